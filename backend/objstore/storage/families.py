"""Grouping of storage error kinds into failure families.

Families let callers reason about a failure at a coarser grain than its
kind, e.g. treat every bucket lifecycle failure alike when logging.
"""

from enum import Enum

from .exceptions import (
    APINotImplemented,
    BackendCorrupted,
    BadDigest,
    BucketExists,
    BucketNameInvalid,
    BucketNotFound,
    EntityTooLarge,
    ImplementationError,
    InvalidACL,
    InvalidDigest,
    InvalidRange,
    ObjectExists,
    ObjectNameInvalid,
    ObjectNotFound,
    OperationNotPermitted,
    StorageError,
    TooManyBuckets,
)


class ErrorFamily(str, Enum):
    """Family a storage error kind belongs to."""

    INTEGRITY_BACKEND = "integrity_backend"
    CAPABILITY = "capability"
    BUCKET_LIFECYCLE = "bucket_lifecycle"
    OBJECT_LIFECYCLE = "object_lifecycle"
    INTEGRITY_DIGEST = "integrity_digest"
    ACCESS_CONTROL = "access_control"
    REQUEST_VALIDITY = "request_validity"


_FAMILIES: dict[type[StorageError], ErrorFamily] = {
    BackendCorrupted: ErrorFamily.INTEGRITY_BACKEND,
    APINotImplemented: ErrorFamily.CAPABILITY,
    OperationNotPermitted: ErrorFamily.CAPABILITY,
    BucketNameInvalid: ErrorFamily.BUCKET_LIFECYCLE,
    BucketExists: ErrorFamily.BUCKET_LIFECYCLE,
    BucketNotFound: ErrorFamily.BUCKET_LIFECYCLE,
    TooManyBuckets: ErrorFamily.BUCKET_LIFECYCLE,
    ObjectNotFound: ErrorFamily.OBJECT_LIFECYCLE,
    ObjectExists: ErrorFamily.OBJECT_LIFECYCLE,
    ObjectNameInvalid: ErrorFamily.OBJECT_LIFECYCLE,
    EntityTooLarge: ErrorFamily.OBJECT_LIFECYCLE,
    BadDigest: ErrorFamily.INTEGRITY_DIGEST,
    InvalidDigest: ErrorFamily.INTEGRITY_DIGEST,
    InvalidACL: ErrorFamily.ACCESS_CONTROL,
    InvalidRange: ErrorFamily.REQUEST_VALIDITY,
}


def find_family(error: BaseException) -> ErrorFamily | None:
    """Return the family of a storage error, or None if it has none.

    A wrapped error reports the family of its innermost cause. Caller-defined
    ``StorageError`` subclasses outside the known kinds have no family.
    """
    target = error.root_cause() if isinstance(error, ImplementationError) else error

    for cls in type(target).__mro__:
        family = _FAMILIES.get(cls)
        if family is not None:
            return family

    return None


def family_of(error: BaseException) -> ErrorFamily:
    """Return the family of a storage error.

    A wrapped error reports the family of its innermost cause.

    Args:
        error: Storage error instance

    Returns:
        ErrorFamily the error's kind belongs to

    Raises:
        TypeError: If the error (or the root cause of a wrapped error) is not
            a storage error kind
    """
    family = find_family(error)
    if family is None:
        target = error.root_cause() if isinstance(error, ImplementationError) else error
        raise TypeError(f"Not a storage error kind: {type(target).__name__}")
    return family


def kinds_in(family: ErrorFamily) -> tuple[type[StorageError], ...]:
    """Return the error kinds belonging to a family, in declaration order."""
    return tuple(kind for kind, kind_family in _FAMILIES.items() if kind_family == family)
