"""Storage error vocabulary for the object storage backend."""

from .exceptions import (
    ERROR_KINDS,
    APINotImplemented,
    BackendCorrupted,
    BackendError,
    BadDigest,
    BucketExists,
    BucketNameInvalid,
    BucketNotFound,
    DigestError,
    EntityTooLarge,
    GenericBucketError,
    GenericObjectError,
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
    wrap,
)
from .families import ErrorFamily, family_of, find_family, kinds_in

__all__ = [
    # Base and shapes
    "StorageError",
    "BackendError",
    "DigestError",
    "GenericBucketError",
    "GenericObjectError",
    # Kinds
    "APINotImplemented",
    "BackendCorrupted",
    "BadDigest",
    "BucketExists",
    "BucketNameInvalid",
    "BucketNotFound",
    "EntityTooLarge",
    "InvalidACL",
    "InvalidDigest",
    "InvalidRange",
    "ObjectExists",
    "ObjectNameInvalid",
    "ObjectNotFound",
    "OperationNotPermitted",
    "TooManyBuckets",
    "ERROR_KINDS",
    # Wrapping
    "ImplementationError",
    "wrap",
    # Families
    "ErrorFamily",
    "family_of",
    "find_family",
    "kinds_in",
]
