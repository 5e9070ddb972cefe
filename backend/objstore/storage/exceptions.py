"""Error taxonomy for the object storage backend.

Every way a bucket, object or storage-device operation can fail is named by
exactly one exception class in this module. Callers discriminate failures by
class (``except BucketNotFound``, ``isinstance``, ``match``) rather than by
parsing messages, and every value renders a fixed human-readable message via
``render()``.

The rendered wording is part of the observable contract: logs and callers
depend on it, so templates are reproduced exactly, quirks included.
"""

from typing import Any, ClassVar


class StorageError(Exception):
    """Base exception for all storage failures.

    Subclasses declare their fields in ``_fields`` and implement ``render()``.
    Fields are assigned once in ``__init__`` and are read-only afterwards.
    """

    _fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        if type(self).render is StorageError.render:
            raise TypeError(
                f"{type(self).__name__} is an error shape; raise one of its kinds"
            )
        super().__init__(self.render())

    def render(self) -> str:
        """Return the human-readable description of this failure."""
        raise NotImplementedError(f"{type(self).__name__} does not define render()")

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({values})"

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fields and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._fields:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__delattr__(name)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._values()))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), self._values())

    def _values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)


# Shared shapes


class GenericBucketError(StorageError):
    """Failure scoped to a single bucket."""

    _fields = ("bucket",)

    def __init__(self, bucket: str) -> None:
        self.bucket = bucket
        super().__init__()


class GenericObjectError(StorageError):
    """Failure scoped to a single object inside a bucket."""

    _fields = ("bucket", "object")

    def __init__(self, bucket: str, object: str) -> None:
        self.bucket = bucket
        self.object = object
        super().__init__()


class DigestError(StorageError):
    """Content checksum failure for an object key."""

    _fields = ("bucket", "key", "digest")

    def __init__(self, bucket: str, key: str, digest: str) -> None:
        self.bucket = bucket
        self.key = key
        self.digest = digest
        super().__init__()


class BackendError(StorageError):
    """Failure of the storage medium at a given path."""

    _fields = ("path",)

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__()


# Backend and capability errors


class BackendCorrupted(BackendError):
    """Path has corrupted data."""

    def render(self) -> str:
        return f"Backend corrupted: {self.path}"


class APINotImplemented(StorageError):
    """Requested API is not implemented by this backend."""

    _fields = ("api",)

    def __init__(self, api: str) -> None:
        self.api = api
        super().__init__()

    def render(self) -> str:
        return f"Api not implemented: {self.api}"


class OperationNotPermitted(StorageError):
    """Operation refused by the backend."""

    _fields = ("operation", "reason")

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__()

    def render(self) -> str:
        return f"Operation {self.operation} not permitted for reason: {self.reason}"


# ACL errors


class InvalidACL(StorageError):
    """Requested ACL value is invalid."""

    _fields = ("acl",)

    def __init__(self, acl: str) -> None:
        self.acl = acl
        super().__init__()

    def render(self) -> str:
        return f"Requested ACL is {self.acl} invalid"


# Bucket errors


class BucketNameInvalid(GenericBucketError):
    """Bucket name provided is invalid."""

    def render(self) -> str:
        return f"Bucket name invalid: {self.bucket}"


class BucketExists(GenericBucketError):
    """Bucket already exists."""

    def render(self) -> str:
        return f"Bucket exists: {self.bucket}"


class BucketNotFound(GenericBucketError):
    """Requested bucket not found."""

    def render(self) -> str:
        return f"Bucket not Found: {self.bucket}"


class TooManyBuckets(GenericBucketError):
    """Total bucket count exceeded."""

    def render(self) -> str:
        return f"Bucket limit exceeded beyond 100, cannot create bucket: {self.bucket}"


# Object errors


class ObjectNotFound(GenericObjectError):
    """Requested object not found."""

    def render(self) -> str:
        return f"Object not Found: {self.bucket}#{self.object}"


class ObjectExists(GenericObjectError):
    """Object already exists."""

    def render(self) -> str:
        return f"Object exists: {self.bucket}#{self.object}"


class ObjectNameInvalid(GenericObjectError):
    """Object name provided is invalid."""

    def render(self) -> str:
        return f"Object name invalid: {self.bucket}#{self.object}"


class EntityTooLarge(GenericObjectError):
    """Object size exceeds the maximum allowed size."""

    _fields = ("bucket", "object", "size", "total_size")

    def __init__(self, bucket: str, object: str, size: str, total_size: str) -> None:
        self.size = size
        self.total_size = total_size
        super().__init__(bucket, object)

    def render(self) -> str:
        # No separators between object/"with" and size/"reached".
        return (
            f"{self.bucket}#{self.object}with {self.size}"
            f"reached maximum allowed size limit {self.total_size}"
        )


# Digest errors


class BadDigest(DigestError):
    """Md5 of received data does not match the provided digest."""

    def render(self) -> str:
        return f"Md5 provided {self.digest} mismatches for: {self.bucket}#{self.key}"


class InvalidDigest(DigestError):
    """Md5 provided in the request is malformed."""

    def render(self) -> str:
        return f"Md5 provided {self.digest} is invalid"


# Request errors


class InvalidRange(StorageError):
    """Requested byte range is not satisfiable."""

    _fields = ("start", "length")

    def __init__(self, start: int, length: int) -> None:
        self.start = start
        self.length = length
        super().__init__()

    def render(self) -> str:
        return f"Invalid range start:{self.start:d} length:{self.length:d}"


# Context wrapping


class ImplementationError(StorageError):
    """Lower-level failure annotated with the bucket and object it hit.

    The original failure is kept as ``cause`` and is also linked as the
    exception's ``__cause__``, so tracebacks show the full chain. Empty
    ``bucket`` or ``object`` means the context does not apply and is left
    out of the message.
    """

    _fields = ("bucket", "object", "cause")

    def __init__(self, bucket: str, object: str, cause: BaseException) -> None:
        if cause is None:
            raise TypeError("ImplementationError requires a cause")
        self.bucket = bucket
        self.object = object
        self.cause = cause
        super().__init__()
        self.__cause__ = cause

    def render(self) -> str:
        message = ""
        if self.bucket:
            message += f"Bucket: {self.bucket} "
        if self.object:
            message += f"Object: {self.object} "
        return message + f"Error: {self.cause}"

    def unwrap(self) -> BaseException:
        """Return the wrapped failure unchanged."""
        return self.cause

    def root_cause(self) -> BaseException:
        """Return the innermost failure below any nested wrappers."""
        cause = self.cause
        while isinstance(cause, ImplementationError):
            cause = cause.cause
        return cause


def wrap(bucket: str, object: str, cause: BaseException) -> ImplementationError:
    """Attach bucket/object context to a lower-level failure.

    Args:
        bucket: Bucket the failing operation targeted, or "" if not applicable
        object: Object the failing operation targeted, or "" if not applicable
        cause: The original failure; kept by reference

    Returns:
        ImplementationError wrapping ``cause``

    Raises:
        TypeError: If ``cause`` is None
    """
    return ImplementationError(bucket, object, cause)


ERROR_KINDS: tuple[type[StorageError], ...] = (
    BackendCorrupted,
    APINotImplemented,
    InvalidACL,
    BucketNameInvalid,
    BucketExists,
    BucketNotFound,
    TooManyBuckets,
    ObjectNotFound,
    ObjectExists,
    ObjectNameInvalid,
    EntityTooLarge,
    BadDigest,
    InvalidDigest,
    OperationNotPermitted,
    InvalidRange,
    ImplementationError,
)
