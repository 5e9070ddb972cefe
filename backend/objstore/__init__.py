"""Object storage backend - error vocabulary for bucket and object operations."""

__version__ = "0.1.0"

# Re-export the error taxonomy for easy access
# Note: logging and settings live in objstore.core and are imported on demand
from .storage import (
    ImplementationError,
    StorageError,
    wrap,
)

__all__ = [
    "ImplementationError",
    "StorageError",
    "__version__",
    "wrap",
]
