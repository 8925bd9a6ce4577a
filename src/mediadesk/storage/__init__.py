"""Storage collaborators: the :class:`BlobStore` protocol and its HTTP
implementation.
"""

from .blob_store import BlobStore, HttpBlobStore
from .transport import AsyncStorageTransport

__all__ = [
    "AsyncStorageTransport",
    "BlobStore",
    "HttpBlobStore",
]
