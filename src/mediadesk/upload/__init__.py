"""Upload orchestration.

Exports
-------
UploadCoordinator
    Runs post-image uploads and owns the ``uploading`` / ``last_error`` flags.
AvatarUploader
    Uploads profile avatars to their own bucket with upsert.
store_and_resolve
    Store bytes and resolve the public URL, normalising store errors.
"""

from .avatar import AvatarUploader
from .coordinator import UploadCoordinator, store_and_resolve

__all__ = [
    "AvatarUploader",
    "UploadCoordinator",
    "store_and_resolve",
]
