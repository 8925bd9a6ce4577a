"""Image helpers for the intake pipeline.

Exports
-------
is_image_type / filter_images
    Decide which selected or dropped payloads are images.
file_extension / mime_to_extension
    Derive the extension used in storage keys.
generate_storage_key / avatar_storage_key
    Build object keys for post images and avatars.
async_load_image_file
    Read a local file off the event loop.
UploadStateMachine
    Track one request's lifecycle and enforce valid transitions.
"""

from .detect import file_extension, filter_images, is_image_type, mime_to_extension
from .keys import KEY_ALPHABET, avatar_storage_key, generate_storage_key, random_suffix
from .load import async_load_image_file
from .state import UploadStateMachine

__all__ = [
    "KEY_ALPHABET",
    "UploadStateMachine",
    "async_load_image_file",
    "avatar_storage_key",
    "file_extension",
    "filter_images",
    "generate_storage_key",
    "is_image_type",
    "mime_to_extension",
    "random_suffix",
]
