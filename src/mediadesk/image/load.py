"""Read local files into :class:`~mediadesk.models.ImageFile` without
blocking the event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from mediadesk.models import ImageFile


async def async_load_image_file(path: str | Path) -> ImageFile:
    """Read *path* in the default executor and wrap it as an ImageFile.

    Raises
    ------
    FileNotFoundError
        If *path* does not point to a regular file.
    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise FileNotFoundError(f"Image file not found: {file_path}")

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, ImageFile.from_path, file_path)
