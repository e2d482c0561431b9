"""Saving generated images to disk."""

import base64
from pathlib import Path

from loguru import logger


EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


def extension_for_mime_type(mime_type: str) -> str:
    return EXTENSIONS.get(mime_type, ".png")


def resolve_output_path(output_path: str | Path, mime_type: str) -> Path:
    """Append the extension for ``mime_type`` when the path has none."""
    path = Path(output_path).expanduser()
    if not path.suffix:
        path = path.with_name(path.name + extension_for_mime_type(mime_type))
    return path


def save_image(data: str, output_path: str | Path, mime_type: str) -> Path:
    """
    Decode base64 image data and write it to ``output_path``.

    Parent directories are created as needed; an existing directory is fine.
    Returns the path written.
    """
    path = resolve_output_path(output_path, mime_type)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(base64.b64decode(data))
    logger.info(f"Saved {mime_type} image to {path}")
    return path
