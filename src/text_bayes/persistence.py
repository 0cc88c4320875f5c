"""File persistence for classifier snapshots.

Writes go to a uniquely named temporary file beside the target, are
flushed to disk, then atomically renamed over the target. A reader of the
target path sees either the previous snapshot or the new one in full.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PATH = "/tmp/text-bayes-model.json"

PathLike = Union[str, Path]


def resolve_model_path(path: Optional[PathLike] = None) -> Path:
    """Resolve a model file path, applying the default when omitted.

    Args:
        path: Absolute path, or ``None``/blank for :data:`DEFAULT_MODEL_PATH`.

    Returns:
        The absolute path as a :class:`~pathlib.Path`.

    Raises:
        InvalidArgumentError: If the path is relative.
    """
    if path is None or not str(path).strip():
        path = DEFAULT_MODEL_PATH
    resolved = Path(path)
    if not resolved.is_absolute():
        raise InvalidArgumentError(f"Model file path must be absolute: {path}")
    return resolved


def atomic_write(path: Path, payload: bytes) -> None:
    """Replace ``path`` with ``payload`` atomically.

    Raises:
        OSError: If the write or rename fails. The temporary file is
            removed and any existing target is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=".text-bayes-", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, path)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise

    logger.debug("Wrote %d bytes to %s", len(payload), path)


def read_file(path: Path) -> bytes:
    """Read a snapshot file in full.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, "rb") as handle:
        return handle.read()
