"""
Output Writer - Persist the fixed document.

The file is written to a temporary sibling and renamed over the target,
so readers see either the previous file or the complete new one.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..contracts.errors import PersistenceError


logger = logging.getLogger(__name__)


def write_output(path: Union[str, Path], html: str, encoding: str = "utf-8") -> Path:
    """
    Atomically write HTML to path, replacing any existing file.

    Args:
        path: Target file
        html: Serialized document
        encoding: Text encoding

    Returns:
        The target path

    Raises:
        PersistenceError: If the directory is missing or not writable
    """
    target = Path(path)
    directory = target.parent if str(target.parent) else Path(".")
    temp_name = None

    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=directory,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(html)
        os.replace(temp_name, target)
    except OSError as e:
        if temp_name is not None and os.path.exists(temp_name):
            os.unlink(temp_name)
        logger.error(f"Cannot write {target}: {e}")
        raise PersistenceError(f"Cannot write {target}", path=str(target), cause=e) from e

    logger.info(f"Wrote {len(html)} characters to {target}")
    return target
