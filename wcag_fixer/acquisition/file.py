"""
File Acquirer - Read an HTML document from the local filesystem.
"""

import asyncio
import logging
from pathlib import Path
from typing import Union

from ..contracts.errors import AcquisitionError

from .base import DocumentAcquirer


logger = logging.getLogger(__name__)

FILE_SCHEME = "file://"


class FileAcquirer(DocumentAcquirer):
    """Reads a path (or file:// URL) as text in a worker thread."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    async def acquire(self, source: Union[str, Path]) -> str:
        path = self.resolve_path(source)
        logger.info(f"Reading {path}")

        try:
            return await asyncio.to_thread(path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {path}: {e}")
            raise AcquisitionError(f"Cannot read {path}", source=str(source), cause=e) from e

    @staticmethod
    def resolve_path(source: Union[str, Path]) -> Path:
        """Strip a file:// scheme and return the filesystem path."""
        text = str(source)
        if text.startswith(FILE_SCHEME):
            text = text[len(FILE_SCHEME):]
        return Path(text)
