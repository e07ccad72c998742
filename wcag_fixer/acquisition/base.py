"""
Document Acquirer - Capability that turns a source into HTML text.
"""

from abc import ABC, abstractmethod


class DocumentAcquirer(ABC):
    """
    Fetches the HTML of one source.

    Implementations raise AcquisitionError for every failure (unreachable
    host, error status, missing file, undecodable bytes). They never
    return partial content.
    """

    @abstractmethod
    async def acquire(self, source: str) -> str:
        """
        Obtain the document.

        Args:
            source: URL or filesystem path

        Returns:
            Serialized HTML
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
