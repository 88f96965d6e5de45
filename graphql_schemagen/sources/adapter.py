"""
Abstract base class for document sources.

Defines the interface schema inference needs from a document store.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class DocumentSourceError(Exception):
    """Exception raised when a document source is used incorrectly."""
    pass


class DocumentSource(ABC):
    """
    Abstract base class for document stores.

    Documents are mappings whose values are None, str, int, float, bool,
    date/datetime, list or nested mappings. Any other value is accepted and
    inferred as ``String``.
    """

    @abstractmethod
    def sample(self, collection_name: str, size: int) -> List[Dict[str, Any]]:
        """
        Return a random sample of documents from a collection.

        Args:
            collection_name: Collection to sample
            size: Maximum number of documents to return

        Returns:
            Up to ``size`` documents; empty for empty or unknown collections

        Raises:
            DocumentSourceError: If the source is closed
        """
        pass

    @abstractmethod
    def list_collections(self) -> List[str]:
        """
        List collection names.

        Returns:
            Collection names in the order the store reports them
        """
        pass

    def close(self) -> None:
        """Release any connection held by the source."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
