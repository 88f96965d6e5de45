"""
In-memory document source.

Serves documents from plain Python lists. Used by tests and by callers that
already hold exported documents (e.g. loaded from a JSON dump).
"""

import random
from typing import Any, Dict, List, Mapping, Optional, Sequence

from graphql_schemagen.sources.adapter import DocumentSource, DocumentSourceError


class InMemoryDocumentSource(DocumentSource):
    """Document source backed by a mapping of collection name to documents."""

    def __init__(
        self,
        collections: Mapping[str, Sequence[Dict[str, Any]]],
        randomize: bool = True,
        seed: Optional[int] = None,
    ):
        """
        Initialize in-memory source.

        Args:
            collections: Collection name -> documents
            randomize: Sample in random order like ``$sample``; False keeps
                stored order and takes the first ``size`` documents
            seed: Seed for the sampling RNG
        """
        self._collections = {name: list(docs) for name, docs in collections.items()}
        self.randomize = randomize
        self._rng = random.Random(seed)
        self._closed = False

    def sample(self, collection_name: str, size: int) -> List[Dict[str, Any]]:
        if self._closed:
            raise DocumentSourceError("Document source is closed")

        documents = self._collections.get(collection_name, [])
        if not self.randomize:
            return documents[:size]
        return self._rng.sample(documents, min(size, len(documents)))

    def list_collections(self) -> List[str]:
        if self._closed:
            raise DocumentSourceError("Document source is closed")
        return list(self._collections.keys())

    def close(self) -> None:
        self._closed = True
