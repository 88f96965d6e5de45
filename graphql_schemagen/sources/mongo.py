"""
MongoDB document source.

Samples collections with the ``$sample`` aggregation stage and normalizes
BSON ObjectIds to their hex string form.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import MongoClient

from graphql_schemagen.sources.adapter import DocumentSource, DocumentSourceError

logger = logging.getLogger(__name__)


def normalize_bson(value: Any) -> Any:
    """
    Convert ObjectIds to 24-character hex strings, recursing into lists and
    sub-documents. Other values are returned unchanged.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: normalize_bson(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_bson(item) for item in value]
    return value


class MongoDocumentSource(DocumentSource):
    """
    Document source for one MongoDB database.

    Connection errors raised by pymongo are not caught here.
    """

    def __init__(
        self,
        connection_string: str,
        database_name: str,
        client: Optional[MongoClient] = None,
        server_selection_timeout_ms: Optional[int] = None,
    ):
        """
        Initialize MongoDB source.

        Args:
            connection_string: MongoDB connection URI
            database_name: Database to read from
            client: Existing client to use; it is not closed by this source
            server_selection_timeout_ms: Driver server selection timeout
        """
        self.database_name = database_name
        self._owns_client = client is None

        if client is None:
            options = {}
            if server_selection_timeout_ms is not None:
                options["serverSelectionTimeoutMS"] = server_selection_timeout_ms
            client = MongoClient(connection_string, **options)

        self._client: Optional[MongoClient] = client
        self._db = client[database_name]

    def _database(self):
        if self._client is None:
            raise DocumentSourceError(
                f"MongoDB source for database '{self.database_name}' is closed")
        return self._db

    def sample(self, collection_name: str, size: int) -> List[Dict[str, Any]]:
        collection = self._database()[collection_name]
        cursor = collection.aggregate([{"$sample": {"size": size}}])
        documents = [normalize_bson(doc) for doc in cursor]
        logger.debug(
            f"Sampled {len(documents)} documents from {self.database_name}.{collection_name}")
        return documents

    def list_collections(self) -> List[str]:
        return list(self._database().list_collection_names())

    def close(self) -> None:
        if self._client is None:
            return
        if self._owns_client:
            self._client.close()
        self._client = None
        self._db = None
