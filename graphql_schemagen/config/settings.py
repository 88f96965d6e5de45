# Configuration management

from pydantic_settings import BaseSettings  # type: ignore
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "test"
    mongo_server_selection_timeout_ms: int = 5000

    # Collections to convert (empty = every collection in the database)
    collection_names: List[str] = []

    # Schema Inference
    schema_sample_size: int = 100

    # Output
    output_path: str = "./generated-schema.graphql"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
