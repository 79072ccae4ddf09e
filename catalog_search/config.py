"""Configuration settings for the indexer."""
from pydantic_settings import BaseSettings
from pydantic import Field
from dotenv import load_dotenv

# Load .env values into os.environ before the settings are read.
load_dotenv()


class Settings(BaseSettings):
    """Indexer settings loaded from environment variables."""
    
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Number of products projected per batch by the indexer
    index_batch_size: int = Field(default=100, gt=0, alias="INDEX_BATCH_SIZE")
    # Value of the "source" metadata key on produced documents
    index_source_name: str = Field(default="product", alias="INDEX_SOURCE_NAME")
    index_jsonl_path: str = Field(default="data/jsonl/product_documents.jsonl", alias="INDEX_JSONL_PATH")
    project_name: str = "Catalog Search Indexer"
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


settings = Settings()
