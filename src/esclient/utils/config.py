from pydantic import Field
from pydantic_settings import BaseSettings


class SearchSettings(BaseSettings):
    """Connection settings for the search server."""

    url: str = Field("http://localhost:9200", description="Base URL of the server")
    http_timeout: float | None = Field(
        default=10.0, description="Request timeout in seconds, None to disable"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "ELASTICSEARCH_",
        "case_sensitive": False,
        "extra": "ignore",
    }
