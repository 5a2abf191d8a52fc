import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

# Result cap shown to the presentation layer. Not configurable.
MAX_RESULTS = 5


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Matching
    threshold_percent: float = float(os.getenv("SEARCH_THRESHOLD_PERCENT", "0.40"))

    # Interaction
    debounce_ms: int = int(os.getenv("SEARCH_DEBOUNCE_MS", "280"))
    min_query_length: int = int(os.getenv("SEARCH_MIN_QUERY_LENGTH", "2"))
    debug: bool = os.getenv("SEARCH_DEBUG", "false").lower() == "true"

    # Catalog loaded at API startup (JSON array of products)
    catalog_path: str | None = os.getenv("CATALOG_PATH")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    @property
    def max_results(self) -> int:
        """Maximum number of ranked matches returned per query."""
        return MAX_RESULTS

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 <= self.threshold_percent <= 1:
            raise ValueError("SEARCH_THRESHOLD_PERCENT must be between 0 and 1")

        if self.debounce_ms < 0:
            raise ValueError(f"SEARCH_DEBOUNCE_MS must be >= 0, got {self.debounce_ms}")

        if self.min_query_length < 1:
            raise ValueError(
                f"SEARCH_MIN_QUERY_LENGTH must be >= 1, got {self.min_query_length}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(debug: bool | None = None) -> None:
    """Set the package log level from the debug flag.

    Args:
        debug: Override settings.debug.
    """
    enabled = settings.debug if debug is None else debug
    logging.getLogger("menu_search").setLevel(logging.DEBUG if enabled else logging.INFO)
