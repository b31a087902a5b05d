from dotenv import load_dotenv
from dataclasses import dataclass
import os

from localseo.constants import DEFAULT_BUSINESS_TYPE

load_dotenv()  # Loads variables from .env file

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default  # Keep default if conversion fails


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass
class Config:
    """Configuration for page fetching and auditing."""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = 10
    max_retries: int = 1
    retry_wait: float = 1.0
    max_workers: int = 4
    business_type: str = DEFAULT_BUSINESS_TYPE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            timeout=_env_int("FETCH_TIMEOUT", 10),
            max_retries=_env_int("FETCH_MAX_RETRIES", 1),
            retry_wait=_env_float("FETCH_RETRY_WAIT", 1.0),
            max_workers=_env_int("MAX_WORKERS", 4),
            business_type=os.getenv("BUSINESS_TYPE", DEFAULT_BUSINESS_TYPE),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary.

        Returns:
            Dictionary of all configuration values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }
