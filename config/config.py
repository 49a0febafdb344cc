import os
from dotenv import load_dotenv
from pathlib import Path

from utils.logger import get_logger

logger = get_logger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_list(name: str, default: str) -> list[str]:
    return [part.strip() for part in os.getenv(name, default).split(",") if part.strip()]


class Config:
    """Configuration management for the application."""

    def __init__(self):
        """Initialize configuration with environment variables."""
        # Load environment variables from .env file if it exists
        env_path = Path(__file__).parent.parent / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        # Provider Configuration
        self.PROVIDER_REGISTRY_PATH = os.getenv('PROVIDER_REGISTRY_PATH') or None
        self.DEFAULT_PROVIDER = (os.getenv('DEFAULT_PROVIDER') or '').strip().lower() or None
        provider_latency = os.getenv('PROVIDER_LATENCY_S')
        self.PROVIDER_LATENCY_S = float(provider_latency) if provider_latency else None

        # Native System Module Configuration
        self.NATIVE_POPULATE_DELAY_S = _env_float('NATIVE_POPULATE_DELAY_S', 1.5)
        self.NATIVE_MIN_ITEMS = int(os.getenv('NATIVE_MIN_ITEMS', '3'))
        self.NATIVE_MAX_ITEMS = int(os.getenv('NATIVE_MAX_ITEMS', '7'))
        self.NATIVE_COVERAGE = _env_list(
            'NATIVE_COVERAGE', 'technology,science,business,health,politics,education'
        )

        # Resolver Configuration
        self.SINGLE_FLIGHT = os.getenv('SINGLE_FLIGHT', 'true').lower() == 'true'

        # Server Configuration
        self.CORS_ORIGINS = _env_list('CORS_ORIGINS', '*')

    def validate(self) -> bool:
        """
        Validate that the configured values are consistent.

        Returns:
            bool: True if configuration is valid, False otherwise
        """
        if self.NATIVE_MIN_ITEMS < 0 or self.NATIVE_MAX_ITEMS < self.NATIVE_MIN_ITEMS:
            logger.error(
                f"Invalid native item range {self.NATIVE_MIN_ITEMS}..{self.NATIVE_MAX_ITEMS}"
            )
            return False
        if self.NATIVE_POPULATE_DELAY_S < 0:
            logger.error("NATIVE_POPULATE_DELAY_S must not be negative")
            return False
        if self.PROVIDER_LATENCY_S is not None and self.PROVIDER_LATENCY_S < 0:
            logger.error("PROVIDER_LATENCY_S must not be negative")
            return False
        if self.PROVIDER_REGISTRY_PATH and not Path(self.PROVIDER_REGISTRY_PATH).exists():
            logger.error(f"Provider registry not found at {self.PROVIDER_REGISTRY_PATH}")
            return False
        return True
