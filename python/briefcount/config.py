import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_RESULTS_DIR = "results"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from `BRIEFCOUNT_*` environment variables.

    A `.env` file in the working directory is loaded on import.
    """

    results_dir: Path = Path(DEFAULT_RESULTS_DIR)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            results_dir=Path(
                os.getenv("BRIEFCOUNT_RESULTS_DIR", DEFAULT_RESULTS_DIR)
            ),
            log_level=os.getenv("BRIEFCOUNT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging for command line entry points."""
    settings = settings or Settings.from_env()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
