import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# loguru built-in levels
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass(slots=True)
class Config:
    QUEUE_CAPACITY: int = int(os.getenv("QUEUE_CAPACITY", 5))
    # Unset means the piece generator is seeded from OS entropy
    SEED: Optional[int] = _optional_int(os.getenv("SEED"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self):
        if self.QUEUE_CAPACITY < 1:
            raise ValueError("QUEUE_CAPACITY must be at least 1")
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"Unknown LOG_LEVEL '{self.LOG_LEVEL}'. Available: {list(LOG_LEVELS)}"
            )


config = Config()
