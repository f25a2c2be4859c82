from enum import Enum
from typing import Optional


class LogLevel(str, Enum):
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["LogLevel"]:
        """Return the matching level, or None for anything else (case-sensitive)."""
        try:
            return cls(value)
        except ValueError:
            return None
