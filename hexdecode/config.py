import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


load_dotenv(find_dotenv(usecwd=True))

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Defaults for the ``hex2bin`` command, read from the environment.

    A ``.env`` file in the working directory is loaded first; variables
    already set in the environment take precedence.
    """

    strict: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            strict=os.getenv("HEX2BIN_STRICT", "").strip().lower() in _TRUE,
            log_level=os.getenv("HEX2BIN_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
