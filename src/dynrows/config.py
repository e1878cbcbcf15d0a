from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from dynrows.utils.logger import set_level

STRICT_DECODING_ENV = "DYNROWS_STRICT_DECODING"
LOG_LEVEL_ENV = "DYNROWS_LOG_LEVEL"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip() == "1"


@dataclass(slots=True)
class Settings:
    """Decoding behaviour shared by the decoder and the entry points.

    Attributes:
        strict_decoding: Raise on scan and cell failures instead of omitting the cell.
        log_level: Level applied to the ``dynrows`` loggers by ``apply_logging``.
    """

    strict_decoding: bool = False
    log_level: str = "WARNING"

    def apply_logging(self) -> None:
        set_level(self.log_level)


def get_settings(*, strict_decoding: bool | None = None) -> Settings:
    """Return Settings loaded from the environment (and a ``.env`` file when present)."""
    load_dotenv()
    settings = Settings(
        strict_decoding=_env_flag(STRICT_DECODING_ENV),
        log_level=os.getenv(LOG_LEVEL_ENV, "WARNING"),
    )
    if strict_decoding is not None:
        settings.strict_decoding = strict_decoding
    settings.apply_logging()
    return settings
