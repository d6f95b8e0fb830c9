from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Key delimiter; none of airline / flight number / airports may contain it
FLIGHT_KEY_DELIMITER = "-"

# Raw text field consulted when structured segment fields are missing
NAVITAS_TEXT_FIELD = "navitas_text"


def _optional_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    service_name: str = "tourflight"
    env: str = "dev"
    log_level: str = "INFO"
    log_file: str = ""
    # Year applied to Navitas "15JAN" style date tokens (None -> current year)
    reference_year: Optional[int] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            service_name=os.getenv("SERVICE_NAME", "tourflight"),
            env=os.getenv("APP_ENV", "dev"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", ""),
            reference_year=_optional_int(os.getenv("NAVITAS_REFERENCE_YEAR")),
        )


settings = Settings.from_env()
