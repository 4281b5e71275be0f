import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    audit_log_file: str
    log_level: str
    appinsights_connection_string: Optional[str] = None


def load_settings() -> Settings:
    """
    Reads runtime settings from the environment (and .env, if present).
    Nothing here affects decoding; only the outer layers use it.
    """
    return Settings(
        audit_log_file=os.getenv("EGYPTID_AUDIT_LOG", "audit.log"),
        log_level=os.getenv("EGYPTID_LOG_LEVEL", "INFO").upper(),
        appinsights_connection_string=os.getenv("AZURE_APPINSIGHTS_CONNECTION_STRING") or None,
    )
