# contactform/config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# load .env into process env vars
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env")


def _as_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "y", "on")


def _as_int(name: str, default: int) -> int:
    try:
        return int(str(os.getenv(name, default)).strip())
    except Exception:
        return default


def _as_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


@dataclass
class Settings:
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # empty => console only

    # Mailchimp
    MAILCHIMP_API_KEY: str = ""
    MAILCHIMP_LIST_ID: str = ""
    MAILCHIMP_SERVER: str = ""  # data-center prefix, e.g. "us6"
    MAILCHIMP_TIMEOUT: int = 10

    # Notification email
    ADMIN_EMAIL: str = ""
    EMAIL_DRY_RUN: bool = False
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 25
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_STARTTLS: bool = False
    SMTP_TIMEOUT: int = 20

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            ENV=_as_str("ENV", "dev"),
            LOG_LEVEL=_as_str("LOG_LEVEL", "INFO").upper(),
            LOG_FILE=_as_str("LOG_FILE"),
            MAILCHIMP_API_KEY=_as_str("MAILCHIMP_API_KEY"),
            MAILCHIMP_LIST_ID=_as_str("MAILCHIMP_LIST_ID"),
            MAILCHIMP_SERVER=_as_str("MAILCHIMP_SERVER"),
            MAILCHIMP_TIMEOUT=_as_int("MAILCHIMP_TIMEOUT", 10),
            ADMIN_EMAIL=_as_str("ADMIN_EMAIL"),
            EMAIL_DRY_RUN=_as_bool("EMAIL_DRY_RUN", False),
            SMTP_HOST=_as_str("SMTP_HOST", "localhost"),
            SMTP_PORT=_as_int("SMTP_PORT", 25),
            SMTP_USERNAME=_as_str("SMTP_USERNAME"),
            SMTP_PASSWORD=os.getenv("SMTP_PASSWORD", ""),
            SMTP_STARTTLS=_as_bool("SMTP_STARTTLS", False),
            SMTP_TIMEOUT=_as_int("SMTP_TIMEOUT", 20),
        )

    @property
    def mailing_list_configured(self) -> bool:
        return bool(self.MAILCHIMP_API_KEY and self.MAILCHIMP_LIST_ID and self.MAILCHIMP_SERVER)
