# contactform/services/sanitize.py
import html
import re
from typing import Any, Mapping

from contactform.schemas import ContactSubmission

FIELDS = ("name", "email", "subject", "message")

_BACKSLASH = re.compile(r"\\(.?)", re.DOTALL)


def _strip_slashes(value: str) -> str:
    # "\x" -> "x", "\\" -> "\", lone trailing "\" dropped
    return _BACKSLASH.sub(r"\1", value)


def sanitize_input(raw: Any) -> str:
    """
    Make a raw form value safe for display and mail headers.

    Not idempotent: escaping twice double-encodes, so call it once per field.
    """
    if not isinstance(raw, str):
        # absent, or an uploaded file part
        return ""
    value = _strip_slashes(raw)
    return html.escape(value, quote=True).strip()


def sanitize_submission(raw: Mapping[str, Any]) -> ContactSubmission:
    return ContactSubmission(**{f: sanitize_input(raw.get(f)) for f in FIELDS})
