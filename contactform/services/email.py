# contactform/services/email.py
from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Callable, Iterable

from contactform.config import Settings
from contactform.schemas import ContactSubmission

log = logging.getLogger(__name__)

SUBJECT_PREFIX = "New Contact: "

# ---- internal helpers --------------------------------------------------------


def _as_list(v: str | Iterable[str] | None) -> list[str]:
    if not v:
        return []
    if isinstance(v, str):
        return [v]
    return [x for x in v if x]


def _one_line(value: str) -> str:
    return " ".join((value or "").split())


def _build_message(
    to: list[str],
    subject: str,
    html: str,
    from_addr: str,
    reply_to: str | None = None,
) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = from_addr
    msg["To"] = ", ".join(to)
    msg["Subject"] = subject
    if reply_to:
        msg["Reply-To"] = reply_to
    msg.set_content(html, subtype="html", charset="utf-8")
    return msg


def _send_via_smtp(settings: Settings, msg: EmailMessage) -> bool:
    host, port = settings.SMTP_HOST, settings.SMTP_PORT
    try:
        with smtplib.SMTP(host, port, timeout=settings.SMTP_TIMEOUT) as s:
            s.ehlo()
            if settings.SMTP_STARTTLS:
                s.starttls(context=ssl.create_default_context())
                s.ehlo()
            if settings.SMTP_USERNAME:
                s.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
            s.send_message(msg)
        log.info("SMTP send ok → %s via %s:%s", msg["To"], host, port)
        return True
    except smtplib.SMTPException as e:
        log.error("SMTP send failed: %s", e)
        return False
    except OSError as e:
        log.error("SMTP connection error (%s:%s): %s", host, port, e)
        return False


# ---- public API --------------------------------------------------------------


def send_email(
    settings: Settings,
    to: str | Iterable[str],
    subject: str,
    html: str,
    from_addr: str,
    reply_to: str | None = None,
) -> bool:
    """
    Hands an HTML message to the configured MTA.
    - Respects settings.EMAIL_DRY_RUN (logs but doesn't send)
    - `to` can be a string or list of strings
    Returns True when the transport accepted the message; never raises.
    """
    to_list = _as_list(to)
    if not to_list:
        log.error("send_email called with empty recipient list")
        return False

    try:
        msg = _build_message(to_list, subject, html, from_addr, reply_to)
    except ValueError as e:
        # bad header value (e.g. embedded line break)
        log.error("send_email could not build message: %s", e)
        return False

    if settings.EMAIL_DRY_RUN:
        log.info("[EMAIL DRY RUN] to=%s subject=%s", to_list, subject)
        return True

    return _send_via_smtp(settings, msg)


# ---- contact notification ----------------------------------------------------


def contact_subject(s: ContactSubmission) -> str:
    return _one_line(SUBJECT_PREFIX + s.subject)


def contact_html(s: ContactSubmission) -> str:
    # fields are already escaped by sanitize_input
    message_html = "<br>\n".join(s.message.splitlines())
    return f"""
    <html>
    <body style="font-family: Arial, sans-serif;">
      <h2>New Contact Form Submission</h2>
      <p><strong>Name:</strong> {s.name}</p>
      <p><strong>Email:</strong> {s.email}</p>
      <p><strong>Subject:</strong> {s.subject}</p>
      <hr>
      <p><strong>Message:</strong></p>
      <p>{message_html}</p>
    </body>
    </html>
    """.strip()


Transport = Callable[..., bool]


class ContactNotifier:
    """Emails a contact submission to the administrator address."""

    def __init__(self, settings: Settings, transport: Transport = send_email):
        self.settings = settings
        self.transport = transport

    def notify(self, s: ContactSubmission) -> bool:
        to = self.settings.ADMIN_EMAIL
        if not to:
            log.error("Contact notification skipped: ADMIN_EMAIL not configured")
            return False

        subject = contact_subject(s)
        log.info("Contact email → %s subject=%s", to, subject)
        return bool(
            self.transport(
                self.settings,
                to,
                subject,
                contact_html(s),
                from_addr=s.email,
                reply_to=s.email,
            )
        )
