# contactform/services/mailing_list.py
from __future__ import annotations

import logging
from typing import Any

import requests

from contactform.config import Settings
from contactform.schemas import SubscriptionOutcome

log = logging.getLogger(__name__)

MAILCHIMP_HOST = "api.mailchimp.com"

CONFIG_MISSING = "Mailchimp configuration is missing."
SUBSCRIBED = "Successfully subscribed to mailing list."
ALREADY_SUBSCRIBED = "Email already subscribed."


def split_name(name: str) -> tuple[str, str]:
    parts = (name or "").split()
    if not parts:
        return "", ""
    first = parts[0]
    last = parts[-1] if len(parts) > 1 else ""
    return first, last


def _error_detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return f"{resp.status_code} {resp.reason or ''}".strip()


class MailchimpSubscriber:
    """
    Adds or updates a member on a Mailchimp audience.

    A 400 whose `detail` mentions "already" means the address is a member
    already, which counts as success.
    """

    def __init__(self, settings: Settings, http: Any = requests):
        self.settings = settings
        self.http = http

    def members_url(self) -> str:
        s = self.settings
        return f"https://{s.MAILCHIMP_SERVER}.{MAILCHIMP_HOST}/3.0/lists/{s.MAILCHIMP_LIST_ID}/members"

    def build_payload(self, email: str, name: str) -> dict:
        first, last = split_name(name)
        return {
            "email_address": email,
            "status": "subscribed",
            "merge_fields": {"FNAME": first, "LNAME": last},
        }

    def subscribe(self, email: str, name: str) -> SubscriptionOutcome:
        if not self.settings.mailing_list_configured:
            log.warning("Mailchimp subscribe skipped: API key / list id / server not configured")
            return SubscriptionOutcome(succeeded=False, message=CONFIG_MISSING)

        try:
            resp = self.http.post(
                self.members_url(),
                auth=("anystring", self.settings.MAILCHIMP_API_KEY),
                json=self.build_payload(email, name),
                timeout=self.settings.MAILCHIMP_TIMEOUT,
            )
        except requests.RequestException as e:
            log.error("Mailchimp network error: %s", e)
            return SubscriptionOutcome(succeeded=False, message=f"Failed to subscribe: {e}")

        if 200 <= resp.status_code < 300:
            log.info("Mailchimp subscribe ok → %s", email)
            return SubscriptionOutcome(succeeded=True, message=SUBSCRIBED, status_code=resp.status_code)

        detail = _error_detail(resp)
        if resp.status_code == 400 and "already" in detail:
            log.warning("Mailchimp: %s already subscribed", email)
            return SubscriptionOutcome(succeeded=True, message=ALREADY_SUBSCRIBED, status_code=400)

        log.error("Mailchimp HTTP %s: %s", resp.status_code, detail)
        return SubscriptionOutcome(
            succeeded=False,
            message=f"Failed to subscribe: {detail}",
            status_code=resp.status_code,
        )
