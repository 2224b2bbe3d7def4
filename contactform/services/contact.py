# contactform/services/contact.py
from __future__ import annotations

import html
import logging
from typing import Any, Mapping, Optional

from contactform.schemas import ContactSubmission, FormResult, SubscriptionOutcome
from contactform.services.email import ContactNotifier
from contactform.services.mailing_list import MailchimpSubscriber
from contactform.services.sanitize import sanitize_submission
from contactform.services.validate import validate_form

log = logging.getLogger(__name__)

THANK_YOU = "Thank you! Your message has been received. We will get back to you soon."
SUBSCRIPTION_FAILED = "Subscription failed. Please try again."
EMAIL_FAILED = "Email could not be sent. Please try again."


class ContactFormHandler:
    """
    sanitize -> validate -> subscribe -> notify, one pass per request.

    Every outcome is a FormResult; nothing raised by the integrations
    escapes `handle`.
    """

    def __init__(self, subscriber: MailchimpSubscriber, notifier: ContactNotifier):
        self.subscriber = subscriber
        self.notifier = notifier

    def handle(self, raw: Optional[Mapping[str, Any]]) -> FormResult:
        if raw is None:
            return FormResult()

        submission = sanitize_submission(raw)
        errors = validate_form(submission)
        if errors:
            log.debug("Contact form rejected: %s", errors)
            return FormResult(status="error", message="<br>".join(errors))

        outcome = self._subscribe(submission.email, submission.name)
        if not outcome.succeeded:
            return FormResult(status="error", message=html.escape(outcome.message or SUBSCRIPTION_FAILED))

        if self._notify(submission):
            return FormResult(status="success", message=THANK_YOU)
        return FormResult(status="error", message=EMAIL_FAILED)

    def _subscribe(self, email: str, name: str) -> SubscriptionOutcome:
        try:
            return self.subscriber.subscribe(email, name)
        except Exception:
            log.exception("Mailing-list subscribe crashed for %s", email)
            return SubscriptionOutcome(succeeded=False, message=SUBSCRIPTION_FAILED)

    def _notify(self, submission: ContactSubmission) -> bool:
        try:
            return self.notifier.notify(submission)
        except Exception:
            log.exception("Contact notification crashed for %s", submission.email)
            return False
