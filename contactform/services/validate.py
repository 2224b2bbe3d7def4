# contactform/services/validate.py
from typing import List

from email_validator import EmailNotValidError, validate_email

from contactform.schemas import ContactSubmission

NAME_REQUIRED = "Name is required."
EMAIL_REQUIRED = "Valid email is required."
SUBJECT_REQUIRED = "Subject is required."
MESSAGE_REQUIRED = "Message is required."


def is_valid_email(email: str) -> bool:
    # ASCII only: the address becomes the From header of the admin email
    if not email or not email.isascii():
        return False
    try:
        validate_email(email, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


def validate_form(s: ContactSubmission) -> List[str]:
    """Every rule runs; the returned order is name, email, subject, message."""
    errors: List[str] = []
    if not s.name:
        errors.append(NAME_REQUIRED)
    if not is_valid_email(s.email):
        errors.append(EMAIL_REQUIRED)
    if not s.subject:
        errors.append(SUBJECT_REQUIRED)
    if not s.message:
        errors.append(MESSAGE_REQUIRED)
    return errors
