import pytest

from contactform.schemas import ContactSubmission
from contactform.services.validate import (
    EMAIL_REQUIRED,
    MESSAGE_REQUIRED,
    NAME_REQUIRED,
    SUBJECT_REQUIRED,
    is_valid_email,
    validate_form,
)

VALID = dict(name="Ada", email="ada@analytical.org", subject="Hi", message="Hello")


def test_valid_submission_has_no_errors():
    assert validate_form(ContactSubmission(**VALID)) == []


@pytest.mark.parametrize(
    "field, expected",
    [
        ("name", NAME_REQUIRED),
        ("email", EMAIL_REQUIRED),
        ("subject", SUBJECT_REQUIRED),
        ("message", MESSAGE_REQUIRED),
    ],
)
def test_blank_field_yields_its_message(field, expected):
    errors = validate_form(ContactSubmission(**{**VALID, field: ""}))
    assert errors == [expected]


@pytest.mark.parametrize("email", ["not-an-email", "ada@", "@analytical.org", "ada analytical.org"])
def test_malformed_email_rejected(email):
    assert validate_form(ContactSubmission(**{**VALID, "email": email})) == [EMAIL_REQUIRED]


def test_all_blank_reports_every_rule_in_order():
    assert validate_form(ContactSubmission()) == [
        NAME_REQUIRED,
        EMAIL_REQUIRED,
        SUBJECT_REQUIRED,
        MESSAGE_REQUIRED,
    ]


def test_is_valid_email():
    assert is_valid_email("ada@analytical.org")
    assert not is_valid_email("")


@pytest.mark.parametrize("email", ["josé@analytical.org", "ada@bücher.de"])
def test_internationalized_email_rejected(email):
    assert validate_form(ContactSubmission(**{**VALID, "email": email})) == [EMAIL_REQUIRED]
