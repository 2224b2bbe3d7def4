"""
Shared pytest fixtures for the contact form tests.
"""
import pytest

from contactform.config import Settings


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeHTTP:
    """Stands in for the `requests` module; records every POST."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse(200, {"id": "abc"})
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


class RecordingTransport:
    def __init__(self, result=True):
        self.result = result
        self.calls = []

    def __call__(self, settings, to, subject, html, from_addr, reply_to=None):
        self.calls.append(
            {"to": to, "subject": subject, "html": html, "from_addr": from_addr, "reply_to": reply_to}
        )
        return self.result


@pytest.fixture
def settings():
    return Settings(
        MAILCHIMP_API_KEY="key-us6",
        MAILCHIMP_LIST_ID="list123",
        MAILCHIMP_SERVER="us6",
        ADMIN_EMAIL="admin@mysite.org",
        EMAIL_DRY_RUN=False,
    )


@pytest.fixture
def valid_form():
    return {
        "name": "Ada Lovelace",
        "email": "ada@analytical.org",
        "subject": "Engines",
        "message": "Hello there.\nSecond line.",
    }


@pytest.fixture
def fake_http():
    return FakeHTTP()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def response_factory():
    return FakeResponse


@pytest.fixture
def http_factory():
    return FakeHTTP
