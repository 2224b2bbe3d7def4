from typing import Literal, Optional

from pydantic import BaseModel


class ContactSubmission(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class SubscriptionOutcome(BaseModel):
    succeeded: bool
    message: str
    status_code: Optional[int] = None  # None => no HTTP response (config missing / network)


class FormResult(BaseModel):
    status: Optional[Literal["success", "error"]] = None
    message: str = ""
