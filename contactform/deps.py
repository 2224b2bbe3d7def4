# contactform/deps.py
from fastapi import Request

from contactform.config import Settings
from contactform.services.contact import ContactFormHandler


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_contact_handler(request: Request) -> ContactFormHandler:
    return request.app.state.contact_handler
