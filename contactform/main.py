# contactform/main.py
# run it with: uvicorn contactform.main:app --reload
from typing import Optional

from fastapi import FastAPI

from contactform.config import Settings
from contactform.logging_config import setup_logging
from contactform.routers.contact import router as contact_router
from contactform.routers.health import router as health_router
from contactform.services.contact import ContactFormHandler
from contactform.services.email import ContactNotifier
from contactform.services.mailing_list import MailchimpSubscriber


def build_contact_handler(settings: Settings) -> ContactFormHandler:
    return ContactFormHandler(
        subscriber=MailchimpSubscriber(settings),
        notifier=ContactNotifier(settings),
    )


def create_app(
    settings: Optional[Settings] = None,
    handler: Optional[ContactFormHandler] = None,
    configure_logging: bool = True,
) -> FastAPI:
    settings = settings or Settings.from_env()
    if configure_logging:
        setup_logging(settings)

    app = FastAPI(title="Contact Form", version="0.1.0")
    app.state.settings = settings
    app.state.contact_handler = handler or build_contact_handler(settings)

    app.include_router(contact_router)
    app.include_router(health_router)
    return app


app = create_app()
