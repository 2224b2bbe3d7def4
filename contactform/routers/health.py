from fastapi import APIRouter, Depends

from contactform.config import Settings
from contactform.deps import get_settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "ok": True,
        "env": settings.ENV,
        "mailing_list_configured": settings.mailing_list_configured,
        "admin_email_configured": bool(settings.ADMIN_EMAIL),
    }
