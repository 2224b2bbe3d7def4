# contactform/routers/contact.py
from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from contactform.deps import get_contact_handler
from contactform.schemas import FormResult
from contactform.services.contact import ContactFormHandler
from contactform.services.sanitize import FIELDS
from contactform.templates import render_contact_page

router = APIRouter(prefix="", tags=["contact"])


def _page(result: FormResult) -> Response:
    # always 200: outcomes are shown in the banner, not the status code
    return Response(content=render_contact_page(result), media_type="text/html", status_code=200)


@router.get("/")
def contact_form():
    return _page(FormResult())


@router.post("/")
async def submit_contact_form(
    request: Request,
    handler: ContactFormHandler = Depends(get_contact_handler),
):
    try:
        form = await request.form()
        raw = {f: form.get(f) for f in FIELDS}
    except Exception:
        # unparseable body => treat every field as blank
        raw = {}

    # subscribe + notify block on network I/O
    result = await run_in_threadpool(handler.handle, raw)
    return _page(result)
