"""
Contact form endpoint for the landing pages.

Flow:
1. Parse and validate the JSON body
2. If email delivery is not configured, log the submission and acknowledge it
3. Otherwise render the notification and send it through Resend
4. Return success even if Resend rejects the email (the failure is only logged)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import httpx
import json
import logging

from app.core.config import Settings, get_settings
from app.core.email_dispatch import get_http_client, send_via_resend
from app.core.notifications import build_email_html, build_subject
from app.models.contact import validate_contact

router = APIRouter()
logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Please fill in your name, email, and phone number."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please call us directly."
PENDING_SETUP_MESSAGE = "Inquiry received (email delivery pending setup)"


@router.post("/contact")
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Accept a contact form submission and email it to the site admin.

    The body is read from the raw request so that malformed JSON is reported
    with the generic error message rather than a framework validation error.
    """
    try:
        body = await request.json()

        validation = validate_contact(body)
        if not validation.is_valid:
            logger.info(f"Contact form rejected: {'; '.join(validation.errors)}")
            return JSONResponse(status_code=400, content={"error": VALIDATION_ERROR_MESSAGE})

        submission = validation.submission
        recipients = settings.admin_recipients

        if not settings.email_enabled or not recipients:
            logger.info(
                f"RESEND_API_KEY or ADMIN_EMAIL not set. Form submission: "
                f"{json.dumps(submission.model_dump())}"
            )
            return JSONResponse(status_code=200, content={"ok": True, "message": PENDING_SETUP_MESSAGE})

        result = await send_via_resend(
            http_client,
            api_key=settings.resend_api_key.strip(),
            to=recipients,
            subject=build_subject(submission),
            html=build_email_html(submission, settings.brand_color),
            from_address=settings.effective_mail_from,
            reply_to=submission.email,
            api_url=settings.resend_api_url,
        )
        if not result.ok:
            # The visitor still gets a success response, the admin relies on the logs
            logger.warning(
                f"⚠️ Contact notification for {submission.email} not delivered "
                f"(status {result.status_code})"
            )

        return JSONResponse(status_code=200, content={"ok": True})

    except Exception as e:
        logger.error(f"Contact form error: {str(e)}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})
