"""
Email delivery through the Resend API.

Delivery is best-effort: a single POST is made and a non-2xx answer is
returned as a failed DeliveryResult instead of an exception, so the caller
decides what (if anything) the visitor should see.
"""

import httpx
import logging
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional

from app.core.config import RESEND_API_URL

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Per-request HTTP client, closed once the response is sent"""
    async with httpx.AsyncClient() as client:
        yield client


async def send_via_resend(
    client: httpx.AsyncClient,
    api_key: str,
    to: List[str],
    subject: str,
    html: str,
    from_address: str,
    reply_to: Optional[str] = None,
    api_url: str = RESEND_API_URL,
) -> DeliveryResult:
    """
    Send one HTML email through Resend.

    Args:
        client: HTTP client used for the request
        api_key: Resend API key (sent as a bearer token)
        to: Recipient addresses
        subject: Subject line
        html: HTML body
        from_address: Sender, e.g. "Acme <onboarding@resend.dev>"
        reply_to: Optional address replies should go to
        api_url: Resend emails endpoint

    Returns:
        DeliveryResult: ok for any 2xx answer, otherwise the status and body
    """
    payload = {
        "from": from_address,
        "to": to,
        "subject": subject,
        "html": html,
    }
    if reply_to:
        payload["reply_to"] = reply_to

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    response = await client.post(api_url, json=payload, headers=headers)

    if not response.is_success:
        logger.error(f"❌ Resend API error ({response.status_code}): {response.text}")
        return DeliveryResult(ok=False, status_code=response.status_code, error=response.text)

    logger.info(f"✅ Resend accepted email '{subject}' for {', '.join(to)}")
    return DeliveryResult(ok=True, status_code=response.status_code)
