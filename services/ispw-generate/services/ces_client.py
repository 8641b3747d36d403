"""CES Client: sends the generate-await request."""

import json
import logging
from typing import Any, Optional
import httpx
from core.errors import NetworkError

logger = logging.getLogger(__name__)


async def dispatch(
    url: httpx.URL,
    token: str,
    body_text: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """
    POSTs the body to the generate-await URL and returns the parsed JSON
    response. The token is sent as the authorization header verbatim.
    """
    content = body_text.encode("utf-8")
    headers = {
        "Content-Type": "application/json",
        "Content-Length": str(len(content)),
        "authorization": token,
    }
    logger.info("Sending generate request to %s", url)
    try:
        async with httpx.AsyncClient(transport=transport, timeout=None) as client:
            response = await client.post(url, content=content, headers=headers)
    except httpx.RequestError as e:
        logger.error("Error contacting CES: %s", e)
        raise NetworkError(f"Unable to reach CES: {e}") from e

    logger.debug("CES responded with status %s", response.status_code)
    try:
        return json.loads(response.text)
    except json.JSONDecodeError as e:
        logger.error("CES returned a body that is not JSON (status %s).", response.status_code)
        raise NetworkError("The response from CES could not be parsed as JSON.") from e
