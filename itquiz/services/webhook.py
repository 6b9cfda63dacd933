import logging

import httpx

from ..domain.model import Delivered, DeliveryOutcome, Failed

logger = logging.getLogger(__name__)


class WebhookDispatcher:
    """
    Posts a rendered message to a chat webhook as ``{"content": message}``.

    Exactly one attempt is made per call. Transport errors, unusable URLs and
    non-2xx responses come back as ``Failed`` instead of being raised.

    Args:
        transport: optional ``httpx`` transport (tests pass an
            ``httpx.MockTransport``); when omitted the default transport is used.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.transport = transport

    async def deliver(self, message: str, url: str) -> DeliveryOutcome:
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                resp = await client.post(url, json={"content": message})
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            reason = f"Webhook responded {exc.response.status_code}: {exc.response.text}".strip()
            logger.warning("Webhook delivery failed: %s", reason)
            return Failed(reason)
        # out-of-range ports surface from the socket layer as OverflowError/ValueError
        except (httpx.HTTPError, httpx.InvalidURL, OverflowError, ValueError) as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.warning("Webhook delivery failed: %s", reason)
            return Failed(reason)
        return Delivered()
