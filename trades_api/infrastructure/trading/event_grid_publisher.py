"""
Adapter: Azure Event Grid publisher.

Implements the TradeEventPublisher port over the Event Grid HTTP API.
Events are posted in the Event Grid event schema, one event per request,
authenticated with the topic access key.
"""

import logging
from typing import Any

import httpx

from trades_api.domain.trading.errors import EventPublishError
from trades_api.domain.trading.events import TradeCreatedEvent
from trades_api.domain.trading.ports import TradeEventPublisher

logger = logging.getLogger(__name__)

ACCESS_KEY_HEADER = "aeg-sas-key"


def _event_to_dict(event: TradeCreatedEvent) -> dict[str, Any]:
    """Serialize an event in the Event Grid event schema."""
    return {
        "id": str(event.id),
        "subject": event.subject,
        "eventType": event.event_type,
        "eventTime": event.event_time.isoformat(),
        "data": event.data,
        "dataVersion": event.data_version,
    }


class EventGridPublisherAdapter(TradeEventPublisher):
    """Sends trade events to an Event Grid topic.

    Args:
        endpoint: Topic endpoint URL.
        access_key: Topic access key.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        endpoint: str | None,
        access_key: str | None,
        timeout: float = 10.0,
    ) -> None:
        self._endpoint = endpoint
        self._access_key = access_key
        self._timeout = timeout

    def send(self, event: TradeCreatedEvent) -> None:
        """POST ``event`` to the topic.

        Raises:
            EventPublishError: If the topic is not configured, unreachable,
                or answers with a non-2xx status.
        """
        if not self._endpoint or not self._access_key:
            raise EventPublishError("Event Grid topic endpoint or key not configured")

        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.post(
                    self._endpoint,
                    json=[_event_to_dict(event)],
                    headers={ACCESS_KEY_HEADER: self._access_key},
                )
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise EventPublishError(f"Event Grid publish failed: {exc}") from exc

        logger.debug("Event %s accepted by Event Grid.", event.id)
