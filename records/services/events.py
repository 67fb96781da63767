import logging
from typing import Iterable, Optional

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.utils import timezone

logger = logging.getLogger(__name__)

UPDATES_GROUP = "updates"

# collection keys clients can be told to refresh
COLLECTION_KEYS = ("patients", "medicalReports", "insuranceForms")


def build_refresh_event(keys: Iterable[str], *, action: Optional[str] = None, record_id: Optional[str] = None) -> dict:
    now = timezone.now()
    return {
        "type": "broadcast.refresh",
        "version": int(now.timestamp()),
        "ts": now.isoformat(),
        "keys": list(keys)[:50],
        "action": action,
        "id": record_id,
    }


def notify_changed(key: str, action: str, record_id: Optional[str] = None) -> bool:
    """Tell connected clients that the ``key`` collection changed.

    The write has already been committed, so a channel layer outage is
    logged and reported through the return value rather than raised.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return False
    event = build_refresh_event([key], action=action, record_id=record_id)
    try:
        async_to_sync(channel_layer.group_send)(UPDATES_GROUP, event)
    except Exception:
        logger.warning("Could not broadcast %s %s for %s", action, key, record_id, exc_info=True)
        return False
    return True
