from channels.generic.websocket import AsyncJsonWebsocketConsumer

from records.services.events import COLLECTION_KEYS, UPDATES_GROUP


class UpdatesConsumer(AsyncJsonWebsocketConsumer):
    """Push record change events to connected front-desk clients.

    A client receives events for every collection until it narrows the
    feed by sending ``{"keys": ["patients", ...]}``; an empty list
    restores the full feed.
    """
    group_name = UPDATES_GROUP

    async def connect(self):
        self.keys = set()
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()
        await self.send_json({"type": "welcome", "message": "connected"})

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(self.group_name, self.channel_name)

    async def receive_json(self, content, **kwargs):
        keys = content.get("keys") if isinstance(content, dict) else None
        if not isinstance(keys, list) or not set(keys) <= set(COLLECTION_KEYS):
            await self.send_json({
                "type": "error",
                "message": f"Expected {{\"keys\": [...]}} with keys from {', '.join(COLLECTION_KEYS)}",
            })
            return
        self.keys = set(keys)
        await self.send_json({"type": "subscribed", "keys": sorted(self.keys)})

    async def broadcast_refresh(self, event):
        # event: {"type": "broadcast.refresh", "version", "ts", "keys", "action", "id"}
        if self.keys and not self.keys.intersection(event.get("keys", ())):
            return
        await self.send_json(event)
