import json
from channels.generic.websocket import AsyncWebsocketConsumer
from .broadcast import group_name

class OccupancyConsumer(AsyncWebsocketConsumer):
    async def connect(self):
        self.tournament_id = int(self.scope["url_route"]["kwargs"]["tournament_id"])
        self.group_name = group_name(self.tournament_id)
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(self.group_name, self.channel_name)

    async def occupancy_update(self, event):
        await self.send(
            text_data=json.dumps(
                {
                    "type": "occupancy_update",
                    "tournament_id": event["tournament_id"],
                    "occupancy": event["occupancy"],
                    "capacity": event["capacity"],
                    "status": event.get("status"),
                }
            )
        )
