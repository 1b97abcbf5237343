import inspect
import logging
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from .models import Tournament

log = logging.getLogger(__name__)

def group_name(tournament_id) -> str:
    return f"tournament_{tournament_id}"

def occupancy_changed(tournament_id):
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return
    row = (
        Tournament.objects
        .filter(pk=tournament_id)
        .values("occupancy", "capacity", "status")
        .first()
    )
    if row is None:
        return
    payload = {
        "type": "occupancy_update",
        "tournament_id": int(tournament_id),
        "occupancy": row["occupancy"],
        "capacity": row["capacity"],
        "status": row["status"],
    }
    group = group_name(tournament_id)
    try:
        if inspect.iscoroutinefunction(channel_layer.group_send):
            async_to_sync(channel_layer.group_send)(group, payload)
        else:
            channel_layer.group_send(group, payload)
    except Exception:
        # runs after commit; the registration itself stands
        log.warning("Occupancy broadcast failed for tournament %s", tournament_id, exc_info=True)
