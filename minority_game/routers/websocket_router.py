import logging

import anyio
from fastapi import APIRouter, WebSocket

from ..dependencies import CoordinatorDep
from .websocket_handler import WebSocketHandler

log = logging.getLogger(__name__)
router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, manager: CoordinatorDep) -> None:
    """Main WebSocket endpoint for admins, players and viewers"""
    await websocket.accept()
    connection_id = manager.connect()

    try:
        # subscribe before reading so no republish tick is missed
        async with manager.subscribe() as subscriber:
            await websocket.send_json(manager.snapshot_for(connection_id))

            async with anyio.create_task_group() as task_group:

                async def run_message_handler() -> None:
                    """Task to handle incoming WebSocket messages"""
                    await WebSocketHandler.handle_messages(
                        websocket=websocket,
                        connection_id=connection_id,
                        manager=manager,
                    )
                    task_group.cancel_scope.cancel()

                task_group.start_soon(run_message_handler)

                await WebSocketHandler.broadcast_to_client(
                    websocket=websocket,
                    connection_id=connection_id,
                    manager=manager,
                    subscriber=subscriber,
                )

    except Exception as e:
        log.error(f"WebSocket error on connection {connection_id}: {e}")
        raise

    finally:
        # the receiver normally closes the session; this covers an early failure
        if connection_id in manager.sessions:
            manager.sessions.close(connection_id)
