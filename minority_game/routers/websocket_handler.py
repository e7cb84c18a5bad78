import json
import logging

from fastapi import WebSocket, status
from fastapi.websockets import WebSocketState
from pydantic import ValidationError

from ..game import GameCoordinator
from ..models import Role
from ..models.messages import (
    ADMIN_MESSAGES,
    FinalMessage,
    LeaveMessage,
    NextMessage,
    QueueAddMessage,
    QueueBulkMessage,
    QueueRemoveMessage,
    RegisterMessage,
    ResetKeepQueueMessage,
    ResetMessage,
    RevealMessage,
    StartMessage,
    VoteMessage,
    inbound_adapter,
)
from ..schemas import RegisteredReply

log = logging.getLogger(__name__)


def _frame_payload(frame: dict) -> str:
    """Text of a receive frame; binary frames are decoded as UTF-8"""
    if frame.get("text") is not None:
        return frame["text"]
    return (frame.get("bytes") or b"").decode("utf-8")


def _is_open(websocket: WebSocket) -> bool:
    return (
        websocket.client_state == WebSocketState.CONNECTED
        and websocket.application_state == WebSocketState.CONNECTED
    )


class WebSocketHandler:
    """Handles WebSocket message processing and communication"""

    @staticmethod
    async def handle_messages(
            websocket: WebSocket,
            connection_id: str,
            manager: GameCoordinator,
    ) -> None:
        """Main message handling loop for WebSocket connections"""
        try:
            while True:
                frame = await websocket.receive()
                if frame["type"] == "websocket.disconnect":
                    break

                try:
                    msg_data = inbound_adapter.validate_python(json.loads(_frame_payload(frame)))
                except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
                    log.debug(f"Dropping malformed message on {connection_id}: {e}")
                    continue

                keep_open = await WebSocketHandler._process_message(
                    msg_data, websocket, connection_id, manager
                )
                if not keep_open:
                    break

        finally:
            await manager.disconnect(connection_id)

    @staticmethod
    async def _process_message(
            msg_data,
            websocket: WebSocket,
            connection_id: str,
            manager: GameCoordinator,
    ) -> bool:
        """Process one validated message; returns False once the socket is closed"""
        if isinstance(msg_data, RegisterMessage):
            return await WebSocketHandler._handle_register(
                msg_data, websocket, connection_id, manager
            )

        if isinstance(msg_data, ADMIN_MESSAGES):
            if manager.role_of(connection_id) != Role.ADMIN:
                log.debug(f"Ignoring {msg_data.type} from non-admin {connection_id}")
                return True
            changed = WebSocketHandler._apply_admin(msg_data, manager)
        elif isinstance(msg_data, VoteMessage):
            changed = manager.vote(connection_id, msg_data.choice)
        elif isinstance(msg_data, LeaveMessage):
            changed = manager.leave(connection_id)
        else:
            changed = False

        if changed:
            await manager.republish()
        return True

    @staticmethod
    async def _handle_register(
            msg_data: RegisterMessage,
            websocket: WebSocket,
            connection_id: str,
            manager: GameCoordinator,
    ) -> bool:
        """Handle role authentication and identity binding"""
        reply, player_id = manager.register(connection_id, msg_data)
        await websocket.send_json(reply.to_wire())

        if not reply.ok:
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return False

        if player_id is not None:
            await websocket.send_json(RegisteredReply(player_id=player_id).to_wire())
        await manager.republish()
        return True

    @staticmethod
    def _apply_admin(msg_data, manager: GameCoordinator) -> bool:
        """Apply an admin command to the engine; returns whether state changed"""
        engine = manager.engine

        if isinstance(msg_data, StartMessage):
            engine.start(msg_data.question, msg_data.option_a, msg_data.option_b)
            return True
        if isinstance(msg_data, QueueAddMessage):
            engine.enqueue(msg_data.question, msg_data.option_a, msg_data.option_b)
            return True
        if isinstance(msg_data, QueueBulkMessage):
            return bool(engine.enqueue_many(msg_data.items))
        if isinstance(msg_data, QueueRemoveMessage):
            return engine.dequeue(msg_data.id)
        if isinstance(msg_data, NextMessage):
            return engine.start_next_from_queue()
        if isinstance(msg_data, RevealMessage):
            return engine.reveal() is not None
        if isinstance(msg_data, FinalMessage):
            engine.finalize()
            return True
        if isinstance(msg_data, ResetMessage):
            engine.reset(keep_queue=False)
            return True
        if isinstance(msg_data, ResetKeepQueueMessage):
            engine.reset(keep_queue=True)
            return True
        return False

    @staticmethod
    async def broadcast_to_client(
            websocket: WebSocket, connection_id: str, manager: GameCoordinator, subscriber
    ) -> None:
        """Answer every state tick with this connection's own snapshot"""
        async for _event in subscriber:
            if connection_id not in manager.sessions:
                continue
            if _is_open(websocket):
                await websocket.send_json(manager.snapshot_for(connection_id))
