"""Chat endpoints and the realtime WebSocket channel."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from loguru import logger
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import ChatMessageCreate, ChatMessageRead
from storefront.services.chat import ChatService
from storefront.services.realtime import ChatConnectionManager

router = APIRouter(prefix="/chat", tags=["chat"])

# Mounted only when the realtime channel is enabled (non-production).
realtime_router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/messages", response_model=ChatMessageRead, status_code=status.HTTP_201_CREATED)
async def send_message(
    payload: ChatMessageCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
    connection_manager: ChatConnectionManager | None = Depends(deps.get_connection_manager),
):
    """Persist a message and push it live to the recipient when connected."""

    message = await run_in_threadpool(
        ChatService(db).send, current_user, payload.recipient_id, payload.content
    )
    response = ChatMessageRead.model_validate(message)
    if connection_manager is not None:
        await connection_manager.send_to_user(
            payload.recipient_id,
            {"type": "chat_message", "data": response.model_dump(mode="json")},
        )
    return response


@router.get("/messages/{peer_id}", response_model=list[ChatMessageRead])
def read_conversation(
    peer_id: uuid.UUID,
    limit: int = Query(100, ge=1, le=500),
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return ChatService(db).conversation(current_user.id, peer_id, limit=limit)


@realtime_router.websocket("/ws")
async def chat_stream(
    websocket: WebSocket,
    token: str | None = Query(None),
    db: Session = Depends(deps.get_db),
) -> None:
    connection_manager: ChatConnectionManager | None = getattr(
        websocket.app.state, "realtime", None
    )
    user = deps.resolve_user_from_token(token, db) if token else None
    if connection_manager is None or user is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    user_id = user.id
    connection_id = await connection_manager.connect(websocket=websocket, user_id=user_id)
    await websocket.send_json({"type": "ready", "data": {"user_id": str(user_id)}})
    try:
        while True:
            try:
                data = await websocket.receive_json()
            except WebSocketDisconnect:
                break
            if isinstance(data, dict) and data.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
                continue
            logger.debug("Unhandled WebSocket message", payload=data)
    finally:
        await connection_manager.disconnect(user_id=user_id, connection_id=connection_id)
