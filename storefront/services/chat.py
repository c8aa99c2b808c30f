"""Buyer/admin chat persistence."""
from __future__ import annotations

import uuid

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session

from storefront.db.models.chat import ChatMessage
from storefront.db.models.user import User
from storefront.utils.exceptions import BadRequestError, NotFoundError


class ChatService:
    def __init__(self, db: Session):
        self.db = db

    def send(self, sender: User, recipient_id: uuid.UUID, content: str) -> ChatMessage:
        if recipient_id == sender.id:
            raise BadRequestError("Cannot send a message to yourself")
        recipient = self.db.get(User, recipient_id)
        if recipient is None or not recipient.is_active:
            raise NotFoundError("Recipient not found")

        message = ChatMessage(sender_id=sender.id, recipient_id=recipient_id, content=content)
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        return message

    def conversation(
        self, user_id: uuid.UUID, peer_id: uuid.UUID, limit: int = 100
    ) -> list[ChatMessage]:
        """Messages exchanged between two users, oldest first."""

        stmt = (
            select(ChatMessage)
            .where(
                or_(
                    and_(ChatMessage.sender_id == user_id, ChatMessage.recipient_id == peer_id),
                    and_(ChatMessage.sender_id == peer_id, ChatMessage.recipient_id == user_id),
                )
            )
            .order_by(ChatMessage.created_at.desc())
            .limit(limit)
        )
        return list(reversed(list(self.db.scalars(stmt))))
