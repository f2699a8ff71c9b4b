from __future__ import annotations

import logging

from django.db import DatabaseError
from django.utils import timezone

from .models import Message

logger = logging.getLogger(__name__)


def add_message(user_id: str | None, user_name: str, title: str, content: str) -> Message | None:
    try:
        message = Message.objects.create(
            user_id=user_id,
            user_name=user_name or "Bilinmeyen Kullanıcı",
            title=title,
            content=content,
            is_read=False,
            created_at=timezone.now(),
        )
    except DatabaseError:
        logger.exception("Error adding message from %s", user_id)
        return None
    logger.info("Message %s received from %s", message.pk, user_id)
    return message


def get_all_messages() -> list[Message]:
    try:
        return list(Message.objects.order_by("-created_at"))
    except DatabaseError:
        logger.exception("Error fetching all messages")
        return []


def mark_message_as_read(message_id) -> bool:
    """Okunmuş mesajı tekrar işaretlemek de başarılıdır."""
    try:
        qs = Message.objects.filter(pk=message_id)
        if not qs.exists():
            return False
        qs.update(is_read=True)
    except DatabaseError:
        logger.exception("Error marking message %s as read", message_id)
        return False
    return True


def count_unread_messages() -> int:
    try:
        return Message.objects.filter(is_read=False).count()
    except DatabaseError:
        logger.exception("Error counting unread messages")
        return 0


def delete_message(message_id) -> bool:
    try:
        deleted, _ = Message.objects.filter(pk=message_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting message %s", message_id)
        return False
