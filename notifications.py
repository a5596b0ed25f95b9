"""In-memory notification channel shared by the storefront and admin console."""

import itertools
import logging
from datetime import datetime
from typing import Callable, List, Optional

from schemas import Notification, NotificationType

logger = logging.getLogger(__name__)

ADMIN_CHANNEL = "admin"


class NotificationCenter:
    """Fire-and-forget sink; senders never wait on delivery."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._items: List[Notification] = []
        self._ids = itertools.count(1)

    def add_notification(self, user_id: str, title: str, message: str,
                         type: NotificationType = NotificationType.info) -> Notification:
        note = Notification(
            id=f"NOTIF-{next(self._ids)}",
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            timestamp=self._clock(),
        )
        self._items.append(note)
        logger.debug("notify %s [%s] %s: %s", user_id, type.value, title, message)
        return note

    def for_user(self, user_id: str) -> List[Notification]:
        # Newest first, like a notification panel
        return [n for n in reversed(self._items) if n.user_id == user_id]

    def unread_count(self, user_id: str) -> int:
        return sum(1 for n in self._items if n.user_id == user_id and not n.read)

    def mark_read(self, notification_id: str) -> Optional[Notification]:
        for n in self._items:
            if n.id == notification_id:
                n.read = True
                return n
        return None

    def mark_all_read(self, user_id: str) -> int:
        count = 0
        for n in self._items:
            if n.user_id == user_id and not n.read:
                n.read = True
                count += 1
        return count

    def clear(self, user_id: str) -> None:
        self._items = [n for n in self._items if n.user_id != user_id]

    def __len__(self):
        return len(self._items)
