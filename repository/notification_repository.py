from sqlalchemy.orm import Session
from db.models import Notification
from typing import List, Optional, Type

from schemas.notification import NotificationBase


class NotificationRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_unread_by_user_id(self, user_id: int) -> List[Type[Notification]]:
        return self.session.query(Notification) \
            .filter(Notification.user_id == user_id, Notification.read.is_(False)) \
            .order_by(Notification.id) \
            .all()

    def create(self, user_id: int, message: str) -> NotificationBase:
        notification = Notification(user_id=user_id, message=message, read=False)
        self.session.add(notification)
        self.session.commit()
        self.session.refresh(notification)

        return NotificationBase(**notification.__dict__)

    def add(self, user_id: int, message: str):
        """
        Stages a new unread notification on the session. The caller commits.
        """
        self.session.add(Notification(user_id=user_id, message=message, read=False))
        self.session.flush()

    def mark_read(self, notifications: List[Optional[Notification]]):
        for notification in notifications:
            notification.read = True

        self.session.commit()
