from typing import List

from sqlalchemy.orm import Session

from repository.notification_repository import NotificationRepository
from schemas.notification import NotificationBase


class NotificationService:
    def __init__(self, session: Session):
        self.repository = NotificationRepository(session)

    def notify(self, user_id: int, message: str) -> NotificationBase:
        return self.repository.create(user_id, message)

    def stage(self, user_id: int, message: str):
        """
        Like `notify`, but leaves the commit to the caller so the notification is saved with its cause.
        """
        self.repository.add(user_id, message)

    def list_unread(self, user_id: int) -> List[NotificationBase]:
        """
        Returns the user's unread notifications, oldest first, and marks them read.

        The returned items still show `read=False`, the state they were in when listed.
        """
        notifications = self.repository.get_unread_by_user_id(user_id)
        unread = [NotificationBase(**notification.__dict__) for notification in notifications]

        self.repository.mark_read(notifications)

        return unread
