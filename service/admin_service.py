import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from db.models import Role
from exceptions import NotFound
from repository.user_repository import UserRepository
from schemas.appointment import AdminAppointmentOutput, AppointmentDecisionInput
from schemas.base import MessageOutputBase
from schemas.user import UserBase
from service.appointment_service import AppointmentService

logger = logging.getLogger(__name__)


class AdminService:
    """
    Administrator operations. Callers are expected to have passed the ADMIN role check already.
    """

    def __init__(self, session: Session):
        self.user_repository = UserRepository(session)
        self.appointment_service = AppointmentService(session)

    def list_users(self) -> List[Optional[UserBase]]:
        return self.user_repository.get_all()

    def grant_access(self, user_id: int, new_role: Role) -> UserBase:
        user = self.user_repository.get_by_id(user_id)

        if not user:
            raise NotFound(f'User with {user_id} not found')

        updated = self.user_repository.update_role(user, new_role.value)
        logger.info(f"Role of '{updated.username}' set to {updated.role}")

        return updated

    def list_pending_appointments(self) -> List[Optional[AdminAppointmentOutput]]:
        return self.appointment_service.get_pending()

    def decide_appointment(self, appointment_id: int, decision: AppointmentDecisionInput) -> MessageOutputBase:
        self.appointment_service.transition(appointment_id, decision.status)
        return MessageOutputBase(message='Appointment updated')
