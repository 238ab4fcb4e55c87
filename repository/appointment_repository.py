import datetime

from sqlalchemy.orm import Session
from db.models import Appointment, AppointmentStatus
from typing import List, Optional, Type

from schemas.appointment import AppointmentBase, AdminAppointmentOutput


class AppointmentRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, _id: int) -> Optional[Type[Appointment]]:
        return self.session.query(Appointment).filter_by(id=_id).first()

    def get_by_user_id(self, user_id: int) -> List[Optional[AppointmentBase]]:
        appointments = self.session.query(Appointment).filter_by(user_id=user_id).order_by(Appointment.id)
        return [AppointmentBase(**appointment.__dict__) for appointment in appointments]

    def get_by_status(self, status: AppointmentStatus) -> List[Optional[AdminAppointmentOutput]]:
        appointments = self.session.query(Appointment).filter_by(status=status.value).order_by(Appointment.id)
        return [AdminAppointmentOutput(**appointment.__dict__) for appointment in appointments]

    def create(self, user_id: int, service_type: str, appointment_time: datetime.datetime) -> AppointmentBase:
        appointment = Appointment(user_id=user_id,
                                  service_type=service_type,
                                  appointment_time=appointment_time,
                                  status=AppointmentStatus.PENDING.value)
        self.session.add(appointment)
        self.session.commit()
        self.session.refresh(appointment)

        return AppointmentBase(**appointment.__dict__)

    def set_status(self, appointment: Type[Appointment], status: AppointmentStatus):
        """
        Stages the new status on the session. The caller commits.
        """
        appointment.status = status.value
        self.session.flush()
