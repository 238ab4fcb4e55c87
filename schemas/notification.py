from typing import List

from pydantic import BaseModel, ConfigDict

from schemas.appointment import AppointmentBase


class NotificationBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    message: str
    read: bool


class DashboardOutput(BaseModel):
    appointments: List[AppointmentBase]
    notifications: List[NotificationBase]
