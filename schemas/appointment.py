import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from db.models import AppointmentStatus


class AppointmentBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    service_type: str
    appointment_time: datetime.datetime
    status: str


class AdminAppointmentOutput(AppointmentBase):
    user_id: int


class BookAppointmentInput(BaseModel):
    model_config = ConfigDict(extra='ignore')

    service_type: str = Field(description='Requested service', examples=['Haircut'])
    appointment_time: datetime.datetime = Field(description='Requested time', examples=['2025-02-20T12:30:00'])

    @field_validator('service_type')
    @classmethod
    def validate_service_type(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('service type must not be empty')

        return value

    @field_validator('appointment_time')
    @classmethod
    def validate_appointment_time(cls, value: datetime.datetime) -> datetime.datetime:
        # stored naive in UTC
        if value.tzinfo is not None:
            value = value.astimezone(datetime.UTC).replace(tzinfo=None)

        return value


class AppointmentDecisionInput(BaseModel):
    model_config = ConfigDict(extra='ignore')

    status: AppointmentStatus = Field(description='APPROVED or REJECTED', examples=['APPROVED'])

    @field_validator('status')
    @classmethod
    def validate_decision(cls, value: AppointmentStatus) -> AppointmentStatus:
        if value == AppointmentStatus.PENDING:
            raise ValueError('an appointment can only be APPROVED or REJECTED')

        return value
