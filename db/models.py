import enum

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text, Float
from sqlalchemy.orm import relationship

from db.database import Base


class Role(str, enum.Enum):
    USER = 'USER'
    ADMIN = 'ADMIN'


class AppointmentStatus(str, enum.Enum):
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'


class User(Base):
    """
    Salon customer or administrator. Which one is decided by the `role` field.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, nullable=False)
    username = Column(String, nullable=False, unique=True)
    email = Column(String, nullable=True)
    password = Column(String, nullable=False)  # hashed
    role = Column(String, nullable=False, default=Role.USER.value)  # USER / ADMIN

    appointments = relationship('Appointment', back_populates='user')
    notifications = relationship('Notification', back_populates='user')


class Appointment(Base):
    """
    A booking request. Starts as PENDING and is decided by an administrator.
    """
    __tablename__ = 'appointments'

    id = Column(Integer, primary_key=True, nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    user = relationship('User', back_populates='appointments')
    service_type = Column(String, nullable=False)
    appointment_time = Column(DateTime, nullable=False)  # UTC
    status = Column(String, nullable=False, default=AppointmentStatus.PENDING.value)


class Notification(Base):
    __tablename__ = 'notifications'

    id = Column(Integer, primary_key=True, nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    user = relationship('User', back_populates='notifications')
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)


class SalonService(Base):
    """
    Catalog entry for a service the salon offers.
    """
    __tablename__ = 'services'

    id = Column(Integer, primary_key=True, nullable=False)
    name = Column(String, nullable=False, unique=True)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False, default='')
