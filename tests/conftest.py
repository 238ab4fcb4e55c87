"""
Shared fixtures of the endpoint tests. Every test runs against a fresh in-memory sqlite database.
"""

import os

os.environ['ENVIRONMENT'] = 'test'
os.environ['SQLALCHEMY_DATABASE_URL'] = 'sqlite://'
os.environ.setdefault('JWT_SECRET', 'test-secret')

import datetime
from typing import Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.database import Base, get_db
from db.models import Appointment, Notification, AppointmentStatus
from main import app
from service.user_service import pwd_context

engine = create_engine(
    'sqlite://',
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

USER_PASSWORD = 'pw1'
ADMIN_PASSWORD = 'admin-pw'


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


class UtilTest:
    @staticmethod
    def insert_user_data(data: Tuple):
        conn = engine.raw_connection()

        cursor = conn.cursor()
        query = 'INSERT OR IGNORE INTO users(id, username, email, password, role) VALUES (?, ?, ?, ?, ?);'

        cursor.execute(query, data)
        conn.commit()

    @staticmethod
    def insert_appointment(user_id: int, service_type: str = 'Haircut',
                           status: AppointmentStatus = AppointmentStatus.PENDING) -> int:
        session = TestingSessionLocal()
        appointment = Appointment(user_id=user_id,
                                  service_type=service_type,
                                  appointment_time=datetime.datetime(2030, 1, 1, 10, 0),
                                  status=status.value)
        session.add(appointment)
        session.commit()
        appointment_id = appointment.id
        session.close()

        return appointment_id

    @staticmethod
    def get_notifications(user_id: int):
        session = TestingSessionLocal()
        notifications = session.query(Notification).filter_by(user_id=user_id).order_by(Notification.id).all()
        session.close()

        return notifications

    @staticmethod
    def get_appointment(appointment_id: int):
        session = TestingSessionLocal()
        appointment = session.query(Appointment).filter_by(id=appointment_id).first()
        session.close()

        return appointment


@pytest.fixture()
def test_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def test_db_with_users():
    Base.metadata.create_all(bind=engine)
    UtilTest.insert_user_data((1, 'alice', 'alice@example.com', pwd_context.hash(USER_PASSWORD), 'USER'))
    UtilTest.insert_user_data((2, 'admin', None, pwd_context.hash(ADMIN_PASSWORD), 'ADMIN'))
    UtilTest.insert_user_data((3, 'bob', None, pwd_context.hash(USER_PASSWORD), 'USER'))
    yield
    Base.metadata.drop_all(bind=engine)


app.dependency_overrides[get_db] = override_get_db

client = TestClient(app)

# returns the 400 of the catch-all handler instead of re-raising server errors
safe_client = TestClient(app, raise_server_exceptions=False)
