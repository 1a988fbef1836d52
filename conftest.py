"""
Shared pytest fixtures: accounts per role, a doctor with a weekly schedule,
and an API client helper that authenticates as a given user.
"""
import datetime

import pytest
from rest_framework.test import APIClient

from clinic_settings.models import ClinicSettings
from doctors.models import Doctor, DoctorSchedule, PracticeSession
from user.models import User


def make_user(phone, role, name=None):
    return User.objects.create_user(phone=phone, password='secret123', name=name or role.title(), role=role)


@pytest.fixture
def patient(db):
    return make_user('081100000001', User.ROLE_PATIENT, 'Ayu')


@pytest.fixture
def other_patient(db):
    return make_user('081100000002', User.ROLE_PATIENT, 'Budi')


@pytest.fixture
def receptionist(db):
    return make_user('081100000003', User.ROLE_RECEPTIONIST)


@pytest.fixture
def nurse(db):
    return make_user('081100000004', User.ROLE_NURSE)


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(phone='081100000005', password='secret123', name='Admin')


@pytest.fixture
def doctor(db):
    user = make_user('081100000006', User.ROLE_DOCTOR, 'Dr. Sari')
    return Doctor.objects.create(user=user, name='Dr. Sari', specialty='General')


@pytest.fixture
def morning_session(db):
    return PracticeSession.objects.create(name='Morning', start_time=datetime.time(8, 0), end_time=datetime.time(12, 0))


@pytest.fixture
def booking_day():
    """A Friday well in the future."""
    return datetime.date(2031, 3, 7)


@pytest.fixture
def schedule(doctor, morning_session, booking_day):
    return DoctorSchedule.objects.create(
        doctor=doctor, session=morning_session, day_of_week=booking_day.weekday(), max_patients=5,
    )


@pytest.fixture
def clinic_policy(db):
    """Store a policy row; returns a setter taking field overrides."""
    def _set(**fields):
        row = ClinicSettings.load()
        for name, value in fields.items():
            setattr(row, name, value)
        row.save()
        return row
    return _set


@pytest.fixture
def api_client():
    """APIClient factory; pass a user to authenticate as them."""
    def _client(user=None):
        client = APIClient()
        if user is not None:
            client.force_authenticate(user=user)
        return client
    return _client
