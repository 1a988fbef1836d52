import pytest

from doctors.models import DailyScheduleStatus, DoctorSchedule, PracticeSession

pytestmark = pytest.mark.django_db


def test_admin_creates_overnight_session(api_client, admin_user):
    response = api_client(admin_user).post('/api/doctors/sessions/', {
        'name': 'Night', 'start_time': '22:00', 'end_time': '02:00',
    }, format='json')

    assert response.data['code'] == 201
    assert response.data['data']['crosses_midnight'] is True
    assert PracticeSession.objects.filter(name='Night').exists()


def test_receptionist_cannot_create_session(api_client, receptionist):
    response = api_client(receptionist).post('/api/doctors/sessions/', {
        'name': 'Night', 'start_time': '22:00', 'end_time': '02:00',
    }, format='json')
    assert response.status_code == 403


def test_admin_creates_schedule(api_client, admin_user, doctor, morning_session):
    response = api_client(admin_user).post('/api/doctors/schedules/', {
        'doctor_id': doctor.pk, 'session_id': morning_session.pk, 'day_of_week': 0, 'max_patients': 12,
    }, format='json')

    assert response.data['code'] == 201
    schedule = DoctorSchedule.objects.get(pk=response.data['data']['id'])
    assert schedule.max_patients == 12
    assert schedule.session == morning_session


def test_schedule_defaults_to_thirty_patients(doctor):
    schedule = DoctorSchedule.objects.create(doctor=doctor, day_of_week=2)
    assert schedule.max_patients == 30


def test_patient_lists_schedules_of_a_doctor(api_client, patient, schedule):
    response = api_client(patient).get('/api/doctors/schedules/', {'doctor_id': schedule.doctor_id})
    assert response.status_code == 200
    assert [row['id'] for row in response.data['data']] == [schedule.pk]


def test_day_status_reports_remaining_capacity(api_client, patient, schedule, booking_day):
    DailyScheduleStatus.objects.create(schedule=schedule, date=booking_day, current_reservations=2)
    response = api_client(patient).get(f'/api/doctors/schedules/{schedule.pk}/days/{booking_day.isoformat()}/')

    data = response.data['data']
    assert data['current_reservations'] == 2
    assert data['remaining'] == 3


def test_admin_closes_a_day(api_client, admin_user, schedule, booking_day):
    response = api_client(admin_user).put(
        f'/api/doctors/schedules/{schedule.pk}/days/{booking_day.isoformat()}/',
        {'is_active': False, 'notes': 'Holiday'}, format='json',
    )
    assert response.data['data']['is_active'] is False
    assert DailyScheduleStatus.objects.get(schedule=schedule, date=booking_day).notes == 'Holiday'
