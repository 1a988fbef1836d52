import datetime

import pytest
from django.utils import timezone

from appointments.models import Reservation
from doctors.models import DoctorSchedule

pytestmark = pytest.mark.django_db

CRON_URL = '/api/internal/jobs/auto-cancel/'


def test_patient_books_and_lists(api_client, patient, schedule, booking_day):
    client = api_client(patient)
    response = client.post('/api/appointments/book/', {
        'schedule_id': schedule.pk, 'reservation_date': booking_day.isoformat(), 'complaint': 'Fever',
    }, format='json')

    assert response.data['code'] == 201
    assert response.data['data']['queue_number'] == 1
    assert response.data['data']['session_name'] == 'Morning'

    listing = client.get('/api/appointments/')
    assert listing.data['data']['count'] == 1


def test_own_reservations_are_paginated(api_client, patient, other_patient, make_reservation):
    for number in range(1, 26):
        make_reservation(number)
    make_reservation(26, patient=other_patient)
    client = api_client(patient)

    first = client.get('/api/appointments/').data['data']
    second = client.get('/api/appointments/', {'page': 2}).data['data']

    assert first['count'] == 25
    assert first['page'] == 1
    assert first['page_size'] == 20
    assert len(first['results']) == 20
    assert second['page'] == 2
    assert len(second['results']) == 5
    assert second['next'] is None


def test_full_day_is_reported_distinctly(api_client, patient, schedule, booking_day):
    schedule.max_patients = 1
    schedule.save()
    client = api_client(patient)
    payload = {'schedule_id': schedule.pk, 'reservation_date': booking_day.isoformat()}
    client.post('/api/appointments/book/', payload, format='json')

    response = client.post('/api/appointments/book/', payload, format='json')

    assert response.data['code'] == 409
    assert response.data['data']['error'] == 'day_full'


def test_booking_in_the_past_is_invalid(api_client, patient, schedule):
    response = api_client(patient).post('/api/appointments/book/', {
        'schedule_id': schedule.pk, 'reservation_date': '2020-01-03',
    }, format='json')
    assert response.status_code == 400
    assert not Reservation.objects.exists()


def test_staff_cannot_use_patient_booking(api_client, receptionist, schedule, booking_day):
    response = api_client(receptionist).post('/api/appointments/book/', {
        'schedule_id': schedule.pk, 'reservation_date': booking_day.isoformat(),
    }, format='json')
    assert response.status_code == 403


def test_patient_cancels_own_but_not_others(api_client, patient, other_patient, make_reservation):
    mine = make_reservation(1, status=Reservation.STATUS_PENDING, examination_status=Reservation.EXAM_NOT_STARTED)
    theirs = make_reservation(2, patient=other_patient)

    assert api_client(patient).post(f'/api/appointments/{mine.pk}/cancel/').data['code'] == 200
    response = api_client(patient).post(f'/api/appointments/{theirs.pk}/cancel/')
    assert response.data['code'] == 404
    theirs.refresh_from_db()
    assert theirs.status == Reservation.STATUS_CONFIRMED


def test_patient_reschedules(api_client, patient, schedule, booking_day):
    client = api_client(patient)
    booked = client.post('/api/appointments/book/', {
        'schedule_id': schedule.pk, 'reservation_date': booking_day.isoformat(),
    }, format='json').data['data']
    next_week = booking_day + datetime.timedelta(days=7)

    response = client.put(f"/api/appointments/{booked['id']}/reschedule/", {
        'schedule_id': schedule.pk, 'reservation_date': next_week.isoformat(), 'reservation_time': '09:30',
    }, format='json')

    assert response.data['code'] == 200
    assert response.data['data']['reservation_date'] == next_week.isoformat()
    assert response.data['data']['reservation_time'] == '09:30:00'


def test_walk_in_by_receptionist(api_client, receptionist, patient, doctor):
    today = timezone.localdate()
    schedule = DoctorSchedule.objects.create(doctor=doctor, day_of_week=today.weekday())

    response = api_client(receptionist).post('/api/queue/walk-in/', {
        'patient_id': patient.pk, 'schedule_id': schedule.pk,
    }, format='json')

    assert response.data['code'] == 201
    assert response.data['data']['examination_status'] == Reservation.EXAM_WAITING


def test_patient_cannot_register_walk_in(api_client, patient, schedule):
    response = api_client(patient).post('/api/queue/walk-in/', {
        'patient_id': patient.pk, 'schedule_id': schedule.pk,
    }, format='json')
    assert response.status_code == 403


def test_check_in_twice_is_reported_distinctly(api_client, receptionist, make_reservation):
    reservation = make_reservation(1, status=Reservation.STATUS_PENDING, examination_status=Reservation.EXAM_NOT_STARTED)
    client = api_client(receptionist)

    assert client.post('/api/queue/checkin/', {'reservation_id': reservation.pk}, format='json').data['code'] == 200
    response = client.post('/api/queue/checkin/', {'reservation_id': reservation.pk}, format='json')

    assert response.data['code'] == 409
    assert response.data['data']['error'] == 'already_checked_in'


def test_patient_cannot_check_in_someone_else(api_client, other_patient, make_reservation):
    reservation = make_reservation(1, status=Reservation.STATUS_PENDING, examination_status=Reservation.EXAM_NOT_STARTED)
    response = api_client(other_patient).post('/api/queue/checkin/', {'reservation_id': reservation.pk}, format='json')
    assert response.status_code == 403


def test_strict_window_error_carries_bounds(api_client, patient, clinic_policy, make_reservation):
    clinic_policy(enable_strict_check_in=True)
    # far past: the window closed long ago
    reservation = make_reservation(1, status=Reservation.STATUS_PENDING, examination_status=Reservation.EXAM_NOT_STARTED,
                                   day=datetime.date(2024, 3, 1))

    response = api_client(patient).post('/api/queue/checkin/', {'reservation_id': reservation.pk}, format='json')

    assert response.data['data']['error'] == 'check_in_too_late'
    assert 'window_starts_at' in response.data['data']
    assert 'window_ends_at' in response.data['data']


def test_check_in_window_endpoint(api_client, patient, make_reservation, booking_day):
    reservation = make_reservation(1, time=datetime.time(10, 0))
    response = api_client(patient).get(f'/api/queue/{reservation.pk}/check-in-window/')

    data = response.data['data']
    assert data['starts_at'] == f'{booking_day.isoformat()}T08:00:00+08:00'
    # late deadline 11:00 is earlier than session end 12:00 + 30
    assert data['ends_at'] == f'{booking_day.isoformat()}T11:00:00+08:00'
    assert data['strict'] is False


def test_priority_endpoint_promotes(api_client, nurse, make_reservation):
    first = make_reservation(1)
    target = make_reservation(2)

    response = api_client(nurse).put(f'/api/queue/{target.pk}/priority/', {
        'is_priority': True, 'priority_reason': 'Seizure',
    }, format='json')

    assert response.data['data'] == {'reservation_id': target.pk, 'is_priority': True, 'new_queue_number': 1}
    first.refresh_from_db()
    assert first.queue_number == 2


def test_priority_on_non_waiting_is_precondition_failure(api_client, nurse, make_reservation):
    reservation = make_reservation(1, status=Reservation.STATUS_PENDING, examination_status=Reservation.EXAM_NOT_STARTED)
    response = api_client(nurse).put(f'/api/queue/{reservation.pk}/priority/', {'is_priority': True}, format='json')
    assert response.data['code'] == 409
    assert response.data['data']['error'] == 'not_waiting'


def test_priority_on_missing_reservation_is_not_found(api_client, nurse):
    response = api_client(nurse).put('/api/queue/9999/priority/', {'is_priority': True}, format='json')
    assert response.data['code'] == 404


def test_examination_status_endpoint(api_client, doctor, make_reservation):
    reservation = make_reservation(1)
    response = api_client(doctor.user).put(f'/api/queue/{reservation.pk}/status/', {
        'examination_status': 'in_progress',
    }, format='json')
    assert response.data['data']['examination_status'] == 'in_progress'


def test_queue_by_date(api_client, receptionist, make_reservation, booking_day):
    make_reservation(2)
    make_reservation(1)
    response = api_client(receptionist).get('/api/queue/date/', {'date': booking_day.isoformat()})

    doctors = response.data['data']['doctors']
    assert len(doctors) == 1
    assert [row['queue_number'] for row in doctors[0]['queue']] == [1, 2]


def test_queue_by_date_rejects_bad_date(api_client, receptionist):
    response = api_client(receptionist).get('/api/queue/date/', {'date': '01/03/2024'})
    assert response.data['code'] == 400


class TestAutoCancelJob:

    def test_missing_secret_is_rejected(self, api_client):
        response = api_client().post(CRON_URL)
        assert response.status_code == 403

    def test_wrong_secret_is_rejected(self, api_client):
        response = api_client().post(CRON_URL, HTTP_AUTHORIZATION='Bearer nope')
        assert response.status_code == 403

    def test_bearer_secret_runs_sweep(self, api_client, clinic_policy):
        clinic_policy(enable_auto_cancel=True)
        response = api_client().post(CRON_URL, HTTP_AUTHORIZATION='Bearer test-cron-secret')

        assert response.status_code == 200
        assert response.data['data']['ok'] is True
        assert response.data['data']['cancelled'] == 0

    def test_header_secret_and_disabled_policy(self, api_client):
        response = api_client().get(CRON_URL, HTTP_X_CRON_SECRET='test-cron-secret')
        assert response.data['data'] == {'skipped': True}

    def test_unconfigured_secret_refused_outside_debug(self, api_client, settings):
        settings.CRON_SECRET = ''
        settings.DEBUG = False
        response = api_client().post(CRON_URL)
        assert response.status_code == 403
