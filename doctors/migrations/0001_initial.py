import django.db.models.deletion
import doctors.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PracticeSession',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='name')),
                ('start_time', models.TimeField(verbose_name='start time')),
                ('end_time', models.TimeField(verbose_name='end time')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'practice session',
                'verbose_name_plural': 'practice sessions',
                'db_table': 'practice_session',
                'ordering': ['start_time'],
            },
        ),
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='name')),
                ('specialty', models.CharField(blank=True, max_length=100, verbose_name='specialty')),
                ('license_number', models.CharField(blank=True, max_length=50, verbose_name='license number')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='doctor_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'doctor',
                'verbose_name_plural': 'doctors',
                'db_table': 'doctor',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='DoctorSchedule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('day_of_week', models.PositiveSmallIntegerField(choices=[(0, 'Monday'), (1, 'Tuesday'), (2, 'Wednesday'), (3, 'Thursday'), (4, 'Friday'), (5, 'Saturday'), (6, 'Sunday')], help_text='0=Monday ... 6=Sunday', verbose_name='day of week')),
                ('max_patients', models.PositiveIntegerField(default=doctors.models.default_max_patients, verbose_name='max patients per day')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('doctor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='schedules', to='doctors.doctor')),
                ('session', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='schedules', to='doctors.practicesession')),
            ],
            options={
                'verbose_name': 'doctor schedule',
                'verbose_name_plural': 'doctor schedules',
                'db_table': 'doctor_schedule',
                'ordering': ['day_of_week', 'session__start_time'],
            },
        ),
        migrations.CreateModel(
            name='DailyScheduleStatus',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(verbose_name='date')),
                ('is_active', models.BooleanField(default=True, verbose_name='open for booking')),
                ('current_reservations', models.PositiveIntegerField(default=0, verbose_name='current reservations')),
                ('notes', models.CharField(blank=True, max_length=255, verbose_name='notes')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('schedule', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='daily_statuses', to='doctors.doctorschedule')),
            ],
            options={
                'verbose_name': 'daily schedule status',
                'verbose_name_plural': 'daily schedule status',
                'db_table': 'daily_schedule_status',
            },
        ),
        migrations.AddConstraint(
            model_name='doctorschedule',
            constraint=models.UniqueConstraint(fields=('doctor', 'session', 'day_of_week'), name='unique_doctor_session_day'),
        ),
        migrations.AddConstraint(
            model_name='dailyschedulestatus',
            constraint=models.UniqueConstraint(fields=('schedule', 'date'), name='unique_schedule_date'),
        ),
    ]
