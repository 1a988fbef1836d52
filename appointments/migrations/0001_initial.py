import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('doctors', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Reservation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('reservation_date', models.DateField(verbose_name='reservation date')),
                ('reservation_time', models.TimeField(verbose_name='reservation time')),
                ('queue_number', models.PositiveIntegerField(blank=True, null=True, verbose_name='queue number')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', max_length=20, verbose_name='status')),
                ('examination_status', models.CharField(choices=[('not_started', 'Not started'), ('waiting', 'Waiting'), ('in_progress', 'In progress'), ('waiting_for_payment', 'Waiting for payment'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='not_started', max_length=20, verbose_name='examination status')),
                ('complaint', models.TextField(blank=True, verbose_name='complaint')),
                ('is_priority', models.BooleanField(default=False, verbose_name='priority')),
                ('priority_reason', models.CharField(blank=True, max_length=255, null=True, verbose_name='priority reason')),
                ('cancellation_reason', models.CharField(blank=True, max_length=50, null=True, verbose_name='cancellation reason')),
                ('is_walk_in', models.BooleanField(default=False, verbose_name='walk-in')),
                ('checked_in_at', models.DateTimeField(blank=True, null=True, verbose_name='checked in at')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('doctor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reservations', to='doctors.doctor')),
                ('patient', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reservations', to=settings.AUTH_USER_MODEL)),
                ('schedule', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='reservations', to='doctors.doctorschedule')),
            ],
            options={
                'verbose_name': 'reservation',
                'verbose_name_plural': 'reservations',
                'db_table': 'reservation',
                'ordering': ['-reservation_date', 'queue_number'],
            },
        ),
        migrations.AddIndex(
            model_name='reservation',
            index=models.Index(fields=['doctor', 'reservation_date', 'status'], name='reservation_doctor_day_idx'),
        ),
        migrations.AddIndex(
            model_name='reservation',
            index=models.Index(fields=['status', 'examination_status', 'reservation_date'], name='reservation_sweep_idx'),
        ),
    ]
