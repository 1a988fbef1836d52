from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ClinicSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('clinic_name', models.CharField(default='Clinic', max_length=150, verbose_name='clinic name')),
                ('address', models.CharField(blank=True, max_length=255, verbose_name='address')),
                ('phone', models.CharField(blank=True, max_length=20, verbose_name='phone')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email')),
                ('enable_strict_check_in', models.BooleanField(default=False, verbose_name='strict check-in window')),
                ('check_in_early_minutes', models.PositiveIntegerField(default=120, verbose_name='check-in opens (minutes before)')),
                ('check_in_late_minutes', models.PositiveIntegerField(default=60, verbose_name='check-in closes (minutes after)')),
                ('enable_auto_cancel', models.BooleanField(default=False, verbose_name='auto-cancel no-shows')),
                ('auto_cancel_grace_minutes', models.PositiveIntegerField(default=30, verbose_name='grace after session end (minutes)')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'clinic settings',
                'verbose_name_plural': 'clinic settings',
                'db_table': 'clinic_settings',
            },
        ),
    ]
