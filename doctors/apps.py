from django.apps import AppConfig


class DoctorsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'doctors'
    verbose_name = 'Doctors and schedules'

    def ready(self):
        """Register signals"""
        import doctors.signals  # noqa: F401
