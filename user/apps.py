from django.apps import AppConfig


class UserConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'user'
    verbose_name = 'Accounts'

    def ready(self):
        """Register signals"""
        import user.signals  # noqa: F401
