from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from decouple import config


class Command(BaseCommand):
    help = 'Create a single default admin if none exists (idempotent).'

    def handle(self, *args, **options):
        User = get_user_model()
        if User.objects.filter(role=User.ROLE_ADMIN).exists():
            self.stdout.write(self.style.WARNING('Admin already exists. No action taken.'))
            return
        # Read from .env with fallbacks
        phone = config('ADMIN_PHONE', default='080000000000')
        password = config('ADMIN_PASSWORD', default='admin@123')
        name = config('ADMIN_NAME', default='Clinic Administrator')
        user = User.objects.create_superuser(phone=phone, password=password, name=name)
        self.stdout.write(self.style.SUCCESS(f'Created admin: {user.phone}'))
