from django.core.management.base import BaseCommand

from appointments.sweep import run_auto_cancel_sweep


class Command(BaseCommand):
    help = 'Cancel reservations past their no-show deadline and release their slots.'

    def handle(self, *args, **options):
        result = run_auto_cancel_sweep()
        if result['skipped']:
            self.stdout.write(self.style.WARNING('Auto-cancel is disabled in clinic settings. Nothing done.'))
            return
        self.stdout.write(self.style.SUCCESS(
            f"Checked {result['processed']} reservation(s), cancelled {result['cancelled']}."
        ))
        if result['cancelled_ids']:
            self.stdout.write('Cancelled ids: ' + ', '.join(str(pk) for pk in result['cancelled_ids']))
