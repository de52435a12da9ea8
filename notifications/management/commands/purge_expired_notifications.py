"""Run the notification expiry sweep once, synchronously."""

from django.core.management.base import BaseCommand

from notifications.jobs.expiry_jobs import purge_expired_notifications


class Command(BaseCommand):
    """Delete every notification whose expires_at has passed."""

    help = "Delete expired notifications now instead of waiting for the sweep"

    def handle(self, *_args, **_options):
        """Run the sweep and report how many records were removed."""
        count = purge_expired_notifications()
        self.stdout.write(self.style.SUCCESS(f"Purged {count} expired notifications"))
