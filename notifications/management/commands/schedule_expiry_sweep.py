"""Register the periodic notification expiry sweep with rq-scheduler."""

from django.core.management.base import BaseCommand

from notifications.jobs.expiry_jobs import schedule_expiry_sweep


class Command(BaseCommand):
    """Schedule the repeating expiry sweep job."""

    help = "Schedule the periodic expiry sweep on the django_rq scheduler"

    def add_arguments(self, parser):
        """Add command line options."""
        parser.add_argument(
            "--interval",
            type=int,
            default=None,
            help="Seconds between sweeps (default: NOTIFICATION_EXPIRY_SWEEP_INTERVAL)",
        )
        parser.add_argument(
            "--queue",
            default="default",
            help="RQ queue the sweep runs on",
        )

    def handle(self, *_args, **options):
        """Register the sweep, replacing any existing registration."""
        schedule_expiry_sweep(
            interval_seconds=options["interval"], queue_name=options["queue"]
        )
        self.stdout.write(self.style.SUCCESS("Expiry sweep scheduled"))
