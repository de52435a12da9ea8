"""Background jobs for the notification expiry sweep.

Expired notifications are removed by a periodic RQ job rather than by the
read path: a record stays readable until the sweep that follows its
``expires_at`` runs. The job is registered on the django_rq scheduler by
``schedule_expiry_sweep``.
"""

from django.conf import settings
from django.utils import timezone

import django_rq
import structlog

from notifications.services.notification_service import notification_service

logger = structlog.get_logger(__name__)

EXPIRY_SWEEP_JOB_ID = "notifications-purge-expired"
DEFAULT_SWEEP_INTERVAL_SECONDS = 300


def purge_expired_notifications() -> int:
    """Delete every notification whose expires_at has passed.

    This job is executed by RQ workers.

    Returns:
        Number of notifications deleted.
    """
    return notification_service.purge_expired(now=timezone.now())


def schedule_expiry_sweep(
    interval_seconds: int | None = None, queue_name: str = "default"
) -> None:
    """Register the expiry sweep as a repeating scheduler job.

    Any previously registered sweep is cancelled first, so calling this on
    every deploy does not stack duplicate jobs.

    Args:
        interval_seconds: Seconds between sweeps
            (default: NOTIFICATION_EXPIRY_SWEEP_INTERVAL).
        queue_name: RQ queue the sweep runs on.
    """
    if interval_seconds is None:
        interval_seconds = getattr(
            settings,
            "NOTIFICATION_EXPIRY_SWEEP_INTERVAL",
            DEFAULT_SWEEP_INTERVAL_SECONDS,
        )

    scheduler = django_rq.get_scheduler(queue_name)

    for job in scheduler.get_jobs():
        if job.id == EXPIRY_SWEEP_JOB_ID:
            scheduler.cancel(job)

    scheduler.schedule(
        scheduled_time=timezone.now(),
        func=purge_expired_notifications,
        interval=interval_seconds,
        repeat=None,
        id=EXPIRY_SWEEP_JOB_ID,
        queue_name=queue_name,
    )

    logger.info(
        "expiry_sweep_scheduled",
        interval_seconds=interval_seconds,
        queue_name=queue_name,
    )
