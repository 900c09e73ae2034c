import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("venue_booking")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Consumed and expired verification codes, every 10 minutes
    "purge-stale-verification-codes": {
        "task": "verification.purge_stale_codes",
        "schedule": 600.0,
        "options": {"expires": 540},
    },
}
