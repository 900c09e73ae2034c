"""Test settings for the venue booking project.

Runs against SQLite unless DB_ENGINE points elsewhere, keeps Celery
tasks in-process and collects outgoing SMS in memory.
"""

from .base import *  # noqa: F401,F403

# Same DB_* variables as base.py, so the suite can run against PostgreSQL too.
DATABASES['default']['NAME'] = os.environ.get('DB_NAME', BASE_DIR / 'test-db.sqlite3')  # noqa: F405
if DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':  # noqa: F405
    # Threads in the race tests need a real file and write locks taken up front.
    DATABASES['default']['TEST'] = {'NAME': BASE_DIR / 'test-db.sqlite3'}  # noqa: F405
    DATABASES['default']['OPTIONS'] = {'timeout': 20, 'transaction_mode': 'IMMEDIATE'}  # noqa: F405

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES['staticfiles'] = {  # noqa: F405
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

SMS_BACKEND = 'apps.notifications.backends.locmem.LocMemSMSBackend'

BOOKING_INITIAL_STATUS = 'pending'
VERIFICATION_CODE_TTL_SECONDS = 300

LOGGING['root']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'CRITICAL'  # noqa: F405
LOGGING['loggers']['django']['level'] = 'CRITICAL'  # noqa: F405
