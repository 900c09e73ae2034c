"""Development settings for the venue booking project.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and printing
outgoing SMS to the console. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Print verification codes instead of calling the SMS gateway
SMS_BACKEND = 'apps.notifications.backends.console.ConsoleSMSBackend'

# Human readable logs
LOGGING['formatters']['plain'] = {  # noqa: F405
    '()': 'structlog.stdlib.ProcessorFormatter',
    'processor': structlog.dev.ConsoleRenderer(colors=False),  # noqa: F405
    'foreign_pre_chain': LOGGING['formatters']['json']['foreign_pre_chain'],  # noqa: F405
}
LOGGING['handlers']['console']['formatter'] = 'plain'  # noqa: F405
LOGGING['handlers']['console']['level'] = 'DEBUG'  # noqa: F405
LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
