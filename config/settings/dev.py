"""Development settings for the Storefront API.

Enables debug, allows all hosts and prints outgoing email to the console.
Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = [  # noqa: F405
    'shared.api.renderers.EnvelopeJSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
]
