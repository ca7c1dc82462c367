"""Django configuration package for the Storefront API.

Holds settings modules for each environment plus the WSGI/ASGI entry
points and the Celery application.
"""

# Import the Celery application as soon as Django starts. Without this
# the shared task registry will not be populated.
from .celery import app as celery_app  # noqa: F401
