"""Test settings.

Use SQLite for unit tests so the suite can run without Postgres.

Run:
  python manage.py test --settings=MediaLibraryBackend.settings_test
"""

from .settings import *  # noqa

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

MEDIA_PROBE_TIMEOUT = None
