"""Public storage base URL resolution.

Deployments expose the storage project in one of three ways: the project
URL, the S3-compatible endpoint, or the database connection string whose
username embeds the project ref (``postgres.<ref>:...``). Whichever is
available is turned into the public object URL for the media bucket::

    https://<ref>.supabase.co/storage/v1/object/public/media
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class StorageConfigurationError(ImproperlyConfigured):
    """No environment variable yields a storage project ref."""


@dataclass(frozen=True)
class RefMatcher:
    """Extracts a project ref from the first set variable in ``env_vars``.

    ``pattern`` may contain ``{domain}``, filled with the escaped storage domain.
    """

    label: str
    env_vars: tuple[str, ...]
    pattern: str

    def candidate(self, environ: Mapping[str, str]) -> str | None:
        for name in self.env_vars:
            value = environ.get(name)
            if value:
                return value
        return None

    def extract(self, environ: Mapping[str, str], domain: str) -> str | None:
        value = self.candidate(environ)
        if not value:
            return None
        match = re.search(self.pattern.format(domain=re.escape(domain)), value)
        return match.group(1) if match else None


# Tried in order; first match wins.
REF_MATCHERS: tuple[RefMatcher, ...] = (
    RefMatcher(
        "project URL",
        ("NEXT_PUBLIC_SUPABASE_URL", "SUPABASE_URL"),
        r"https://([^.]+)\.{domain}",
    ),
    RefMatcher(
        "S3 endpoint",
        ("S3_ENDPOINT",),
        r"https://([^.]+)\.storage\.{domain}",
    ),
    RefMatcher(
        "database URL",
        ("DATABASE_URI", "POSTGRES_URL"),
        r"postgres\.([^:]+):",
    ),
)


def public_base_url(project_ref: str) -> str:
    domain = getattr(settings, "MEDIA_STORAGE_PUBLIC_DOMAIN", "supabase.co")
    bucket = getattr(settings, "MEDIA_STORAGE_BUCKET", "media")
    return f"https://{project_ref}.{domain}/storage/v1/object/public/{bucket}"


def resolve_storage_base_url(environ: Mapping[str, str] | None = None) -> str:
    """Return the public storage base URL (no trailing slash).

    Raises StorageConfigurationError when none of the recognised variables
    contains a project ref.
    """
    if environ is None:
        environ = os.environ
    domain = getattr(settings, "MEDIA_STORAGE_PUBLIC_DOMAIN", "supabase.co")

    for matcher in REF_MATCHERS:
        project_ref = matcher.extract(environ, domain)
        if project_ref:
            logger.debug("Storage project ref %s taken from %s", project_ref, matcher.label)
            return public_base_url(project_ref)

    # Presence only; these variables may carry credentials.
    presence = ", ".join(
        f"{name}={'set' if environ.get(name) else 'unset'}"
        for matcher in REF_MATCHERS
        for name in matcher.env_vars
    )
    logger.warning("Could not determine project storage URL from environment variables")
    logger.warning("Available env vars: %s", presence)
    raise StorageConfigurationError(
        "Cannot determine storage URL - please check environment variables"
    )
