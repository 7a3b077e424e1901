"""Seed the media collection from files already in the storage bucket.

For every catalog asset the seeder checks that the object is publicly
reachable (folder path first, bare filename as fallback) and then creates
or updates the single ``Media`` record for that filename so its URL
fields point at the object. Dimensions and sizes are placeholders; the
files themselves are never downloaded.

Usage
-----
    from media.seeding import seed_media, verify_storage_files

    ids = asyncio.run(seed_media())        # {"logo.png": 1, ...}
    asyncio.run(verify_storage_files())    # read-only audit, logs only
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from django.conf import settings
from django.utils import timezone

from . import probes
from .catalog import ASSETS, Asset, mime_type_for
from .storage_url import resolve_storage_base_url
from .store import MediaStore

logger = logging.getLogger(__name__)

COLLECTION = "media"

# Placeholder metadata; the real files are never inspected.
PLACEHOLDER_FILESIZE = 100000
PLACEHOLDER_WIDTH = 800
PLACEHOLDER_HEIGHT = 600
THUMBNAIL_WIDTH = 400
THUMBNAIL_HEIGHT = 300
THUMBNAIL_FILESIZE = 50000


class OutcomeStatus(enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNREACHABLE = "unreachable"
    FAILED = "failed"


@dataclass(frozen=True)
class AssetOutcome:
    filename: str
    status: OutcomeStatus
    record_id: int | None = None
    url: str = ""
    error: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status in (OutcomeStatus.CREATED, OutcomeStatus.UPDATED)


def _default_timeout() -> float | None:
    return getattr(settings, "MEDIA_PROBE_TIMEOUT", None)


def thumbnail_descriptor(filename: str, mime_type: str, url: str) -> dict:
    return {
        "width": THUMBNAIL_WIDTH,
        "height": THUMBNAIL_HEIGHT,
        "mime_type": mime_type,
        "filesize": THUMBNAIL_FILESIZE,
        "filename": f"thumb_{filename}",
        "url": url,
    }


class MediaSeeder:
    """Upserts one ``Media`` record per catalog asset, keyed on filename."""

    def __init__(
        self,
        store: MediaStore | None = None,
        assets: Iterable[Asset] = ASSETS,
        environ: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.store = store if store is not None else MediaStore()
        self.assets = tuple(assets)
        self.environ = environ
        self.timeout = timeout if timeout is not None else _default_timeout()
        self.base_url = ""
        self.outcomes: list[AssetOutcome] = []

    async def run(self) -> dict[str, int]:
        """Process every asset and return ``{filename: record id}`` for the successes.

        Per-asset failures are logged and skipped. A storage configuration
        error, or anything escaping the per-asset guard, is re-raised.
        """
        try:
            logger.info("Creating media entries for storage files...")
            self.base_url = resolve_storage_base_url(self.environ)
            logger.info("Using storage URL: %s", self.base_url)

            self.outcomes = []
            media_assets: dict[str, int] = {}
            for asset in self.assets:
                outcome = await self._seed_asset(asset)
                self.outcomes.append(outcome)
                if outcome.succeeded:
                    media_assets[asset.filename] = outcome.record_id

            success_count = len(media_assets)
            total_count = len(self.assets)
            if success_count == total_count:
                logger.info("All media entries created successfully! (%d/%d)", success_count, total_count)
            else:
                logger.warning("Partial success: %d/%d media entries created", success_count, total_count)
            return media_assets
        except Exception:
            logger.exception("Critical error in media seeding")
            raise

    async def _seed_asset(self, asset: Asset) -> AssetOutcome:
        try:
            logger.info("Creating database entry for: %s", asset.path)
            final_url = await self._reachable_url(asset)
            if final_url is None:
                return AssetOutcome(asset.filename, OutcomeStatus.UNREACHABLE)
            return await self._upsert(asset, final_url)
        except Exception as exc:
            logger.error("Failed to create media entry for %s: %s", asset.filename, exc, exc_info=True)
            return AssetOutcome(asset.filename, OutcomeStatus.FAILED, error=str(exc))

    async def _reachable_url(self, asset: Asset) -> str | None:
        """Return the first reachable candidate URL, or None."""
        file_url = f"{self.base_url}/{asset.path}"
        logger.info("Testing URL: %s", file_url)
        result = await probes.probe(file_url, self.timeout)
        if result.ok:
            logger.info("URL is accessible: %s", file_url)
            return file_url

        logger.warning("URL not accessible: %s (%s)", file_url, result.message)
        logger.warning("Will try without folder structure...")
        fallback_url = f"{self.base_url}/{asset.filename}"
        fallback = await probes.probe(fallback_url, self.timeout)
        if not fallback.ok:
            logger.error("Fallback URL also not accessible: %s (%s)", fallback_url, fallback.message)
            return None
        logger.info("Using fallback URL: %s", fallback_url)
        return fallback_url

    async def _upsert(self, asset: Asset, final_url: str) -> AssetOutcome:
        mime_type = mime_type_for(asset.filename)
        thumbnail = thumbnail_descriptor(asset.filename, mime_type, final_url)

        existing = await self.store.afind(COLLECTION, {"filename": asset.filename}, limit=1)
        if existing:
            record_id = existing[0].pk
            logger.info("Media already exists: %s, updating URL...", asset.filename)
            await self.store.aupdate(COLLECTION, record_id, {
                "url": final_url,
                "thumbnail_url": final_url,
                # Other size entries on the record are kept.
                "sizes": {**(existing[0].sizes or {}), "thumbnail": thumbnail},
            })
            logger.info("Updated existing media: %s", asset.filename)
            status = OutcomeStatus.UPDATED
        else:
            now = timezone.now()
            record = await self.store.acreate(COLLECTION, {
                "alt": asset.alt,
                "filename": asset.filename,
                "mime_type": mime_type,
                "filesize": PLACEHOLDER_FILESIZE,
                "width": PLACEHOLDER_WIDTH,
                "height": PLACEHOLDER_HEIGHT,
                "url": final_url,
                "thumbnail_url": final_url,
                "sizes": {"thumbnail": thumbnail},
                "created_at": now,
                "updated_at": now,
            })
            record_id = record.pk
            logger.info("Created media entry: %s -> ID: %s", asset.filename, record_id)
            status = OutcomeStatus.CREATED

        logger.info("Final file URL: %s", final_url)
        return AssetOutcome(asset.filename, status, record_id=record_id, url=final_url)


async def seed_media(
    store: MediaStore | None = None,
    assets: Iterable[Asset] = ASSETS,
    environ: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> dict[str, int]:
    return await MediaSeeder(store, assets, environ, timeout).run()


async def verify_storage_files(
    assets: Iterable[Asset] = ASSETS,
    environ: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> None:
    """Log whether each asset's folder path is reachable. Touches no records."""
    if timeout is None:
        timeout = _default_timeout()
    base_url = resolve_storage_base_url(environ)
    logger.info("Verifying storage files...")

    for asset in assets:
        file_url = f"{base_url}/{asset.path}"
        try:
            result = await probes.probe(file_url, timeout)
            if result.ok:
                logger.info("File exists: %s", asset.path)
            else:
                logger.warning("File not found: %s (%s)", asset.path, result.message)
        except Exception as exc:
            logger.error("Could not verify: %s: %s", asset.path, exc)
