"""Collection-level find / create / update over the Django ORM.

The seeder talks to the CMS through this small contract instead of the
model managers directly, so a different backend (or a fake in tests) can
stand in for it::

    store = MediaStore()
    docs = store.find("media", {"filename": "logo.png"}, limit=1)
    doc = store.create("media", {"filename": "logo.png", ...})
    store.update("media", doc.id, {"url": "https://..."})
"""

from __future__ import annotations

import logging
from typing import Any

from asgiref.sync import sync_to_async
from django.db import models
from django.utils import timezone

from .models import Media

logger = logging.getLogger(__name__)

DEFAULT_COLLECTIONS: dict[str, type[models.Model]] = {
    "media": Media,
}


class MediaStore:
    def __init__(self, collections: dict[str, type[models.Model]] | None = None) -> None:
        self.collections = dict(collections or DEFAULT_COLLECTIONS)

    def _model(self, collection: str) -> type[models.Model]:
        try:
            return self.collections[collection]
        except KeyError:
            raise LookupError(f"Unknown collection: {collection}") from None

    def find(self, collection: str, where: dict[str, Any], limit: int | None = None) -> list:
        """Return matching records in primary-key order (possibly empty)."""
        qs = self._model(collection).objects.filter(**where).order_by("pk")
        if limit is not None:
            qs = qs[:limit]
        return list(qs)

    def create(self, collection: str, data: dict[str, Any]):
        record = self._model(collection).objects.create(**data)
        logger.debug("Created %s record %s", collection, record.pk)
        return record

    def update(self, collection: str, id, data: dict[str, Any]):
        model = self._model(collection)
        record = model.objects.get(pk=id)
        for field, value in data.items():
            setattr(record, field, value)
        update_fields = list(data)
        if any(f.name == "updated_at" for f in model._meta.get_fields()) and "updated_at" not in data:
            record.updated_at = timezone.now()
            update_fields.append("updated_at")
        record.save(update_fields=update_fields)
        logger.debug("Updated %s record %s (%s)", collection, id, ", ".join(update_fields))
        return record

    async def afind(self, collection: str, where: dict[str, Any], limit: int | None = None) -> list:
        return await sync_to_async(self.find)(collection, where, limit)

    async def acreate(self, collection: str, data: dict[str, Any]):
        return await sync_to_async(self.create)(collection, data)

    async def aupdate(self, collection: str, id, data: dict[str, Any]):
        return await sync_to_async(self.update)(collection, id, data)
