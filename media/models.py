from django.db import models
from django.utils import timezone


class Media(models.Model):
    """A file in the public storage bucket, referenced by URL."""

    filename = models.CharField(max_length=255, unique=True)
    alt = models.CharField(max_length=255, blank=True, default='')
    mime_type = models.CharField(max_length=100, blank=True, default='')
    filesize = models.PositiveIntegerField(null=True, blank=True, help_text="Size in bytes")
    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)
    url = models.URLField(max_length=2048, blank=True, default='')
    thumbnail_url = models.URLField(max_length=2048, blank=True, default='')

    # Derived image sizes keyed by name, e.g.
    # {"thumbnail": {"width": 400, "height": 300, "mime_type": ..., "filesize": ...,
    #                "filename": ..., "url": ...}}
    sizes = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['filename']
        verbose_name_plural = 'media'

    def __str__(self):
        return self.filename
