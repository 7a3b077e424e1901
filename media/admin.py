from django.contrib import admin

from .models import Media


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ('id', 'filename', 'mime_type', 'url', 'updated_at')
    search_fields = ('filename', 'alt', 'url')
    list_filter = ('mime_type',)
