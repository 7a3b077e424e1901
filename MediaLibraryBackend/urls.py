"""
URL configuration for MediaLibraryBackend project.

Only the admin is exposed; media records are browsed and edited there.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path("admin/", admin.site.urls),
]
