import asyncio

from django.core.management.base import BaseCommand, CommandError

from media.seeding import verify_storage_files
from media.storage_url import StorageConfigurationError


class Command(BaseCommand):
    help = "Check that every catalog asset is reachable in the storage bucket (read-only)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="HEAD request timeout in seconds (defaults to MEDIA_PROBE_TIMEOUT).",
        )

    def handle(self, *args, **options):
        timeout = options["timeout"]
        if timeout is not None and timeout <= 0:
            raise CommandError("--timeout must be positive")

        try:
            asyncio.run(verify_storage_files(timeout=timeout))
        except StorageConfigurationError as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(self.style.SUCCESS("Storage verification finished; see log for per-file results."))
