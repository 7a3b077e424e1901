import asyncio

from django.core.management.base import BaseCommand, CommandError

from media.seeding import MediaSeeder, OutcomeStatus, verify_storage_files
from media.storage_url import StorageConfigurationError
from media.store import MediaStore


class Command(BaseCommand):
    help = "Create (or update) media records for files already in the storage bucket."

    def add_arguments(self, parser):
        parser.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="HEAD request timeout in seconds (defaults to MEDIA_PROBE_TIMEOUT).",
        )
        parser.add_argument(
            "--verify-first",
            action="store_true",
            help="Run a read-only reachability check of every asset before seeding.",
        )

    def handle(self, *args, **options):
        timeout = options["timeout"]
        if timeout is not None and timeout <= 0:
            raise CommandError("--timeout must be positive")

        seeder = MediaSeeder(MediaStore(), timeout=timeout)
        try:
            if options["verify_first"]:
                asyncio.run(verify_storage_files(timeout=timeout))
            media_assets = asyncio.run(seeder.run())
        except StorageConfigurationError as exc:
            raise CommandError(str(exc)) from exc

        for outcome in seeder.outcomes:
            if outcome.succeeded:
                self.stdout.write(f"{outcome.status.value:<11} {outcome.filename} -> {outcome.record_id}")
            elif outcome.status is OutcomeStatus.UNREACHABLE:
                self.stdout.write(self.style.WARNING(f"unreachable {outcome.filename}"))
            else:
                self.stdout.write(self.style.ERROR(f"failed      {outcome.filename}: {outcome.error}"))

        total = len(seeder.assets)
        if len(media_assets) == total:
            self.stdout.write(self.style.SUCCESS(f"Seeded {total}/{total} media entries from {seeder.base_url}"))
        else:
            self.stdout.write(self.style.WARNING(f"Partial success: {len(media_assets)}/{total} media entries"))
