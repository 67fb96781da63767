from django.core.management.base import BaseCommand, CommandError

from records.services.events import COLLECTION_KEYS, notify_changed


class Command(BaseCommand):
    help = "Broadcast a WebSocket refresh event so connected clients re-read their records."

    def add_arguments(self, parser):
        parser.add_argument('keys', nargs='*', help=f"Collections to refresh: {', '.join(COLLECTION_KEYS)} (default: all)")

    def handle(self, *args, **options):
        keys = options['keys'] or COLLECTION_KEYS
        unknown = sorted(set(keys) - set(COLLECTION_KEYS))
        if unknown:
            raise CommandError(f"Unknown collection(s): {', '.join(unknown)}")
        sent = [key for key in keys if notify_changed(key, 'refresh')]
        self.stdout.write(self.style.SUCCESS(f"Broadcast refresh for {', '.join(sent) or 'nothing'}"))
