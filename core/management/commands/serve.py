# core/management/commands/serve.py
import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from core.exceptions import ConfigurationError
from core.sheets import sheets_store

logger = logging.getLogger('core')


class Command(BaseCommand):
    help = "Resolve Google credentials, connect to the spreadsheet and start serving on PORT."

    def add_arguments(self, parser):
        parser.add_argument('--port', type=int, default=None, help="Overrides the PORT setting.")
        parser.add_argument('--host', default='0.0.0.0')

    def handle(self, *args, **options):
        # Credentials are resolved before any connection is accepted.
        try:
            sheets_store.connect()
        except ConfigurationError as e:
            logger.error("Error loading credentials: %s", e)
            raise CommandError(str(e)) from e

        port = options['port'] or settings.PORT
        logger.info("Server running on port %s", port)
        call_command('runserver', f"{options['host']}:{port}", use_reloader=False)
