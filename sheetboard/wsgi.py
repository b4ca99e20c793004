"""
WSGI config for the sheetboard project.

The spreadsheet connection is made here, before the server hands us any
request. Bad or missing credentials abort the import, so the worker never
starts serving.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'sheetboard.settings')

application = get_wsgi_application()

from core.sheets import sheets_store  # noqa: E402  (needs configured apps)

sheets_store.connect()
