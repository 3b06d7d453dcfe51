"""
WSGI config for the txdb API project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'txdb_api.settings')

application = get_wsgi_application()
