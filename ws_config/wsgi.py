"""
WSGI config for ws_config project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ws_config.settings.development')

application = get_wsgi_application()
