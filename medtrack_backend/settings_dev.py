"""
Development settings (SQLite).

Usage:
    export DJANGO_SETTINGS_MODULE=medtrack_backend.settings_dev
    python manage.py migrate
    python manage.py runserver 8080
"""

from .settings import *

# ---------------------------------------------------------
# DEVELOPMENT SETTINGS
# ---------------------------------------------------------

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', '*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'database.sqlite3',
        'OPTIONS': {
            'timeout': 20,
        },
    },
}

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ),
}

CORS_ALLOW_ALL_ORIGINS = True  # DEV only

# ---------------------------------------------------------
# LOGGING: verbose output for the project logger
# ---------------------------------------------------------

LOGGING['handlers']['console']['formatter'] = 'simple'
LOGGING['loggers']['medtrack_backend']['level'] = 'DEBUG'
LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'WARNING',  # set to DEBUG to see SQL queries
    'propagate': False,
}
