from .base import *  # noqa

DEBUG = True

# Dev CORS
CORS_ALLOW_ALL_ORIGINS = True
