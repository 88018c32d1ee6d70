from django.apps import AppConfig


class WellCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.well_core'
    verbose_name = 'Well Core'
