from django.apps import AppConfig


class BarriersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.barriers'
    verbose_name = 'Well Barriers'
