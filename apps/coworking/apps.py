from django.apps import AppConfig


class CoworkingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.coworking'
    label = 'coworking'
