from django.apps import AppConfig


class MdAlertsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'mdalerts'
    verbose_name = 'Markdown alerts'
