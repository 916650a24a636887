from django.apps import AppConfig


class AccessibleFormsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "a11yforms"
    verbose_name = "Accessible forms"
