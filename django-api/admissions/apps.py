from django.apps import AppConfig


class AdmissionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "admissions"

    def ready(self) -> None:
        from admissions import signals  # noqa: F401
