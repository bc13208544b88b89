"""Django app configuration for page_engine."""
from django.apps import AppConfig


class PageEngineConfig(AppConfig):
    """Configuration for the page engine app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "page_engine"
    verbose_name = "Page Engine"

    def ready(self):
        """Configure app when ready."""
        # Configure legacy table name if enabled
        from .conf import configure_legacy_tables
        configure_legacy_tables()
