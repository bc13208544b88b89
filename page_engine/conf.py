"""
Configuration settings for django-page-engine.

Override these in your Django settings.py:

    PAGE_ENGINE = {
        'HISTORY_LIMIT': 50,
        'PAGE_SECTION_TYPES': {'homepage': ['hero', 'custom']},
        ...
    }

For an existing page layouts table, use:

    PAGE_ENGINE = {
        'USE_LEGACY_TABLE_NAMES': True,
        'LEGACY_TABLE_NAME': 'page_layouts',
    }
"""
from django.conf import settings

DEFAULTS = {
    # Legacy table support
    "USE_LEGACY_TABLE_NAMES": False,
    "LEGACY_TABLE_NAME": "page_layouts",

    # Undo depth per editor session, None for unbounded
    "HISTORY_LIMIT": 100,

    # Section types offered when adding a section, per page
    "PAGE_SECTION_TYPES": {
        "homepage": ["hero", "featured-posts", "about-section", "newsletter-cta", "custom"],
        "about": ["hero", "text-content", "team-section", "custom"],
        "blog": ["hero", "blog-grid", "categories-section", "custom"],
        "contact": ["hero", "contact-form", "contact-info", "custom"],
        "events": ["hero", "events-grid", "cta-section", "custom"],
    },
    "DEFAULT_SECTION_TYPES": ["hero", "text-content", "custom"],

    "PAGE_NAME_MAX_LENGTH": 100,
}


class PageEngineSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from page_engine.conf import engine_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid page_engine setting: {name}")

        user_settings = getattr(settings, "PAGE_ENGINE", {})
        return user_settings.get(name, DEFAULTS[name])

    def section_types_for(self, page_name):
        """Return the section type tags an editor may add to a page."""
        return list(self.PAGE_SECTION_TYPES.get(page_name, self.DEFAULT_SECTION_TYPES))


engine_settings = PageEngineSettings()


def get_table_name(model_name):
    """
    Get the database table name for a model.

    If USE_LEGACY_TABLE_NAMES is True, returns the legacy table name
    (e.g., 'page_layouts' instead of 'page_engine_pagelayout').
    """
    if engine_settings.USE_LEGACY_TABLE_NAMES:
        return engine_settings.LEGACY_TABLE_NAME
    return f"page_engine_{model_name}"


def configure_legacy_tables():
    """
    Point PageLayout at the legacy table.

    Called from AppConfig.ready(). This modifies the model _meta.db_table
    at runtime.
    """
    if not engine_settings.USE_LEGACY_TABLE_NAMES:
        return

    from .models import PageLayout

    PageLayout._meta.db_table = get_table_name("pagelayout")
    # Existing table, keep migrations away from it
    PageLayout._meta.managed = False
