"""
Models for django-page-engine.

All models are importable from page_engine.models:

    from page_engine.models import PageLayout
"""
from .layouts import PageLayout

__all__ = [
    "PageLayout",
]
