"""
PageLayout model for django-page-engine.
"""
from django.db import models

from ..conf import engine_settings
from ..sections import dump_sections, parse_sections


class PageLayout(models.Model):
    """
    Stored section layout of one site page.

    Sections are kept as a JSON list in their stored dictionary form:
    [{"id": ..., "type": ..., "content": {...}}, ...]
    """

    page_name = models.CharField(
        max_length=engine_settings.PAGE_NAME_MAX_LENGTH,
        unique=True,
        help_text="Page identifier, e.g. 'homepage' or 'about'",
    )
    sections = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["page_name"]
        verbose_name = "Page Layout"
        verbose_name_plural = "Page Layouts"

    def __str__(self):
        return self.page_name

    @property
    def section_count(self):
        """Return the number of stored sections."""
        return len(self.sections or [])

    @property
    def section_types(self):
        """Return the type tags of the stored sections, in order."""
        return [item.get("type", "") for item in self.sections or [] if isinstance(item, dict)]

    def get_sections(self):
        """Parse stored sections into typed sections. Raises InvalidSection."""
        return parse_sections(self.sections or [])

    def set_sections(self, sections):
        """Replace stored sections with the given typed sections (not saved)."""
        self.sections = dump_sections(sections)
