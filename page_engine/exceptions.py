"""
Exceptions raised or returned by django-page-engine.
"""


class PageEngineError(Exception):
    """Base class for page engine errors."""


class InvalidSection(PageEngineError, ValueError):
    """A section is malformed, or its type is not allowed."""


class SectionNotFound(PageEngineError, KeyError):
    """No section with the given id exists in the layout."""

    def __init__(self, section_id):
        self.section_id = section_id
        super().__init__(section_id)

    def __str__(self):
        return f"Section not found: {self.section_id}"


class LayoutNotFound(PageEngineError):
    """No layout is stored for the given page name."""

    def __init__(self, page_name):
        self.page_name = page_name
        super().__init__(f"No layout stored for page '{page_name}'")


class LayoutError(PageEngineError):
    """Storing or reading a layout failed."""


class UnsavedChanges(PageEngineError):
    """The editor holds changes that would be discarded."""
