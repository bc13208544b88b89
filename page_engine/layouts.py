"""
Page layout persistence.

Every function returns an Ok or Err result instead of raising, so callers
can surface failures to the user without try/except at each call site.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import InvalidSection, LayoutError, LayoutNotFound
from .models import PageLayout
from .result import Err, Ok
from .sections import Section, dump_sections
from .signals import layout_deleted, layout_saved

logger = logging.getLogger(__name__)


@dataclass
class LoadedLayout:
    page_name: str
    sections: List[Section]
    updated_at: Optional[datetime] = None


def page_path(page_name):
    """Return the public URL path of a page."""
    if page_name == "homepage":
        return "/"
    return f"/{page_name}"


def get_page_layout(page_name):
    """Load the stored layout of a page."""
    try:
        layout = PageLayout.objects.get(page_name=page_name)
    except PageLayout.DoesNotExist:
        return Err(LayoutNotFound(page_name))
    except DatabaseError as exc:
        logger.exception("Error fetching page layout %s", page_name)
        return Err(LayoutError(f"Could not load layout '{page_name}': {exc}"))

    try:
        sections = layout.get_sections()
    except InvalidSection as exc:
        logger.error("Stored layout %s is invalid: %s", page_name, exc)
        return Err(exc)

    return Ok(LoadedLayout(
        page_name=layout.page_name,
        sections=sections,
        updated_at=layout.updated_at,
    ))


def save_page_layout(page_name, sections):
    """Create or replace the layout of a page."""
    data = dump_sections(sections)
    try:
        with transaction.atomic():
            layout, created = PageLayout.objects.update_or_create(
                page_name=page_name,
                defaults={"sections": data},
            )
    except DatabaseError as exc:
        logger.exception("Error saving page layout %s", page_name)
        return Err(LayoutError(f"Could not save layout '{page_name}': {exc}"))

    logger.info(
        "%s page layout %s (%d sections)",
        "Created" if created else "Updated",
        page_name,
        len(data),
    )
    layout_saved.send(
        sender=PageLayout,
        page_name=page_name,
        path=page_path(page_name),
        layout=layout,
    )
    return Ok(layout)


def list_page_layouts():
    """Return all stored layouts."""
    try:
        return Ok(list(PageLayout.objects.all()))
    except DatabaseError as exc:
        logger.exception("Error fetching page layouts")
        return Err(LayoutError(f"Could not list layouts: {exc}"))


def delete_page_layout(page_name):
    """Delete the stored layout of a page."""
    try:
        with transaction.atomic():
            deleted, _ = PageLayout.objects.filter(page_name=page_name).delete()
    except DatabaseError as exc:
        logger.exception("Error deleting page layout %s", page_name)
        return Err(LayoutError(f"Could not delete layout '{page_name}': {exc}"))

    if not deleted:
        return Err(LayoutNotFound(page_name))

    logger.info("Deleted page layout %s", page_name)
    layout_deleted.send(sender=PageLayout, page_name=page_name, path=page_path(page_name))
    return Ok(True)


def duplicate_page_layout(source_page_name, new_page_name):
    """Copy the layout of one page under a new page name."""
    try:
        with transaction.atomic():
            source = PageLayout.objects.filter(page_name=source_page_name).first()
            if source is None:
                return Err(LayoutNotFound(source_page_name))
            layout = PageLayout.objects.create(
                page_name=new_page_name,
                sections=source.sections,
            )
    except IntegrityError:
        return Err(LayoutError(f"A layout for '{new_page_name}' already exists"))
    except DatabaseError as exc:
        logger.exception("Error duplicating page layout %s", source_page_name)
        return Err(LayoutError(f"Could not duplicate layout '{source_page_name}': {exc}"))

    logger.info("Duplicated page layout %s as %s", source_page_name, new_page_name)
    return Ok(layout)
