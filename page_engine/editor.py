"""
Editor session for one page layout.

An EditorSession holds the working copy of a page's sections in a History
buffer. Every edit replaces the whole section list, so undo and redo are
plain moves through the history. Saving writes the current sections and
makes them the new baseline.
"""
import logging

from .conf import engine_settings
from .defaults import default_sections
from .exceptions import InvalidSection, LayoutNotFound, SectionNotFound, UnsavedChanges
from .history import History
from .layouts import get_page_layout, save_page_layout
from .notifications import NotificationQueue
from .result import Err, Ok
from .sections import new_section
from .shortcuts import bind_history_shortcuts, history_key_handler

logger = logging.getLogger(__name__)

_UNSET = object()


class EditorSession:
    """
    History-backed editing of a page layout.

    Supports:
    - Adding, editing, deleting and reordering sections
    - Undo/redo, including keyboard shortcuts
    - Save and cancel against the last saved layout
    """

    def __init__(self, page_name, sections=(), notifications=None, history_limit=_UNSET):
        if history_limit is _UNSET:
            history_limit = engine_settings.HISTORY_LIMIT
        self.page_name = page_name
        self.notifications = notifications if notifications is not None else NotificationQueue()
        self.is_editing = False
        self._saved = tuple(sections)
        self.history = History(self._saved, limit=history_limit)

    def __repr__(self):
        return f"<EditorSession {self.page_name} sections={len(self.sections)}>"

    @classmethod
    def open(cls, page_name, **kwargs):
        """Start a session from the stored layout, or the page defaults."""
        session = cls(page_name, **kwargs)
        result = get_page_layout(page_name)
        if result.is_ok:
            sections = result.value.sections
        else:
            if not isinstance(result.error, LayoutNotFound):
                session.notifications.error("Failed to load page layout")
            sections = default_sections(page_name)
        session._saved = tuple(sections)
        session.history.reset(session._saved)
        return session

    # State

    @property
    def sections(self):
        return list(self.history.present)

    @property
    def saved_sections(self):
        return list(self._saved)

    @property
    def can_undo(self):
        return self.history.can_undo

    @property
    def can_redo(self):
        return self.history.can_redo

    @property
    def has_changes(self):
        return self.history.present != self._saved

    @property
    def section_types(self):
        return engine_settings.section_types_for(self.page_name)

    def _index(self, section_id):
        for index, section in enumerate(self.history.present):
            if section.id == section_id:
                return index
        raise SectionNotFound(section_id)

    def _commit(self, sections):
        self.history.set(tuple(sections))

    # Edit mode

    def start_editing(self):
        self.is_editing = True

    def stop_editing(self, force=False):
        """Leave edit mode. Refused while there are unsaved changes unless ``force`` is set."""
        if self.has_changes and not force:
            return Err(UnsavedChanges("You have unsaved changes"))
        self.is_editing = False
        return Ok()

    def toggle_editing(self, force=False):
        if self.is_editing:
            return self.stop_editing(force=force)
        self.start_editing()
        return Ok()

    # Section operations

    def add_section(self, section_type):
        """Append a new section with placeholder content and return it."""
        if section_type not in self.section_types:
            raise InvalidSection(
                f"Section type '{section_type}' is not available on page '{self.page_name}'"
            )
        section = new_section(section_type)
        self._commit(self.history.present + (section,))
        return section

    def update_section(self, section_id, **changes):
        """Replace content fields of a section and return the new section."""
        index = self._index(section_id)
        sections = list(self.history.present)
        updated = sections[index].with_content(**changes)
        if updated == sections[index]:
            return updated
        sections[index] = updated
        self._commit(sections)
        return updated

    def delete_section(self, section_id):
        index = self._index(section_id)
        sections = list(self.history.present)
        removed = sections.pop(index)
        self._commit(sections)
        return removed

    def can_move_up(self, section_id):
        return self._index(section_id) > 0

    def can_move_down(self, section_id):
        return self._index(section_id) < len(self.history.present) - 1

    def move_up(self, section_id):
        """Swap a section with the one above it. Returns False at the top."""
        index = self._index(section_id)
        if index == 0:
            return False
        sections = list(self.history.present)
        sections[index - 1], sections[index] = sections[index], sections[index - 1]
        self._commit(sections)
        return True

    def move_down(self, section_id):
        """Swap a section with the one below it. Returns False at the bottom."""
        index = self._index(section_id)
        if index >= len(self.history.present) - 1:
            return False
        sections = list(self.history.present)
        sections[index], sections[index + 1] = sections[index + 1], sections[index]
        self._commit(sections)
        return True

    # History

    def undo(self):
        return self.history.undo()

    def redo(self):
        return self.history.redo()

    def save(self):
        """Persist the current sections and make them the new baseline."""
        sections = self.history.present
        result = save_page_layout(self.page_name, sections)
        if result.is_err:
            logger.warning("Save of %s failed: %s", self.page_name, result.error)
            self.notifications.error("Failed to save changes")
            return result

        self._saved = sections
        self.history.reset(sections)
        self.notifications.success("Changes saved successfully!")
        return result

    def cancel(self, discard=False):
        """Revert to the last saved sections and leave edit mode."""
        if self.has_changes and not discard:
            return Err(UnsavedChanges("Discard all changes?"))
        self.history.reset(self._saved)
        self.is_editing = False
        return Ok()

    # Keyboard

    def handle_key(self, event):
        """Apply an undo/redo shortcut. True if the key was a shortcut."""
        return history_key_handler(self)(event)

    def bind_shortcuts(self, dispatcher):
        """Context manager binding undo/redo keys to this session."""
        return bind_history_shortcuts(dispatcher, self)
