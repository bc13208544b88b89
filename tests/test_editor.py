"""
Tests for EditorSession.
"""
import pytest

from page_engine.editor import EditorSession
from page_engine.exceptions import (
    InvalidSection,
    LayoutError,
    SectionNotFound,
    UnsavedChanges,
)
from page_engine.layouts import get_page_layout, save_page_layout
from page_engine.models import PageLayout
from page_engine.result import Err
from page_engine.sections import parse_sections


@pytest.fixture
def sections():
    return parse_sections([
        {"id": "hero", "type": "hero", "content": {"title": "Welcome"}},
        {"id": "featured", "type": "featured-posts", "content": {"title": "Featured"}},
        {"id": "newsletter", "type": "newsletter-cta", "content": {"title": "Subscribe"}},
    ])


@pytest.fixture
def session(sections):
    """An editor session on the homepage."""
    return EditorSession("homepage", sections)


def ids(session):
    return [section.id for section in session.sections]


class TestOpen:
    """Tests for opening a session."""

    def test_open_stored_layout(self, db, sections):
        save_page_layout("homepage", sections)

        session = EditorSession.open("homepage")

        assert session.sections == sections
        assert not session.has_changes
        assert not session.can_undo
        assert len(session.notifications) == 0

    def test_open_falls_back_to_defaults(self, db):
        session = EditorSession.open("contact")

        assert ids(session) == ["hero", "contact-form", "contact-info"]
        assert len(session.notifications) == 0

    def test_open_unknown_page_is_empty(self, db):
        session = EditorSession.open("landing")
        assert session.sections == []

    def test_open_corrupt_layout_notifies(self, db):
        PageLayout.objects.create(page_name="about", sections=[{"id": "x", "type": "nope"}])

        session = EditorSession.open("about")

        assert ids(session) == ["hero", "mission", "team"]
        [notification] = session.notifications.drain()
        assert notification.level == "error"
        assert notification.description == "Failed to load page layout"

    @pytest.mark.parametrize("stored", [
        [{"id": "g", "type": "blog-grid", "content": {"items": 5}}],
        [{"id": "x", "type": ["hero"], "content": {}}],
    ])
    def test_open_malformed_layout_falls_back(self, db, stored):
        PageLayout.objects.create(page_name="blog", sections=stored)

        session = EditorSession.open("blog")

        assert ids(session) == ["hero", "blog-grid", "categories"]
        [notification] = session.notifications.drain()
        assert notification.description == "Failed to load page layout"

    def test_history_limit_from_settings(self, settings, sections):
        settings.PAGE_ENGINE = {"HISTORY_LIMIT": 3}
        session = EditorSession("homepage", sections)
        assert session.history.limit == 3


class TestSectionOperations:
    """Tests for add, update, delete and move."""

    def test_add_section(self, session):
        section = session.add_section("custom")

        assert session.sections[-1] == section
        assert section.title == "Custom Section"
        assert session.can_undo
        assert session.has_changes

    def test_add_disallowed_type(self, session):
        with pytest.raises(InvalidSection):
            session.add_section("contact-form")
        assert not session.can_undo

    def test_update_section(self, session):
        updated = session.update_section("hero", title="Hello", button_text="Read")

        assert session.sections[0] == updated
        assert updated.title == "Hello"
        assert session.can_undo

    def test_update_without_change_skips_history(self, session):
        session.update_section("hero", title="Welcome")
        assert not session.can_undo

    def test_update_unknown_section(self, session):
        with pytest.raises(SectionNotFound):
            session.update_section("missing", title="x")

    def test_delete_section(self, session):
        removed = session.delete_section("featured")

        assert removed.id == "featured"
        assert ids(session) == ["hero", "newsletter"]

    def test_delete_unknown_section(self, session):
        with pytest.raises(SectionNotFound):
            session.delete_section("missing")

    def test_move_up(self, session):
        assert session.move_up("newsletter")
        assert ids(session) == ["hero", "newsletter", "featured"]

    def test_move_down(self, session):
        assert session.move_down("hero")
        assert ids(session) == ["featured", "hero", "newsletter"]

    def test_moves_at_bounds_are_noops(self, session):
        assert not session.move_up("hero")
        assert not session.move_down("newsletter")
        assert not session.can_undo

    def test_can_move(self, session):
        assert not session.can_move_up("hero")
        assert session.can_move_down("hero")
        assert session.can_move_up("newsletter")
        assert not session.can_move_down("newsletter")

    def test_section_types(self, session):
        assert session.section_types == [
            "hero", "featured-posts", "about-section", "newsletter-cta", "custom",
        ]


class TestUndoRedo:
    """Tests for editor history."""

    def test_undo_redo_edits(self, session, sections):
        session.delete_section("featured")
        session.move_up("newsletter")

        session.undo()
        assert ids(session) == ["hero", "newsletter"]
        session.undo()
        assert session.sections == sections
        assert not session.has_changes

        session.redo()
        session.redo()
        assert ids(session) == ["newsletter", "hero"]

    def test_edit_after_undo_drops_redo(self, session):
        session.delete_section("featured")
        session.undo()
        session.move_down("hero")

        assert not session.can_redo
        assert ids(session) == ["featured", "hero", "newsletter"]


class TestSaveAndCancel:
    """Tests for save, cancel and edit mode."""

    def test_save(self, db, session):
        session.delete_section("featured")

        result = session.save()

        assert result.is_ok
        assert not session.can_undo
        assert not session.can_redo
        assert not session.has_changes
        assert ids(session) == ["hero", "newsletter"]
        stored = get_page_layout("homepage").unwrap()
        assert [s.id for s in stored.sections] == ["hero", "newsletter"]
        [notification] = session.notifications.drain()
        assert notification.level == "success"
        assert notification.description == "Changes saved successfully!"

    def test_failed_save_keeps_history(self, monkeypatch, session):
        monkeypatch.setattr(
            "page_engine.editor.save_page_layout",
            lambda page_name, sections: Err(LayoutError("database is down")),
        )
        session.delete_section("featured")

        result = session.save()

        assert result.is_err
        assert session.can_undo
        assert session.has_changes
        [notification] = session.notifications.drain()
        assert notification.level == "error"
        assert notification.description == "Failed to save changes"

    def test_cancel_with_changes_needs_discard(self, session, sections):
        session.start_editing()
        session.delete_section("hero")

        result = session.cancel()
        assert isinstance(result.error, UnsavedChanges)
        assert session.is_editing

        assert session.cancel(discard=True).is_ok
        assert session.sections == sections
        assert not session.can_undo
        assert not session.can_redo
        assert not session.is_editing

    def test_cancel_reverts_to_last_save(self, db, session):
        session.delete_section("hero")
        session.save()
        session.delete_section("featured")

        session.cancel(discard=True)

        assert ids(session) == ["featured", "newsletter"]

    def test_toggle_editing(self, session):
        assert session.toggle_editing().is_ok
        assert session.is_editing

        session.move_down("hero")
        result = session.toggle_editing()
        assert isinstance(result.error, UnsavedChanges)
        assert session.is_editing

        assert session.toggle_editing(force=True).is_ok
        assert not session.is_editing
        # Leaving edit mode keeps the working copy
        assert session.has_changes

    def test_stop_editing_without_changes(self, session):
        session.start_editing()
        assert session.stop_editing().is_ok
        assert not session.is_editing
