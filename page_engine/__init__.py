"""
django-page-engine - Section layouts for site pages, with an undo/redo editor.

Features:
- Typed sections (hero, text, call to action, grids, custom)
- Page layouts stored per page name with transactional writes
- Editor sessions with bounded undo/redo history
- Undo/redo keyboard shortcuts scoped to the editor session
- Save/load feedback through a notification queue and Django messages
"""

__version__ = "0.1.0"
__author__ = "Nestor Wheelock"
