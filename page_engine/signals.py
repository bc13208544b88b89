"""
Signals sent by django-page-engine.

Connect these to invalidate cached pages when a layout changes:

    from page_engine.signals import layout_saved

    @receiver(layout_saved)
    def purge_page(sender, page_name, path, **kwargs):
        cache.delete(make_template_fragment_key("page", [path]))
"""
from django.dispatch import Signal

# Sent after a layout is committed. Provides: page_name, path, layout
layout_saved = Signal()

# Sent after a layout is deleted. Provides: page_name, path
layout_deleted = Signal()
