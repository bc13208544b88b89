"""
Django admin configuration for page_engine.
"""
from django.contrib import admin, messages
from django.utils.html import format_html_join

from .defaults import DEFAULT_LAYOUTS, default_sections
from .layouts import duplicate_page_layout, save_page_layout
from .models import PageLayout
from .sections import SECTION_LABELS


@admin.register(PageLayout)
class PageLayoutAdmin(admin.ModelAdmin):
    list_display = ["page_name", "section_count", "section_summary", "updated_at"]
    search_fields = ["page_name"]
    readonly_fields = ["section_list", "created_at", "updated_at"]

    fieldsets = (
        (None, {
            "fields": ("page_name", "section_list")
        }),
        ("Raw Sections", {
            "fields": ("sections",),
            "classes": ("collapse",),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["reset_to_default", "duplicate_layouts"]

    @admin.display(description="Sections")
    def section_summary(self, obj):
        """Section labels in page order."""
        labels = [SECTION_LABELS.get(t, t) for t in obj.section_types]
        summary = ", ".join(labels)
        return summary[:80] + "..." if len(summary) > 80 else summary

    @admin.display(description="Sections")
    def section_list(self, obj):
        return format_html_join(
            "\n",
            "<div><strong>{}</strong> ({})</div>",
            ((item.get("id", ""), SECTION_LABELS.get(item.get("type"), item.get("type")))
             for item in obj.sections or [] if isinstance(item, dict)),
        )

    @admin.action(description="Reset selected layouts to default")
    def reset_to_default(self, request, queryset):
        count = 0
        for layout in queryset:
            if layout.page_name not in DEFAULT_LAYOUTS:
                self.message_user(
                    request,
                    f"No default layout for {layout.page_name}.",
                    messages.WARNING,
                )
                continue
            result = save_page_layout(layout.page_name, default_sections(layout.page_name))
            if result.is_ok:
                count += 1
            else:
                self.message_user(request, str(result.error), messages.ERROR)
        self.message_user(request, f"{count} layouts reset to default.")

    @admin.action(description="Duplicate selected layouts")
    def duplicate_layouts(self, request, queryset):
        count = 0
        for layout in queryset:
            result = duplicate_page_layout(layout.page_name, f"{layout.page_name}-copy")
            if result.is_ok:
                count += 1
            else:
                self.message_user(request, str(result.error), messages.ERROR)
        self.message_user(request, f"{count} layouts duplicated.")
