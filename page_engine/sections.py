"""
Typed page sections.

A layout is an ordered list of sections. Each section carries an ``id``
and a ``type`` tag; the tag selects the variant model and with it the
content fields. Sections are stored as:

    {"id": "hero", "type": "hero", "content": {"title": "...", "buttonText": "..."}}

Sections are frozen pydantic models. Editing produces a new section via
``with_content`` so that snapshots kept by the editor history stay
untouched. Content keys a variant does not declare are kept as extras and
written back unchanged.
"""
import uuid
from types import MappingProxyType
from typing import Annotated, Literal, Tuple, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .exceptions import InvalidSection

SECTION_LABELS = {
    "hero": "Hero Section",
    "text-content": "Text Content",
    "about-section": "About Section",
    "team-section": "Team Section",
    "contact-form": "Contact Form",
    "contact-info": "Contact Info",
    "cta-section": "CTA Section",
    "newsletter-cta": "Newsletter CTA",
    "featured-posts": "Featured Posts",
    "blog-grid": "Blog Grid",
    "events-grid": "Events Grid",
    "categories-section": "Categories Section",
    "custom": "Custom Section",
}

# Wire keys holding the section identity, never part of content
RESERVED_KEYS = ("id", "type")


class Section(BaseModel):
    """Base section: an id, a type tag, a title and a description."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str = Field(min_length=1)
    type: str
    title: str = ""
    description: str = ""

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Section id must not be blank")
        return value

    @property
    def label(self):
        return SECTION_LABELS.get(self.type, self.type)

    @property
    def extra(self):
        """Read-only view of content keys this variant does not declare."""
        return MappingProxyType(dict(self.model_extra or {}))

    def content(self):
        """Return the camelCase content record, omitting empty fields."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude=set(RESERVED_KEYS),
            exclude_defaults=True,
        )

    def to_dict(self):
        return {"id": self.id, "type": self.type, "content": self.content()}

    def with_content(self, **changes):
        """Return a copy with the given content fields replaced."""
        if any(key in changes for key in RESERVED_KEYS):
            raise InvalidSection("Section id and type cannot be edited")
        allowed = (set(type(self).model_fields) - set(RESERVED_KEYS)) | set(self.model_extra or {})
        unknown = set(changes) - allowed
        if unknown:
            raise InvalidSection(
                f"Unknown fields for {self.type}: {', '.join(sorted(unknown))}"
            )
        data = self.model_dump()
        data.update(changes)
        try:
            return type(self).model_validate(data)
        except ValidationError as exc:
            raise InvalidSection(f"Invalid content for {self.type}: {exc}") from exc


class HeroSection(Section):
    type: Literal["hero"]
    subtitle: str = ""
    button_text: str = Field(default="", alias="buttonText")
    button_link: str = Field(default="", alias="buttonLink")
    image_url: str = Field(default="", alias="imageUrl")


class TextSection(Section):
    type: Literal[
        "text-content",
        "about-section",
        "team-section",
        "contact-form",
        "contact-info",
    ]


class CallToActionSection(Section):
    type: Literal["cta-section", "newsletter-cta"]
    button_text: str = Field(default="", alias="buttonText")
    button_link: str = Field(default="", alias="buttonLink")


class GridItem(BaseModel):
    """One free-form entry of a grid section."""

    model_config = ConfigDict(frozen=True, extra="allow")


class GridSection(Section):
    type: Literal[
        "featured-posts",
        "blog-grid",
        "events-grid",
        "categories-section",
    ]
    items: Tuple[GridItem, ...] = ()


class CustomSection(Section):
    """Free-form section; everything beyond title and description lives in extras."""

    type: Literal["custom"]


SECTION_VARIANTS = (HeroSection, TextSection, CallToActionSection, GridSection, CustomSection)

AnySection = Annotated[
    Union[HeroSection, TextSection, CallToActionSection, GridSection, CustomSection],
    Field(discriminator="type"),
]

_section_adapter = TypeAdapter(AnySection)

SECTION_CLASSES = {
    section_type: cls
    for cls in SECTION_VARIANTS
    for section_type in get_args(cls.model_fields["type"].annotation)
}


def section_from_dict(data):
    """Build a typed section from its stored dictionary form."""
    if not isinstance(data, dict):
        raise InvalidSection("Section must be a mapping")

    section_type = data.get("type")
    if not isinstance(section_type, str) or section_type not in SECTION_CLASSES:
        raise InvalidSection(f"Unknown section type: {section_type!r}")

    content = data.get("content")
    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise InvalidSection(f"Section content must be a mapping, got {type(content).__name__}")
    reserved = [key for key in RESERVED_KEYS if key in content]
    if reserved:
        raise InvalidSection(f"Section content may not contain {', '.join(reserved)}")

    try:
        return _section_adapter.validate_python(
            {**content, "id": data.get("id"), "type": section_type}
        )
    except ValidationError as exc:
        raise InvalidSection(f"Invalid {section_type} section: {exc}") from exc


def parse_sections(data):
    if not isinstance(data, list):
        raise InvalidSection("Layout sections must be a list")
    return [section_from_dict(item) for item in data]


def dump_sections(sections):
    return [section.to_dict() for section in sections]


DEFAULT_CONTENT = {
    "hero": {
        "title": "New Hero Section",
        "subtitle": "Subtitle here",
        "description": "Description text...",
        "buttonText": "Learn More",
        "buttonLink": "/",
    },
    "text-content": {
        "title": "New Section",
        "description": "Add your content here...",
    },
    "cta-section": {
        "title": "Call to Action",
        "description": "Get started today",
        "buttonText": "Get Started",
    },
    "featured-posts": {
        "title": "Featured Content",
        "description": "Check out our latest updates",
    },
    "custom": {
        "title": "Custom Section",
        "description": "Add your custom content here",
    },
}
DEFAULT_CONTENT["newsletter-cta"] = DEFAULT_CONTENT["cta-section"]
DEFAULT_CONTENT["blog-grid"] = DEFAULT_CONTENT["featured-posts"]
DEFAULT_CONTENT["events-grid"] = DEFAULT_CONTENT["featured-posts"]

FALLBACK_CONTENT = {
    "title": "New Section",
    "description": "Content goes here...",
}


def new_section_id():
    return f"section_{uuid.uuid4().hex[:12]}"


def new_section(section_type, section_id=None):
    """Create a section of the given type filled with placeholder content."""
    if section_type not in SECTION_CLASSES:
        raise InvalidSection(f"Unknown section type: {section_type!r}")
    return section_from_dict({
        "id": section_id or new_section_id(),
        "type": section_type,
        "content": DEFAULT_CONTENT.get(section_type, FALLBACK_CONTENT),
    })
