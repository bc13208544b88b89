"""
Built-in layouts used when a page has nothing stored yet.
"""
from .sections import parse_sections

DEFAULT_LAYOUTS = {
    "homepage": [
        {
            "id": "hero",
            "type": "hero",
            "content": {
                "title": "Welcome to TRISKIDEAS",
                "subtitle": "Empowering Minds, Inspiring Ideas",
                "description": "Discover insightful articles, innovative concepts, and transformative ideas.",
                "buttonText": "Explore Our Blog",
                "buttonLink": "/blog",
            },
        },
        {
            "id": "featured",
            "type": "featured-posts",
            "content": {
                "title": "Featured Articles",
                "description": "Check out our most popular and recent posts",
            },
        },
        {
            "id": "about",
            "type": "about-section",
            "content": {
                "title": "About TRISKIDEAS",
                "description": "We share ideas that matter, stories that inspire, and knowledge that transforms.",
            },
        },
        {
            "id": "newsletter",
            "type": "newsletter-cta",
            "content": {
                "title": "Stay Connected",
                "description": "Subscribe to our newsletter for the latest updates",
                "buttonText": "Subscribe Now",
            },
        },
    ],
    "about": [
        {
            "id": "hero",
            "type": "hero",
            "content": {
                "title": "About TRISKIDEAS",
                "subtitle": "Our Story, Mission & Vision",
                "description": "Learn more about who we are and what drives us forward.",
            },
        },
        {
            "id": "mission",
            "type": "text-content",
            "content": {
                "title": "Our Mission",
                "description": "To empower minds and inspire ideas through thoughtful content and innovative perspectives.",
            },
        },
        {
            "id": "team",
            "type": "team-section",
            "content": {
                "title": "Meet Our Team",
                "description": "The people behind TRISKIDEAS",
            },
        },
    ],
    "blog": [
        {
            "id": "hero",
            "type": "hero",
            "content": {
                "title": "Our Blog",
                "subtitle": "Insights, Stories & Ideas",
                "description": "Explore our collection of articles and thought-provoking content.",
            },
        },
        {
            "id": "blog-grid",
            "type": "blog-grid",
            "content": {
                "title": "Latest Posts",
                "description": "Check out our most recent articles",
            },
        },
        {
            "id": "categories",
            "type": "categories-section",
            "content": {
                "title": "Browse by Category",
                "description": "Find content that interests you",
            },
        },
    ],
    "contact": [
        {
            "id": "hero",
            "type": "hero",
            "content": {
                "title": "Get In Touch",
                "subtitle": "We'd Love to Hear From You",
                "description": "Have questions or feedback? Reach out to us anytime.",
            },
        },
        {
            "id": "contact-form",
            "type": "contact-form",
            "content": {
                "title": "Send Us a Message",
                "description": "Fill out the form below and we'll get back to you soon.",
            },
        },
        {
            "id": "contact-info",
            "type": "contact-info",
            "content": {
                "title": "Contact Information",
                "description": "You can also reach us through these channels:",
            },
        },
    ],
    "events": [
        {
            "id": "hero",
            "type": "hero",
            "content": {
                "title": "Upcoming Events",
                "subtitle": "Join Us for Amazing Experiences",
                "description": "Discover and register for our latest events and activities.",
            },
        },
        {
            "id": "events-grid",
            "type": "events-grid",
            "content": {
                "title": "Featured Events",
                "description": "Don't miss out on these exciting opportunities",
            },
        },
        {
            "id": "cta",
            "type": "cta-section",
            "content": {
                "title": "Stay Updated",
                "description": "Subscribe to get notifications about upcoming events",
                "buttonText": "Subscribe Now",
            },
        },
    ],
}


def default_sections(page_name):
    """Return the built-in sections for a page, or an empty list."""
    return parse_sections(DEFAULT_LAYOUTS.get(page_name, []))
