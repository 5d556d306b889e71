"""
Configuration settings for django-classroom-blog.

Override these in your Django settings.py:

    CLASSROOM_BLOG = {
        'EXCERPT_LENGTH': 200,
        'COMMENT_MAX_LENGTH': 2000,
        ...
    }

The app ships its own user model with a ``role`` field, so the host
project must also set:

    AUTH_USER_MODEL = 'classroom_blog.User'
"""
from django.conf import settings

DEFAULTS = {
    # Excerpts
    "EXCERPT_LENGTH": 150,
    "EXCERPT_ELLIPSIS": "...",

    # Comments
    "COMMENT_MAX_LENGTH": 1000,
    # Moderation is not implemented yet, every comment is approved on creation
    "AUTO_APPROVE_COMMENTS": True,

    # Images
    "IMAGE_UPLOAD_PATH": "blogs/",
    "IMAGE_MAX_SIZE_KB": 2048,
    "ALLOWED_IMAGE_TYPES": ["image/jpeg", "image/png", "image/gif"],

    # Dashboard
    "RECENT_BLOGS_LIMIT": 5,
    "RECENT_COMMENT_ACTIVITY_LIMIT": 5,
    "RECENT_BLOG_ACTIVITY_LIMIT": 3,
    "ACTIVITY_FEED_LIMIT": 6,
    "ACTIVITY_TITLE_LENGTH": 30,
    "DASHBOARD_EXCERPT_LENGTH": 100,

    # SEO
    "SLUG_MAX_LENGTH": 255,
}


class ClassroomBlogSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from classroom_blog.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid classroom_blog setting: {name}")

        user_settings = getattr(settings, "CLASSROOM_BLOG", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = ClassroomBlogSettings()
