"""Django app configuration for classroom_blog."""
from django.apps import AppConfig


class ClassroomBlogConfig(AppConfig):
    """Configuration for the classroom blog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "classroom_blog"
    verbose_name = "Classroom Blog"

    def ready(self):
        """Connect signal receivers."""
        from . import signals  # noqa: F401
