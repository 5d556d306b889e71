"""
Exceptions raised by classroom_blog services.

Missing objects are reported with Django's ``Http404`` and bad input with
``django.core.exceptions.ValidationError``. The classes below cover the
recoverable denials that views turn into a redirect with a flash message.
"""


class BlogActionDenied(Exception):
    """An action was refused; the caller should redirect with ``message``."""

    default_message = "This action is not allowed."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(BlogActionDenied):
    """The actor failed an authorization rule."""

    default_message = "You are not authorized to perform this action."


class CommentsDisabled(BlogActionDenied):
    """The blog does not accept comments."""

    default_message = "Comments are disabled for this blog."


class VersionConflict(Exception):
    """The blog changed since the caller last read it."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Blog was modified concurrently (expected version {expected}, found {actual})."
        )
