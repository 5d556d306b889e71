"""
Authorization rules for blogs and comments.

Each rule is a pure function of the acting user and the resource. Rules
never query the database beyond attributes already loaded on the objects.
"""


def is_moderator(user):
    """Check if user is an admin, teacher or core member."""
    return bool(getattr(user, "is_moderator", False))


def is_owner(user, obj):
    """Check if user authored ``obj`` (a Blog or Comment)."""
    return user is not None and user.pk is not None and user.pk == obj.author_id


def can_view(user, blog):
    """Published blogs are visible to all; drafts to their owner and moderators."""
    return blog.is_published or is_owner(user, blog) or is_moderator(user)


def can_edit(user, blog):
    return is_owner(user, blog) or is_moderator(user)


def can_delete(user, blog):
    return is_owner(user, blog) or is_moderator(user)


def can_comment(blog):
    """Any authenticated user may comment while the blog allows it."""
    return bool(blog.allow_comments)


def can_edit_comment(user, comment):
    return is_owner(user, comment) or is_moderator(user)


def can_delete_comment(user, comment):
    return is_owner(user, comment) or is_moderator(user)
