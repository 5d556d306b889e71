"""
Comment thread assembly.

Threads are two tiers: approved top-level comments, newest first, each
owning its replies, oldest first. Approval only filters the top level;
replies are shown whenever their parent is.
"""
from .text import initials


def author_data(user):
    """Serialize a comment or blog author for view-models."""
    name = user.display_name
    return {
        "id": user.pk,
        "name": name,
        "initials": initials(name),
    }


def comment_data(comment, replies=None):
    """Serialize a comment node. Replies always carry an empty list."""
    return {
        "id": comment.pk,
        "content": comment.content,
        "author": author_data(comment.author),
        "created_at": comment.created_at.isoformat(),
        "replies": replies if replies is not None else [],
    }


def build_threads(comments):
    """
    Shape a blog's comments into top-level nodes with their replies.

    Args:
        comments: iterable of Comment instances for one blog, with
            ``author`` loaded

    Returns:
        List of comment dicts, each with a flat ``replies`` list
    """
    top_level = []
    replies_by_parent = {}

    for comment in comments:
        if comment.parent_id is None:
            if comment.is_approved:
                top_level.append(comment)
        else:
            replies_by_parent.setdefault(comment.parent_id, []).append(comment)

    top_level.sort(key=lambda c: (c.created_at, c.pk), reverse=True)

    threads = []
    for comment in top_level:
        replies = sorted(
            replies_by_parent.get(comment.pk, []),
            key=lambda c: (c.created_at, c.pk),
        )
        threads.append(comment_data(comment, [comment_data(reply) for reply in replies]))
    return threads


def blog_threads(blog):
    """Load and assemble the comment threads of ``blog``."""
    comments = blog.comments.select_related("author")
    return build_threads(comments)
