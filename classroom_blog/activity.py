"""
Dashboard assembly: recent blogs, the merged activity feed and statistics.
"""
from django.db.models import Sum
from django.utils.html import strip_tags
from django.utils.timesince import timesince

from .conf import blog_settings
from .models import Blog, Comment, User
from .text import initials, limit_text


def actor_data(user):
    name = user.display_name
    return {"name": name, "initials": initials(name)}


def _timestamps(moment):
    return {
        "created_at": moment.isoformat(),
        "created_ago": f"{timesince(moment)} ago",
    }


def comment_activity(comment):
    title = limit_text(comment.blog.title, blog_settings.ACTIVITY_TITLE_LENGTH)
    return {
        "type": "comment",
        "user": actor_data(comment.author),
        "description": f'commented on "{title}"',
        "timestamp": comment.created_at,
        **_timestamps(comment.created_at),
    }


def blog_activity(blog):
    title = limit_text(blog.title, blog_settings.ACTIVITY_TITLE_LENGTH)
    return {
        "type": "blog_published",
        "user": actor_data(blog.author),
        "description": f'published "{title}"',
        "timestamp": blog.created_at,
        **_timestamps(blog.created_at),
    }


def merge_activity(comment_items, blog_items, limit=None):
    """
    Merge activity records newest first and keep the first ``limit``.

    The sort is stable, so on equal timestamps comments stay ahead of
    blogs and each list keeps its fetch order. The ``timestamp`` key used
    for sorting is dropped from the returned records.
    """
    if limit is None:
        limit = blog_settings.ACTIVITY_FEED_LIMIT
    merged = sorted(
        list(comment_items) + list(blog_items),
        key=lambda item: item["timestamp"],
        reverse=True,
    )[:limit]
    return [{k: v for k, v in item.items() if k != "timestamp"} for item in merged]


def recent_activity(user):
    """Build the recent activity feed shown to ``user``."""
    comments = (
        Comment.objects.filter(blog__status=Blog.Status.PUBLISHED)
        .select_related("author", "blog")
        .order_by("-created_at", "-pk")[:blog_settings.RECENT_COMMENT_ACTIVITY_LIMIT]
    )
    blogs = (
        Blog.objects.filter(status=Blog.Status.PUBLISHED)
        .exclude(author=user)
        .select_related("author")
        .order_by("-created_at", "-pk")[:blog_settings.RECENT_BLOG_ACTIVITY_LIMIT]
    )
    return merge_activity(
        [comment_activity(c) for c in comments],
        [blog_activity(b) for b in blogs],
    )


def recent_blogs(limit=None):
    """Latest published blogs as dashboard cards."""
    if limit is None:
        limit = blog_settings.RECENT_BLOGS_LIMIT
    blogs = (
        Blog.objects.filter(status=Blog.Status.PUBLISHED)
        .select_related("author")
        .prefetch_related("categories", "tags")
        .order_by("-created_at", "-pk")[:limit]
    )
    return [
        {
            "id": blog.pk,
            "title": blog.title,
            "slug": blog.slug,
            "excerpt": limit_text(
                strip_tags(blog.content), blog_settings.DASHBOARD_EXCERPT_LENGTH
            ),
            "author": actor_data(blog.author),
            "view_count": blog.view_count,
            "categories": [category.name for category in blog.categories.all()],
            "tags": [tag.name for tag in blog.tags.all()],
            **_timestamps(blog.created_at),
        }
        for blog in blogs
    ]


def user_blog_stats(user):
    blogs = Blog.objects.filter(author=user)
    return {
        "total_blogs": blogs.count(),
        "published_blogs": blogs.filter(status=Blog.Status.PUBLISHED).count(),
        "draft_blogs": blogs.filter(status=Blog.Status.DRAFT).count(),
        "total_views": blogs.aggregate(total=Sum("view_count"))["total"] or 0,
    }


def class_stats():
    return {
        "total_students": User.objects.filter(role=User.Role.STUDENT).count(),
        "total_teachers": User.objects.filter(role__in=User.MODERATOR_ROLES).count(),
        "total_blogs": Blog.objects.filter(status=Blog.Status.PUBLISHED).count(),
        "total_comments": Comment.objects.count(),
    }


def dashboard(user):
    """Assemble the dashboard view-model for ``user``."""
    return {
        "recent_blogs": recent_blogs(),
        "recent_activity": recent_activity(user),
        "user_blog_stats": user_blog_stats(user),
        "class_stats": class_stats(),
    }
