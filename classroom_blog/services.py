"""
Blog operations used by the views.

Every mutating operation checks the authorization rules in
``classroom_blog.permissions`` first and raises ``Unauthorized`` or
``CommentsDisabled`` before touching the database. Views call the
``ensure_*`` guards themselves when they must refuse a request before
validating its input.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Q

from . import permissions
from .conf import blog_settings
from .exceptions import CommentsDisabled, Unauthorized, VersionConflict
from .models import Blog, Comment, Like
from .threads import author_data, blog_threads

logger = logging.getLogger(__name__)

# Fields a blog form may write directly
BLOG_FIELDS = (
    "title",
    "content",
    "excerpt",
    "format_type",
    "status",
    "meta_title",
    "meta_description",
    "slug",
    "allow_comments",
)


def ensure_can_view(user, blog):
    if not permissions.can_view(user, blog):
        logger.warning("User %s denied access to draft blog %s", user.pk, blog.pk)
        raise Unauthorized("You are not authorized to view this draft blog post.")


def ensure_can_edit(user, blog):
    if not permissions.can_edit(user, blog):
        logger.warning("User %s denied update of blog %s", user.pk, blog.pk)
        raise Unauthorized("You are not authorized to edit this blog.")


def ensure_can_delete(user, blog):
    if not permissions.can_delete(user, blog):
        logger.warning("User %s denied deletion of blog %s", user.pk, blog.pk)
        raise Unauthorized("You are not authorized to delete this blog.")


def ensure_can_comment(user, blog):
    ensure_can_view(user, blog)
    if not permissions.can_comment(blog):
        raise CommentsDisabled()


def ensure_can_edit_comment(user, comment):
    if not permissions.can_edit_comment(user, comment):
        logger.warning("User %s denied update of comment %s", user.pk, comment.pk)
        raise Unauthorized("You are not authorized to update this comment.")


def ensure_can_delete_comment(user, comment):
    if not permissions.can_delete_comment(user, comment):
        logger.warning("User %s denied deletion of comment %s", user.pk, comment.pk)
        raise Unauthorized("You are not authorized to delete this comment.")


def visible_blogs(user):
    """
    Blogs ``user`` may list, newest first.

    Moderators see everything. Everyone else sees published blogs plus
    their own drafts.
    """
    qs = (
        Blog.objects.select_related("author")
        .prefetch_related("categories", "tags")
        .annotate(
            comments_count=Count("comments", distinct=True),
            likes_count=Count("likes", distinct=True),
        )
    )
    if not permissions.is_moderator(user):
        qs = qs.filter(Q(status=Blog.Status.PUBLISHED) | Q(author=user))
    return qs.order_by("-created_at", "-pk")


def blog_data(blog):
    """Serialize the fields shared by list and detail view-models."""
    return {
        "id": blog.pk,
        "title": blog.title,
        "slug": blog.slug,
        "excerpt": blog.get_excerpt(),
        "image_url": blog.image.url if blog.image else None,
        "format_type": blog.format_type,
        "status": blog.status,
        "view_count": blog.view_count,
        "version": blog.version,
        "is_featured": blog.is_featured,
        "allow_comments": blog.allow_comments,
        "author": author_data(blog.author),
        "categories": [
            {"id": c.pk, "name": c.name, "slug": c.slug} for c in blog.categories.all()
        ],
        "tags": [
            {"id": t.pk, "name": t.name, "slug": t.slug, "color": t.color}
            for t in blog.tags.all()
        ],
        "created_at": blog.created_at.isoformat(),
        "updated_at": blog.updated_at.isoformat(),
    }


def blog_list(user):
    """List view-model: visible blogs with counts and cached excerpts."""
    blogs = []
    for blog in visible_blogs(user):
        item = blog_data(blog)
        item["comments_count"] = blog.comments_count
        item["likes_count"] = blog.likes_count
        blogs.append(item)
    return {"blogs": blogs, "user_role": user.role}


def view_blog(user, blog):
    """
    Detail view-model for ``blog`` as seen by ``user``.

    Counts a view when the reader is not the owner.

    Raises:
        Unauthorized: the blog is a draft the user may not read
    """
    ensure_can_view(user, blog)

    if not permissions.is_owner(user, blog):
        blog.increment_view_count()

    data = blog_data(blog)
    data.update(
        content=blog.content,
        meta_title=blog.meta_title,
        meta_description=blog.meta_description,
        likes_count=blog.likes.count(),
        comments_count=blog.comments.count(),
        is_liked=blog.likes.filter(user=user).exists(),
        comments=blog_threads(blog),
    )
    return {
        "blog": data,
        "user_role": user.role,
        "can_edit": permissions.can_edit(user, blog),
        "can_delete": permissions.can_delete(user, blog),
        "can_comment": permissions.can_comment(blog),
    }


def edit_data(user, blog):
    """Raw blog fields for the edit form."""
    ensure_can_edit(user, blog)
    data = {field: getattr(blog, field) for field in BLOG_FIELDS}
    data.update(
        id=blog.pk,
        version=blog.version,
        image_url=blog.image.url if blog.image else None,
        categories=list(blog.categories.values_list("pk", flat=True)),
        tags=list(blog.tags.values_list("pk", flat=True)),
    )
    return {"blog": data}


def _apply_fields(blog, data):
    for field in BLOG_FIELDS:
        if field in data:
            setattr(blog, field, data[field])


def _set_taxonomy(blog, data):
    if data.get("categories") is not None:
        blog.categories.set(data["categories"])
    if data.get("tags") is not None:
        blog.tags.set(data["tags"])


def create_blog(user, data):
    """
    Create a blog owned by ``user`` from validated form data.

    ``data`` may carry ``image``, ``categories`` and ``tags`` alongside
    the plain fields.
    """
    blog = Blog(author=user)
    _apply_fields(blog, data)
    if data.get("image"):
        blog.image = data["image"]

    with transaction.atomic():
        blog.save()
        _set_taxonomy(blog, data)

    logger.info("Blog %s created by user %s as %s", blog.pk, user.pk, blog.status)
    return blog


def update_blog(user, blog, data, expected_version=None):
    """
    Apply validated form data to ``blog`` and bump its version.

    Without ``expected_version`` concurrent updates race and the last
    write wins. With it, the stored version must still match or
    ``VersionConflict`` is raised and nothing is written.

    Changing the content without supplying a new excerpt clears the cached
    excerpt so it is regenerated on the next read. Posting back the stored
    excerpt does not count as supplying one. A new image replaces
    the stored file.
    """
    ensure_can_edit(user, blog)

    content_changed = "content" in data and data["content"] != blog.content
    # An excerpt equal to the stored one is the cached value posted back
    excerpt_supplied = bool(data.get("excerpt")) and data["excerpt"] != blog.excerpt
    old_image = blog.image.name if blog.image else None

    _apply_fields(blog, data)
    if content_changed and not excerpt_supplied:
        blog.excerpt = ""
    if data.get("image"):
        blog.image = data["image"]

    with transaction.atomic():
        if expected_version is not None:
            current = (
                Blog.objects.select_for_update()
                .values_list("version", flat=True)
                .get(pk=blog.pk)
            )
            if current != expected_version:
                raise VersionConflict(expected_version, current)
            blog.version = current + 1
        else:
            blog.version += 1
        blog.save()
        _set_taxonomy(blog, data)

    if old_image and old_image != blog.image.name:
        blog.image.storage.delete(old_image)

    logger.info("Blog %s updated by user %s to version %s", blog.pk, user.pk, blog.version)
    return blog


def delete_blog(user, blog):
    """Delete ``blog``; comments, likes and the image file go with it."""
    ensure_can_delete(user, blog)

    pk = blog.pk
    blog.delete()
    logger.info("Blog %s deleted by user %s", pk, user.pk)


def post_comment(user, blog, content, parent=None):
    """
    Add a comment to ``blog``, optionally as a reply to ``parent``.

    A reply to a reply is attached to the thread's top-level comment.

    Raises:
        Unauthorized: the user may not read the blog
        CommentsDisabled: the blog does not accept comments
        ValidationError: ``parent`` belongs to another blog
    """
    ensure_can_comment(user, blog)

    if parent is not None:
        if parent.blog_id != blog.pk:
            raise ValidationError(
                {"parent_id": "Replies must belong to the same blog as their parent."}
            )
        if parent.parent_id is not None:
            parent = parent.parent

    comment = Comment.objects.create(
        blog=blog,
        author=user,
        parent=parent,
        content=content,
        is_approved=blog_settings.AUTO_APPROVE_COMMENTS,
    )
    logger.info("Comment %s posted on blog %s by user %s", comment.pk, blog.pk, user.pk)
    return comment


def comment_threads(user, blog):
    """Comment listing for a blog the user may read."""
    ensure_can_view(user, blog)
    return {"comments": blog_threads(blog)}


def edit_comment(user, comment, content):
    ensure_can_edit_comment(user, comment)

    comment.content = content
    comment.save(update_fields=["content", "updated_at"])
    return comment


def delete_comment(user, comment):
    ensure_can_delete_comment(user, comment)

    pk = comment.pk
    comment.delete()
    logger.info("Comment %s deleted by user %s", pk, user.pk)


def toggle_like(user, blog):
    """
    Like or unlike ``blog``.

    Returns (like_or_none, "created" | "removed")
    """
    ensure_can_view(user, blog)

    like, action = Like.toggle(blog, user)
    logger.info("User %s like on blog %s %s", user.pk, blog.pk, action)
    return like, action
