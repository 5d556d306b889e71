"""
Comment and Like models for django-classroom-blog.
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from ..conf import blog_settings


class Comment(models.Model):
    """
    Comment on a blog.

    Replies point at a top-level comment through ``parent``. Threads are
    one level deep: a reply to a reply is stored against the thread's
    top-level comment (see ``services.post_comment``).
    """

    blog = models.ForeignKey(
        "classroom_blog.Blog",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_comments",
    )
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="replies",
    )
    content = models.TextField(max_length=blog_settings.COMMENT_MAX_LENGTH)
    is_approved = models.BooleanField(
        default=True,
        help_text="Whether comment is approved and visible",
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["blog", "is_approved", "created_at"], name="comment_blog_approved_idx"),
        ]

    def __str__(self):
        return f"Comment by {self.author} on {self.blog}"

    def clean(self):
        if self.parent_id and self.parent.blog_id != self.blog_id:
            raise ValidationError(
                {"parent": "Replies must belong to the same blog as their parent."}
            )

    @property
    def preview(self):
        """Return truncated content for admin display."""
        if len(self.content) > 100:
            return self.content[:100] + "..."
        return self.content

    @property
    def is_reply(self):
        """Check if this is a reply to another comment."""
        return self.parent_id is not None

    def approve(self):
        """Approve the comment for display."""
        self.is_approved = True
        self.save(update_fields=["is_approved", "updated_at"])

    def reject(self):
        """Hide the comment from the top-level listing."""
        self.is_approved = False
        self.save(update_fields=["is_approved", "updated_at"])


class Like(models.Model):
    """A user's like on a blog. The row existing means liked."""

    blog = models.ForeignKey(
        "classroom_blog.Blog",
        on_delete=models.CASCADE,
        related_name="likes",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_likes",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["user", "blog"], name="unique_like_per_user_blog"),
        ]

    def __str__(self):
        return f"{self.user} likes {self.blog}"

    @classmethod
    def toggle(cls, blog, user):
        """
        Toggle a like on a blog.

        If the user already likes the blog, removes it; otherwise adds it.
        A row created concurrently by another request counts as liked.

        Returns (like_or_none, "created" | "removed")
        """
        existing = cls.objects.filter(blog=blog, user=user).first()

        if existing:
            existing.delete()
            return None, "removed"

        like, _ = cls.objects.get_or_create(blog=blog, user=user)
        return like, "created"
