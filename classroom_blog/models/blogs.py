"""
Blog, Category, and Tag models for django-classroom-blog.
"""
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.text import slugify

from ..conf import blog_settings
from ..text import make_excerpt


def get_upload_path(instance, filename):
    """Generate upload path for blog images."""
    return blog_settings.IMAGE_UPLOAD_PATH + filename


class Category(models.Model):
    """Subject area a blog can be filed under."""

    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)[:100]
        super().save(*args, **kwargs)

    @property
    def blog_count(self):
        """Return count of published blogs in this category."""
        return self.blogs.filter(status=Blog.Status.PUBLISHED).count()


class Tag(models.Model):
    """
    Flat tag for blogs.

    ``color`` is a free-form CSS colour used by the presentation layer.
    """

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True)
    color = models.CharField(max_length=20, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)[:100]
        super().save(*args, **kwargs)

    @property
    def blog_count(self):
        """Return count of published blogs with this tag."""
        return self.blogs.filter(status=Blog.Status.PUBLISHED).count()


class Blog(models.Model):
    """
    Blog post written by a classroom member.

    Supports:
    - Draft and published states
    - Version counter bumped on every update
    - Excerpt cached on first read
    - Optional cover image
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLISHED = "published", "Published"

    class FormatType(models.TextChoices):
        MARKDOWN = "markdown", "Markdown"
        RICH_TEXT = "rich_text", "Rich text"
        HTML = "html", "HTML"

    # Content
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, null=True, blank=True)
    content = models.TextField()
    excerpt = models.TextField(
        blank=True,
        help_text="Optional manual excerpt. Generated from content on first read if blank.",
    )
    image = models.ImageField(upload_to=get_upload_path, blank=True)
    format_type = models.CharField(
        max_length=20,
        choices=FormatType.choices,
        default=FormatType.MARKDOWN,
    )

    # Owner, never reassigned after creation
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blogs",
    )

    # Status
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )
    is_featured = models.BooleanField(default=False)
    allow_comments = models.BooleanField(default=True)

    # SEO
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)

    # Taxonomy
    categories = models.ManyToManyField(Category, related_name="blogs", blank=True)
    tags = models.ManyToManyField(Tag, related_name="blogs", blank=True)

    # Engagement stats
    view_count = models.PositiveIntegerField(default=0)
    version = models.PositiveIntegerField(default=1)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "-created_at"], name="blog_status_created_idx"),
            models.Index(fields=["author", "-created_at"], name="blog_author_created_idx"),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        # Auto-generate slug from title
        if not self.slug:
            base_slug = slugify(self.title)[:blog_settings.SLUG_MAX_LENGTH]
            if base_slug:
                slug = base_slug
                counter = 1
                while Blog.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                    slug = f"{base_slug}-{counter}"
                    counter += 1
                self.slug = slug
            else:
                self.slug = None

        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("classroom_blog:blog_detail", kwargs={"pk": self.pk})

    @property
    def is_published(self):
        return self.status == self.Status.PUBLISHED

    @property
    def is_draft(self):
        return self.status == self.Status.DRAFT

    def get_excerpt(self):
        """
        Return the stored excerpt, generating and persisting it if blank.

        The write goes through a queryset update so it neither touches
        ``updated_at`` nor bumps ``version``.
        """
        if not self.excerpt:
            self.excerpt = make_excerpt(self.content)
            if self.pk:
                Blog.objects.filter(pk=self.pk).update(excerpt=self.excerpt)
        return self.excerpt

    def increment_view_count(self):
        """Increment view count atomically."""
        Blog.objects.filter(pk=self.pk).update(view_count=models.F("view_count") + 1)
        self.refresh_from_db(fields=["view_count"])
