"""
Django admin configuration for classroom_blog.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import Blog, Category, Comment, Like, Tag, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ["username", "email", "first_name", "last_name", "role", "is_staff"]
    list_filter = ["role", "is_staff", "is_superuser", "is_active"]
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Classroom", {"fields": ("role",)}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Classroom", {"fields": ("role",)}),
    )


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "blog_count", "created_at"]
    search_fields = ["name", "slug", "description"]
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "color_swatch", "blog_count", "created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at"]

    def color_swatch(self, obj):
        if not obj.color:
            return "-"
        return format_html(
            '<span style="display:inline-block;width:1em;height:1em;background:{};"></span> {}',
            obj.color,
            obj.color,
        )

    color_swatch.short_description = "Color"


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    raw_id_fields = ["author", "parent"]
    fields = ["author", "parent", "content", "is_approved"]


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "author",
        "status",
        "is_featured",
        "allow_comments",
        "view_count",
        "version",
        "created_at",
    ]
    list_filter = ["status", "format_type", "is_featured", "allow_comments", "categories", "created_at"]
    search_fields = ["title", "content", "author__username"]
    raw_id_fields = ["author"]
    filter_horizontal = ["categories", "tags"]
    date_hierarchy = "created_at"
    inlines = [CommentInline]
    readonly_fields = ["view_count", "version", "created_at", "updated_at"]
    prepopulated_fields = {"slug": ("title",)}

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "content", "excerpt", "image", "format_type", "author")
        }),
        ("Taxonomy", {
            "fields": ("categories", "tags")
        }),
        ("Status", {
            "fields": ("status", "is_featured", "allow_comments")
        }),
        ("SEO", {
            "fields": ("meta_title", "meta_description"),
            "classes": ("collapse",),
        }),
        ("Metadata", {
            "fields": ("view_count", "version", "created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_blogs", "unpublish_blogs", "feature_blogs", "unfeature_blogs"]

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"

    @admin.action(description="Publish selected blogs")
    def publish_blogs(self, request, queryset):
        count = queryset.update(status=Blog.Status.PUBLISHED)
        self.message_user(request, f"{count} blogs published.")

    @admin.action(description="Move selected blogs back to draft")
    def unpublish_blogs(self, request, queryset):
        count = queryset.update(status=Blog.Status.DRAFT)
        self.message_user(request, f"{count} blogs moved to draft.")

    @admin.action(description="Feature selected blogs")
    def feature_blogs(self, request, queryset):
        count = queryset.update(is_featured=True)
        self.message_user(request, f"{count} blogs featured.")

    @admin.action(description="Unfeature selected blogs")
    def unfeature_blogs(self, request, queryset):
        count = queryset.update(is_featured=False)
        self.message_user(request, f"{count} blogs unfeatured.")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "author", "blog", "is_reply", "is_approved", "created_at"]
    list_filter = ["is_approved", "created_at"]
    search_fields = ["content", "author__username", "blog__title"]
    raw_id_fields = ["blog", "author", "parent"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["approve_comments", "reject_comments"]

    @admin.action(description="Approve selected comments")
    def approve_comments(self, request, queryset):
        count = queryset.update(is_approved=True)
        self.message_user(request, f"{count} comments approved.")

    @admin.action(description="Reject selected comments")
    def reject_comments(self, request, queryset):
        count = queryset.update(is_approved=False)
        self.message_user(request, f"{count} comments rejected.")


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ["user", "blog", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["user__username", "blog__title"]
    raw_id_fields = ["user", "blog"]
