"""
Forms validating blog and comment input.
"""
from django import forms

from .conf import blog_settings
from .models import Blog, Comment


class BlogForm(forms.ModelForm):
    """
    Create/update form for blogs.

    ``status``, ``format_type`` and ``allow_comments`` are optional and
    fall back to draft, markdown and true when omitted.
    """

    status = forms.ChoiceField(choices=Blog.Status.choices, required=False)
    format_type = forms.ChoiceField(choices=Blog.FormatType.choices, required=False)
    allow_comments = forms.NullBooleanField(required=False)

    class Meta:
        model = Blog
        fields = [
            "title",
            "content",
            "excerpt",
            "image",
            "format_type",
            "status",
            "meta_title",
            "meta_description",
            "slug",
            "allow_comments",
            "categories",
            "tags",
        ]

    def clean_image(self):
        image = self.cleaned_data.get("image")
        if not image or not hasattr(image, "content_type"):
            return image

        if image.content_type not in blog_settings.ALLOWED_IMAGE_TYPES:
            raise forms.ValidationError("Image must be a JPEG, PNG or GIF file.")

        max_size_kb = blog_settings.IMAGE_MAX_SIZE_KB
        if image.size > max_size_kb * 1024:
            raise forms.ValidationError(f"Image may not be larger than {max_size_kb} KB.")
        return image

    def clean_status(self):
        return self.cleaned_data.get("status") or Blog.Status.DRAFT

    def clean_format_type(self):
        return self.cleaned_data.get("format_type") or Blog.FormatType.MARKDOWN

    def clean_allow_comments(self):
        value = self.cleaned_data.get("allow_comments")
        return True if value is None else value


class CommentForm(forms.Form):
    """Comment or reply on a blog. ``parent_id`` must be a comment on the same blog."""

    content = forms.CharField(max_length=blog_settings.COMMENT_MAX_LENGTH, strip=True)
    parent_id = forms.ModelChoiceField(queryset=Comment.objects.none(), required=False)

    def __init__(self, *args, blog=None, **kwargs):
        super().__init__(*args, **kwargs)
        if blog is not None:
            self.fields["parent_id"].queryset = blog.comments.all()


class CommentUpdateForm(forms.Form):
    content = forms.CharField(max_length=blog_settings.COMMENT_MAX_LENGTH, strip=True)
