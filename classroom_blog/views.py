"""
Views for django-classroom-blog.

Pages answer with a JSON view-model for the front end. Mutations redirect
with a flash message, or answer with JSON when the client asks for it.
"""
from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.views import View

from . import activity, services
from .exceptions import BlogActionDenied, VersionConflict
from .forms import BlogForm, CommentForm, CommentUpdateForm
from .models import Blog, Category, Comment, Tag


def wants_json(request):
    return request.headers.get("Accept") == "application/json"


def render_props(request, props, status=200):
    """Return ``props`` as JSON with any pending flash messages attached."""
    props = dict(props)
    props["flash"] = [
        {"level": message.level_tag, "message": str(message)}
        for message in messages.get_messages(request)
    ]
    return JsonResponse(props, status=status)


def form_errors(form):
    return JsonResponse({"errors": form.errors.get_json_data()}, status=400)


def form_options():
    """Choices the blog create/edit form needs."""
    return {
        "status_choices": [value for value, _ in Blog.Status.choices],
        "format_choices": [value for value, _ in Blog.FormatType.choices],
        "categories": list(Category.objects.values("id", "name", "slug")),
        "tags": list(Tag.objects.values("id", "name", "slug", "color")),
    }


class DeniedRedirectMixin:
    """Turn ``BlogActionDenied`` into an error message and a redirect."""

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except BlogActionDenied as exc:
            if wants_json(request):
                return JsonResponse({"error": exc.message}, status=403)
            messages.error(request, exc.message)
            return redirect(self.get_denied_url())

    def get_denied_url(self):
        return reverse("classroom_blog:blog_list")


class BlogViewMixin(LoginRequiredMixin, DeniedRedirectMixin):
    pass


class BlogListView(BlogViewMixin, View):
    """List blogs visible to the current user."""

    def get(self, request):
        return render_props(request, services.blog_list(request.user))


class BlogCreateView(BlogViewMixin, View):
    """Create a new blog."""

    def get(self, request):
        return render_props(request, form_options())

    def post(self, request):
        form = BlogForm(request.POST, request.FILES)
        if not form.is_valid():
            return form_errors(form)

        blog = services.create_blog(request.user, form.cleaned_data)

        if wants_json(request):
            return JsonResponse({"id": blog.pk, "status": blog.status}, status=201)

        if blog.is_published:
            messages.success(request, "Blog published successfully.")
            return redirect(blog.get_absolute_url())
        messages.success(request, "Blog saved as draft successfully.")
        return redirect("classroom_blog:blog_list")


class BlogDetailView(BlogViewMixin, View):
    """Display a single blog with its comment threads."""

    def get(self, request, pk):
        blog = get_object_or_404(Blog.objects.select_related("author"), pk=pk)
        return render_props(request, services.view_blog(request.user, blog))


class BlogUpdateView(BlogViewMixin, View):
    """
    Edit an existing blog.

    Sending ``expected_version`` makes the update fail with 409 if someone
    else saved the blog in the meantime.
    """

    def get(self, request, pk):
        blog = get_object_or_404(Blog, pk=pk)
        props = services.edit_data(request.user, blog)
        props.update(form_options())
        return render_props(request, props)

    def post(self, request, pk):
        blog = get_object_or_404(Blog, pk=pk)
        services.ensure_can_edit(request.user, blog)

        # The form validates against its own copy; ModelForm writes into its instance
        form = BlogForm(request.POST, request.FILES, instance=Blog.objects.get(pk=pk))
        if not form.is_valid():
            return form_errors(form)

        expected_version = request.POST.get("expected_version")
        try:
            expected_version = int(expected_version) if expected_version else None
        except ValueError:
            return JsonResponse(
                {"errors": {"expected_version": [{"message": "Enter a whole number.", "code": "invalid"}]}},
                status=400,
            )

        try:
            blog = services.update_blog(
                request.user, blog, form.cleaned_data, expected_version=expected_version
            )
        except VersionConflict as exc:
            return JsonResponse({"error": str(exc), "version": exc.actual}, status=409)

        if wants_json(request):
            return JsonResponse({"id": blog.pk, "status": blog.status, "version": blog.version})

        if blog.is_published:
            messages.success(request, "Blog published successfully.")
            return redirect(blog.get_absolute_url())
        messages.success(request, "Blog saved as draft successfully.")
        return redirect("classroom_blog:blog_list")


class BlogDeleteView(BlogViewMixin, View):
    """Delete a blog."""

    def post(self, request, pk):
        blog = get_object_or_404(Blog, pk=pk)
        services.delete_blog(request.user, blog)

        if wants_json(request):
            return JsonResponse({"deleted": pk})

        messages.success(request, "Blog deleted successfully.")
        return redirect("classroom_blog:blog_list")


class CommentListCreateView(BlogViewMixin, View):
    """List a blog's comment threads or add a comment to it."""

    def get_denied_url(self):
        blog = getattr(self, "blog", None)
        if blog is not None and blog.is_published:
            return blog.get_absolute_url()
        return super().get_denied_url()

    def get(self, request, pk):
        self.blog = get_object_or_404(Blog, pk=pk)
        return render_props(request, services.comment_threads(request.user, self.blog))

    def post(self, request, pk):
        self.blog = get_object_or_404(Blog, pk=pk)
        services.ensure_can_comment(request.user, self.blog)

        form = CommentForm(request.POST, blog=self.blog)
        if not form.is_valid():
            return form_errors(form)

        comment = services.post_comment(
            request.user,
            self.blog,
            form.cleaned_data["content"],
            parent=form.cleaned_data.get("parent_id"),
        )

        if wants_json(request):
            return JsonResponse({
                "id": comment.pk,
                "content": comment.content,
                "parent_id": comment.parent_id,
                "author": comment.author.username,
                "created_at": comment.created_at.isoformat(),
                "is_approved": comment.is_approved,
            }, status=201)

        messages.success(request, "Comment posted successfully.")
        return redirect(self.blog.get_absolute_url())


class CommentMixin(BlogViewMixin):
    """Load the comment from the URL and send denials back to its blog."""

    def get_comment(self, pk):
        self.comment = get_object_or_404(Comment.objects.select_related("blog"), pk=pk)
        return self.comment

    def get_denied_url(self):
        comment = getattr(self, "comment", None)
        if comment is not None:
            return comment.blog.get_absolute_url()
        return super().get_denied_url()


class CommentUpdateView(CommentMixin, View):
    """Edit a comment."""

    def post(self, request, pk):
        comment = self.get_comment(pk)
        services.ensure_can_edit_comment(request.user, comment)

        form = CommentUpdateForm(request.POST)
        if not form.is_valid():
            return form_errors(form)

        services.edit_comment(request.user, comment, form.cleaned_data["content"])

        if wants_json(request):
            return JsonResponse({"id": comment.pk, "content": comment.content})

        messages.success(request, "Comment updated successfully.")
        return redirect(comment.blog.get_absolute_url())


class CommentDeleteView(CommentMixin, View):
    """Delete a comment and its replies."""

    def post(self, request, pk):
        comment = self.get_comment(pk)
        services.delete_comment(request.user, comment)

        if wants_json(request):
            return JsonResponse({"deleted": pk})

        messages.success(request, "Comment deleted successfully.")
        return redirect(comment.blog.get_absolute_url())


class LikeToggleView(BlogViewMixin, View):
    """Like or unlike a blog."""

    def post(self, request, pk):
        blog = get_object_or_404(Blog, pk=pk)
        like, action = services.toggle_like(request.user, blog)

        if wants_json(request):
            return JsonResponse({
                "action": action,
                "is_liked": like is not None,
                "likes_count": blog.likes.count(),
            })

        messages.success(request, "Blog liked." if like else "Like removed.")
        return redirect(blog.get_absolute_url())


class DashboardView(BlogViewMixin, View):
    """Recent blogs, recent activity and statistics."""

    def get(self, request):
        return render_props(request, activity.dashboard(request.user))
