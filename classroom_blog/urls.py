"""
URL configuration for django-classroom-blog.

Include in your project urls.py:

    path('', include('classroom_blog.urls')),
"""
from django.urls import path

from . import views

app_name = "classroom_blog"

urlpatterns = [
    # Blogs
    path("", views.BlogListView.as_view(), name="blog_list"),
    path("blogs/new/", views.BlogCreateView.as_view(), name="blog_create"),
    path("blogs/<int:pk>/", views.BlogDetailView.as_view(), name="blog_detail"),
    path("blogs/<int:pk>/edit/", views.BlogUpdateView.as_view(), name="blog_update"),
    path("blogs/<int:pk>/delete/", views.BlogDeleteView.as_view(), name="blog_delete"),

    # Interactions
    path("blogs/<int:pk>/comments/", views.CommentListCreateView.as_view(), name="comment_list_create"),
    path("blogs/<int:pk>/like/", views.LikeToggleView.as_view(), name="like_toggle"),
    path("comments/<int:pk>/edit/", views.CommentUpdateView.as_view(), name="comment_update"),
    path("comments/<int:pk>/delete/", views.CommentDeleteView.as_view(), name="comment_delete"),

    # Dashboard
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
]
