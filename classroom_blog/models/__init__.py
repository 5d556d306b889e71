"""
Models for django-classroom-blog.

All models are importable from classroom_blog.models:

    from classroom_blog.models import User, Blog, Category, Tag, Comment, Like
"""
from .users import User
from .blogs import Category, Tag, Blog
from .comments import Comment, Like

__all__ = [
    "User",
    # Blogs
    "Category",
    "Tag",
    "Blog",
    # Interactions
    "Comment",
    "Like",
]
