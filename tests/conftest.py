"""
Shared fixtures for django-classroom-blog tests.
"""
import pytest

from classroom_blog.models import Blog, Category, Comment, Tag, User

from .factories import make_user


@pytest.fixture
def student(db):
    return make_user("student", first_name="Sarah", last_name="Johnson")


@pytest.fixture
def other_student(db):
    return make_user("other", first_name="Mike", last_name="Chen")


@pytest.fixture
def teacher(db):
    return make_user("teacher", role=User.Role.TEACHER, first_name="Emily", last_name="Davis")


@pytest.fixture
def category(db):
    return Category.objects.create(name="Machine Learning")


@pytest.fixture
def tag(db):
    return Tag.objects.create(name="Python", color="#3776ab")


@pytest.fixture
def published_blog(db, student):
    return Blog.objects.create(
        title="Published Blog",
        content="# Hello *world*",
        author=student,
        status=Blog.Status.PUBLISHED,
    )


@pytest.fixture
def draft_blog(db, student):
    return Blog.objects.create(
        title="Draft Blog",
        content="Work in progress",
        author=student,
    )


@pytest.fixture
def comment(db, published_blog, other_student):
    return Comment.objects.create(
        blog=published_blog,
        author=other_student,
        content="Great post!",
    )
