"""
Tests for the dashboard activity feed and statistics.
"""
from datetime import datetime, timedelta, timezone as dt_timezone

from classroom_blog import activity
from classroom_blog.models import Blog, Comment, User

from .factories import backdate, make_user

BASE = datetime(2025, 7, 3, 12, 0, tzinfo=dt_timezone.utc)


def record(kind, minute):
    moment = BASE + timedelta(minutes=minute)
    return {"type": kind, "description": f"{kind} {minute}", "timestamp": moment}


class TestMergeActivity:

    def test_keeps_six_newest(self):
        comments = [record("comment", m) for m in (1, 3, 5, 7, 9)]
        blogs = [record("blog_published", m) for m in (2, 4, 6)]

        feed = activity.merge_activity(comments, blogs, limit=6)

        assert len(feed) == 6
        assert [item["description"] for item in feed] == [
            "comment 9",
            "comment 7",
            "blog_published 6",
            "comment 5",
            "blog_published 4",
            "comment 3",
        ]
        assert {item["type"] for item in feed} <= {"comment", "blog_published"}

    def test_timestamp_key_dropped(self):
        feed = activity.merge_activity([record("comment", 1)], [])
        assert "timestamp" not in feed[0]

    def test_ties_keep_comments_first(self):
        comments = [record("comment", 5)]
        blogs = [record("blog_published", 5)]

        feed = activity.merge_activity(comments, blogs)

        assert [item["type"] for item in feed] == ["comment", "blog_published"]


class TestRecentActivity:

    def test_feed_from_database(self, db, student, other_student):
        mine = Blog.objects.create(
            title="My Blog", content="x", author=student, status=Blog.Status.PUBLISHED
        )
        backdate(mine, 100)
        for minutes in (10, 30, 50):
            blog = Blog.objects.create(
                title=f"Other Blog {minutes}",
                content="x",
                author=other_student,
                status=Blog.Status.PUBLISHED,
            )
            backdate(blog, minutes)
        for minutes in (5, 15, 25, 35, 45):
            comment = Comment.objects.create(blog=mine, author=other_student, content="nice")
            backdate(comment, minutes)

        feed = activity.recent_activity(student)

        assert len(feed) == 6
        assert [item["type"] for item in feed] == [
            "comment",
            "blog_published",
            "comment",
            "comment",
            "blog_published",
            "comment",
        ]

    def test_excludes_drafts_and_own_blogs(self, db, student, other_student):
        draft = Blog.objects.create(title="Secret", content="x", author=other_student)
        Comment.objects.create(blog=draft, author=student, content="hidden")
        Blog.objects.create(
            title="Mine", content="x", author=student, status=Blog.Status.PUBLISHED
        )

        assert activity.recent_activity(student) == []

    def test_description_limits_title(self, db, student, other_student):
        Blog.objects.create(
            title="A Very Long Title That Keeps Going On",
            content="x",
            author=other_student,
            status=Blog.Status.PUBLISHED,
        )

        item = activity.recent_activity(student)[0]

        assert item["description"] == 'published "A Very Long Title That Keeps G..."'
        assert item["user"] == {"name": "Mike Chen", "initials": "MC"}
        assert item["created_ago"].endswith(" ago")


class TestDashboard:

    def test_recent_blogs_card(self, db, other_student, category, tag):
        blog = Blog.objects.create(
            title="Card",
            content="<p>Hello <b>there</b></p>",
            author=other_student,
            status=Blog.Status.PUBLISHED,
        )
        blog.categories.add(category)
        blog.tags.add(tag)

        cards = activity.recent_blogs()

        assert len(cards) == 1
        assert cards[0]["excerpt"] == "Hello there"
        assert cards[0]["categories"] == ["Machine Learning"]
        assert cards[0]["tags"] == ["Python"]

    def test_user_blog_stats(self, db, student, published_blog, draft_blog):
        Blog.objects.filter(pk=published_blog.pk).update(view_count=7)

        stats = activity.user_blog_stats(student)

        assert stats == {
            "total_blogs": 2,
            "published_blogs": 1,
            "draft_blogs": 1,
            "total_views": 7,
        }

    def test_user_blog_stats_without_blogs(self, db, other_student):
        assert activity.user_blog_stats(other_student)["total_views"] == 0

    def test_class_stats(self, db, student, other_student, teacher, published_blog, draft_blog, comment):
        make_user("admin", role=User.Role.ADMIN)

        stats = activity.class_stats()

        assert stats == {
            "total_students": 2,
            "total_teachers": 2,
            "total_blogs": 1,
            "total_comments": 1,
        }

    def test_dashboard_sections(self, db, student):
        data = activity.dashboard(student)
        assert set(data) == {"recent_blogs", "recent_activity", "user_blog_stats", "class_stats"}
