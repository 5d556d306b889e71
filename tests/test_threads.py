"""
Tests for comment thread assembly.
"""
from classroom_blog.models import Comment
from classroom_blog.threads import blog_threads

from .factories import backdate


def add_comment(blog, author, content, minutes_ago, parent=None, is_approved=True):
    comment = Comment.objects.create(
        blog=blog,
        author=author,
        content=content,
        parent=parent,
        is_approved=is_approved,
    )
    return backdate(comment, minutes_ago)


class TestBlogThreads:

    def test_top_level_newest_first(self, db, published_blog, student, other_student):
        add_comment(published_blog, student, "first", 30)
        add_comment(published_blog, other_student, "second", 20)
        add_comment(published_blog, student, "third", 10)

        threads = blog_threads(published_blog)

        assert [t["content"] for t in threads] == ["third", "second", "first"]

    def test_replies_oldest_first_under_parent(self, db, published_blog, student, other_student):
        parent = add_comment(published_blog, student, "question", 30)
        add_comment(published_blog, other_student, "late answer", 5, parent=parent)
        add_comment(published_blog, other_student, "early answer", 25, parent=parent)

        threads = blog_threads(published_blog)

        assert len(threads) == 1
        assert [r["content"] for r in threads[0]["replies"]] == ["early answer", "late answer"]

    def test_reply_nodes_have_no_replies(self, db, published_blog, student, other_student):
        parent = add_comment(published_blog, student, "question", 30)
        add_comment(published_blog, other_student, "answer", 20, parent=parent)

        reply = blog_threads(published_blog)[0]["replies"][0]

        assert reply["replies"] == []
        assert set(reply) == {"id", "content", "author", "created_at", "replies"}

    def test_unapproved_top_level_hidden(self, db, published_blog, student):
        add_comment(published_blog, student, "visible", 20)
        add_comment(published_blog, student, "hidden", 10, is_approved=False)

        threads = blog_threads(published_blog)

        assert [t["content"] for t in threads] == ["visible"]

    def test_unapproved_reply_still_shown(self, db, published_blog, student, other_student):
        parent = add_comment(published_blog, student, "question", 30)
        add_comment(published_blog, other_student, "pending", 20, parent=parent, is_approved=False)

        threads = blog_threads(published_blog)

        assert [r["content"] for r in threads[0]["replies"]] == ["pending"]

    def test_deeper_chains_are_dropped(self, db, published_blog, student, other_student):
        parent = add_comment(published_blog, student, "question", 30)
        reply = add_comment(published_blog, other_student, "answer", 20, parent=parent)
        add_comment(published_blog, student, "nested", 10, parent=reply)

        threads = blog_threads(published_blog)

        assert len(threads) == 1
        assert [r["content"] for r in threads[0]["replies"]] == ["answer"]

    def test_author_shape(self, db, published_blog, student):
        add_comment(published_blog, student, "hi", 1)

        author = blog_threads(published_blog)[0]["author"]

        assert author == {"id": student.pk, "name": "Sarah Johnson", "initials": "SJ"}

    def test_other_blogs_excluded(self, db, published_blog, draft_blog, student):
        add_comment(draft_blog, student, "elsewhere", 1)

        assert blog_threads(published_blog) == []
