"""
django-classroom-blog - A classroom blogging app for Django.

Features:
- Role-based moderation (student, teacher, admin, core member)
- Draft and published blog posts with version tracking
- Markdown excerpts cached on first read
- Single-level comment threads
- Likes and view counters
- Dashboard with a merged recent-activity feed
"""

__version__ = "0.1.0"
