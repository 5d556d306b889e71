from django.core.management.base import BaseCommand
from django.db import transaction

from classroom_blog.models import Blog, Category, Comment, Tag, User

USERS = [
    ("sarah", "Sarah", "Johnson", User.Role.STUDENT),
    ("mike", "Mike", "Chen", User.Role.STUDENT),
    ("emily", "Emily", "Davis", User.Role.TEACHER),
    ("john", "John", "Smith", User.Role.STUDENT),
]

CATEGORIES = [
    ("Programming", "programming"),
    ("Machine Learning", "machine-learning"),
    ("Web Development", "web-development"),
    ("Data Science", "data-science"),
    ("UI/UX", "ui-ux"),
]

TAGS = ["React", "JavaScript", "Python", "AI", "Tutorial", "Tips"]

BLOGS = [
    {
        "slug": "introduction-to-machine-learning",
        "title": "Introduction to Machine Learning",
        "author": "sarah",
        "content": (
            "# Introduction to Machine Learning\n\n"
            "Machine Learning is a subset of artificial intelligence that enables "
            "computers to learn without being explicitly programmed.\n\n"
            "## Key Concepts\n\n"
            "- **Supervised Learning**: learning with labeled data\n"
            "- **Unsupervised Learning**: finding patterns in unlabeled data\n"
        ),
        "categories": ["machine-learning", "data-science"],
        "tags": ["python", "ai", "tutorial"],
    },
    {
        "slug": "building-your-first-react-component",
        "title": "Building Your First React Component",
        "author": "mike",
        "content": (
            "# Building Your First React Component\n\n"
            "Components are the building blocks of a React app. Read the "
            "[official docs](https://react.dev) before you start.\n"
        ),
        "categories": ["web-development", "programming"],
        "tags": ["react", "javascript", "tutorial"],
    },
    {
        "slug": "tips-for-clean-python",
        "title": "Tips for Writing Clean Python",
        "author": "emily",
        "content": (
            "# Tips for Writing Clean Python\n\n"
            "Prefer *small functions*, clear names and `pytest` for tests.\n"
        ),
        "categories": ["programming"],
        "tags": ["python", "tips"],
    },
]

COMMENTS = [
    ("introduction-to-machine-learning", "mike", "Great overview, thanks for sharing!"),
    ("introduction-to-machine-learning", "emily", "Nice work. Try adding an example next time."),
    ("building-your-first-react-component", "john", "This helped me with my assignment."),
    ("tips-for-clean-python", "sarah", "The naming tips are really useful."),
]


class Command(BaseCommand):
    help = "Creates demo users, categories, tags, blogs and comments."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            default="password",
            help="Password for the demo users.",
            dest="password",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        users = {}
        for username, first_name, last_name, role in USERS:
            user, created = User.objects.get_or_create(
                username=username,
                defaults={
                    "first_name": first_name,
                    "last_name": last_name,
                    "email": f"{username}@example.com",
                    "role": role,
                },
            )
            if created:
                user.set_password(options["password"])
                user.save(update_fields=["password"])
            users[username] = user

        categories = {}
        for name, slug in CATEGORIES:
            categories[slug], _ = Category.objects.get_or_create(slug=slug, defaults={"name": name})

        tags = {}
        for name in TAGS:
            tag, _ = Tag.objects.get_or_create(name=name)
            tags[tag.slug] = tag

        created_blogs = 0
        blogs = {}
        for data in BLOGS:
            blog, created = Blog.objects.get_or_create(
                slug=data["slug"],
                defaults={
                    "title": data["title"],
                    "content": data["content"],
                    "author": users[data["author"]],
                    "status": Blog.Status.PUBLISHED,
                },
            )
            if created:
                blog.categories.set(categories[slug] for slug in data["categories"])
                blog.tags.set(tags[slug] for slug in data["tags"])
                created_blogs += 1
            blogs[data["slug"]] = blog

        created_comments = 0
        for slug, username, content in COMMENTS:
            _, created = Comment.objects.get_or_create(
                blog=blogs[slug],
                author=users[username],
                content=content,
            )
            created_comments += created

        self.stdout.write(
            f"Seeded {len(users)} users, {created_blogs} new blogs and {created_comments} new comments."
        )
