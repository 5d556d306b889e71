"""
User model for django-classroom-blog.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Classroom member.

    Every member has exactly one role. Teachers, admins and core members
    are moderators: they can read drafts and edit or delete anyone's
    blogs and comments.
    """

    class Role(models.TextChoices):
        STUDENT = "student", "Student"
        TEACHER = "teacher", "Teacher"
        ADMIN = "admin", "Admin"
        CORE_MEMBER = "core_member", "Core Member"

    MODERATOR_ROLES = (Role.ADMIN, Role.TEACHER, Role.CORE_MEMBER)

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
        db_index=True,
    )

    def __str__(self):
        return self.display_name

    @property
    def display_name(self):
        return self.get_full_name() or self.username

    def has_role(self, role):
        return self.role == role

    @property
    def is_student(self):
        return self.has_role(self.Role.STUDENT)

    @property
    def is_teacher(self):
        return self.has_role(self.Role.TEACHER)

    @property
    def is_admin_role(self):
        """Role is admin. Unrelated to Django's ``is_staff``/``is_superuser``."""
        return self.has_role(self.Role.ADMIN)

    @property
    def is_core_member(self):
        return self.has_role(self.Role.CORE_MEMBER)

    @property
    def is_moderator(self):
        """Check if user is an admin, teacher or core member."""
        return self.role in self.MODERATOR_ROLES
