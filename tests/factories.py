"""
Helpers for building test data.
"""
from datetime import timedelta
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from PIL import Image

from classroom_blog.models import User


def make_user(username, role=User.Role.STUDENT, **kwargs):
    return User.objects.create_user(
        username=username,
        password="testpass123",
        role=role,
        **kwargs,
    )


def backdate(obj, minutes):
    """Move ``created_at`` of a saved object ``minutes`` into the past."""
    moment = timezone.now() - timedelta(minutes=minutes)
    type(obj).objects.filter(pk=obj.pk).update(created_at=moment)
    obj.refresh_from_db()
    return obj


def image_upload(name="cover.png", image_format="PNG", content_type="image/png", size=(8, 8)):
    """Build an uploaded image file with real image bytes."""
    buffer = BytesIO()
    Image.new("RGB", size, "red").save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)
