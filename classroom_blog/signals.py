"""
Signal receivers for classroom_blog.
"""
import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Blog

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=Blog, dispatch_uid="classroom_blog_delete_image")
def delete_blog_image(sender, instance, **kwargs):
    """Remove the stored image file once its blog row is gone."""
    if instance.image:
        logger.debug("Deleting image %s of blog %s", instance.image.name, instance.pk)
        instance.image.delete(save=False)
