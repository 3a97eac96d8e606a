"""
Signal handlers for fishing app.
"""
import logging
from django.db.models.signals import post_save
from django.dispatch import receiver
from .models import Catch, FishingSession
from .services import SessionAlbumService

logger = logging.getLogger(__name__)


@receiver(post_save, sender=FishingSession)
def create_album_for_new_session(sender, instance, created, **kwargs):
    """Give every new session its own album."""
    if kwargs.get('raw'):
        return
    if created:
        SessionAlbumService.create_session_album(instance)


@receiver(post_save, sender=Catch)
def add_new_catch_to_session_album(sender, instance, created, **kwargs):
    """File new catches into the session album."""
    if kwargs.get('raw'):
        return
    if created:
        SessionAlbumService.add_catch_to_session_album(instance)
