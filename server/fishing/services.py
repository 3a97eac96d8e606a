# fishing/services.py
import logging
from typing import Optional, Tuple
from django.db import transaction
from fishing.models import AlbumCatch, Catch, CatchAlbum, FishingSession, UserAvatar

logger = logging.getLogger(__name__)


class SessionAlbumService:
    """Keeps one private album per fishing session in step with its catches"""

    @classmethod
    def create_session_album(cls, session: FishingSession) -> CatchAlbum:
        """
        Create the album that collects a session's catches

        Args:
            session: FishingSession the album belongs to

        Returns:
            The new CatchAlbum
        """
        name = session.location_name or f"Session {session.session_date:%b %d, %Y}"
        album = CatchAlbum.objects.create(
            user_id=session.user_id,
            name=name[:100],
            description=f"Automatically created for fishing session on {session.session_date:%B %d, %Y at %I:%M %p}",
            is_public=False,
            fishing_session=session,
            is_session_album=True,
        )
        logger.info(f"Created session album {album.id} '{album.name}' for session {session.id}")
        return album

    @classmethod
    def get_session_album(cls, session_id) -> Optional[CatchAlbum]:
        return CatchAlbum.objects.filter(
            fishing_session_id=session_id,
            is_session_album=True
        ).first()

    @classmethod
    def add_catch_to_session_album(cls, catch: Catch) -> bool:
        """
        Add a catch to its session's album.

        Returns False when the session has no album. Adding a catch that is
        already in the album is a no-op.
        """
        album = cls.get_session_album(catch.session_id)
        if album is None:
            logger.warning(f"No session album found for session {catch.session_id}; catch {catch.id} not added")
            return False

        _entry, created = AlbumCatch.objects.get_or_create(album=album, catch=catch)
        if created:
            logger.info(f"Added catch {catch.id} to session album {album.id}")
        return True

    @classmethod
    def delete_session_album(cls, session_id) -> bool:
        """Delete a session's album and its memberships. Returns True when nothing is left."""
        album = cls.get_session_album(session_id)
        if album is None:
            return True

        with transaction.atomic():
            removed, _ = AlbumCatch.objects.filter(album=album).delete()
            album.delete()

        logger.info(f"Deleted session album {album.name} for session {session_id} ({removed} catches unlinked)")
        return True


class FishingLogService:
    """Explicit queries across sessions, catches, albums and avatars"""

    @classmethod
    def get_sessions_for_user(cls, user):
        return FishingSession.objects.filter(user=user).order_by('-session_date')

    @classmethod
    def get_catches_for_session(cls, session_id):
        return Catch.objects.filter(session_id=session_id).select_related('species')

    @classmethod
    def get_catches_for_album(cls, album_id):
        return (
            Catch.objects.filter(album_entries__album_id=album_id)
            .select_related('species')
            .order_by('album_entries__added_at')
        )

    @classmethod
    def get_albums_for_catch(cls, catch_id):
        return CatchAlbum.objects.filter(album_catches__catch_id=catch_id)

    @classmethod
    def get_avatars_for_user(cls, user):
        return UserAvatar.objects.filter(user=user)

    @classmethod
    def get_catches_for_species(cls, species_id):
        return Catch.objects.filter(species_id=species_id)

    @classmethod
    def add_catch_to_album(cls, album: CatchAlbum, catch: Catch) -> Tuple[AlbumCatch, bool]:
        """
        Put a catch into one of its owner's albums

        Returns:
            (entry, created) tuple

        Raises:
            ValueError: the album and the catch belong to different users
        """
        if album.user_id != catch.session.user_id:
            raise ValueError("Catches can only be added to the angler's own albums")

        return AlbumCatch.objects.get_or_create(album=album, catch=catch)

    @classmethod
    def remove_catch_from_album(cls, album: CatchAlbum, catch: Catch) -> bool:
        deleted, _ = AlbumCatch.objects.filter(album=album, catch=catch).delete()
        return deleted > 0

    @classmethod
    def delete_catch(cls, catch: Catch) -> None:
        """Delete a catch after unlinking it from every album that holds it."""
        with transaction.atomic():
            removed, _ = AlbumCatch.objects.filter(catch=catch).delete()
            catch_id = catch.id
            catch.delete()

        logger.info(f"Deleted catch {catch_id} ({removed} album links removed)")
