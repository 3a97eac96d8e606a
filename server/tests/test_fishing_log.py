"""
Tests for session albums and the fishing log queries.
"""
import json
from datetime import datetime, timedelta
from decimal import Decimal
from unittest import mock
import pytest
from django.core.management import call_command
from django.db.models import RestrictedError
from django.utils import timezone
from fishing.models import AlbumCatch, Catch, CatchAlbum, FishingSession, UserAvatar
from fishing.services import FishingLogService, SessionAlbumService

pytestmark = pytest.mark.django_db


class TestSessionAlbums:

    def test_new_session_gets_private_album_named_after_location(self, fishing_session):
        album = SessionAlbumService.get_session_album(fishing_session.id)

        assert album is not None
        assert album.name == 'Tampa Bay Pier'
        assert album.is_session_album
        assert not album.is_public
        assert album.user_id == fishing_session.user_id

    def test_album_named_after_date_without_location(self, user):
        session = FishingSession.objects.create(
            user=user,
            session_date=timezone.make_aware(datetime(2025, 3, 7, 17, 45)),
            water_type='Fresh',
        )

        album = SessionAlbumService.get_session_album(session.id)
        assert album.name == 'Session Mar 07, 2025'

    def test_new_catch_joins_session_album(self, fishing_session, make_catch):
        catch = make_catch()

        album = SessionAlbumService.get_session_album(fishing_session.id)
        assert list(FishingLogService.get_catches_for_album(album.id)) == [catch]

    def test_adding_catch_twice_is_noop(self, make_catch):
        catch = make_catch()

        assert SessionAlbumService.add_catch_to_session_album(catch)
        assert AlbumCatch.objects.filter(catch=catch).count() == 1

    def test_missing_album_returns_false(self, fishing_session, make_catch):
        catch = make_catch()
        SessionAlbumService.delete_session_album(fishing_session.id)

        with mock.patch('fishing.services.logger') as logger:
            assert SessionAlbumService.add_catch_to_session_album(catch) is False
        assert logger.warning.called

    def test_delete_session_album(self, fishing_session, make_catch):
        catch = make_catch()

        assert SessionAlbumService.delete_session_album(fishing_session.id)

        assert SessionAlbumService.get_session_album(fishing_session.id) is None
        assert Catch.objects.filter(pk=catch.pk).exists()
        assert AlbumCatch.objects.count() == 0

    def test_delete_missing_album_is_true(self, fishing_session):
        SessionAlbumService.delete_session_album(fishing_session.id)
        assert SessionAlbumService.delete_session_album(fishing_session.id)


class TestFishingLogService:

    def test_sessions_for_user_newest_first(self, user, fishing_session):
        later = FishingSession.objects.create(
            user=user,
            session_date=fishing_session.session_date + timedelta(days=3),
            water_type='Salt',
        )

        assert list(FishingLogService.get_sessions_for_user(user)) == [later, fishing_session]

    def test_catches_for_session_and_species(self, fishing_session, species, make_catch):
        catch = make_catch()

        assert list(FishingLogService.get_catches_for_session(fishing_session.id)) == [catch]
        assert list(FishingLogService.get_catches_for_species(species.id)) == [catch]

    def test_albums_for_catch(self, user, make_catch):
        catch = make_catch()
        trophies = CatchAlbum.objects.create(user=user, name='Trophies')
        FishingLogService.add_catch_to_album(trophies, catch)

        albums = set(FishingLogService.get_albums_for_catch(catch.id))
        assert trophies in albums
        assert len(albums) == 2

    def test_add_catch_to_album_is_idempotent(self, user, make_catch):
        catch = make_catch()
        album = CatchAlbum.objects.create(user=user, name='Redfish')

        _entry, created = FishingLogService.add_catch_to_album(album, catch)
        _entry, created_again = FishingLogService.add_catch_to_album(album, catch)

        assert created
        assert not created_again

    def test_cannot_add_catch_to_someone_elses_album(self, other_user, make_catch):
        catch = make_catch()
        album = CatchAlbum.objects.create(user=other_user, name='Not mine')

        with pytest.raises(ValueError):
            FishingLogService.add_catch_to_album(album, catch)

    def test_remove_catch_from_album(self, user, make_catch):
        catch = make_catch()
        album = CatchAlbum.objects.create(user=user, name='Keepers')
        FishingLogService.add_catch_to_album(album, catch)

        assert FishingLogService.remove_catch_from_album(album, catch)
        assert not FishingLogService.remove_catch_from_album(album, catch)

    def test_delete_catch_unlinks_albums_first(self, user, make_catch):
        catch = make_catch()
        album = CatchAlbum.objects.create(user=user, name='Keepers')
        FishingLogService.add_catch_to_album(album, catch)

        with pytest.raises(RestrictedError):
            Catch.objects.get(pk=catch.pk).delete()

        FishingLogService.delete_catch(catch)

        assert not Catch.objects.exists()
        assert CatchAlbum.objects.filter(pk=album.pk).exists()

    def test_avatars_for_user_default_first(self, user):
        plain = UserAvatar.objects.create(user=user, name='Plain')
        hat = UserAvatar.objects.create(user=user, name='Hat')
        hat.make_default()
        plain.make_default()

        avatars = list(FishingLogService.get_avatars_for_user(user))
        assert avatars[0] == plain
        hat.refresh_from_db()
        assert not hat.is_default


class TestSessionModel:

    def test_complete(self, fishing_session):
        fishing_session.complete()
        fishing_session.refresh_from_db()

        assert fishing_session.is_completed
        assert fishing_session.completed_at is not None

    def test_no_location(self, user, session_date):
        session = FishingSession.objects.create(user=user, session_date=session_date, water_type='Fresh')
        assert session.get_location_coords() is None

    def test_display_image_prefers_watermarked(self, make_catch):
        catch = make_catch(photo_url='/Images/a.jpg', watermarked_image_url='/Images/a_wm.jpg')
        assert catch.display_image_url == '/Images/a_wm.jpg'
        assert make_catch(size=Decimal('20.00')).display_image_url is None


class TestFixtureLoading:

    def test_loaddata_does_not_create_session_albums(self, user, species, tmp_path):
        fixture = tmp_path / 'sessions.json'
        fixture.write_text(json.dumps([
            {
                'model': 'fishing.fishingsession',
                'pk': 900,
                'fields': {
                    'user': str(user.pk),
                    'session_date': '2025-06-14T06:30:00Z',
                    'water_type': 'Salt',
                    'location_name': 'Fixture Pier',
                    'created_at': '2025-06-14T06:30:00Z',
                },
            },
            {
                'model': 'fishing.catch',
                'pk': 901,
                'fields': {
                    'session': 900,
                    'species': species.pk,
                    'size': '21.00',
                    'created_at': '2025-06-14T07:00:00Z',
                },
            },
        ]), encoding='utf-8')

        call_command('loaddata', str(fixture), verbosity=0)

        assert FishingSession.objects.filter(pk=900).exists()
        assert Catch.objects.filter(pk=901).exists()
        assert not CatchAlbum.objects.exists()
        assert not AlbumCatch.objects.exists()
