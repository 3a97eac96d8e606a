"""
Tests for the fishing buddy lifecycle.
"""
import pytest
from django.db import IntegrityError
from social.models import FishingBuddy

pytestmark = pytest.mark.django_db


class TestFishingBuddy:

    def test_request_then_accept(self, user, other_user):
        link = FishingBuddy.create_request(user, other_user)
        assert link.status == 'Pending'
        assert list(FishingBuddy.get_pending_requests(other_user)) == [link]
        assert not FishingBuddy.are_buddies(user, other_user)

        link.accept()

        assert FishingBuddy.are_buddies(user, other_user)
        assert FishingBuddy.are_buddies(other_user, user)
        assert FishingBuddy.get_buddy_ids(user) == [other_user.id]
        assert FishingBuddy.get_buddy_ids(other_user) == [user.id]

    def test_cannot_buddy_yourself(self, user):
        with pytest.raises(ValueError):
            FishingBuddy.create_request(user, user)

    def test_self_link_rejected_by_database(self, user):
        with pytest.raises(IntegrityError):
            FishingBuddy.objects.create(owner=user, buddy=user)

    @pytest.mark.parametrize('status', ['Pending', 'Accepted', 'Blocked'])
    def test_existing_link_blocks_new_request_either_way(self, user, other_user, status):
        FishingBuddy.objects.create(owner=user, buddy=other_user, status=status)

        with pytest.raises(ValueError):
            FishingBuddy.create_request(user, other_user)
        with pytest.raises(ValueError):
            FishingBuddy.create_request(other_user, user)

    def test_duplicate_pair_rejected_by_database(self, user, other_user):
        FishingBuddy.objects.create(owner=user, buddy=other_user)
        with pytest.raises(IntegrityError):
            FishingBuddy.objects.create(owner=user, buddy=other_user)

    def test_decline_deletes_request(self, user, other_user):
        link = FishingBuddy.create_request(user, other_user)

        link.decline()

        assert not FishingBuddy.objects.exists()
        FishingBuddy.create_request(user, other_user)

    def test_only_pending_can_be_accepted_or_declined(self, user, other_user):
        link = FishingBuddy.create_request(user, other_user)
        link.accept()

        with pytest.raises(ValueError):
            link.accept()
        with pytest.raises(ValueError):
            link.decline()

    def test_block_and_unblock(self, user, other_user):
        link = FishingBuddy.create_request(user, other_user)
        link.accept()

        link.block()
        assert not FishingBuddy.are_buddies(user, other_user)
        assert FishingBuddy.get_buddy_ids(user) == []

        link.unblock()
        assert not FishingBuddy.objects.exists()

    def test_unblock_requires_block(self, user, other_user):
        link = FishingBuddy.create_request(user, other_user)
        with pytest.raises(ValueError):
            link.unblock()

    def test_remove_buddy(self, user, other_user):
        link = FishingBuddy.create_request(user, other_user)
        with pytest.raises(ValueError):
            link.remove()

        link.accept()
        link.remove()

        assert not FishingBuddy.are_buddies(user, other_user)

    def test_deleting_user_removes_links(self, user, other_user):
        FishingBuddy.create_request(user, other_user)

        other_user.delete()

        assert not FishingBuddy.objects.exists()
