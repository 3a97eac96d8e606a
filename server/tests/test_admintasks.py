"""
Tests for admin task tracking and species helpers.
"""
import pytest
from admintasks.models import AdminTask, AdminTaskInstance, TaskStatus
from species.models import FishSpecies


@pytest.mark.django_db
class TestAdminTaskInstance:

    def test_mark_completed_by_user(self, user):
        task = AdminTask.objects.create(task_name='Post monthly newsletter')
        instance = AdminTaskInstance.objects.create(task=task, year=2025, month=6, assigned_to=user)

        instance.mark_completed(user=user)
        instance.refresh_from_db()

        assert instance.status == TaskStatus.COMPLETED
        assert instance.completed_by == user
        assert instance.completed_date is not None
        assert not instance.is_automated_completion

    def test_deleting_assignee_keeps_instance(self, user):
        task = AdminTask.objects.create(task_name='Review sponsor list')
        instance = AdminTaskInstance.objects.create(task=task, year=2025, month=2, assigned_to=user)
        instance.mark_completed(user=user, automated=True)

        user.delete()
        instance.refresh_from_db()

        assert instance.assigned_to is None
        assert instance.completed_by is None
        assert instance.is_automated_completion


class TestSeasons:

    @pytest.mark.parametrize('start, end, month, expected', [
        (3, 10, 6, True),
        (3, 10, 11, False),
        (11, 2, 12, True),
        (11, 2, 1, True),
        (11, 2, 6, False),
        (None, None, 6, True),
    ])
    def test_is_in_season(self, start, end, month, expected):
        fish = FishSpecies(common_name='Trout', water_type='Fresh', season_start=start, season_end=end)
        assert fish.is_in_season(month) is expected
