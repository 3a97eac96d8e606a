"""
Shared fixtures for the Fish-Smart members test suite.
"""
from datetime import datetime
from decimal import Decimal
import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from fishing.models import Catch, FishingSession
from species.models import FishSpecies


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username='angler',
        email='angler@example.com',
        password='testpass123'
    )


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(
        username='buddy',
        email='buddy@example.com',
        password='testpass123'
    )


@pytest.fixture
def species(db):
    return FishSpecies.objects.create(
        common_name='Redfish',
        scientific_name='Sciaenops ocellatus',
        water_type='Salt',
        region='Gulf Coast',
        min_size=Decimal('18.00'),
        max_size=Decimal('27.00'),
    )


@pytest.fixture
def session_date():
    return timezone.make_aware(datetime(2025, 6, 14, 6, 30))


@pytest.fixture
def fishing_session(user, session_date):
    return FishingSession.objects.create(
        user=user,
        session_date=session_date,
        water_type='Salt',
        location_name='Tampa Bay Pier',
    )


@pytest.fixture
def make_catch(fishing_session, species):
    def _make_catch(**overrides):
        data = {
            'session': fishing_session,
            'species': species,
            'size': Decimal('22.50'),
        }
        data.update(overrides)
        return Catch.objects.create(**data)
    return _make_catch
