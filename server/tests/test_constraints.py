"""
Tests for uniqueness, range checks and delete policies.
"""
from datetime import date
from decimal import Decimal
import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import RestrictedError
from admintasks.models import AdminTask, AdminTaskInstance, TaskStatusMessage
from billing.models import (
    BackgroundRemovalUsage,
    BillableAsset,
    CreditApplication,
    Invoice,
    UserCredit,
)
from catalog.models import BaitsLures, FishingEquipment, Outfit, Sponsor
from fishing.models import AlbumCatch, Catch, CatchAlbum, FishingSession, SmartCatchProfile, UserAvatar
from species.models import FishSpecies

pytestmark = pytest.mark.django_db


class TestUniqueness:

    def test_one_profile_per_user(self, user):
        SmartCatchProfile.objects.create(user=user)
        with pytest.raises(IntegrityError):
            SmartCatchProfile.objects.create(user=user)

    def test_get_or_create_profile_reuses_row(self, user):
        first = SmartCatchProfile.get_or_create_for_user(user)
        second = SmartCatchProfile.get_or_create_for_user(user)
        assert first.pk == second.pk
        assert not first.is_premium

    def test_plot_id_unique(self):
        BillableAsset.objects.create(plot_id='A-17')
        with pytest.raises(IntegrityError):
            BillableAsset.objects.create(plot_id='A-17')

    def test_task_instance_unique_per_month(self):
        task = AdminTask.objects.create(task_name='Send dues reminders')
        AdminTaskInstance.objects.create(task=task, year=2025, month=6)
        with pytest.raises(IntegrityError):
            AdminTaskInstance.objects.create(task=task, year=2025, month=6)

    def test_album_membership_unique(self, user, make_catch):
        catch = make_catch()
        album = CatchAlbum.objects.create(user=user, name='Trophies')
        AlbumCatch.objects.create(album=album, catch=catch)
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                AlbumCatch.objects.create(album=album, catch=catch)


class TestRangeChecks:

    def test_catch_negative_size_rejected(self, make_catch):
        with pytest.raises(IntegrityError):
            make_catch(size=Decimal('-1.00'))

    def test_catch_weight_negative_rejected(self, make_catch):
        with pytest.raises(IntegrityError):
            make_catch(weight=Decimal('-0.50'))

    def test_catch_humidity_over_100_rejected(self, make_catch):
        with pytest.raises(IntegrityError):
            make_catch(humidity=101)

    def test_session_latitude_range(self, user, session_date):
        with pytest.raises(IntegrityError):
            FishingSession.objects.create(
                user=user,
                session_date=session_date,
                water_type='Fresh',
                latitude=Decimal('91.00000000'),
            )

    def test_species_season_month_range(self):
        with pytest.raises(IntegrityError):
            FishSpecies.objects.create(common_name='Nowhere Fish', water_type='Fresh', season_start=13)

    def test_task_month_range(self):
        task = AdminTask.objects.create(task_name='Reconcile deposits')
        with pytest.raises(IntegrityError):
            AdminTaskInstance.objects.create(task=task, year=2025, month=0)

    def test_full_clean_reports_out_of_range_size(self, fishing_session, species):
        catch = Catch(session=fishing_session, species=species, size=Decimal('1000.00'))
        with pytest.raises(ValidationError) as excinfo:
            catch.full_clean()
        assert 'size' in excinfo.value.message_dict

    def test_location_keeps_decimal_precision(self, user, session_date):
        session = FishingSession.objects.create(
            user=user,
            session_date=session_date,
            water_type='Salt',
            latitude=Decimal('27.76543210'),
            longitude=Decimal('-82.63456789'),
        )
        session.refresh_from_db()
        assert session.get_location_coords() == (Decimal('27.76543210'), Decimal('-82.63456789'))


class TestCascade:

    def test_deleting_session_deletes_catches(self, fishing_session, make_catch):
        make_catch()
        make_catch(size=Decimal('19.25'))

        fishing_session.delete()

        assert Catch.objects.count() == 0
        assert CatchAlbum.objects.count() == 0
        assert AlbumCatch.objects.count() == 0

    def test_deleting_task_deletes_instances(self):
        task = AdminTask.objects.create(task_name='Archive photos')
        AdminTaskInstance.objects.create(task=task, year=2025, month=1)

        task.delete()

        assert AdminTaskInstance.objects.count() == 0

    def test_deleting_user_deletes_usage_and_messages(self, user):
        BackgroundRemovalUsage.objects.create(
            user=user,
            usage_month=6,
            usage_year=2025,
            service_used='Remove.bg',
            cost=Decimal('0.200'),
            charge_amount=Decimal('0.50'),
        )
        TaskStatusMessage.objects.create(user=user, dismissal_count=2)

        user.delete()

        assert BackgroundRemovalUsage.objects.count() == 0
        assert TaskStatusMessage.objects.count() == 0


class TestSetNull:

    def test_deleting_sponsor_keeps_items(self):
        sponsor = Sponsor.objects.create(name='Reel Co')
        outfit = Outfit.objects.create(name='Guide Shirt', sponsor=sponsor)
        rod = FishingEquipment.objects.create(name='Inshore Rod', type='Rod', sponsor=sponsor)
        bait = BaitsLures.objects.create(name='Paddle Tail', sponsor=sponsor)

        sponsor.delete()

        for item in (outfit, rod, bait):
            item.refresh_from_db()
            assert item.sponsor is None

    def test_deleting_equipment_keeps_session(self, fishing_session):
        rod = FishingEquipment.objects.create(name='Spinning Combo', type='Rod')
        fishing_session.rod_reel_setup = rod
        fishing_session.save()

        rod.delete()

        fishing_session.refresh_from_db()
        assert fishing_session.rod_reel_setup is None

    def test_deleting_invoice_unlinks_usage(self, user):
        invoice = Invoice.objects.create(
            user=user,
            invoice_date=date(2025, 7, 1),
            due_date=date(2025, 7, 31),
            description='Background removal for June',
            amount_due=Decimal('1.50'),
        )
        usage = BackgroundRemovalUsage.objects.create(
            user=user,
            usage_month=6,
            usage_year=2025,
            service_used='Clipdrop',
            cost=Decimal('0.125'),
            charge_amount=Decimal('0.50'),
            has_been_invoiced=True,
            invoice=invoice,
        )

        invoice.delete()

        usage.refresh_from_db()
        assert usage.invoice is None
        assert usage.cost == Decimal('0.125')

    def test_deleting_user_keeps_billable_asset(self, user):
        asset = BillableAsset.objects.create(plot_id='B-04', user=user, assessment_fee=Decimal('125.00'))

        user.delete()

        asset.refresh_from_db()
        assert asset.user is None


class TestRestrict:

    def test_species_in_use_cannot_be_deleted(self, species, make_catch):
        catch = make_catch()

        with pytest.raises(RestrictedError):
            species.delete()

        assert Catch.objects.filter(pk=catch.pk).exists()

    def test_avatar_in_use_cannot_be_deleted(self, user, make_catch):
        avatar = UserAvatar.objects.create(user=user, name='Sunhat')
        make_catch(avatar=avatar)

        with pytest.raises(RestrictedError):
            avatar.delete()

    def test_catch_in_album_cannot_be_deleted_directly(self, make_catch):
        catch = make_catch()

        with pytest.raises(RestrictedError):
            catch.delete()

    def test_applied_credit_cannot_be_deleted(self, user):
        invoice = Invoice.objects.create(
            user=user,
            invoice_date=date(2025, 1, 1),
            due_date=date(2025, 1, 31),
            description='Annual dues',
            amount_due=Decimal('60.00'),
        )
        credit = UserCredit.objects.create(
            user=user,
            credit_date=date(2025, 1, 5),
            amount=Decimal('20.00'),
            reason='Overpayment',
        )
        CreditApplication.objects.create(user_credit=credit, invoice=invoice, amount_applied=Decimal('20.00'))

        with pytest.raises(RestrictedError):
            credit.delete()
        with pytest.raises(RestrictedError):
            invoice.delete()
