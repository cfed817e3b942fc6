import pytest
from django.core.management import call_command

from hospital_core.pharmacy.models import Medicine
from hospital_core.rooms.models import Room


@pytest.mark.django_db
def test_seed_hospital_is_idempotent():
    call_command("seed_hospital")
    rooms = Room.objects.count()
    medicines = Medicine.objects.count()
    assert rooms > 0
    assert medicines > 0

    call_command("seed_hospital")
    assert Room.objects.count() == rooms
    assert Medicine.objects.count() == medicines


@pytest.mark.django_db
def test_seed_hospital_rooms_only():
    call_command("seed_hospital", "--rooms-only")
    assert Room.objects.exists()
    assert not Medicine.objects.exists()
