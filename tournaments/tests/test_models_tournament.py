import datetime as dt
import pytest
from django.db import IntegrityError, transaction
from tournaments.models import Registration, Tournament


@pytest.mark.django_db
def test_accepts_registrations_by_status(make_tournament):
    assert make_tournament(status=Tournament.Status.REGISTRATION_OPEN).accepts_registrations is True
    assert make_tournament(status=Tournament.Status.DRAFT).accepts_registrations is True
    assert make_tournament(status=Tournament.Status.CLOSED).accepts_registrations is False
    assert make_tournament(status=Tournament.Status.COMPLETED).accepts_registrations is False


@pytest.mark.django_db
def test_slots_left_and_deadline_default(make_tournament):
    t = make_tournament(capacity=3)
    assert t.slots_left == 3
    # дедлайн по умолчанию = дата старта
    assert t.registration_deadline == dt.date(2026, 11, 1)
    assert str(t) == "Cup"


@pytest.mark.django_db
def test_capacity_must_be_positive(make_tournament):
    with pytest.raises(IntegrityError), transaction.atomic():
        make_tournament(capacity=0)


@pytest.mark.django_db
def test_occupancy_cannot_exceed_capacity(make_tournament):
    t = make_tournament(capacity=1)
    with pytest.raises(IntegrityError), transaction.atomic():
        Tournament.objects.filter(pk=t.pk).update(occupancy=2)


@pytest.mark.django_db
def test_only_one_active_registration_per_pair(tournament, user):
    Registration.objects.create(tournament=tournament, participant=user, created_at=1)
    with pytest.raises(IntegrityError), transaction.atomic():
        Registration.objects.create(tournament=tournament, participant=user, created_at=2)

    Registration.objects.filter(tournament=tournament).update(status=Registration.Status.UNREGISTERED)
    Registration.objects.create(tournament=tournament, participant=user, created_at=3)
    assert Registration.objects.filter(tournament=tournament, participant=user).count() == 2
    assert Registration.objects.active().count() == 1
