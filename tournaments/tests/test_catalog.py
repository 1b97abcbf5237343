# tournaments/tests/test_catalog.py
import datetime as dt
import pytest
from tournaments import catalog, ledger
from tournaments.models import Game, Tournament

pytestmark = pytest.mark.django_db


def test_get_contest_snapshot(make_tournament):
    t = make_tournament(capacity=2)
    snap = catalog.get_contest(t.pk)
    assert (snap.id, snap.capacity, snap.occupancy, snap.status) == (t.pk, 2, 0, t.status)
    assert snap.accepts_registrations is True
    assert snap.is_full is False


def test_get_contest_missing_returns_none():
    assert catalog.get_contest(123456) is None


def test_lock_contest_inside_transaction(tournament):
    from django.db import transaction
    with transaction.atomic():
        snap = catalog.lock_contest(tournament.pk)
    assert snap.id == tournament.pk


def test_increment_refuses_when_full_or_closed(make_tournament):
    full = make_tournament(capacity=1)
    assert catalog.increment_occupancy(full.pk, 0)
    assert not catalog.increment_occupancy(full.pk, 1)

    closed = make_tournament(status=Tournament.Status.CLOSED)
    assert not catalog.increment_occupancy(closed.pk, 0)


def test_decrement_never_goes_below_zero(tournament):
    assert not catalog.decrement_occupancy(tournament.pk, 0)
    catalog.increment_occupancy(tournament.pk, 0)
    assert catalog.decrement_occupancy(tournament.pk, 1)
    tournament.refresh_from_db()
    assert tournament.occupancy == 0


def test_list_contests_filters_by_status_and_game(make_tournament, game):
    other_game = Game.objects.create(name="Valorant", slug="valorant")
    a = make_tournament(title="Open CS")
    b = make_tournament(title="Draft CS", status=Tournament.Status.DRAFT)
    c = make_tournament(title="Open Val")
    c.game = other_game
    c.save()

    assert set(catalog.list_contests()) == {a, b, c}
    assert set(catalog.list_contests(status="all", game="all")) == {a, b, c}
    assert set(catalog.list_contests(status="draft")) == {b}
    assert set(catalog.list_contests(game="valorant")) == {c}
    assert set(catalog.list_contests(status="registration_open", game="cs2")) == {a}


def test_create_contest_starts_as_empty_draft(game, user):
    t = catalog.create_contest(
        user, game_slug="cs2", title="New Cup", capacity=32,
        start_date=dt.date(2026, 12, 1), status="completed", occupancy=10,
    )
    assert t.status == Tournament.Status.DRAFT
    assert t.occupancy == 0
    assert t.created_by == user
    assert t.game == game
    assert t.registration_deadline == dt.date(2026, 12, 1)


def test_create_contest_rejects_inactive_game(user):
    Game.objects.create(name="Old", slug="old", is_active=False)
    with pytest.raises(catalog.CatalogError):
        catalog.create_contest(user, game_slug="old", title="X", capacity=4, start_date=dt.date(2026, 1, 1))
    with pytest.raises(catalog.CatalogError):
        catalog.create_contest(user, game_slug="nope", title="X", capacity=4, start_date=dt.date(2026, 1, 1))


def test_count_mismatches_reports_drift_only(make_tournament, make_user):
    healthy = make_tournament(title="Healthy")
    drifted = make_tournament(title="Drifted")
    ledger.register(healthy.pk, make_user("h").pk)
    ledger.register(drifted.pk, make_user("d").pk)
    Tournament.objects.filter(pk=drifted.pk).update(occupancy=2)

    assert list(catalog.count_mismatches()) == [(drifted.pk, 2, 1)]
