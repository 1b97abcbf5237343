"""Read and conditional-write access to tournaments for the registration ledger.

Occupancy is only ever changed through ``increment_occupancy`` and
``decrement_occupancy``; both are single conditional UPDATE statements so the
database decides whether the change applies.
"""
from dataclasses import dataclass
from decimal import Decimal

from django.db.models import Count, F, Q

from .models import Game, Registration, Tournament


class CatalogError(Exception):
    pass


@dataclass(frozen=True)
class ContestSnapshot:
    id: int
    capacity: int
    occupancy: int
    status: str
    title: str = ""
    entry_fee: Decimal = Decimal("0")

    @property
    def accepts_registrations(self) -> bool:
        return self.status in Tournament.OPEN_STATUSES

    @property
    def is_full(self) -> bool:
        return self.occupancy >= self.capacity

    @classmethod
    def from_row(cls, row):
        return cls(**row)


_SNAPSHOT_FIELDS = ("id", "capacity", "occupancy", "status", "title", "entry_fee")


def get_contest(contest_id) -> ContestSnapshot | None:
    row = Tournament.objects.filter(pk=contest_id).values(*_SNAPSHOT_FIELDS).first()
    return ContestSnapshot.from_row(row) if row else None


def lock_contest(contest_id) -> ContestSnapshot | None:
    # must run inside transaction.atomic()
    row = (
        Tournament.objects
        .select_for_update()
        .filter(pk=contest_id)
        .values(*_SNAPSHOT_FIELDS)
        .first()
    )
    return ContestSnapshot.from_row(row) if row else None


def increment_occupancy(contest_id, expected_occupancy: int) -> bool:
    updated = (
        Tournament.objects
        .filter(
            pk=contest_id,
            occupancy=expected_occupancy,
            occupancy__lt=F("capacity"),
            status__in=Tournament.OPEN_STATUSES,
        )
        .update(occupancy=F("occupancy") + 1)
    )
    return updated == 1


def decrement_occupancy(contest_id, expected_occupancy: int) -> bool:
    updated = (
        Tournament.objects
        .filter(pk=contest_id, occupancy=expected_occupancy, occupancy__gt=0)
        .update(occupancy=F("occupancy") - 1)
    )
    return updated == 1


def list_contests(status=None, game=None):
    qs = Tournament.objects.select_related("game", "created_by")
    if status and status != "all":
        qs = qs.filter(status=status)
    if game and game != "all":
        qs = qs.filter(game__slug=game)
    return qs.order_by("-created_at", "-id")


def create_contest(created_by, *, game_slug, **fields) -> Tournament:
    game = Game.objects.filter(slug=game_slug, is_active=True).first()
    if game is None:
        raise CatalogError(f"Invalid game: {game_slug}")
    fields.pop("status", None)
    fields.pop("occupancy", None)
    return Tournament.objects.create(
        game=game,
        created_by=created_by,
        status=Tournament.Status.DRAFT,
        **fields,
    )


def count_mismatches():
    rows = (
        Tournament.objects
        .annotate(
            registered=Count(
                "registrations",
                filter=Q(registrations__status=Registration.Status.REGISTERED),
            )
        )
        .exclude(occupancy=F("registered"))
        .order_by("id")
        .values_list("id", "occupancy", "registered")
    )
    yield from rows
