"""Registration ledger: who holds a slot in which tournament.

Every write runs in one ``transaction.atomic()`` block that locks the
tournament row, checks the preconditions, writes the registration row and
moves ``Tournament.occupancy`` with a conditional UPDATE. If the conditional
UPDATE loses a race the block is rolled back and the attempt starts over, so
occupancy always equals the number of ``registered`` rows.

Business rejections come back as :class:`Outcome` values. Exceptions are
reserved for malformed input (:class:`LedgerValidationError`), an unreachable
or contended store (:class:`LedgerUnavailable`, safe to retry) and a broken
occupancy invariant (:class:`LedgerInvariantError`).
"""
import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from functools import partial

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, InterfaceError, OperationalError, transaction
from django.db.models import Max

from accounts import wallet
from teams.models import Team

from . import broadcast, catalog
from .models import Registration

log = logging.getLogger(__name__)


class Outcome(str, Enum):
    REGISTERED = "Registered"
    CONTEST_NOT_FOUND = "ContestNotFound"
    REGISTRATION_CLOSED = "RegistrationClosed"
    CONTEST_FULL = "ContestFull"
    ALREADY_REGISTERED = "AlreadyRegistered"
    WITHDRAWN = "Withdrawn"
    NOT_REGISTERED = "NotRegistered"
    COOLDOWN_ACTIVE = "CooldownActive"


@dataclass(frozen=True)
class RegistrationResult:
    outcome: Outcome
    registration_id: int | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.REGISTERED


@dataclass(frozen=True)
class WithdrawResult:
    outcome: Outcome
    registration_id: int | None = None
    retry_after: int | None = None
    refund_amount: Decimal | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.WITHDRAWN


class LedgerError(Exception):
    pass


class LedgerValidationError(LedgerError, ValueError):
    pass


class LedgerUnavailable(LedgerError):
    pass


class LedgerInvariantError(LedgerError):
    pass


class _OccupancyConflict(Exception):
    pass


# ------------------------------------------------------------------ helpers

def _clean_id(value, name):
    if value is None or isinstance(value, (bool, float)):
        raise LedgerValidationError(f"{name} is required and must be an integer")
    try:
        cleaned = int(value)
    except (TypeError, ValueError):
        raise LedgerValidationError(f"{name} must be an integer") from None
    if cleaned <= 0:
        raise LedgerValidationError(f"{name} must be positive")
    return cleaned


def _now() -> int:
    return int(time.time())


def _next_timestamp() -> int:
    # strict within one tournament (its row lock is held); best effort across tournaments
    latest = Registration.objects.aggregate(m=Max("created_at"))["m"] or 0
    return max(_now(), latest)


def _verify_occupancy(contest_id, expected):
    actual = Registration.objects.active().filter(tournament_id=contest_id).count()
    if actual != expected:
        log.error(
            "Occupancy invariant violated for tournament %s: occupancy=%s registered_rows=%s",
            contest_id, expected, actual,
        )
        raise LedgerInvariantError(
            f"Tournament {contest_id} occupancy {expected} does not match {actual} registrations"
        )


def _require_refs(participant_id, team_id):
    if not get_user_model().objects.filter(pk=participant_id).exists():
        raise LedgerValidationError(f"participant {participant_id} does not exist")
    if team_id is not None and not Team.objects.filter(pk=team_id).exists():
        raise LedgerValidationError(f"team {team_id} does not exist")


def _with_retries(attempt, label, contest_id):
    attempts = max(1, int(getattr(settings, "REGISTRATION_MAX_ATTEMPTS", 3)))
    for n in range(1, attempts + 1):
        try:
            return attempt()
        except _OccupancyConflict:
            log.warning("%s: occupancy conflict on tournament %s (attempt %s/%s)", label, contest_id, n, attempts)
        except IntegrityError as exc:
            # deferred foreign keys fail at commit, outside the savepoint
            log.warning("%s: integrity error for tournament %s: %s", label, contest_id, exc)
            raise LedgerValidationError("Registration references a missing participant or team") from exc
        except (OperationalError, InterfaceError) as exc:
            log.warning("%s: store unavailable for tournament %s: %s", label, contest_id, exc)
            raise LedgerUnavailable("Registration store is unavailable, retry later") from exc
    raise LedgerUnavailable(f"{label}: tournament {contest_id} is contended, retry later")


# ------------------------------------------------------------------ reads

def has_active_registration(contest_id, participant_id) -> bool:
    return Registration.objects.active().filter(
        tournament_id=contest_id, participant_id=participant_id
    ).exists()


def registration_for(contest_id, participant_id):
    return (
        Registration.objects.active()
        .filter(tournament_id=contest_id, participant_id=participant_id)
        .select_related("team")
        .first()
    )


def active_registrations(contest_id):
    return (
        Registration.objects.active()
        .filter(tournament_id=contest_id)
        .select_related("participant", "team")
        .order_by("created_at", "id")
    )


# ------------------------------------------------------------------ writes

def register(contest_id, participant_id, team_id=None) -> RegistrationResult:
    """Give ``participant_id`` one slot in ``contest_id``.

    Checks run in order and the first failing one decides the outcome:
    ``ContestNotFound``, ``RegistrationClosed``, ``ContestFull``,
    ``AlreadyRegistered``. Retrying a call whose first attempt did commit
    reports ``AlreadyRegistered``.
    """
    contest_id = _clean_id(contest_id, "contest_id")
    participant_id = _clean_id(participant_id, "participant_id")
    if team_id is not None:
        team_id = _clean_id(team_id, "team_id")

    result = _with_retries(
        partial(_register_once, contest_id, participant_id, team_id), "register", contest_id
    )
    if result.ok:
        log.info(
            "Participant %s registered for tournament %s (registration %s)",
            participant_id, contest_id, result.registration_id,
        )
    return result


def _register_once(contest_id, participant_id, team_id):
    with transaction.atomic():
        contest = catalog.lock_contest(contest_id)
        if contest is None:
            return RegistrationResult(Outcome.CONTEST_NOT_FOUND)
        _require_refs(participant_id, team_id)
        if not contest.accepts_registrations:
            return RegistrationResult(Outcome.REGISTRATION_CLOSED)
        if contest.is_full:
            return RegistrationResult(Outcome.CONTEST_FULL)
        if has_active_registration(contest_id, participant_id):
            return RegistrationResult(Outcome.ALREADY_REGISTERED)

        try:
            with transaction.atomic():
                registration = Registration.objects.create(
                    tournament_id=contest_id,
                    participant_id=participant_id,
                    team_id=team_id,
                    status=Registration.Status.REGISTERED,
                    created_at=_next_timestamp(),
                )
        except IntegrityError:
            # a concurrent call for the same pair committed first
            if has_active_registration(contest_id, participant_id):
                return RegistrationResult(Outcome.ALREADY_REGISTERED)
            raise

        if not catalog.increment_occupancy(contest_id, contest.occupancy):
            raise _OccupancyConflict()
        _verify_occupancy(contest_id, contest.occupancy + 1)
        transaction.on_commit(partial(broadcast.occupancy_changed, contest_id))

    return RegistrationResult(Outcome.REGISTERED, registration.pk)


def withdraw(contest_id, participant_id, cooldown=None) -> WithdrawResult:
    """Release the participant's active registration and free its slot.

    ``cooldown`` is the minimum age in seconds of the registration; ``None``
    uses ``REGISTRATION_WITHDRAW_COOLDOWN`` and ``0`` disables the check.
    A non-zero entry fee is credited back to the participant's wallet in the
    same transaction.
    """
    contest_id = _clean_id(contest_id, "contest_id")
    participant_id = _clean_id(participant_id, "participant_id")
    if cooldown is None:
        cooldown = getattr(settings, "REGISTRATION_WITHDRAW_COOLDOWN", 0)

    result = _with_retries(
        partial(_withdraw_once, contest_id, participant_id, int(cooldown)), "withdraw", contest_id
    )
    if result.ok:
        log.info(
            "Participant %s withdrew from tournament %s (registration %s)",
            participant_id, contest_id, result.registration_id,
        )
    return result


def _withdraw_once(contest_id, participant_id, cooldown):
    with transaction.atomic():
        contest = catalog.lock_contest(contest_id)
        if contest is None:
            return WithdrawResult(Outcome.CONTEST_NOT_FOUND)
        if not contest.accepts_registrations:
            return WithdrawResult(Outcome.REGISTRATION_CLOSED)

        registration = (
            Registration.objects.active()
            .filter(tournament_id=contest_id, participant_id=participant_id)
            .first()
        )
        if registration is None:
            return WithdrawResult(Outcome.NOT_REGISTERED)

        now = _now()
        elapsed = max(0, now - registration.created_at)
        if cooldown > 0 and elapsed < cooldown:
            return WithdrawResult(
                Outcome.COOLDOWN_ACTIVE, registration.pk, retry_after=cooldown - elapsed
            )

        updated = (
            Registration.objects
            .filter(pk=registration.pk, status=Registration.Status.REGISTERED)
            .update(status=Registration.Status.UNREGISTERED, withdrawn_at=now)
        )
        if updated != 1:
            return WithdrawResult(Outcome.NOT_REGISTERED)

        if not catalog.decrement_occupancy(contest_id, contest.occupancy):
            raise _OccupancyConflict()
        _verify_occupancy(contest_id, contest.occupancy - 1)

        refund = None
        if contest.entry_fee > 0:
            wallet.credit(
                participant_id,
                contest.entry_fee,
                description=f"Tournament unregistration refund: {contest.title}",
                tournament_id=contest_id,
            )
            refund = contest.entry_fee
        transaction.on_commit(partial(broadcast.occupancy_changed, contest_id))

    return WithdrawResult(Outcome.WITHDRAWN, registration.pk, refund_amount=refund)
