import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from tournaments import ledger
from tournaments.models import Tournament


@pytest.mark.django_db
def test_check_occupancy_ok(tournament, user, capsys):
    ledger.register(tournament.pk, user.pk)
    call_command("check_occupancy")
    out = capsys.readouterr().out
    assert "OK" in out


@pytest.mark.django_db
def test_check_occupancy_reports_mismatch(tournament, user, capsys):
    ledger.register(tournament.pk, user.pk)
    Tournament.objects.filter(pk=tournament.pk).update(occupancy=0)

    with pytest.raises(CommandError):
        call_command("check_occupancy")
    out = capsys.readouterr().out
    assert f"MISMATCH: tournament {tournament.pk} occupancy=0 registered=1" in out
