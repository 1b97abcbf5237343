import pytest
from django.contrib import admin
from django.contrib.auth import get_user_model

from accounts.admin import CaptainTeamInline, UserAdmin
from teams.models import Team

User = get_user_model()


def test_user_admin_registered_with_inlines():
    assert isinstance(admin.site._registry[User], UserAdmin)
    assert CaptainTeamInline in UserAdmin.inlines
    assert "role" in UserAdmin.list_display


@pytest.mark.django_db
def test_user_admin_columns():
    ma = UserAdmin(User, admin.site)
    u = User.objects.create_user(username="a", password="x")
    assert ma.active_registrations(u) == 0
    assert ma.captain_of_teams(u) == "—"

    Team.objects.create(name="Alpha", captain=u)
    assert ma.captain_of_teams(u) == "Alpha"

    text = ma.permissions_summary(u)
    assert "role=player" in text and "staff=False" in text and "groups=" in text


@pytest.mark.django_db
def test_permissions_summary_for_unsaved_user():
    ma = UserAdmin(User, admin.site)
    assert ma.permissions_summary(None) == ""
    assert ma.permissions_summary(User(username="draft")) == ""
