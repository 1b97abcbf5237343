# tournaments/tests/conftest.py
import datetime as dt
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from teams.models import Team, TeamMembership
from tournaments.models import Game, Tournament

User = get_user_model()

@pytest.fixture
def user(db):
    return User.objects.create_user("user", password="x", email="u@u.u")

@pytest.fixture
def platform_admin(db):
    return User.objects.create_user("admin", password="x", email="a@a.a", role=User.Role.ADMIN)

@pytest.fixture
def make_user(db):
    def _make(username):
        return User.objects.create_user(username, password="x", email=f"{username}@x.x")
    return _make

@pytest.fixture
def game(db):
    return Game.objects.create(name="Counter-Strike 2", slug="cs2")

@pytest.fixture
def make_tournament(db, game):
    def _make(title="Cup", capacity=8, status=Tournament.Status.REGISTRATION_OPEN, **extra):
        return Tournament.objects.create(
            title=title,
            game=game,
            capacity=capacity,
            status=status,
            start_date=dt.date(2026, 11, 1),
            **extra,
        )
    return _make

@pytest.fixture
def tournament(make_tournament):
    return make_tournament()

@pytest.fixture
def make_team(db, make_user):
    def _make(name, tag=None, captain=None):
        cap = captain or make_user(f"{name.lower()}_cap")
        team = Team.objects.create(name=name, tag=tag or name[:3].upper(), captain=cap)
        TeamMembership.objects.create(user=cap, team=team, role=TeamMembership.Role.CAPTAIN)
        return team
    return _make

@pytest.fixture
def api_client():
    return APIClient()

@pytest.fixture
def user_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
