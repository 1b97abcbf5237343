import pytest
from rest_framework.test import APIClient

@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="u1", email="u1@example.com", password="pass123"
    )

@pytest.fixture
def another_user(django_user_model):
    return django_user_model.objects.create_user(
        username="u2", email="u2@example.com", password="pass123"
    )

@pytest.fixture
def captain_user(django_user_model):
    return django_user_model.objects.create_user(
        username="cap", email="cap@example.com", password="pass123"
    )

@pytest.fixture
def game(db):
    from tournaments.models import Game
    return Game.objects.create(name="Counter-Strike 2", slug="cs2")

@pytest.fixture
def team(captain_user):
    from teams.models import Team, TeamMembership
    t = Team.objects.create(name="Dream Team", tag="DT", captain=captain_user)
    TeamMembership.objects.create(user=captain_user, team=t, role="captain")
    return t

@pytest.fixture
def api_client():
    return APIClient()

@pytest.fixture
def logged_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client

@pytest.fixture
def captain_client(api_client, captain_user):
    api_client.force_authenticate(user=captain_user)
    return api_client
