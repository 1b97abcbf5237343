import pytest
from django.urls import reverse
from tournaments import ledger
from tournaments.models import Game, Tournament


# 1) Список турниров
@pytest.mark.django_db
def test_api_tournament_list_shape(api_client, make_tournament):
    make_tournament(title="Alpha Cup")
    make_tournament(title="Beta Cup")
    url = reverse("tournaments:api_tournament_list")

    resp = api_client.get(url)
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    titles = {item["title"] for item in data["tournaments"]}
    assert {"Alpha Cup", "Beta Cup"} <= titles
    assert data["pagination"] == {"total": 2, "limit": 20, "offset": 0, "has_more": False}
    first = data["tournaments"][0]
    assert first["game_slug"] == "cs2"
    assert first["max_players"] == 8
    assert first["current_players"] == 0


@pytest.mark.django_db
def test_api_tournament_list_pagination_and_filters(api_client, make_tournament):
    for i in range(3):
        make_tournament(title=f"Open {i}")
    make_tournament(title="Draft", status=Tournament.Status.DRAFT)
    url = reverse("tournaments:api_tournament_list")

    page = api_client.get(url, {"limit": 2, "offset": 0}).json()
    assert len(page["tournaments"]) == 2
    assert page["pagination"]["has_more"] is True
    assert page["pagination"]["total"] == 4

    drafts = api_client.get(url, {"status": "draft"}).json()
    assert [t["title"] for t in drafts["tournaments"]] == ["Draft"]

    none = api_client.get(url, {"game": "valorant"}).json()
    assert none["tournaments"] == []


@pytest.mark.django_db
def test_api_tournament_detail_for_anonymous(api_client, tournament):
    url = reverse("tournaments:api_tournament_detail", args=[tournament.pk])
    resp = api_client.get(url)
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == tournament.pk
    assert data["user_registration"] is None
    assert data["is_admin"] is False


@pytest.mark.django_db
def test_api_tournament_detail_shows_caller_registration(user_client, tournament, user):
    result = ledger.register(tournament.pk, user.pk)
    url = reverse("tournaments:api_tournament_detail", args=[tournament.pk])

    data = user_client.get(url).json()
    assert data["user_registration"]["id"] == result.registration_id
    assert data["user_registration"]["status"] == "registered"
    assert data["current_players"] == 1


@pytest.mark.django_db
def test_api_tournament_detail_404(api_client):
    resp = api_client.get(reverse("tournaments:api_tournament_detail", args=[999999]))
    assert resp.status_code == 404


# 2) Создание турнира
CREATE_PAYLOAD = {
    "title": "Winter Cup",
    "game_slug": "cs2",
    "max_players": 16,
    "start_date": "2026-12-20",
}


@pytest.mark.django_db
def test_api_create_tournament_as_admin(api_client, platform_admin, game):
    api_client.force_authenticate(user=platform_admin)
    resp = api_client.post(reverse("tournaments:api_tournament_list"), CREATE_PAYLOAD, format="json")

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["tournament"]["status"] == "draft"
    assert body["tournament"]["max_players"] == 16
    t = Tournament.objects.get(pk=body["tournament"]["id"])
    assert t.created_by == platform_admin
    assert t.start_time.hour == 18


@pytest.mark.django_db
def test_api_create_tournament_staff_counts_as_admin(api_client, make_user, game):
    staff = make_user("staffer")
    staff.is_staff = True
    staff.save()
    api_client.force_authenticate(user=staff)
    resp = api_client.post(reverse("tournaments:api_tournament_list"), CREATE_PAYLOAD, format="json")
    assert resp.status_code == 201


@pytest.mark.django_db
def test_api_create_tournament_forbidden_for_player(user_client, game):
    resp = user_client.post(reverse("tournaments:api_tournament_list"), CREATE_PAYLOAD, format="json")
    assert resp.status_code == 403
    assert not Tournament.objects.exists()


@pytest.mark.django_db
def test_api_create_tournament_requires_auth(api_client, game):
    resp = api_client.post(reverse("tournaments:api_tournament_list"), CREATE_PAYLOAD, format="json")
    assert resp.status_code in (401, 403)


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["title", "game_slug", "max_players", "start_date"])
def test_api_create_tournament_missing_fields(api_client, platform_admin, game, missing):
    api_client.force_authenticate(user=platform_admin)
    payload = {k: v for k, v in CREATE_PAYLOAD.items() if k != missing}
    resp = api_client.post(reverse("tournaments:api_tournament_list"), payload, format="json")
    assert resp.status_code == 400
    assert missing in resp.json()


@pytest.mark.django_db
def test_api_create_tournament_unknown_game(api_client, platform_admin):
    Game.objects.create(name="Retired", slug="retired", is_active=False)
    api_client.force_authenticate(user=platform_admin)
    payload = {**CREATE_PAYLOAD, "game_slug": "retired"}
    resp = api_client.post(reverse("tournaments:api_tournament_list"), payload, format="json")
    assert resp.status_code == 400
    assert "game_slug" in resp.json()


@pytest.mark.django_db
def test_api_create_tournament_deadline_after_start(api_client, platform_admin, game):
    api_client.force_authenticate(user=platform_admin)
    payload = {**CREATE_PAYLOAD, "registration_deadline": "2026-12-25"}
    resp = api_client.post(reverse("tournaments:api_tournament_list"), payload, format="json")
    assert resp.status_code == 400
    assert "registration_deadline" in resp.json()
