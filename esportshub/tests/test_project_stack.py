# esportshub/tests/test_project_stack.py
import importlib

import pytest
from django.urls import reverse, resolve, get_resolver
from channels.routing import ProtocolTypeRouter


# --- urls.py ---------------------------------------------------------------

def test_health_endpoint(client):
    resp = client.get(reverse("health"))
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_root_path_resolves_to_health_view():
    match = resolve("/")
    assert match.url_name == "health"


def test_included_namespaces_resolve():
    assert reverse("admin:index").startswith("/admin/")
    assert reverse("tournaments:api_tournament_list") == "/tournaments/api/tournaments/"
    assert reverse("teams:api_team_list") == "/teams/api/teams/"
    assert reverse("accounts:api_me") == "/accounts/api/me/"

    namespaces = set(get_resolver().namespace_dict.keys())
    assert {"accounts", "teams", "tournaments"}.issubset(namespaces)


# --- asgi.py ---------------------------------------------------------------

def test_asgi_protocoltyperouter_has_http_and_ws(monkeypatch):
    monkeypatch.setenv("DJANGO_SETTINGS_MODULE", "esportshub.settings.test")
    mod = importlib.import_module("esportshub.asgi")
    importlib.reload(mod)

    app = mod.application
    assert isinstance(app, ProtocolTypeRouter)
    mapping = getattr(app, "application_mapping", {})
    assert "http" in mapping and "websocket" in mapping
    assert callable(mapping["http"])
    assert mapping["websocket"] is not None


# --- wsgi.py ---------------------------------------------------------------

def test_wsgi_application_callable(monkeypatch):
    monkeypatch.setenv("DJANGO_SETTINGS_MODULE", "esportshub.settings.test")
    mod = importlib.import_module("esportshub.wsgi")
    importlib.reload(mod)
    assert callable(mod.application)


# --- settings -------------------------------------------------------------

def test_registration_settings_defaults():
    from django.conf import settings
    assert settings.REGISTRATION_WITHDRAW_COOLDOWN == 300
    assert settings.REGISTRATION_MAX_ATTEMPTS >= 1
    assert settings.REGISTRATION_RETRY_AFTER >= 1
    assert "tournaments.ledger" in settings.LOGGING["loggers"]
