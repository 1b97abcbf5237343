# esportshub/tests/test_urls_debug_media.py
import importlib
import re

from django.conf import settings
from django.test import override_settings
from django.urls import clear_url_caches
from django.views.static import serve

from accounts.models import User
from teams.models import Team


def _reload_urls():
    import esportshub.urls as urls_mod
    clear_url_caches()
    return importlib.reload(urls_mod)


def _media_pattern(urlpatterns):
    media = settings.MEDIA_URL.lstrip("/").rstrip("/")
    for p in urlpatterns:
        regex = getattr(getattr(p, "pattern", None), "regex", None)
        if regex and re.search(rf"{re.escape(media)}/?", regex.pattern):
            return p
    return None


@override_settings(DEBUG=True, MEDIA_URL="/media/", MEDIA_ROOT="/tmp/media")
def test_debug_serves_team_logos_and_avatars():
    urls = _reload_urls()
    pattern = _media_pattern(urls.urlpatterns)
    assert pattern is not None
    assert pattern.callback is serve

    logo_path = f"{Team._meta.get_field('logo').upload_to}dream.png"
    avatar_path = f"{User._meta.get_field('avatar').upload_to}me.png"
    for rel in (logo_path, avatar_path):
        match = pattern.resolve(f"media/{rel}")
        assert match is not None
        assert match.kwargs["path"] == rel
        assert match.kwargs["document_root"] == "/tmp/media"


@override_settings(DEBUG=False, MEDIA_URL="/media/", MEDIA_ROOT="/tmp/media")
def test_no_media_patterns_without_debug():
    urls = _reload_urls()
    assert _media_pattern(urls.urlpatterns) is None
