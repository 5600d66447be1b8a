"""Tests for perch.templating — entry points as kida globals."""

from pathlib import Path

from kida import Environment

from perch.client import Client
from perch.config import ClientConfig
from perch.context import request_scope
from perch.routing import RouteContext
from perch.templating import register_globals

LAYOUT = """<html><head>{{ inject_theme_styles() }}</head>
<body>{{ inject_controller_script() }}</body></html>"""


def _make_env(config: ClientConfig) -> Environment:
    return register_globals(Environment(autoescape=True), Client(config))


class TestRegisterGlobals:
    def test_returns_env(self, config: ClientConfig) -> None:
        env = Environment(autoescape=True)
        assert register_globals(env, Client(config)) is env

    def test_layout_renders_tags_unescaped(self, config: ClientConfig) -> None:
        tpl = _make_env(config).from_string(LAYOUT)
        with request_scope(RouteContext("welcome", "index")):
            rendered = tpl.render({})
        assert '<link rel="stylesheet/less" href="/js/src/skins/home/less/default.less">' in rendered
        assert 'data-page="src/home"></script>' in rendered
        assert "&lt;" not in rendered

    def test_layout_without_page_data(self, config: ClientConfig) -> None:
        tpl = _make_env(config).from_string(LAYOUT)
        with request_scope(RouteContext("blog", "index")):
            rendered = tpl.render({})
        assert "<head></head>" in rendered
        assert "<body></body>" in rendered

    def test_legacy_globals(self, config: ClientConfig, site: Path) -> None:
        (site / "js" / "build" / "legacy.2.js").write_text("")
        tpl = _make_env(config).from_string(
            "{{ inject_legacy_support_styles() }}{{ inject_legacy_support_script() }}"
        )
        with request_scope(RouteContext("welcome", "index")):
            rendered = tpl.render({})
        assert 'href="/js/build/skins/legacy/css/ie.css"' in rendered
        assert '<script src="/js/build/legacy.2.js"></script>' in rendered
