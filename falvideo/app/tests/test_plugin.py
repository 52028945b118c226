import asyncio
import logging
import os

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from falvideo.app import config
from falvideo.app.config import PluginConfigError, Settings, validate_plugin_config
from falvideo.app.domain.text_to_video import Content, Memory
from falvideo.app.main import create_app
from falvideo.app.plugin import build_plugin
from falvideo.app.services.model_handlers import ModelType
from falvideo.app.services.plugin_events import EventType
from falvideo.app.services.quick_provider import quick_provider
from falvideo.app.services.starter_service import ServiceNotFoundError, StarterService


class FakeRuntime:
    def __init__(self, services=None):
        self.services = dict(services or {})

    def get_setting(self, key):
        return None

    def get_service(self, service_type):
        return self.services.get(service_type)


def _settings(**env):
    return Settings(**env)


def test_config_absent_variable_only_warns(caplog):
    caplog.set_level(logging.WARNING, logger=config.__name__)
    out = validate_plugin_config({})
    assert out == {"EXAMPLE_PLUGIN_VARIABLE": None}
    assert "FalAI plugin variable is not provided" in caplog.text


def test_config_empty_variable_rejected():
    with pytest.raises(PluginConfigError) as excinfo:
        validate_plugin_config({"EXAMPLE_PLUGIN_VARIABLE": ""})
    assert str(excinfo.value) == (
        "Invalid plugin configuration: FalAI plugin variable is not provided"
    )


def test_plugin_descriptor_contents():
    plugin = build_plugin(_settings(EXAMPLE_PLUGIN_VARIABLE="abc"))

    assert plugin.name == "plugin-fal-ai"
    assert plugin.description == "Generate videos using fal.ai MiniMax Hailuo-02"
    assert plugin.config == {"EXAMPLE_PLUGIN_VARIABLE": "abc"}
    assert [a.name for a in plugin.actions] == ["TEXT_TO_VIDEO"]
    assert [p.name for p in plugin.providers] == ["QUICK_PROVIDER"]
    assert plugin.services == [StarterService]
    assert set(plugin.events) == {e.value for e in EventType}
    assert set(plugin.models) == {m.value for m in ModelType}


def test_plugin_init_exports_set_values(monkeypatch):
    # recorded so the value exported by init is undone after the test
    monkeypatch.setenv("EXAMPLE_PLUGIN_VARIABLE", "stale")
    plugin = build_plugin(_settings())
    out = asyncio.run(plugin.init({"EXAMPLE_PLUGIN_VARIABLE": "value-1"}))
    assert out["EXAMPLE_PLUGIN_VARIABLE"] == "value-1"
    assert os.environ["EXAMPLE_PLUGIN_VARIABLE"] == "value-1"


def test_plugin_init_rejects_invalid_config():
    plugin = build_plugin(_settings())
    with pytest.raises(PluginConfigError):
        asyncio.run(plugin.init({"EXAMPLE_PLUGIN_VARIABLE": ""}))


def test_quick_provider_returns_fixed_text():
    out = asyncio.run(quick_provider.get(FakeRuntime(), Memory(content=Content(text="hi"))))
    assert out.text == "I am a provider"
    assert out.values == {}
    assert out.data == {}


def test_starter_service_lifecycle(caplog):
    caplog.set_level(logging.INFO)
    runtime = FakeRuntime()
    service = asyncio.run(StarterService.start(runtime))
    assert isinstance(service, StarterService)
    assert service.runtime is runtime

    runtime.services[StarterService.service_type] = service
    asyncio.run(StarterService.stop_service(runtime))
    assert "Starter service stopped" in caplog.text


def test_starter_service_stop_without_instance():
    with pytest.raises(ServiceNotFoundError):
        asyncio.run(StarterService.stop_service(FakeRuntime()))


def test_event_handlers_only_log(caplog):
    caplog.set_level(logging.DEBUG)
    plugin = build_plugin(_settings())
    for handler in plugin.events[EventType.WORLD_JOINED.value]:
        assert asyncio.run(handler({"world": {"id": "w1"}})) is None
    assert "WORLD_JOINED event received" in caplog.text
    assert "w1" in caplog.text


def test_model_handlers_return_placeholder_text():
    plugin = build_plugin(_settings())
    small = asyncio.run(plugin.models["TEXT_SMALL"](FakeRuntime(), prompt="hi"))
    large = asyncio.run(
        plugin.models["TEXT_LARGE"](FakeRuntime(), prompt="hi", max_tokens=10, temperature=0.1)
    )
    assert small.startswith("Never gonna give you up")
    assert large.startswith("Never gonna make you cry")


@pytest.mark.parametrize("name", ["TEXT_TO_VIDEO", "make_video", "generate-video", "VIDEO_FROM_TEXT"])
def test_plugin_get_action_by_name_or_simile(name):
    plugin = build_plugin(_settings())
    assert plugin.get_action(name) is plugin.actions[0]


def test_plugin_get_action_unknown():
    plugin = build_plugin(_settings())
    assert plugin.get_action("TEXT_TO_IMAGE") is None
    assert plugin.get_action(None) is None
    assert plugin.get_action("  ") is None


def test_app_mounts_status_route():
    app = create_app(_settings(FALVIDEO_API_PREFIX="/plugins/fal"))
    with TestClient(app) as client:
        resp = client.get("/plugins/fal/status")
    assert resp.status_code == 200
    assert resp.json()["plugin"] == "plugin-fal-ai"


def test_settings_normalizes_log_level():
    assert _settings(FALVIDEO_LOG_LEVEL="debug").log_level == "DEBUG"


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        _settings(FALVIDEO_LOG_LEVEL="loud")
