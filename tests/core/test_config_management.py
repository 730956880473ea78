# tests/core/test_config_management.py
import json

import pytest

from conftest import FakeData
from hmcon_shell.core.handlers.config_handler import handle_config
from hmcon_shell.core.handlers.exec_handler import handle_exec
from hmcon_shell.core.managers.config_manager import ConfigManager
from hmcon_shell.core.utils.path_utils import PathUtils

# A predictable configuration for the tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "queue": {
        "max_size": 100
    },
    "batch": {
        "grid_extension": ".asc",
        "progress_bar": True
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Points the ConfigManager at a temporary settings.json and restores the
    real configuration afterwards.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: settings_file)

    manager = ConfigManager()
    manager.reset()
    yield manager

    monkeypatch.undo()
    manager.reset()


def test_config_manager_load(config_env):
    config = config_env.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["queue"]["max_size"] == 100


def test_config_manager_is_a_singleton(config_env):
    assert ConfigManager() is config_env


def test_config_manager_get_nested(config_env):
    assert config_env.get_nested("batch.grid_extension") == ".asc"
    assert config_env.get_nested("non.existent.key", "default") == "default"


def test_config_manager_set_nested_casts_to_existing_type(config_env):
    config_env.set_nested("queue.max_size", "20")
    assert config_env.get_nested("queue.max_size") == 20

    config_env.set_nested("batch.progress_bar", "false")
    assert config_env.get_nested("batch.progress_bar") is False

    config_env.set_nested("new_feature.enabled", "yes")
    assert config_env.get_nested("new_feature.enabled") == "yes"


def test_config_manager_refuses_to_overwrite_a_section(config_env):
    assert config_env.set_nested("queue", "1") is False
    assert config_env.get_nested("queue.max_size") == 100


def test_missing_settings_file_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: tmp_path / "nope.json")
    manager = ConfigManager()
    manager.reset()
    assert manager.get_all() == {}
    monkeypatch.undo()
    manager.reset()


def test_config_command(config_env, make_session, transcript):
    ctx = make_session(files={"a.asc": FakeData("a")})

    assert handle_config(["set", "batch.grid_extension", ".ASC"], ctx) == 0
    assert config_env.get_nested("batch.grid_extension") == ".ASC"

    assert handle_config(["list"], ctx) == 0
    assert any('"grid_extension": ".ASC"' in line for line in transcript)

    assert handle_config(["reset"], ctx) == 0
    assert config_env.get_nested("batch.grid_extension") == ".asc"

    assert handle_config([], ctx) == 1
    assert handle_config(["explode"], ctx) == 1


def test_queue_and_prompt_settings_apply_to_a_running_session(config_env, make_session, scripted_input, tmp_path):
    ctx = make_session()
    script = tmp_path / "three.txt"
    script.write_text("a\nb\nc\n", encoding="utf-8")

    assert handle_config(["set", "queue.max_size", "2"], ctx) == 0
    assert handle_exec([str(script)], ctx) == 1
    assert len(ctx.queue) == 0

    assert handle_config(["set", "prompt.marker", "hm$"], ctx) == 0
    scripted_input.lines = ["info"]
    assert ctx.read_line() == "info"
    assert scripted_input.prompts == ["hm$"]
