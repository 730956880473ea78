# tests/core/test_completion_manager.py
from prompt_toolkit.document import Document

from conftest import FakeData
from hmcon_shell.core.context.job import Job
from hmcon_shell.core.managers.completion_manager import CompletionManager


def _texts(manager, text):
    return [c.text for c in manager.generate_completions(Document(text, len(text)))]


def test_input_phase_offers_selection_commands(make_session):
    manager = CompletionManager(make_session())
    assert "batch" in _texts(manager, "")
    assert _texts(manager, "ex") == ["exec", "exit"]


def test_export_phase_offers_configuration_commands(make_session):
    ctx = make_session(files={"a.asc": FakeData("a")})
    ctx.job = Job(["a.asc"])
    manager = CompletionManager(ctx)

    names = _texts(manager, "")
    assert {"export", "abort", "format", "mod", "info", "vars"} <= set(names)
    assert "equalizeheightmaps" not in names


def test_batch_phase_offers_batch_commands(make_session):
    ctx = make_session()
    ctx.job = Job(["a.asc", "b.asc"])
    assert _texts(CompletionManager(ctx), "eq") == ["equalizeheightmaps"]


def test_modifier_and_format_arguments(make_session):
    ctx = make_session()
    ctx.job = Job(["a.asc"])
    manager = CompletionManager(ctx)

    assert _texts(manager, "mod s") == ["scale"]
    assert _texts(manager, "format asc x") == ["xyz"]


def test_variable_completion(make_session):
    ctx = make_session()
    ctx.job = Job(["a.asc"])
    ctx.job.variables.define("height", "10")
    ctx.job.variables.define("width", "3")

    assert _texts(CompletionManager(ctx), "mod offset ${h") == ["${height}"]
