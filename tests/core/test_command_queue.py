# tests/core/test_command_queue.py
import pytest

from hmcon_shell.core.command_queue import CommandQueue
from hmcon_shell.core.errors import QueueOverflowError, ScriptError


def test_lines_are_served_fifo():
    queue = CommandQueue()
    queue.prepend(["a", "b", "c"])
    assert [queue.pop(), queue.pop(), queue.pop()] == ["a", "b", "c"]
    assert not queue


def test_prepended_script_runs_before_remaining_lines():
    queue = CommandQueue()
    queue.prepend(["outer1", "outer2"])
    assert queue.pop() == "outer1"
    queue.prepend(["inner1", "inner2"])
    assert [queue.pop() for _ in range(3)] == ["inner1", "inner2", "outer2"]


def test_overflow_is_rejected_atomically():
    queue = CommandQueue(max_size=100)
    queue.prepend([f"line{i}" for i in range(60)])

    with pytest.raises(QueueOverflowError):
        queue.prepend([f"extra{i}" for i in range(41)])

    assert len(queue) == 60
    assert queue.pop() == "line0"


def test_queue_may_be_filled_exactly_to_the_limit():
    queue = CommandQueue(max_size=100)
    queue.prepend(["x"] * 100)
    assert len(queue) == 100


def test_load_script_skips_blank_lines_and_comments(tmp_path):
    script = tmp_path / "run.txt"
    script.write_text("# convert everything\nformat asc\n\n  mod offset 10  \nexport\n", encoding="utf-8")

    queue = CommandQueue()
    assert queue.load_script(script) == 3
    assert [queue.pop() for _ in range(3)] == ["format asc", "mod offset 10", "export"]


def test_load_script_missing_file_leaves_queue_untouched(tmp_path):
    queue = CommandQueue()
    queue.prepend(["keep"])
    with pytest.raises(ScriptError):
        queue.load_script(tmp_path / "missing.txt")
    assert len(queue) == 1


def test_clear_empties_queue():
    queue = CommandQueue()
    queue.prepend(["a", "b"])
    queue.clear()
    assert len(queue) == 0
