# tests/core/test_batch_equalize.py
import pytest

from conftest import FakeData
from hmcon_shell.core.context.job import Job
from hmcon_shell.core.handlers.batch_handler import handle_equalizeheightmaps
from hmcon_shell.model import DataInfo


def _session_with(make_session, infos):
    ctx = make_session(files={p: FakeData(p) for p in infos}, infos=infos)
    return ctx


def test_equalize_aggregates_eligible_files(make_session, transcript):
    infos = {
        "a.asc": DataInfo(low=0, high=10, average=5),
        "b.asc": DataInfo(low=2, high=8, average=5),
        "c.asc": DataInfo(low=-1, high=9, average=4),
    }
    ctx = _session_with(make_session, infos)
    job = Job(list(infos))

    result = handle_equalizeheightmaps([], job, ctx)

    assert result.low == -1
    assert result.high == 10
    assert result.average == pytest.approx(14 / 3)
    assert result.eligible == 3
    assert ["1/3", "2/3", "3/3"] == [line for line in transcript if "/" in line and len(line) == 3]
    assert float(job.variables.get("equalize.low")) == -1
    assert float(job.variables.get("equalize.high")) == 10


def test_non_grid_files_are_excluded_and_reported(make_session, transcript):
    infos = {
        "a.asc": DataInfo(low=0, high=10, average=5),
        "b.asc": DataInfo(low=2, high=8, average=5),
        "c.asc": DataInfo(low=-1, high=9, average=4),
    }
    ctx = _session_with(make_session, infos)
    job = Job(["a.asc", "b.asc", "c.asc", "spike.xyz"])

    result = handle_equalizeheightmaps([], job, ctx)

    assert result.low == -1
    assert result.high == 10
    assert result.average == pytest.approx(14 / 3)
    assert result.eligible == 3
    assert result.total == 4
    assert any("spike.xyz is not a ASC file!" in line for line in transcript)


def test_no_eligible_files_is_an_error(make_session, transcript):
    ctx = make_session()
    ctx.queue.prepend(["export"])
    job = Job(["x.xyz", "y.xyz"])

    assert handle_equalizeheightmaps([], job, ctx) is None

    assert any("No eligible files" in line for line in transcript)
    assert "equalize.average" not in job.variables
    assert len(ctx.queue) == 0


def test_result_variables_keep_full_precision(make_session, transcript):
    infos = {
        "a.asc": DataInfo(low=1234.5678, high=8848.8649, average=4321.98765),
        "b.asc": DataInfo(low=2000.125, high=5000.0625, average=3000.5),
    }
    ctx = _session_with(make_session, infos)
    job = Job(list(infos))

    result = handle_equalizeheightmaps([], job, ctx)

    assert float(job.variables.get("equalize.low")) == result.low == 1234.5678
    assert float(job.variables.get("equalize.high")) == result.high == 8848.8649
    assert float(job.variables.get("equalize.average")) == result.average
    # the summary stays short
    assert "    highest:  8848.86" in transcript
