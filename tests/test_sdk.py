from __future__ import annotations

import io

import pytest

from downsync.contracts.config import DownsyncConfig
from downsync.contracts.exceptions import UsageError
from downsync.sdk import Downsync
from downsync.status import StatusLogger
from tests.fakes.connection import FakeConnection
from tests.fakes.runner import FakeRunner

_STATUS = ("hg", "status", "static_upstream")
_CHANGES = "M static_upstream/foo/x.txt\n? static_upstream/bar/y.txt\nM static_upstream/foo/z.txt\n"


@pytest.mark.asyncio
async def test_sync_auto_detects_projects_and_runs_each_once(config: DownsyncConfig, status: StatusLogger) -> None:
    runner = FakeRunner(status, outputs={_STATUS: _CHANGES})
    ds = Downsync.from_config(config, status=status, runner=runner)

    result = await ds.sync()

    assert sorted(result.identifiers) == ["bar", "foo"]
    assert result.ok
    sync_calls = [call for call in runner.calls if call[0] in {"update", "sign"}]
    assert len(sync_calls) == 8
    assert {call[-1] for call in sync_calls} == {"foo", "bar"}


@pytest.mark.asyncio
async def test_sync_with_explicit_projects_skips_detection(config: DownsyncConfig, status: StatusLogger) -> None:
    runner = FakeRunner(status)
    ds = Downsync.from_config(config, status=status, runner=runner)

    await ds.sync(["widgets"])

    assert _STATUS not in runner.calls
    assert len(runner.calls) == 4


@pytest.mark.asyncio
async def test_sync_is_repeatable_without_upstream_changes(config: DownsyncConfig, status: StatusLogger) -> None:
    first = FakeRunner(status, outputs={_STATUS: _CHANGES})
    second = FakeRunner(status, outputs={_STATUS: _CHANGES})

    await Downsync.from_config(config, status=status, runner=first).sync()
    await Downsync.from_config(config, status=status, runner=second).sync()

    assert first.calls == second.calls


@pytest.mark.asyncio
async def test_sync_with_nothing_changed_reports_and_returns_empty(
    config: DownsyncConfig, status: StatusLogger, output: io.StringIO
) -> None:
    runner = FakeRunner(status)

    result = await Downsync.from_config(config, status=status, runner=runner).sync()

    assert result.identifiers == []
    assert runner.calls == [_STATUS]
    assert "nothing to sync" in output.getvalue()


@pytest.mark.asyncio
async def test_watch_without_projects_is_a_usage_error(config: DownsyncConfig, status: StatusLogger) -> None:
    connected: list[bool] = []

    async def _connect() -> FakeConnection:
        connected.append(True)
        return FakeConnection([])

    ds = Downsync.from_config(config, status=status, runner=FakeRunner(status), connect=_connect)

    with pytest.raises(UsageError):
        await ds.watch()

    assert connected == []


@pytest.mark.asyncio
async def test_watch_subscribes_to_detected_projects(config: DownsyncConfig, status: StatusLogger) -> None:
    connection = FakeConnection([])

    async def _connect() -> FakeConnection:
        return connection

    runner = FakeRunner(status, outputs={_STATUS: _CHANGES})
    ds = Downsync.from_config(config, status=status, runner=runner, connect=_connect)

    await ds.watch()

    expression = connection.sent[0][3]["expression"]
    assert expression == ["anyof", ["dirname", "static_upstream/foo"], ["dirname", "static_upstream/bar"]]
