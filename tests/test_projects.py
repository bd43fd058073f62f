from __future__ import annotations

import pytest

from downsync.engine.projects import ProjectResolver
from downsync.engine.utils import dedupe, downstream_project, in_upstream, match_watched_project, upstream_project
from downsync.vcs import HgClient
from tests.fakes.runner import FakeRunner

_STATUS = ("hg", "status", "static_upstream")


def _resolver(runner: FakeRunner) -> ProjectResolver:
    return ProjectResolver(HgClient(runner), upstream_prefix="static_upstream")


@pytest.mark.asyncio
async def test_explicit_projects_are_returned_unchanged() -> None:
    runner = FakeRunner()

    projects = await _resolver(runner).resolve(["a", "b", "a"])

    assert projects == ["a", "b", "a"]
    assert runner.calls == []


@pytest.mark.asyncio
async def test_pending_upstream_changes_decide_without_explicit_projects() -> None:
    runner = FakeRunner(
        outputs={
            _STATUS: "M static_upstream/foo/x.txt\n? static_upstream/bar/y.txt\nM static_upstream/foo/z.txt\n",
        }
    )

    projects = await _resolver(runner).resolve([])

    assert set(projects) == {"foo", "bar"}
    assert len(projects) == 2


@pytest.mark.asyncio
async def test_other_statuses_and_paths_are_ignored() -> None:
    runner = FakeRunner(
        outputs={
            _STATUS: "R static_upstream/gone/x.txt\n! static_upstream/missing/x.txt\n"
            "M README\nM static_upstream/top.txt\n",
        }
    )

    assert await _resolver(runner).resolve() == []


@pytest.mark.asyncio
async def test_result_is_computed_once() -> None:
    runner = FakeRunner(outputs={_STATUS: ["M static_upstream/foo/x.txt\n", "M static_upstream/bar/x.txt\n"]})
    resolver = _resolver(runner)

    first = await resolver.resolve()
    second = await resolver.resolve()

    assert first == second == ["foo"]
    assert runner.calls == [_STATUS]


def test_upstream_project_takes_first_segment_after_prefix() -> None:
    assert upstream_project("static_upstream/widgets/src/a.js", "static_upstream") == "widgets"
    assert upstream_project("site/static_upstream/widgets/a.js", "static_upstream") == "widgets"
    assert upstream_project("static_upstream/a.js", "static_upstream") is None
    assert upstream_project("not_static_upstream/widgets/a.js", "static_upstream") is None


def test_in_upstream_matches_the_prefix_at_any_depth() -> None:
    assert in_upstream("static_upstream/a/b", "static_upstream")
    assert in_upstream("sites/x/static_upstream/a/b", "static_upstream")
    assert not in_upstream("not_static_upstream/a/b", "static_upstream")
    assert not in_upstream("sites/www/downstream/a/b", "static_upstream")


def test_downstream_project_is_anchored_to_the_downstream_segment() -> None:
    assert downstream_project("sites/www/downstream/y/b", "downstream") == "y"
    assert downstream_project("downstream/y/b", "downstream") == "y"
    assert downstream_project("sites/www/downstream/b", "downstream") is None
    assert downstream_project("static_upstream/y/b", "downstream") is None


def test_match_watched_project_first_match_wins() -> None:
    watched = ["widgets", "gadgets"]

    assert match_watched_project("/repo/static_upstream/widgets/src/a.js", watched, "static_upstream") == "widgets"
    assert match_watched_project("static_upstream/gadgets/b.css", watched, "static_upstream") == "gadgets"
    assert match_watched_project("static_upstream/widgets2/b.css", watched, "static_upstream") is None
    assert match_watched_project("docs/readme.md", watched, "static_upstream") is None


def test_dedupe_keeps_first_seen_order() -> None:
    assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
