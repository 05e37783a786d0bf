from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import respx
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def token() -> str:
    return "dummy-token"


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture
def cli_runner(monkeypatch):
    """Provide a CLI runner with a dummy API token."""

    monkeypatch.setenv("TRAVIS_TOKEN", "test-token")
    monkeypatch.delenv("TRAVIS_HOST", raising=False)
    monkeypatch.delenv("TRAVIS_DEBUG", raising=False)
    return CliRunner()


def _repository_embed(repo_id: int = 25, slug: str = "travis-ci/travis-web") -> dict[str, Any]:
    return {
        "@type": "repository",
        "@href": f"/repo/{repo_id}",
        "@representation": "minimal",
        "id": repo_id,
        "name": slug.split("/")[-1],
        "slug": slug,
    }


@pytest.fixture
def build_payload() -> Callable[..., dict[str, Any]]:
    def factory(build_id: int = 1, number: str = "1", state: str = "passed") -> dict[str, Any]:
        job_id = build_id * 10 + 1
        return {
            "@type": "build",
            "@href": f"/build/{build_id}",
            "@representation": "standard",
            "id": build_id,
            "number": number,
            "state": state,
            "duration": 120,
            "event_type": "push",
            "started_at": "2018-04-14T10:00:00Z",
            "finished_at": None,
            "repository": _repository_embed(),
            "branch": {
                "@type": "branch",
                "@href": "/repo/25/branch/master",
                "@representation": "minimal",
                "name": "master",
            },
            "commit": {
                "@type": "commit",
                "@representation": "minimal",
                "id": 7,
                "sha": "abc123",
                "ref": "refs/heads/master",
                "message": "Fix the thing",
                "committed_at": "2018-04-14T09:58:00Z",
            },
            "jobs": [
                {
                    "@type": "job",
                    "@href": f"/job/{job_id}",
                    "@representation": "minimal",
                    "id": job_id,
                }
            ],
        }

    return factory


@pytest.fixture
def repository_payload() -> Callable[..., dict[str, Any]]:
    def factory(
        repo_id: int = 25, slug: str = "travis-ci/travis-web", active: bool = True
    ) -> dict[str, Any]:
        payload = _repository_embed(repo_id, slug)
        payload.update(
            {
                "@representation": "standard",
                "description": "The Travis CI web client",
                "github_language": "JavaScript",
                "active": active,
                "private": False,
                "starred": False,
                "owner": {
                    "@type": "organization",
                    "@href": "/org/87",
                    "id": 87,
                    "login": "travis-ci",
                },
                "default_branch": {
                    "@type": "branch",
                    "@href": f"/repo/{repo_id}/branch/master",
                    "name": "master",
                },
            }
        )
        return payload

    return factory
