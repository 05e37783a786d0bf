from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from travis_client.models import (
    Action,
    Build,
    Collection,
    Embed,
    Linked,
    MinimalBuild,
    MinimalRepository,
    Pagination,
    Repository,
    Setting,
    TravisModel,
    Unlinked,
)


class Thing(TravisModel):
    field: str


def test_embed_reads_sideband_and_object_from_same_payload() -> None:
    embed = Embed[Thing].model_validate({"@type": "T", "@href": "/x/1", "field": "v"})

    assert embed.type == "T"
    assert embed.path == "/x/1"
    assert embed.object.field == "v"
    assert embed.link == Linked("/x/1")


def test_embed_without_href_is_unlinked() -> None:
    embed = Embed[Thing].model_validate({"@type": "T", "field": "v"})

    assert embed.path is None
    assert embed.link == Unlinked("T")


def test_embed_requires_type_tag() -> None:
    with pytest.raises(ValidationError):
        Embed[Thing].model_validate({"@href": "/x/1", "field": "v"})


def test_embed_serializes_back_to_wire_shape() -> None:
    payload = {"@type": "repository", "@href": "/repo/1", "id": 1, "name": "app", "slug": "a/app"}
    embed = Embed[MinimalRepository].model_validate(payload)

    dumped = embed.model_dump(by_alias=True)

    assert dumped == payload
    assert Embed[MinimalRepository].model_validate(dumped) == embed


def test_pagination_decodes_wire_names() -> None:
    page = Pagination.model_validate(
        {"limit": 5, "offset": 0, "count": 12, "is_first": True, "is_last": False}
    )

    assert (page.limit, page.offset, page.count) == (5, 0, 12)
    assert page.is_first is True
    assert page.is_last is False
    assert page.next is None


def test_pagination_round_trip() -> None:
    page = Pagination.model_validate(
        {
            "limit": 25,
            "offset": 25,
            "count": 60,
            "is_first": False,
            "is_last": False,
            "next": {"@href": "/builds?limit=25&offset=50", "offset": 50, "limit": 25},
            "prev": {"@href": "/builds?limit=25&offset=0", "offset": 0, "limit": 25},
        }
    )

    assert Pagination.model_validate(page.model_dump(by_alias=True)) == page
    assert page.next is not None and page.next.path == "/builds?limit=25&offset=50"


def test_collection_accepts_bare_array(build_payload) -> None:
    builds = Collection[Build].model_validate([build_payload(1), build_payload(2)])

    assert [build.id for build in builds] == [1, 2]
    assert len(builds) == 2
    assert builds[1].id == 2
    assert builds.pagination is None


def test_collection_accepts_envelope(build_payload) -> None:
    envelope = {
        "@type": "builds",
        "@href": "/builds",
        "@representation": "standard",
        "@pagination": {"limit": 25, "offset": 0, "count": 1, "is_first": True, "is_last": True},
        "builds": [build_payload(3)],
    }

    builds = Collection[Build].model_validate(envelope)

    assert builds.type == "builds"
    assert builds.path == "/builds"
    assert builds.pagination is not None and builds.pagination.count == 1
    assert [build.id for build in builds] == [3]


def test_collection_without_items_fails() -> None:
    with pytest.raises(ValidationError):
        Collection[Setting].model_validate({"unexpected": 1})


def test_build_decodes_embedded_resources(build_payload) -> None:
    build = Build.model_validate(build_payload(5, number="42"))

    assert build.number == "42"
    assert build.repository is not None
    assert build.repository.object.slug == "travis-ci/travis-web"
    assert build.repository.link == Linked("/repo/25")
    assert build.commit is not None and build.commit.link == Unlinked("commit")
    assert [job.object.id for job in build.jobs] == [51]
    assert build.started_at is not None and build.started_at.year == 2018


def test_build_requires_core_fields() -> None:
    with pytest.raises(ValidationError):
        Build.model_validate({"unexpected": 1})


def test_repository_owner_embed(repository_payload) -> None:
    repo = Repository.model_validate(repository_payload(slug="octo/cat"))

    assert repo.slug == "octo/cat"
    assert repo.owner is not None and repo.owner.object.login == "travis-ci"
    assert repo.default_branch is not None and repo.default_branch.object.name == "master"


def test_minimal_models_name_their_full_counterpart() -> None:
    assert MinimalBuild.full_model() is Build
    assert MinimalRepository.full_model() is Repository


def test_action_unwraps_pending_envelope() -> None:
    payload = {
        "@type": "pending",
        "build": {"@type": "build", "@href": "/build/9", "id": 9, "number": "3", "state": "created"},
        "state_change": "restart",
        "resource_type": "build",
    }

    action = Action[MinimalBuild].model_validate(payload)

    assert action.type == "pending"
    assert action.state_change == "restart"
    assert action.resource_type == "build"
    assert action.resource.id == 9


def test_action_accepts_bare_resource() -> None:
    action = Action[MinimalBuild].model_validate({"@type": "build", "id": 4, "state": "canceled"})

    assert action.resource.id == 4
    assert action.resource.state == "canceled"


def test_setting_values_keep_their_type() -> None:
    settings = TypeAdapter(list[Setting]).validate_python(
        [{"name": "build_pushes", "value": True}, {"name": "maximum_number_of_builds", "value": 3}]
    )

    assert settings[0].value is True
    assert settings[1].value == 3
