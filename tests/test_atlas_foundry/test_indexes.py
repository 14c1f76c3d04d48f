"""Tests for index building and deterministic ordering."""

import pytest

from atlas_foundry.indexes import body_sort_key, build_index, empty_index, index_by_id
from atlas_foundry.models import Body
from tests.test_atlas_foundry.factories import body_doc, make_entries, mission_doc, system_doc


@pytest.fixture
def entries():
    return make_entries(
        ("system", system_doc()),
        ("system", system_doc("alpha", "alpha Centauri", primary="alpha/a")),
        ("body", body_doc("sol/sun", "Sun", "sol", type="star", navOrder=0)),
        ("body", body_doc("sol/mars", "Mars", "sol/sun", navOrder=4)),
        ("body", body_doc("sol/earth", "Earth", "sol/sun", navOrder=3)),
        ("body", body_doc("sol/ceres", "Ceres", "sol/sun", type="dwarf-planet")),
        ("body", body_doc("sol/arrokoth", "Arrokoth", "sol/sun", type="asteroid")),
        ("body", body_doc("sol/earth/moon", "Moon", "sol/earth", type="moon")),
        ("body", body_doc("alpha/a", "Alpha A", "alpha", system="alpha", type="star")),
        ("mission", mission_doc("voyager-2", "voyager 2")),
        ("mission", mission_doc("apollo-11", "Apollo 11")),
    )


def ids(items):
    return [item.id for item in items]


def test_collections_are_sorted(entries):
    index = build_index(entries)

    assert ids(index.systems) == ["alpha", "sol"]
    assert ids(index.missions) == ["apollo-11", "voyager-2"]
    assert ids(index.bodies) == [
        "sol/sun",
        "sol/earth",
        "sol/mars",
        "alpha/a",
        "sol/arrokoth",
        "sol/ceres",
        "sol/earth/moon",
    ]


def test_children_by_parent(entries):
    index = build_index(entries)

    assert ids(index.get_children("sol/sun")) == [
        "sol/earth",
        "sol/mars",
        "sol/arrokoth",
        "sol/ceres",
    ]
    assert ids(index.get_children("sol/earth")) == ["sol/earth/moon"]
    assert index.get_children("sol/earth/moon") == []
    assert ids(index.get_children("sol")) == ["sol/sun"]


def test_groups_partition_bodies(entries):
    index = build_index(entries)

    grouped = [body for group in index.bodies_by_system_id.values() for body in group]
    assert sorted(ids(grouped)) == sorted(ids(index.bodies))
    by_parent = [body for group in index.children_by_parent_id.values() for body in group]
    assert sorted(ids(by_parent)) == sorted(ids(index.bodies))
    assert ids(index.bodies_by_system_id["alpha"]) == ["alpha/a"]


def test_groups_preserve_global_order(entries):
    index = build_index(entries)
    position = {body.id: i for i, body in enumerate(index.bodies)}

    for group in index.children_by_parent_id.values():
        assert [position[b.id] for b in group] == sorted(position[b.id] for b in group)


def test_every_system_root_has_one_child(entries):
    index = build_index(entries)

    for system in index.systems:
        assert ids(index.get_children(system.id)) == [system.primary_body_id]


def test_build_is_deterministic(entries):
    shuffled = dict(reversed(list(entries.items())))

    assert build_index(entries).to_dict() == build_index(shuffled).to_dict()


def test_lookups(entries):
    index = build_index(entries, files_scanned=11)

    assert index.entity_count == 11
    assert index.files_scanned == 11
    assert index.get_system("sol").name == "Sol"
    assert index.get_system("sol/sun") is None
    assert index.get_body("sol/sun").type == "star"
    assert index.get_body("apollo-11") is None
    assert index.get_entity("apollo-11").name == "Apollo 11"
    assert index.get_entity("nope") is None
    assert set(index.bodies_by_id) == set(ids(index.bodies))
    assert set(index.systems_by_id) == {"alpha", "sol"}


def test_to_dict_uses_content_field_names(entries):
    data = build_index(entries).to_dict()

    assert list(data) == [
        "systems",
        "bodies",
        "missions",
        "entitiesById",
        "bodiesBySystemId",
        "childrenByParentId",
    ]
    sun = data["entitiesById"]["sol/sun"]
    assert sun["navParentId"] == "sol"
    assert sun["curationScore"] == 50
    assert "nav_parent_id" not in sun
    assert [b["id"] for b in data["childrenByParentId"]["sol/earth"]] == ["sol/earth/moon"]


def test_empty_index():
    index = empty_index()

    assert index.entity_count == 0
    assert index.systems == [] and index.bodies == [] and index.missions == []
    assert index.get_children("sol") == []
    assert index.to_dict()["entitiesById"] == {}


def test_name_ties_break_on_id():
    twin_b = Body.model_validate(body_doc("sol/b", "Twin", "sol/sun"))
    twin_a = Body.model_validate(body_doc("sol/a", "Twin", "sol/sun"))

    assert ids(sorted([twin_b, twin_a], key=body_sort_key)) == ["sol/a", "sol/b"]


def test_fractional_nav_order():
    late = Body.model_validate(body_doc("sol/x", "X", "sol/sun", navOrder=2.5))
    early = Body.model_validate(body_doc("sol/y", "Y", "sol/sun", navOrder=-1))

    assert ids(sorted([late, early], key=body_sort_key)) == ["sol/y", "sol/x"]


def test_index_by_id_last_wins():
    first = Body.model_validate(body_doc("sol/x", "First", "sol/sun"))
    second = Body.model_validate(body_doc("sol/x", "Second", "sol/sun"))

    assert index_by_id([first, second])["sol/x"].name == "Second"
    assert index_by_id([]) == {}


def test_get_children_returns_a_copy(entries):
    index = build_index(entries)

    children = index.get_children("sol/sun")
    children.clear()
    index.get_children("sol/earth/moon").append(index.get_body("sol/mars"))

    assert len(index.get_children("sol/sun")) == 4
    assert index.get_children("sol/earth/moon") == []
