"""Tests for discovery, per-file parsing and identity assembly."""

from pathlib import Path

import pytest

from atlas_foundry.exceptions import DuplicateIdError, ParseError, SchemaValidationError
from atlas_foundry.loader import ContentLoader, discover
from atlas_foundry.models import Body, ContentEntry, System
from atlas_foundry.parsers import parse_content_file
from atlas_foundry.registry import ContentRegistry
from tests.test_atlas_foundry.factories import (
    body_doc,
    deny_body_reads,
    mission_doc,
    system_doc,
    write_doc,
)


class TestDiscover:
    def test_finds_only_known_basenames(self, content_root: Path):
        write_doc(content_root, "sol/system.json", system_doc())
        write_doc(content_root, "a/b/c/d/body.json", body_doc("sol/sun", "Sun", "sol"))
        write_doc(content_root, "m/mission.json", mission_doc("m", "M"))
        write_doc(content_root, "notes/bodies.json", {})
        write_doc(content_root, "notes/body.json.bak", {})
        write_doc(content_root, "README.md", "# hi")
        (content_root / "fake" / "system.json").mkdir(parents=True)

        found = discover(content_root)

        assert sorted(p.name for p in found) == ["body.json", "mission.json", "system.json"]
        assert all(p.is_absolute() for p in found)

    def test_missing_root_is_empty(self, tmp_path: Path):
        assert discover(tmp_path / "nope") == []

    def test_empty_root(self, content_root: Path):
        assert discover(content_root) == []


class TestParseContentFile:
    def test_parses_body(self, content_root: Path):
        path = write_doc(
            content_root, "sol/sun/body.json", body_doc("sol/sun", "Sun", "sol", type="star")
        )

        entry = parse_content_file(path, content_root)

        assert entry.kind == "body"
        assert entry.rel_path == "sol/sun/body.json"
        assert entry.id == "sol/sun"
        assert isinstance(entry.data, Body)

    def test_malformed_json_names_file_and_parser_message(self, content_root: Path):
        path = write_doc(content_root, "sol/system.json", '{"id": "sol",')

        with pytest.raises(ParseError) as exc_info:
            parse_content_file(path, content_root)

        message = str(exc_info.value)
        assert message.startswith("Invalid JSON in sol/system.json: ")
        assert "Expecting" in message
        assert exc_info.value.rel_path == "sol/system.json"

    def test_schema_error_names_file_and_field(self, content_root: Path):
        doc = body_doc("sol/earth", "Earth", "sol/sun", size=42)
        path = write_doc(content_root, "planets/earth/body.json", doc)

        with pytest.raises(SchemaValidationError) as exc_info:
            parse_content_file(path, content_root)

        error = exc_info.value
        assert error.rel_path == "planets/earth/body.json"
        assert error.field_path == "size"
        assert "Schema validation failed for planets/earth/body.json: size:" in str(error)

    def test_kind_comes_from_filename(self, content_root: Path):
        # A system document saved as body.json fails the body schema.
        path = write_doc(content_root, "sol/body.json", system_doc())

        with pytest.raises(SchemaValidationError) as exc_info:
            parse_content_file(path, content_root)

        assert "primaryBodyId" in str(exc_info.value)

    def test_rejects_unknown_filename(self, content_root: Path):
        path = write_doc(content_root, "sol/planet.json", {})
        with pytest.raises(ValueError):
            parse_content_file(path, content_root)


class TestContentRegistry:
    def _entry(self, kind, entity, rel_path) -> ContentEntry:
        return ContentEntry(kind=kind, rel_path=rel_path, data=entity)

    def test_add_and_get(self):
        registry = ContentRegistry()
        system = System.model_validate(system_doc())
        registry.add(self._entry("system", system, "sol/system.json"))

        assert "sol" in registry
        assert len(registry) == 1
        assert registry.get("sol").data is system
        assert registry.ids() == ["sol"]

    def test_duplicate_across_kinds(self):
        registry = ContentRegistry()
        registry.add(
            self._entry("system", System.model_validate(system_doc()), "sol/system.json")
        )
        clash = Body.model_validate(body_doc("sol", "Sol Body", "sol"))

        with pytest.raises(DuplicateIdError) as exc_info:
            registry.add(self._entry("body", clash, "odd/body.json"))

        assert str(exc_info.value) == (
            'Duplicate id: "sol" (found in system: sol/system.json and body: odd/body.json)'
        )


class TestContentLoader:
    def test_load_all_counts_files(self, sol_root: Path):
        loader = ContentLoader(sol_root)
        registry = loader.load_all()

        assert loader.files_scanned == 8
        assert len(registry) == 8
        assert registry.get("apollo-11").kind == "mission"

    def test_duplicate_body_ids_name_both_files(self, content_root: Path):
        write_doc(content_root, "a/body.json", body_doc("sol/mars", "Mars", "sol/sun"))
        write_doc(content_root, "b/body.json", body_doc("sol/mars", "Mars II", "sol/sun"))

        with pytest.raises(DuplicateIdError) as exc_info:
            ContentLoader(content_root).load_all()

        error = exc_info.value
        assert error.entity_id == "sol/mars"
        assert {error.first_path, error.second_path} == {"a/body.json", "b/body.json"}
        assert "a/body.json" in str(error) and "b/body.json" in str(error)

    def test_first_bad_file_aborts(self, sol_root: Path):
        write_doc(sol_root, "broken/body.json", "not json")

        with pytest.raises(ParseError, match="broken/body.json"):
            ContentLoader(sol_root).load_all()


def test_unreadable_file_is_a_parse_error(content_root: Path, monkeypatch):
    path = write_doc(content_root, "sol/sun/body.json", body_doc("sol/sun", "Sun", "sol"))
    deny_body_reads(monkeypatch)

    with pytest.raises(ParseError) as exc_info:
        parse_content_file(path, content_root)

    assert str(exc_info.value).startswith("Cannot read sol/sun/body.json: ")
    assert exc_info.value.rel_path == "sol/sun/body.json"
