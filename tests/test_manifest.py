"""Tests for the manifest model and the package.json loader."""

from __future__ import annotations

import pytest

from npm_drift.errors import LoadError
from npm_drift.models import DEPENDENCY_CATEGORIES, Manifest
from npm_drift.parsers.package_json import (
    ManifestShapeError,
    load_manifest,
    validate,
)

from .conftest import write_manifest


class TestManifest:
    def test_missing_categories_are_empty(self):
        manifest = Manifest.from_dict({"name": "x", "dependencies": {"a": "1.0.0"}})
        assert manifest.category("dependencies") == {"a": "1.0.0"}
        assert manifest.category("devDependencies") == {}
        assert manifest.category("peerDependencies") == {}

    def test_null_category_is_empty(self):
        manifest = Manifest.from_dict({"devDependencies": None})
        assert manifest.dev_dependencies == {}

    def test_category_names_map_to_fields(self):
        manifest = Manifest.from_dict(
            {
                "dependencies": {"a": "1"},
                "devDependencies": {"b": "2"},
                "peerDependencies": {"c": "3"},
            }
        )
        assert manifest.dependencies == {"a": "1"}
        assert manifest.dev_dependencies == {"b": "2"}
        assert manifest.peer_dependencies == {"c": "3"}
        assert list(manifest.to_dict()) == list(DEPENDENCY_CATEGORIES)

    def test_non_mapping_category_rejected(self):
        with pytest.raises(TypeError, match="dependencies"):
            Manifest(dependencies=["left-pad"])

    @pytest.mark.parametrize("section", [["ab"], [], "", 0])
    def test_from_dict_rejects_non_mapping_section(self, section):
        with pytest.raises(TypeError, match="dependencies"):
            Manifest.from_dict({"dependencies": section})

    def test_from_dict_copies_sections(self):
        deps = {"a": "1"}
        manifest = Manifest.from_dict({"dependencies": deps})
        deps["b"] = "2"
        assert manifest.dependencies == {"a": "1"}

    def test_unknown_category(self):
        with pytest.raises(KeyError):
            Manifest().category("optionalDependencies")


class TestValidate:
    def test_accepts_full_manifest(self):
        validate({"name": "x", "version": "1.0.0", "dependencies": {"a": "^1.0.0"}})

    def test_rejects_non_object(self):
        with pytest.raises(ManifestShapeError, match="<root>"):
            validate(["dependencies"])

    def test_rejects_list_section(self):
        with pytest.raises(ManifestShapeError, match="devDependencies"):
            validate({"devDependencies": ["jest"]})

    def test_rejects_non_string_version(self):
        with pytest.raises(ManifestShapeError, match="dependencies/a"):
            validate({"dependencies": {"a": 1}})

    def test_ignores_unrelated_fields(self):
        validate({"scripts": {"build": 1}, "workspaces": ["packages/*"]})


class TestLoadManifest:
    def test_loads_package_json(self, tmp_path):
        write_manifest(tmp_path, {"dependencies": {"lodash": "4.17.0"}})
        manifest = load_manifest(tmp_path)
        assert manifest.dependencies == {"lodash": "4.17.0"}

    def test_is_idempotent(self, tmp_path):
        write_manifest(tmp_path, {"peerDependencies": {"react": ">=17"}})
        assert load_manifest(tmp_path) == load_manifest(tmp_path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError) as exc_info:
            load_manifest(tmp_path)
        assert exc_info.value.path == tmp_path
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert str(tmp_path) in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        write_manifest(tmp_path, "{not json")
        with pytest.raises(LoadError) as exc_info:
            load_manifest(tmp_path)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_malformed_section(self, tmp_path):
        write_manifest(tmp_path, {"dependencies": "left-pad"})
        with pytest.raises(LoadError) as exc_info:
            load_manifest(tmp_path)
        assert isinstance(exc_info.value.cause, ManifestShapeError)
