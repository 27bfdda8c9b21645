"""
Tests para la carga de YAML y el descubrimiento de archivos.
"""
import pytest

from table_import.infrastructure.documents.file_finder import find_configuration_files
from table_import.infrastructure.documents.yaml_loader import YamlDocumentLoader
from table_import.shared.exceptions.domain import DocumentParseError


class TestYamlDocumentLoader:

    def test_loads_mapping(self, tmp_path):
        path = tmp_path / "be_groups.yaml"
        path.write_text("be_groups:\n  editors:\n    title: Editors\n    subgroup: [1, 2]\n", encoding="utf-8")
        document = YamlDocumentLoader().load(str(path))
        assert document == {"be_groups": {"editors": {"title": "Editors", "subgroup": [1, 2]}}}

    def test_missing_or_empty_path_returns_none(self, tmp_path):
        loader = YamlDocumentLoader()
        assert loader.load(str(tmp_path / "nope.yml")) is None
        assert loader.load("") is None
        assert loader.load(str(tmp_path)) is None

    def test_empty_file_is_empty_document(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert YamlDocumentLoader().load(str(path)) == {}

    def test_malformed_yaml_raises_parse_error(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("pages:\n  - uid: 1\n bad indent: [\n", encoding="utf-8")
        with pytest.raises(DocumentParseError) as exc_info:
            YamlDocumentLoader().load(str(path))
        assert exc_info.value.path == str(path)

    def test_non_mapping_root_raises_parse_error(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(DocumentParseError):
            YamlDocumentLoader().load(str(path))


class TestFindConfigurationFiles:

    def test_only_files_inside_configuration_dirs(self, tmp_path):
        (tmp_path / "ext_a" / "Configuration" / "Yaml").mkdir(parents=True)
        (tmp_path / "ext_b" / "Configuration").mkdir(parents=True)
        (tmp_path / "ext_c" / "Resources").mkdir(parents=True)

        a = tmp_path / "ext_a" / "Configuration" / "Yaml" / "pages.yml"
        b = tmp_path / "ext_b" / "Configuration" / "be_users.yaml"
        a.write_text("pages: {}\n", encoding="utf-8")
        b.write_text("be_users: {}\n", encoding="utf-8")
        (tmp_path / "ext_b" / "Configuration" / "notes.txt").write_text("x", encoding="utf-8")
        (tmp_path / "ext_c" / "Resources" / "ignored.yml").write_text("x: 1\n", encoding="utf-8")

        assert find_configuration_files(str(tmp_path)) == sorted([str(a), str(b)])

    def test_missing_root_yields_nothing(self, tmp_path):
        assert find_configuration_files(str(tmp_path / "missing")) == []
