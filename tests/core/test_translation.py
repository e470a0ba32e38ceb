# tests/core/test_translation.py
"""Tests for translatable values and the catalog translator."""

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from optionkit.core.translation import (
    CatalogTranslator,
    Group,
    Leaf,
    Rows,
    resolve,
    to_translatable,
)


def shout(text: str) -> str:
    return text.upper()


# Nested label mappings: string leaves, string or int keys
labels_strategy = st.recursive(
    st.text(max_size=20),
    lambda children: st.dictionaries(
        st.one_of(st.text(max_size=10), st.integers()), children, max_size=5
    ),
    max_leaves=20,
)


class TestToTranslatable:
    def test_string_is_leaf(self) -> None:
        assert to_translatable("Save") == Leaf("Save")

    def test_mapping_is_group(self) -> None:
        assert to_translatable({"a": "A", "b": {"c": "C"}}) == Group(
            {"a": Leaf("A"), "b": Group({"c": Leaf("C")})}
        )

    def test_list_is_rows(self) -> None:
        assert to_translatable(["A", {"id": "b", "name": "B"}]) == Rows(
            (Leaf("A"), Group({"id": Leaf("b"), "name": Leaf("B")}))
        )

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="Cannot translate value of type int"):
            to_translatable({"a": 1})  # type: ignore[dict-item]


class TestResolve:
    def test_leaf_is_translated(self) -> None:
        assert resolve(Leaf("save"), shout) == "SAVE"

    def test_group_keys_preserved(self) -> None:
        translated = resolve(to_translatable({"yes": "yes", 0: "no"}), shout)

        assert translated == {"yes": "YES", 0: "NO"}

    def test_nested_group(self) -> None:
        translated = resolve(to_translatable({"g": {"a": "a"}}), shout)

        assert translated == {"g": {"a": "A"}}

    def test_rows_keep_order(self) -> None:
        translated = resolve(to_translatable([{"name": "b"}, {"name": "a"}]), shout)

        assert translated == [{"name": "B"}, {"name": "A"}]

    def test_empty_group(self) -> None:
        assert resolve(Group({}), shout) == {}

    def test_rejects_non_translatable(self) -> None:
        with pytest.raises(TypeError, match="Not a Translatable"):
            resolve("plain", shout)  # type: ignore[arg-type]

    @given(text=st.text(max_size=50))
    def test_string_translates_directly(self, text: str) -> None:
        assert resolve(to_translatable(text), shout) == text.upper()

    @given(labels=labels_strategy)
    def test_mapping_preserves_shape(self, labels: object) -> None:
        """Every key survives; every leaf is translated independently."""

        def expected(value: object) -> object:
            if isinstance(value, str):
                return value.upper()
            return {k: expected(v) for k, v in value.items()}  # type: ignore[attr-defined]

        assert resolve(to_translatable(labels), shout) == expected(labels)  # type: ignore[arg-type]


class TestCatalogTranslator:
    def test_translates_within_domain(self) -> None:
        translator = CatalogTranslator(
            catalogs={"banner": {"Save": "Enregistrer"}, "slider": {"Save": "Sauver"}}
        )

        assert translator.translate("Save", "banner") == "Enregistrer"
        assert translator.translate("Save", "slider") == "Sauver"

    def test_missing_entry_falls_back_to_source(self) -> None:
        translator = CatalogTranslator(catalogs={"banner": {}})

        assert translator.translate("Save", "banner") == "Save"

    def test_missing_domain_falls_back_to_source(self) -> None:
        assert CatalogTranslator().translate("Save", "banner") == "Save"

    def test_from_yaml(self, tmp_path: Path) -> None:
        catalog = tmp_path / "fr.yaml"
        catalog.write_text(
            "banner:\n  Save: Enregistrer\n  Top: Haut\n", encoding="utf-8"
        )

        translator = CatalogTranslator.from_yaml(catalog, locale="fr")

        assert translator.locale == "fr"
        assert translator.translate("Top", "banner") == "Haut"

    def test_from_empty_yaml(self, tmp_path: Path) -> None:
        catalog = tmp_path / "empty.yaml"
        catalog.write_text("", encoding="utf-8")

        assert CatalogTranslator.from_yaml(catalog).catalogs == {}

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            CatalogTranslator.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_rejects_non_mapping(self, tmp_path: Path) -> None:
        catalog = tmp_path / "list.yaml"
        catalog.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping of domains"):
            CatalogTranslator.from_yaml(catalog)

    def test_from_yaml_rejects_flat_domain(self, tmp_path: Path) -> None:
        catalog = tmp_path / "flat.yaml"
        catalog.write_text("banner: Enregistrer\n", encoding="utf-8")

        with pytest.raises(ValueError, match="domain 'banner'"):
            CatalogTranslator.from_yaml(catalog)
