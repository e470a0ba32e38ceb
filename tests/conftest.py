# tests/conftest.py
"""Shared test fixtures.

Provides a sample module, a recording store double, and adapter factories.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import os
from collections.abc import Callable, Iterator
from typing import Any, ClassVar

import pytest
from hypothesis import Phase, Verbosity, settings

from optionkit.core.store import SqlConfigurationStore
from optionkit.core.translation import CatalogTranslator
from optionkit.plugins.base import BaseModule
from optionkit.plugins.configuration import OptionsConfiguration
from optionkit.plugins.context import AdminContext, QueryParameters

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))

ADMIN_INDEX = "index.php?controller=AdminModules&token=abc123"


class BannerModule(BaseModule):
    """Sample module with static and computed option labels."""

    name = "banner"
    OPTIONS: ClassVar[dict[str, dict[str, Any]]] = {
        "position": {
            "title": "Position",
            "desc": "Where the banner is shown",
            "type": "select",
            "identifier": "value",
            "default": "top",
            "list": {"top": "Top", "bottom": "Bottom"},
        },
        "delay": {
            "title": "Delay",
            "type": "text",
            "cast": "intval",
            "default": 5,
        },
        "theme": {
            "title": "Theme",
            "type": "radio",
            "choices": {},
        },
        "message": {
            "title": "Message",
            "type": "textarea",
        },
    }

    def get_option_choices(self, option: str) -> dict[Any, Any]:
        if option == "theme":
            return {"light": self.l("Light"), "dark": self.l("Dark")}
        return {}


class RecordingStore:
    """In-memory ConfigurationStore double recording every call.

    ``fail_on`` names make update_value/delete_by_name return False.
    """

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.values: dict[str, str] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_on = fail_on or set()

    def get(self, name: str) -> str:
        self.calls.append(("get", (name,)))
        return self.values.get(name, "")

    def update_value(self, name: str, value: str) -> bool:
        self.calls.append(("update_value", (name, value)))
        if name in self.fail_on:
            return False
        self.values[name] = value
        return True

    def delete_by_name(self, name: str) -> bool:
        self.calls.append(("delete_by_name", (name,)))
        if name in self.fail_on:
            return False
        self.values.pop(name, None)
        return True

    def writes(self) -> list[tuple[Any, ...]]:
        return [args for call, args in self.calls if call == "update_value"]


class StaticController:
    """AdminController double returning fixed markup."""

    def __init__(self, markup: str = "<form>options</form>") -> None:
        self.markup = markup
        self.render_count = 0

    def render_options(self) -> str:
        self.render_count += 1
        return self.markup


FRENCH_CATALOG = {
    "banner": {
        "Position": "Emplacement",
        "Top": "Haut",
        "Bottom": "Bas",
        "Light": "Clair",
        "Dark": "Sombre",
        "Save": "Enregistrer",
    }
}


@pytest.fixture
def banner_module_cls() -> type[BannerModule]:
    return BannerModule


@pytest.fixture
def translator() -> CatalogTranslator:
    return CatalogTranslator(catalogs=FRENCH_CATALOG, locale="fr")


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def recording_store_cls() -> type[RecordingStore]:
    return RecordingStore


@pytest.fixture
def sql_store() -> Iterator[SqlConfigurationStore]:
    store = SqlConfigurationStore.in_memory()
    yield store
    store.close()


@pytest.fixture
def controller() -> StaticController:
    return StaticController()


@pytest.fixture
def make_configuration(
    recording_store: RecordingStore, controller: StaticController
) -> Callable[..., OptionsConfiguration]:
    """Factory building an adapter around BannerModule.

    Keyword arguments:
        module: module instance (default: untranslated BannerModule)
        store: ConfigurationStore (default: recording_store)
        query: request query parameters (default: none)
    """

    def _make(
        *,
        module: BaseModule | None = None,
        store: Any = None,
        query: dict[str, str] | None = None,
    ) -> OptionsConfiguration:
        context = AdminContext(
            current_index=ADMIN_INDEX,
            request=QueryParameters(query=query or {}),
            controller=controller,
        )
        return OptionsConfiguration(
            module if module is not None else BannerModule(),
            store=store if store is not None else recording_store,
            context=context,
        )

    return _make
