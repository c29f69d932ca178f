"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from entitykinds import (
    Entity,
    InstanceFactory,
    TypeRegistry,
    entity_kind,
    get_registry,
    reset_registry,
)


@pytest.fixture
def registry():
    """Fresh, private TypeRegistry instance."""
    return TypeRegistry()


@pytest.fixture
def factory(registry):
    """InstanceFactory bound to the private registry."""
    return InstanceFactory(registry)


@pytest.fixture(autouse=True)
def _reset_process_registry():
    """Reset the process-wide registry to its initial state around every test."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def process_registry():
    """Process-wide registry, already reset for this test."""
    return get_registry()


@entity_kind("Person")
class FixturePerson(Entity):
    """Every new Person starts out as The Flash."""

    @property
    def nickname(self) -> str | None:
        return self.get("nickname")

    @nickname.setter
    def nickname(self, value: str) -> None:
        self.put("nickname", value)

    @property
    def real_name(self) -> str | None:
        return self.get("realName")

    @real_name.setter
    def real_name(self, value: str) -> None:
        self.put("realName", value)

    def set_default_values(self) -> None:
        self.nickname = "The Flash"


@entity_kind("NoDefaultConstructor")
class FixtureNoDefaultConstructor(Entity):
    def __init__(self, argument: None) -> None:
        super().__init__()


@entity_kind("ClassWithDirtyingConstructor")
class FixtureDirtyingConstructor(Entity):
    def __init__(self) -> None:
        super().__init__()
        self.put("foo", "Bar")


@pytest.fixture
def person_cls():
    return FixturePerson


@pytest.fixture
def no_default_constructor_cls():
    return FixtureNoDefaultConstructor


@pytest.fixture
def dirtying_cls():
    return FixtureDirtyingConstructor
