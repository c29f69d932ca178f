"""Tests for system kinds and the current-user cache."""

import pytest

from entitykinds import (
    ConflictPolicy,
    CurrentUserStore,
    Installation,
    InstanceFactory,
    RegistrationError,
    Role,
    Session,
    TypeRegistry,
    User,
)
from entitykinds.builtins import BUILTIN_KINDS, register_builtin_kinds, unregister_builtin_kinds


class MyUser(User):
    pass


class MyUser2(User):
    pass


@pytest.fixture
def builtin_registry(registry):
    register_builtin_kinds(registry)
    return registry


def test_builtin_kind_names(builtin_registry):
    assert sorted(builtin_registry.names()) == ["_Installation", "_Role", "_Session", "_User"]
    assert builtin_registry.get_type("_User") is User
    assert builtin_registry.get_type("_Role") is Role
    assert builtin_registry.get_type("_Session") is Session
    assert builtin_registry.get_type("_Installation") is Installation


def test_process_registry_has_builtins(process_registry):
    assert all(cls.__entity_kind__ in process_registry for cls in BUILTIN_KINDS)


def test_user_subclass_takes_over(builtin_registry):
    """Application subclasses of built-in kinds win over the built-in class."""
    factory = InstanceFactory(builtin_registry)

    assert type(factory.create_fresh("_User")) is User
    builtin_registry.register(MyUser)
    assert type(factory.create_fresh("_User")) is MyUser
    builtin_registry.register(User)
    assert type(factory.create_fresh("_User")) is MyUser


def test_sibling_user_subclass_rejected(builtin_registry):
    builtin_registry.register(MyUser)

    with pytest.raises(RegistrationError):
        builtin_registry.register(MyUser2)

    assert builtin_registry.get_type("_User") is MyUser


def test_reregistering_builtins_keeps_subclasses(builtin_registry):
    builtin_registry.register(MyUser)

    register_builtin_kinds(builtin_registry)

    assert builtin_registry.get_type("_User") is MyUser


def test_unregister_builtin_kinds(builtin_registry):
    builtin_registry.register(MyUser)

    unregister_builtin_kinds(builtin_registry)

    assert len(builtin_registry) == 0


def test_user_fields():
    user = User()
    user.username = "barry"
    user.email = "barry@example.com"

    assert user.username == "barry"
    assert user.email == "barry@example.com"
    assert user.dirty_keys() == frozenset({"username", "email"})


def test_role_name():
    role = Role()
    role.name = "Administrators"

    assert role.name == "Administrators"
    assert role.kind == "_Role"


def test_session_token_is_remote():
    assert Session().session_token is None


def test_fresh_installation_gets_defaults(builtin_registry):
    factory = InstanceFactory(builtin_registry)

    first = factory.create_fresh("_Installation")
    second = factory.create_fresh("_Installation")

    assert first.device_type == "python"
    assert first.installation_id
    assert first.installation_id != second.installation_id
    assert first.is_dirty()


def test_installation_reference_is_clean(builtin_registry):
    pointer = InstanceFactory(builtin_registry).create_reference("_Installation", "abc")

    assert pointer.installation_id is None
    assert not pointer.is_dirty()


# Current user cache


def test_current_user_store():
    store = CurrentUserStore()
    user = User()

    store.set(user)
    assert store.get() is user

    store.clear()
    assert store.get() is None


def test_current_user_store_rejects_non_users():
    with pytest.raises(TypeError):
        CurrentUserStore().set(Role())  # type: ignore[arg-type]


def test_current_user_cleared_on_user_registration(builtin_registry):
    """Registering a User subclass invalidates the cached current user."""
    store = CurrentUserStore()
    store.attach(builtin_registry)
    store.set(User())

    builtin_registry.register(MyUser)

    assert store.get() is None


def test_current_user_kept_on_unrelated_changes(builtin_registry, person_cls):
    store = CurrentUserStore()
    store.attach(builtin_registry)
    user = User()
    store.set(user)

    builtin_registry.register(person_cls)
    builtin_registry.register(User)
    builtin_registry.unregister("_Role")

    assert store.get() is user


def test_detached_store_not_cleared(builtin_registry):
    store = CurrentUserStore()
    store.attach(builtin_registry)
    store.detach(builtin_registry)
    user = User()
    store.set(user)

    builtin_registry.register(MyUser)

    assert store.get() is user


def test_sibling_user_subclasses_under_replace_policy():
    """With REPLACE, the last of two sibling User subclasses wins.

    Each takeover of _User also drops the cached current user.
    """
    registry = TypeRegistry(conflict_policy=ConflictPolicy.REPLACE)
    register_builtin_kinds(registry)
    factory = InstanceFactory(registry)
    store = CurrentUserStore()
    store.attach(registry)

    assert type(factory.create_fresh("_User")) is User
    store.set(User())
    registry.register(MyUser)
    assert type(factory.create_fresh("_User")) is MyUser
    assert store.get() is None

    registry.register(User)
    assert type(factory.create_fresh("_User")) is MyUser

    store.set(MyUser())
    registry.register(MyUser2)
    assert type(factory.create_fresh("_User")) is MyUser2
    assert store.get() is None
