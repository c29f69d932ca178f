import logging

from entitykinds import (
    ConstructionInvariantError,
    CurrentUserStore,
    Entity,
    InstanceFactory,
    RegistrationError,
    User,
    entity_kind,
    get_registry,
)


@entity_kind("Person")
class Person(Entity):
    """Library-level kind."""

    @property
    def nickname(self) -> str | None:
        return self.get("nickname")

    @nickname.setter
    def nickname(self, value: str) -> None:
        self.put("nickname", value)

    def set_default_values(self) -> None:
        self.nickname = "The Flash"


class Speedster(Person):
    """Application-level specialization of Person."""

    @property
    def top_speed(self) -> float | None:
        return self.get("topSpeed")


class Robot:
    pass


@entity_kind("Sloppy")
class Sloppy(Entity):
    def __init__(self) -> None:
        super().__init__()
        self.put("foo", "Bar")  # belongs in set_default_values


class MyUser(User):
    pass


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    registry = get_registry()
    store = CurrentUserStore()
    store.attach(registry)
    store.set(User())

    # Registration order does not matter: the subclass wins either way
    registry.register(Speedster)
    registry.register(Person)
    registry.register(Sloppy)

    try:
        registry.register(Robot, "Person")
    except RegistrationError as e:
        print(f"Rejected: {e}")

    factory = InstanceFactory()
    flash = factory.create_fresh("Person")
    print(f"Fresh: {flash!r}, nickname={flash.nickname}")

    pointer = factory.create_reference("Person", "xWMyZ4YEGZ")
    print(f"Reference: {pointer!r}, ref={pointer.to_ref()}")

    try:
        factory.create_reference("Sloppy", "abc")
    except ConstructionInvariantError as e:
        print(f"Refused: {e}")

    registry.register(MyUser)
    print(f"_User -> {registry.get_type('_User').__name__}, cached user: {store.get()}")


if __name__ == "__main__":
    main()
