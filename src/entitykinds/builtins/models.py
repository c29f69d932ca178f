"""System kinds shipped with the package.

Applications may register subclasses of these under the same kind name;
the registry then resolves the kind to the subclass.
"""

from __future__ import annotations

import uuid

from entitykinds.core.entity import Entity, entity_kind


@entity_kind("_User")
class User(Entity):
    """Account of an application user."""

    @property
    def username(self) -> str | None:
        return self.get("username")

    @username.setter
    def username(self, value: str) -> None:
        self.put("username", value)

    @property
    def email(self) -> str | None:
        return self.get("email")

    @email.setter
    def email(self, value: str) -> None:
        self.put("email", value)


@entity_kind("_Role")
class Role(Entity):
    """Named group of users sharing permissions."""

    @property
    def name(self) -> str | None:
        return self.get("name")

    @name.setter
    def name(self, value: str) -> None:
        self.put("name", value)


@entity_kind("_Session")
class Session(Entity):
    """Server-issued login session. Its token is assigned remotely."""

    @property
    def session_token(self) -> str | None:
        return self.get("sessionToken")


@entity_kind("_Installation")
class Installation(Entity):
    """One installed copy of the application.

    New installations get a generated installation id. References to existing
    installations keep the remote one, so the id is assigned in the defaults
    hook rather than the constructor.
    """

    @property
    def installation_id(self) -> str | None:
        return self.get("installationId")

    @property
    def device_type(self) -> str | None:
        return self.get("deviceType")

    def set_default_values(self) -> None:
        self.put("installationId", str(uuid.uuid4()))
        self.put("deviceType", "python")
