"""People: the lightweight stub and the full auth record."""

from __future__ import annotations

from enum import StrEnum

from pydantic import ConfigDict

from ridesharing.models._base import RideshareModel


class AuthType(StrEnum):
    """Identity provider that produced a :class:`UserData` record.

    Providers without a mapped member resolve to ``UNKNOWN`` instead of
    raising ``ValueError``.
    """

    CSH = "CSH"
    GOOGLE = "GOOGLE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> AuthType:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return cls.UNKNOWN


class UserStub(RideshareModel):
    """Minimal person reference; identity is ``id``."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class UserData(RideshareModel):
    """User record returned by the auth endpoint.

    The server sends snake_case keys (``given_name``), so those are accepted
    next to the camelCase aliases.
    """

    model_config = ConfigDict(frozen=True)

    type: AuthType
    id: str
    given_name: str
    family_name: str
    preferred_username: str | None = None
    email: str | None = None
    picture: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.given_name} {self.family_name}".strip()

    def to_stub(self) -> UserStub:
        """Reduce the record to the reference used on cars and events."""
        return UserStub(id=self.id, name=self.display_name)
