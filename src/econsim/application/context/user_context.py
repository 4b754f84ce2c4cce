"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the calling user.

    Created once per request and passed to user-scoped repositories, which
    filter every query by ``user_id``. The id is opaque: today it comes from
    a request header (see ``get_user_context``), later from an authenticated
    principal.
    """

    user_id: str

    @classmethod
    def from_values(cls, user_id: str) -> UserContext:
        return cls(user_id=user_id)

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
