"""User response records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResponse:
    """User projected for API consumers."""

    id: int
    first_name: str
    last_name: str
    deleted: bool
