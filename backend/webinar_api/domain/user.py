from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Identity of the caller acting on webinars."""

    id: str
    email: str
