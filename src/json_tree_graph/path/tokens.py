"""KeyToken and IndexToken: the two atomic accesses a path is made of.

A path such as ``user.roles[1]`` tokenizes to
``[KeyToken("user"), KeyToken("roles"), IndexToken(1)]``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IndexToken", "KeyToken", "PathToken"]


@dataclass(frozen=True, slots=True)
class KeyToken:
    """Access of an object member by name."""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class IndexToken:
    """Access of an array element by position.

    Attributes:
        index: Non-negative element index.
    """

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            msg = f"index must be >= 0, got {self.index}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"[{self.index}]"


PathToken = KeyToken | IndexToken
