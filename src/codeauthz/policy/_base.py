"""PolicyRegistration dataclass — metadata for a registered policy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["PolicyRegistration"]


@dataclass(frozen=True, slots=True)
class PolicyRegistration:
    """A single registered decision predicate with its metadata.

    Attributes:
        action: The action identifier (e.g. ``"delete"``, ``"update:profile"``).
        fn: The predicate, called as ``fn(subject, target)``.
        name: The predicate name (for debugging/logging).
        description: Human-readable description (from docstring).
    """

    action: str
    fn: Callable[[Any, Any], bool]
    name: str
    description: str
