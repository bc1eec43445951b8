"""Shared type variables and aliases for codeauthz."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

__all__ = ["Effector", "SubjectT", "TargetT"]

# The actor requesting the action.
SubjectT = TypeVar("SubjectT")

# The entity the action is performed on (may be the same type as the subject).
TargetT = TypeVar("TargetT")

# A decision predicate: ``True`` permits the action, ``False`` denies it.
Effector = Callable[[SubjectT, TargetT], bool]
