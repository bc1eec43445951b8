"""Data models for explain output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["AccessExplanation"]


@dataclass(frozen=True, slots=True)
class AccessExplanation:
    """Explanation of a single decision for a (subject, action, target) triple.

    Attributes:
        subject_repr: ``repr()`` of the subject.
        action: The action that was checked.
        target_repr: ``repr()`` of the target.
        policy_name: Name of the policy that decided.
        policy_description: Description of the policy that decided.
        allowed: The decision.
    """

    subject_repr: str
    action: str
    target_repr: str
    policy_name: str
    policy_description: str
    allowed: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "subject": self.subject_repr,
            "action": self.action,
            "target": self.target_repr,
            "policy_name": self.policy_name,
            "policy_description": self.policy_description,
            "allowed": self.allowed,
        }

    def __str__(self) -> str:
        verdict = "ALLOWED" if self.allowed else "DENIED"
        lines = [
            f"AccessExplanation: {self.action} -> {verdict}",
            f"  Subject: {self.subject_repr}",
            f"  Target: {self.target_repr}",
            f"  Policy: {self.policy_name}",
        ]
        if self.policy_description:
            lines.append(f"    {self.policy_description.strip()}")
        return "\n".join(lines)
