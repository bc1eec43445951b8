"""Explain authorization decisions for debugging."""

from codeauthz.explain._access import explain_access
from codeauthz.explain._models import AccessExplanation

__all__ = ["AccessExplanation", "explain_access"]
