"""Configuration module for codeauthz."""

from __future__ import annotations

from codeauthz.config._config import AuthzConfig, configure, get_global_config

__all__ = ["AuthzConfig", "configure", "get_global_config"]
