"""Configuration settings using Pydantic Settings.

Provides typed registry configuration with environment variable support.

Usage:
    from entitykinds.config import RegistrySettings

    # Load from environment variables (ENTITYKINDS_*)
    settings = RegistrySettings()

    # Or override with explicit values
    settings = RegistrySettings(conflict_policy="replace")
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the process-wide kind registry.

    Attributes:
        conflict_policy: What happens when an unrelated class is registered
            under a name that is already taken. "error" rejects it, "replace"
            lets the newest registration win.
        register_builtins: Register the system kinds (_User, _Role, ...) when
            the registry is created or reset.

    Environment Variables:
        ENTITYKINDS_CONFLICT_POLICY
        ENTITYKINDS_REGISTER_BUILTINS
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYKINDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    conflict_policy: Literal["error", "replace"] = "error"
    register_builtins: bool = True
