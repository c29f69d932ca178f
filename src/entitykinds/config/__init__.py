"""Configuration module using Pydantic Settings.

Usage:
    from entitykinds.config import RegistrySettings

    settings = RegistrySettings(register_builtins=False)
"""

from entitykinds.config.settings import RegistrySettings

__all__ = [
    "RegistrySettings",
]
