"""Configuration module for e2e_installer."""

from e2e_installer.config.settings import Settings

__all__ = ["Settings"]
