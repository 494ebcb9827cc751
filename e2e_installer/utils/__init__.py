"""Utility helpers for e2e_installer."""

from e2e_installer.utils.console import ColorfulFormatter, configure_logging

__all__ = ["ColorfulFormatter", "configure_logging"]
