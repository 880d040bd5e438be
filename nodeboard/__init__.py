"""Nodeboard - one-shot machine onboarding agent."""

__version__ = "1.2"

from .core.info import SystemInfo, build_system_info

__all__ = ["SystemInfo", "build_system_info"]
