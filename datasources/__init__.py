"""Data sources consulted by the tiered resolver."""

from .native_system_module import NativeSystemModule

__all__ = ["NativeSystemModule"]
