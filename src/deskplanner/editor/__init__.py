"""Blueprint editor model."""

from .blueprint import Blueprint

__all__ = ["Blueprint"]
