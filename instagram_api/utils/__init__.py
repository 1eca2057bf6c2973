"""Utility modules for the Instagram API client."""

from .headers import HeaderGenerator

__all__ = ["HeaderGenerator"]
