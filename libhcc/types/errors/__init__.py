"""Errors that type registry may raise."""

from .unknown_type import UnknownTypeError

__all__ = ["UnknownTypeError"]
