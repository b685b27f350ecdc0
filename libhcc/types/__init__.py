"""Primitive types known to code generation backends."""

from ._base import TypeMetadata
from .registry import TypeRegistry, build_primitive_type_registry

__all__ = ("TypeMetadata", "TypeRegistry", "build_primitive_type_registry")
