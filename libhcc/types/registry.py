from libhcc.targets.target import Target

from ._base import TypeMetadata
from .errors import UnknownTypeError


class TypeRegistry(dict[str, TypeMetadata]):
    def copy(self) -> "TypeRegistry":
        return TypeRegistry(super().copy())

    def lookup(self, typename: str) -> TypeMetadata:
        """Get type by its name, unlike `get` fails on unregistered ones."""
        if typename not in self:
            raise UnknownTypeError(typename=typename, types_available=self.keys())
        return self[typename]

    def size_of(self, typename: str) -> int:
        return self.lookup(typename).size_in_bytes


def build_primitive_type_registry(target: Target) -> TypeRegistry:
    """Construct registry of builtin types for given target.

    Only `long` depends on target: it is always an machine word,
    so it is 8 bytes on HyperCPU and 4 bytes on QProc.
    """
    return TypeRegistry(
        {
            name: TypeMetadata(name=name, size_in_bytes=size)
            for name, size in (
                ("void", 0),
                ("char", 1),
                ("short", 2),
                ("int", 4),
                ("long", target.cpu_word_size),
            )
        },
    )
