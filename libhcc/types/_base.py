from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeMetadata:
    """Primitive type known to backend, only its name and size matter for codegen."""

    name: str
    size_in_bytes: int

    def __repr__(self) -> str:
        return f"{self.name.upper()}[{self.size_in_bytes}]"
