from collections.abc import Iterable

from libhcc.exceptions import HccError


class UnknownTypeError(HccError):
    def __init__(self, typename: str, types_available: Iterable[str]) -> None:
        super().__init__(typename)
        self.typename = typename
        self.types_available = list(types_available)

    def __repr__(self) -> str:
        return f"""Unknown type '{self.typename}'!

Expected one of registered primitive types but got unknown '{self.typename}'
Known types: [{", ".join(self.types_available)}]

{self.generic_error_name}"""
