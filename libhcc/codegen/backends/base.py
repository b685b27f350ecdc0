from collections.abc import Callable
from typing import IO, Protocol

from libhcc.codegen.abi import ABIDescriptor
from libhcc.codegen.config import CodegenConfig
from libhcc.targets.target import Target
from libhcc.types.registry import TypeRegistry


class CodeGeneratorBackend(Protocol):
    """Base code generator backend protocol.

    All backends implement this protocol, operations are driven by an external IR walker
    in correct order and append instructions into backend own buffer.
    Operations that produce value return register holding it.
    """

    target: Target
    abi: ABIDescriptor
    types: TypeRegistry

    def __init__(
        self,
        target: Target | None = None,
        config: CodegenConfig | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None: ...

    @property
    def output(self) -> str: ...

    def flush(self, fd: IO[str]) -> None: ...

    def allocate_register(self) -> str: ...

    def emit_function_prologue(self, name: str) -> None: ...
    def emit_function_epilogue(self) -> None: ...

    def emit_mov_const(self, value: int, dest_register: str | None = None) -> str: ...

    def emit_add(self, out: str, lhs: str, rhs: str) -> None: ...
    def emit_sub(self, out: str, lhs: str, rhs: str) -> None: ...
    def emit_mul(self, out: str, lhs: str, rhs: str) -> None: ...
    def emit_div(self, out: str, lhs: str, rhs: str) -> None: ...

    def emit_move(self, dest: str, src: str) -> None: ...

    def emit_reserve_stack_space(self, size: int) -> None: ...

    def emit_load_from_stack(
        self,
        align: int,
        size: int,
        dest_register: str | None = None,
    ) -> str: ...

    def emit_store_to_stack(self, align: int, size: int, src_register: str) -> None: ...

    def emit_load_address_from_stack(
        self,
        align: int,
        dest_register: str | None = None,
    ) -> str: ...

    def emit_call(self, name: str) -> None: ...
    def emit_push(self, register: str) -> None: ...
    def emit_pop(self, register: str) -> None: ...
    def emit_single_ret(self) -> None: ...
    def emit_label(self, name: str) -> None: ...
