"""Core HyperCPU codegen."""

from __future__ import annotations

from libhcc.codegen.abi import ABIDescriptor, HyperCPUABI
from libhcc.codegen.backends.generic import GenericCodegenBackend
from libhcc.codegen.exceptions import InvalidStackSizeError, UnsupportedWidthError

from .registers import (
    HYPERCPU_ACCESS_WIDTHS,
    HYPERCPU_DIALECT,
    HYPERCPU_FRAME_DISPLACEMENT_RANGE,
)


class HyperCPUCodegenBackend(GenericCodegenBackend):
    """HyperCPU addresses stack slots directly with `ptr` operands relative to XBP."""

    dialect = HYPERCPU_DIALECT
    target_name = "hypercpu"

    def _build_abi(self) -> ABIDescriptor:
        return HyperCPUABI()

    def _validate_access(self, align: int, size: int) -> None:
        super()._validate_access(align, size)
        if not 0 < align < HYPERCPU_FRAME_DISPLACEMENT_RANGE:
            raise InvalidStackSizeError(
                size=align,
                reason=f"Stack slot offset from XBP must be within 1..{HYPERCPU_FRAME_DISPLACEMENT_RANGE - 1} bytes",
            )
        if size not in HYPERCPU_ACCESS_WIDTHS:
            raise UnsupportedWidthError(size=size, architecture=self.dialect.architecture)

    def _stack_slot_operand(self, align: int, size: int) -> str:
        """Memory operand for slot at XBP - align, displacement wraps around."""
        displacement = HYPERCPU_FRAME_DISPLACEMENT_RANGE - align
        return f"b{size * 8} ptr [{self.dialect.frame_base_register}+0u{displacement}]"

    def _reserve_stack_space(self, size: int) -> None:
        self._instruction("sub", self.dialect.stack_pointer_register, self._immediate(size))

    def _load_from_stack(self, align: int, size: int, register: str | None) -> str:
        register = register or self.allocate_register()
        self._instruction("mov", register, self._stack_slot_operand(align, size))
        return register

    def _store_to_stack(self, align: int, size: int, register: str) -> None:
        self._instruction("mov", self._stack_slot_operand(align, size), register)

    def _load_address_from_stack(self, align: int, register: str) -> None:
        self._instruction("mov", register, self.dialect.frame_base_register)
        self._instruction("sub", register, self._immediate(align))
