"""Core QProc codegen."""

from __future__ import annotations

from libhcc.codegen.abi import ABIDescriptor, QprocABI
from libhcc.codegen.backends.generic import GenericCodegenBackend

from .registers import (
    QPROC_ADDRESS_REGISTER,
    QPROC_DEFAULT_WIDTH,
    QPROC_DIALECT,
    QPROC_OFFSET_REGISTER,
    QPROC_WIDTH,
)


def qproc_access_width(size: int) -> QPROC_WIDTH:
    """Get `lod` / `str` width keyword for access of given size in bytes.

    Only 1 and 2 bytes are special cased, any other size (including >4) falls back to `dword`.
    """
    if size == 1:
        return "byte"
    if size == 2:
        return "word"
    return QPROC_DEFAULT_WIDTH


class QprocCodegenBackend(GenericCodegenBackend):
    """QProc has no memory operands, stack slot address is computed into R0 (using R1) first."""

    dialect = QPROC_DIALECT
    target_name = "qproc"

    def _build_abi(self) -> ABIDescriptor:
        return QprocABI()

    def _compute_stack_slot_address(self, align: int) -> None:
        """R0 = BP - align, clobbers R1."""
        self._instruction("mov", QPROC_ADDRESS_REGISTER, self.dialect.frame_base_register)
        self._instruction("movi", QPROC_OFFSET_REGISTER, self._immediate(align))
        self._instruction("sub", QPROC_ADDRESS_REGISTER, QPROC_OFFSET_REGISTER)

    def _reserve_stack_space(self, size: int) -> None:
        self._instruction("movi", QPROC_ADDRESS_REGISTER, self._immediate(size))
        self._instruction("sub", self.dialect.stack_pointer_register, QPROC_ADDRESS_REGISTER)

    def _load_from_stack(self, align: int, size: int, register: str | None) -> str:
        if not register:
            register = self.allocate_register()
            while register in (QPROC_ADDRESS_REGISTER, QPROC_OFFSET_REGISTER):
                register = self.allocate_register()

        self._compute_stack_slot_address(align)
        self._instruction("lod", register, qproc_access_width(size), QPROC_ADDRESS_REGISTER)
        return register

    def _store_to_stack(self, align: int, size: int, register: str) -> None:
        # Address computation clobbers R0 and R1, so value is preserved on stack
        # and restored into R1 (R0 holds address by then)
        is_clobbered = register in (QPROC_ADDRESS_REGISTER, QPROC_OFFSET_REGISTER)
        if is_clobbered:
            self._instruction("push", register)

        self._compute_stack_slot_address(align)

        if is_clobbered:
            register = QPROC_OFFSET_REGISTER
            self._instruction("pop", register)
        self._instruction("str", qproc_access_width(size), QPROC_ADDRESS_REGISTER, register)

    def _load_address_from_stack(self, align: int, register: str) -> None:
        # Offset is staged in R0, unless R0 is destination itself
        offset_register = QPROC_ADDRESS_REGISTER
        if register == QPROC_ADDRESS_REGISTER:
            offset_register = QPROC_OFFSET_REGISTER

        self._instruction("mov", register, self.dialect.frame_base_register)
        self._instruction("movi", offset_register, self._immediate(align))
        self._instruction("sub", register, offset_register)
