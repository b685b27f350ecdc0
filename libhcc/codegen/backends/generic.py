"""Operations that are same on every target, up to dialect (syntax, registers, ABI)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, ClassVar

from libhcc.codegen.config import CodegenConfig
from libhcc.codegen.exceptions import InvalidRegisterError, InvalidStackSizeError
from libhcc.codegen.registers import RegisterAllocator
from libhcc.codegen.writer import CodeBuffer
from libhcc.targets.target import Target, TargetName
from libhcc.types.registry import build_primitive_type_registry

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from libhcc.codegen.abi import ABIDescriptor
    from libhcc.types.registry import TypeRegistry

    from .dialect import ArchitectureDialect


def _ignore_warning(_: str) -> None: ...


class GenericCodegenBackend(ABC):
    """Backend implementation driven by an architecture dialect.

    Targets only override stack access operations as their instructions are shaped differently.
    Instance owns its buffer, allocator, ABI and types so backends may be used in parallel.
    """

    dialect: ClassVar[ArchitectureDialect]
    target_name: ClassVar[TargetName]

    target: Target
    config: CodegenConfig
    abi: ABIDescriptor
    types: TypeRegistry
    allocator: RegisterAllocator
    writer: CodeBuffer

    def __init__(
        self,
        target: Target | None = None,
        config: CodegenConfig | None = None,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        self.target = target or Target.from_name(self.target_name)
        assert self.target.architecture == self.dialect.architecture, (
            f"{self.__class__.__name__} cannot emit code for {self.target.architecture}"
        )
        self.config = config or CodegenConfig()
        self.on_warning = on_warning or _ignore_warning

        self.abi = self._build_abi()
        self.types = build_primitive_type_registry(self.target)
        self.allocator = RegisterAllocator(
            register_prefix=self.dialect.register_prefix,
            max_index=self.dialect.max_register_index,
            on_wraparound=self.on_warning,
        )
        self.writer = CodeBuffer(self.config, comment_token=self.dialect.comment_token)

    @abstractmethod
    def _build_abi(self) -> ABIDescriptor:
        raise NotImplementedError

    @property
    def output(self) -> str:
        return self.writer.getvalue()

    def flush(self, fd: IO[str]) -> None:
        self.writer.full_buffer_flush(fd)

    def allocate_register(self) -> str:
        return self.allocator.allocate()

    ####
    # Helpers
    ####

    @contextmanager
    def _operation(
        self,
        name: str,
        *,
        comment_token: str | None = None,
    ) -> Generator[None, None, None]:
        """Emit operation comment and discard everything operation emitted if it fails."""
        checkpoint = len(self.writer)
        try:
            self.writer.comment(name, token=comment_token)
            yield
        except Exception:
            self.writer.truncate(checkpoint)
            raise

    def _instruction(self, mnemonic: str, *operands: str) -> None:
        self.writer.instruction(self.dialect.format_instruction(mnemonic, *operands))

    def _immediate(self, value: int) -> str:
        return self.dialect.immediate_formatter(value)

    def _validate_registers(self, *registers: str) -> None:
        for register in registers:
            if not register or not self.dialect.is_register(register):
                raise InvalidRegisterError(
                    register=register,
                    architecture=self.dialect.architecture,
                )

    def _validate_optional_register(self, register: str | None) -> None:
        # Empty register means `allocate one for me`
        if register:
            self._validate_registers(register)

    def _validate_access(self, align: int, size: int) -> None:
        if size <= 0:
            raise InvalidStackSizeError(
                size=size,
                reason="Stack access size must be positive, cannot access zero or less bytes",
            )
        self._validate_align(align)

    def _validate_align(self, align: int) -> None:
        if align < 0:
            raise InvalidStackSizeError(
                size=align,
                reason="Stack slot offset from frame base cannot be negative",
            )

    ####
    # Functions
    ####

    def emit_function_prologue(self, name: str) -> None:
        """Define function label and setup new frame (push old frame base)."""
        frame_base = self.dialect.frame_base_register
        with self._operation("emit_function_prologue"):
            self.writer.label(name)
            self._instruction("push", frame_base)
            self._instruction("mov", frame_base, self.dialect.stack_pointer_register)

    def emit_function_epilogue(self) -> None:
        """Restore frame set up by prologue.

        Without an link-register return address is on stack and is popped there too.
        """
        frame_base = self.dialect.frame_base_register
        with self._operation("emit_function_epilogue"):
            self._instruction("mov", self.dialect.stack_pointer_register, frame_base)
            self._instruction("pop", frame_base)
            if not self.dialect.has_link_register:
                self._emit_return()

    def emit_single_ret(self) -> None:
        with self._operation(
            "emit_single_ret",
            comment_token=self.dialect.return_comment_token,
        ):
            self._emit_return()

    def _emit_return(self) -> None:
        if self.dialect.instruction_pointer_register:
            self._instruction("pop", self.dialect.instruction_pointer_register)
            return
        self._instruction("ret")

    def emit_call(self, name: str) -> None:
        with self._operation("emit_call"):
            self._instruction("call", name)

    def emit_label(self, name: str) -> None:
        with self._operation("emit_label"):
            self.writer.label(name)

    ####
    # Registers
    ####

    def emit_mov_const(self, value: int, dest_register: str | None = None) -> str:
        self._validate_optional_register(dest_register)
        with self._operation("emit_mov_const"):
            register = dest_register or self.allocate_register()
            self._instruction(
                self.dialect.move_immediate_mnemonic,
                register,
                self._immediate(value),
            )
        return register

    def emit_move(self, dest: str, src: str) -> None:
        self._validate_registers(dest, src)
        if dest == src and self.dialect.elide_self_move:
            return
        with self._operation("emit_move"):
            self._instruction("mov", dest, src)

    def emit_push(self, register: str) -> None:
        self._validate_registers(register)
        with self._operation("emit_push"):
            self._instruction("push", register)

    def emit_pop(self, register: str) -> None:
        self._validate_registers(register)
        with self._operation("emit_pop"):
            self._instruction("pop", register)

    ####
    # Arithmetics
    ####

    def emit_add(self, out: str, lhs: str, rhs: str) -> None:
        self._emit_two_operand_arithmetic("emit_add", "add", out, lhs, rhs)

    def emit_sub(self, out: str, lhs: str, rhs: str) -> None:
        self._emit_two_operand_arithmetic("emit_sub", "sub", out, lhs, rhs)

    def emit_mul(self, out: str, lhs: str, rhs: str) -> None:
        self._emit_two_operand_arithmetic("emit_mul", "mul", out, lhs, rhs)

    def emit_div(self, out: str, lhs: str, rhs: str) -> None:
        """Divide `lhs` by `rhs`.

        With fixed-operand division operands are moved into dividend and divisor registers
        (both are clobbered), high register is preserved and result is moved from dividend register.
        """
        division = self.dialect.division
        if division is None:
            self._emit_two_operand_arithmetic("emit_div", "div", out, lhs, rhs)
            return

        self._validate_registers(out, lhs, rhs)
        with self._operation("emit_div"):
            self._instruction("push", division.high_register)
            self._stage_division_operands(lhs, rhs)
            self._instruction("div", division.dividend_register)
            self._instruction("pop", division.high_register)
            if out != division.dividend_register:
                self._instruction("mov", out, division.dividend_register)

    def _stage_division_operands(self, lhs: str, rhs: str) -> None:
        """Move `lhs` into dividend register and `rhs` into divisor register without clobbering either."""
        division = self.dialect.division
        assert division is not None
        dividend, divisor = division.dividend_register, division.divisor_register

        if rhs == dividend and lhs != dividend:
            if lhs == divisor:
                # Operands are swapped, high register is already preserved so use it as temporary
                self._instruction("mov", division.high_register, rhs)
                self._instruction("mov", dividend, lhs)
                self._instruction("mov", divisor, division.high_register)
                return
            self._instruction("mov", divisor, rhs)
            self._instruction("mov", dividend, lhs)
            return

        if lhs != dividend:
            self._instruction("mov", dividend, lhs)
        if rhs != divisor:
            self._instruction("mov", divisor, rhs)

    def _emit_two_operand_arithmetic(
        self,
        operation: str,
        mnemonic: str,
        out: str,
        lhs: str,
        rhs: str,
    ) -> None:
        """Compute result into `lhs` and relocate it into `out` if they differ."""
        self._validate_registers(out, lhs, rhs)
        with self._operation(operation):
            self._instruction(mnemonic, lhs, rhs)
            if out != lhs:
                self._instruction("mov", out, lhs)

    ####
    # Stack
    ####

    def emit_reserve_stack_space(self, size: int) -> None:
        if size <= 0:
            raise InvalidStackSizeError(
                size=size,
                reason="Reserved stack space must be positive, cannot reserve zero or less bytes",
            )
        with self._operation("emit_reserve_stack_space"):
            self._reserve_stack_space(size)

    def emit_load_from_stack(
        self,
        align: int,
        size: int,
        dest_register: str | None = None,
    ) -> str:
        """Load `size` bytes at frame base - `align` into register (allocated if not given)."""
        self._validate_access(align, size)
        self._validate_optional_register(dest_register)
        with self._operation("emit_load_from_stack"):
            return self._load_from_stack(align, size, dest_register or None)

    def emit_store_to_stack(self, align: int, size: int, src_register: str) -> None:
        """Store `size` bytes from register at frame base - `align`."""
        self._validate_access(align, size)
        self._validate_registers(src_register)
        with self._operation("emit_store_to_stack"):
            self._store_to_stack(align, size, src_register)

    def emit_load_address_from_stack(
        self,
        align: int,
        dest_register: str | None = None,
    ) -> str:
        """Compute address of frame base - `align` into register (allocated if not given)."""
        self._validate_align(align)
        self._validate_optional_register(dest_register)
        with self._operation("emit_load_address_from_stack"):
            register = dest_register
            if not register:
                register = self.allocate_register()
                if register == self.dialect.primary_scratch_register:
                    register = self.allocate_register()
            self._load_address_from_stack(align, register)
        return register

    # Target specific

    @abstractmethod
    def _reserve_stack_space(self, size: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def _load_from_stack(self, align: int, size: int, register: str | None) -> str:
        raise NotImplementedError

    @abstractmethod
    def _store_to_stack(self, align: int, size: int, register: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def _load_address_from_stack(self, align: int, register: str) -> None:
        raise NotImplementedError
