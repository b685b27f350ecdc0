from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DivisionConstraint:
    """Division instruction with fixed (hardware) operands.

    Dividend is expected in `dividend_register`, divisor is expected in `divisor_register`
    and `high_register` is clobbered by instruction (remainder / high part of result).
    """

    dividend_register: str
    divisor_register: str
    high_register: str


@dataclass(frozen=True, slots=True)
class ArchitectureDialect:
    """Everything that differs between targets but does not change shape of generic operations."""

    architecture: str

    # General purpose registers are named as `prefix` + index in [0, max_register_index]
    register_prefix: str
    max_register_index: int

    frame_base_register: str
    stack_pointer_register: str

    # Register used by backend internally for address computation, never handed out
    # by address loads when allocated
    primary_scratch_register: str

    # Assembly syntax
    comment_token: str
    operand_separator: str
    instruction_terminator: str
    immediate_formatter: Callable[[int], str]
    move_immediate_mnemonic: str

    # Some targets prefer to not emit `mov` into itself
    elide_self_move: bool

    # If set, return address is on stack and returning is popping into that register
    # otherwise target has an link-register and dedicated `ret` instruction
    instruction_pointer_register: str | None = field(default=None)

    # Comment token for `emit_single_ret` (may differ from general one)
    return_comment_token: str | None = field(default=None)

    # None means division is same two-operand instruction as other arithmetics
    division: DivisionConstraint | None = field(default=None)

    @property
    def general_purpose_registers(self) -> tuple[str, ...]:
        return tuple(
            f"{self.register_prefix}{i}" for i in range(self.max_register_index + 1)
        )

    @property
    def special_registers(self) -> tuple[str, ...]:
        registers = (self.frame_base_register, self.stack_pointer_register)
        if self.instruction_pointer_register:
            registers += (self.instruction_pointer_register,)
        return registers

    @property
    def has_link_register(self) -> bool:
        return self.instruction_pointer_register is None

    def is_register(self, register: str) -> bool:
        return (
            register in self.general_purpose_registers
            or register in self.special_registers
        )

    def format_instruction(self, mnemonic: str, *operands: str) -> str:
        if not operands:
            return f"{mnemonic}{self.instruction_terminator}"
        return f"{mnemonic} {self.operand_separator.join(operands)}{self.instruction_terminator}"
