"""Consts and dialect of HyperCPU registers and assembly syntax."""

from __future__ import annotations

from libhcc.codegen.backends.dialect import ArchitectureDialect, DivisionConstraint

# Highest index of general purpose registers (X0-X7)
HYPERCPU_MAX_REGISTER_INDEX = 7

# Immediates are 64 bits unsigned (`0u` prefixed)
HYPERCPU_IMMEDIATE_MASK = (1 << 64) - 1

# Frame displacement is an 8 bit unsigned offset that wraps around, so xbp+0u248 is xbp-8
HYPERCPU_FRAME_DISPLACEMENT_RANGE = 0x100

# Width of `ptr` accesses in bytes
HYPERCPU_ACCESS_WIDTHS = (1, 2, 4, 8)


def format_hypercpu_immediate(value: int) -> str:
    return f"0u{value & HYPERCPU_IMMEDIATE_MASK}"


HYPERCPU_DIALECT = ArchitectureDialect(
    architecture="HyperCPU",
    register_prefix="x",
    max_register_index=HYPERCPU_MAX_REGISTER_INDEX,
    frame_base_register="xbp",
    stack_pointer_register="xsp",
    primary_scratch_register="x0",
    comment_token="//",
    operand_separator=", ",
    instruction_terminator=";",
    immediate_formatter=format_hypercpu_immediate,
    move_immediate_mnemonic="mov",
    elide_self_move=True,
    # `div` divides X0 by X2 and clobbers X1
    division=DivisionConstraint(
        dividend_register="x0",
        divisor_register="x2",
        high_register="x1",
    ),
)
