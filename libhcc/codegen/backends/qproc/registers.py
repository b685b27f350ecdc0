"""Consts and dialect of QProc registers and assembly syntax."""

from __future__ import annotations

from typing import Literal

from libhcc.codegen.backends.dialect import ArchitectureDialect

# Highest index of general purpose registers (R0-R12)
QPROC_MAX_REGISTER_INDEX = 12

# Registers which backend uses to compute stack addresses (`bp` - align)
# R0 holds address, R1 holds offset
QPROC_ADDRESS_REGISTER = "r0"
QPROC_OFFSET_REGISTER = "r1"

# `lod` / `str` width keywords by size in bytes, everything else is `dword`
QPROC_WIDTH = Literal["byte", "word", "dword"]
QPROC_DEFAULT_WIDTH: QPROC_WIDTH = "dword"


def format_qproc_immediate(value: int) -> str:
    return str(value)


QPROC_DIALECT = ArchitectureDialect(
    architecture="QProc",
    register_prefix="r",
    max_register_index=QPROC_MAX_REGISTER_INDEX,
    frame_base_register="bp",
    stack_pointer_register="sp",
    primary_scratch_register=QPROC_ADDRESS_REGISTER,
    comment_token=";",
    operand_separator=" ",
    instruction_terminator="",
    immediate_formatter=format_qproc_immediate,
    move_immediate_mnemonic="movi",
    elide_self_move=False,
    instruction_pointer_register="ip",
    return_comment_token="//",
)
