from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ABIDescriptor:
    """Register convention for passing arguments and returning values on one target."""

    # Register that holds return value of an function (primitive only)
    return_register: str

    # Registers used to pass arguments, in order of parameters
    # Does not include registers reserved for return value and internal linkage
    arguments_registers: Sequence[str]


@dataclass(frozen=True, slots=True, init=True)
class HyperCPUABI(ABIDescriptor):
    """ABI for HyperCPU, X1 is reserved (used by division as high part)."""

    return_register: str = "x0"
    arguments_registers: Sequence[str] = field(
        default_factory=lambda: tuple(f"x{i}" for i in range(2, 8)),
    )


@dataclass(frozen=True, slots=True, init=True)
class QprocABI(ABIDescriptor):
    """ABI for QProc, R1 is reserved (used for stack addressing)."""

    return_register: str = "r0"
    arguments_registers: Sequence[str] = field(
        default_factory=lambda: tuple(f"r{i}" for i in range(2, 13)),
    )
