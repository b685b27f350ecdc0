from dataclasses import dataclass
from typing import Literal, assert_never

TargetName = Literal["hypercpu", "qproc"]


@dataclass(eq=True)
class Target:
    """Specifications for target machine the assembly is emitted for."""

    # Conventional short name for that target for comparisons
    name: TargetName

    # Based on name
    architecture: Literal["HyperCPU", "QProc"]

    # Width of machine word, also the size of `long`
    cpu_word_size: Literal[4, 8]

    file_assembly_suffix: Literal[".s", ".asm"]

    @staticmethod
    def from_name(name: TargetName) -> "Target":
        match name:
            case "hypercpu":
                return Target(
                    name=name,
                    architecture="HyperCPU",
                    cpu_word_size=8,
                    file_assembly_suffix=".s",
                )
            case "qproc":
                return Target(
                    name=name,
                    architecture="QProc",
                    cpu_word_size=4,
                    file_assembly_suffix=".asm",
                )
            case _:
                assert_never(name)
