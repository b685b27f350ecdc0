"""Code generation backend module.

Provides code generation backends (codegen) for emitting assembly from backend operations.
"""

from .base import CodeGeneratorBackend
from .hypercpu import HyperCPUCodegenBackend
from .qproc import QprocCodegenBackend

__all__ = [
    "CodeGeneratorBackend",
    "HyperCPUCodegenBackend",
    "QprocCodegenBackend",
]
