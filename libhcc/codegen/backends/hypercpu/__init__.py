"""HyperCPU codegen backend."""

from .codegen import HyperCPUCodegenBackend

__all__ = ["HyperCPUCodegenBackend"]
