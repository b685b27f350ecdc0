"""QProc codegen backend."""

from .codegen import QprocCodegenBackend

__all__ = ["QprocCodegenBackend"]
