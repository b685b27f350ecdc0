"""Code generation from backend operations into target assembly text."""

from .config import CodegenConfig
from .generator import generate_code_for_assembler
from .get_backend import get_backend_for_target

__all__ = [
    "CodegenConfig",
    "generate_code_for_assembler",
    "get_backend_for_target",
]
