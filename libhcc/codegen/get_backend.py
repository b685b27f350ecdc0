from libhcc.targets import Target

from .backends import (
    CodeGeneratorBackend,
    HyperCPUCodegenBackend,
    QprocCodegenBackend,
)
from .exceptions import CodegenUnsupportedBackendTargetError


def get_backend_for_target(
    target: Target,
) -> type[CodeGeneratorBackend]:
    """Get code generator backend for specified target architecture."""
    match target.architecture:
        case "HyperCPU":
            return HyperCPUCodegenBackend
        case "QProc":
            return QprocCodegenBackend
        case _:
            raise CodegenUnsupportedBackendTargetError(target=target)
