import pytest

from libhcc.codegen.backends import HyperCPUCodegenBackend, QprocCodegenBackend
from libhcc.codegen.backends.generic import GenericCodegenBackend
from libhcc.codegen.exceptions import CodegenUnsupportedBackendTargetError
from libhcc.codegen.get_backend import get_backend_for_target
from libhcc.targets.target import Target


def test_get_backend_for_target() -> None:
    assert get_backend_for_target(Target.from_name("hypercpu")) is HyperCPUCodegenBackend
    assert get_backend_for_target(Target.from_name("qproc")) is QprocCodegenBackend


def test_get_backend_for_target_unknown() -> None:
    base_target = Target.from_name("hypercpu")
    base_target.architecture = "x86"  # pyright: ignore[reportAttributeAccessIssue]
    with pytest.raises(CodegenUnsupportedBackendTargetError) as excinfo:
        get_backend_for_target(base_target)
    assert "[codegen-unsupported-backend-target-error]" in repr(excinfo.value)


def test_backends_do_not_share_state() -> None:
    first = HyperCPUCodegenBackend()
    second = HyperCPUCodegenBackend()
    first.emit_mov_const(1)
    first.emit_mov_const(2)

    assert second.emit_mov_const(3) == "x0"
    assert second.output == "mov x0, 0u3;\n"
    assert first.abi == second.abi
    assert first.types is not second.types


def test_generic_backend_is_abstract() -> None:
    with pytest.raises(TypeError):
        GenericCodegenBackend()  # pyright: ignore[reportAbstractUsage]
