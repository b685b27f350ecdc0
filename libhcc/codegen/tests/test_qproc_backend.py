import pytest

from libhcc.codegen.backends.qproc import QprocCodegenBackend
from libhcc.codegen.backends.qproc.codegen import qproc_access_width
from libhcc.codegen.config import CodegenConfig
from libhcc.codegen.exceptions import InvalidRegisterError, InvalidStackSizeError


def test_qproc_mov_const() -> None:
    backend = QprocCodegenBackend()
    assert backend.emit_mov_const(42) == "r0"
    assert backend.emit_mov_const(-3, "r7") == "r7"
    assert backend.output.splitlines() == [
        "movi r0 42",
        "movi r7 -3",
    ]


def test_qproc_function_frame() -> None:
    backend = QprocCodegenBackend()
    backend.emit_function_prologue("foo")
    backend.emit_function_epilogue()
    backend.emit_single_ret()
    assert backend.output.splitlines() == [
        "foo:",
        "push bp",
        "mov bp sp",
        "mov sp bp",
        "pop bp",
        "pop ip",
        "pop ip",
    ]


def test_qproc_division_has_no_fixed_registers() -> None:
    backend = QprocCodegenBackend()
    backend.emit_div("r0", "r0", "r3")
    assert backend.output == "div r0 r3\n"

    backend = QprocCodegenBackend()
    backend.emit_div("r4", "r0", "r3")
    assert backend.output.splitlines() == [
        "div r0 r3",
        "mov r4 r0",
    ]


def test_qproc_arithmetics() -> None:
    backend = QprocCodegenBackend()
    backend.emit_add("r2", "r2", "r3")
    backend.emit_sub("r5", "r2", "r3")
    backend.emit_mul("r2", "r2", "r2")
    assert backend.output.splitlines() == [
        "add r2 r3",
        "sub r2 r3",
        "mov r5 r2",
        "mul r2 r2",
    ]


def test_qproc_move_is_never_elided() -> None:
    backend = QprocCodegenBackend()
    backend.emit_move("r1", "r1")
    backend.emit_move("r1", "r2")
    assert backend.output.splitlines() == [
        "mov r1 r1",
        "mov r1 r2",
    ]


def test_qproc_reserve_stack_space() -> None:
    backend = QprocCodegenBackend()
    backend.emit_reserve_stack_space(16)
    assert backend.output.splitlines() == [
        "movi r0 16",
        "sub sp r0",
    ]


def test_qproc_load_store_same_slot() -> None:
    backend = QprocCodegenBackend()
    register = backend.emit_load_from_stack(8, 1, "")
    # R0 and R1 are used for address computation so never allocated for loads
    assert register == "r2"

    backend.emit_store_to_stack(8, 1, register)
    assert backend.output.splitlines() == [
        "mov r0 bp",
        "movi r1 8",
        "sub r0 r1",
        "lod r2 byte r0",
        "mov r0 bp",
        "movi r1 8",
        "sub r0 r1",
        "str byte r0 r2",
    ]


def test_qproc_store_preserves_address_registers() -> None:
    backend = QprocCodegenBackend()
    backend.emit_store_to_stack(4, 4, "r0")
    assert backend.output.splitlines() == [
        "push r0",
        "mov r0 bp",
        "movi r1 4",
        "sub r0 r1",
        "pop r1",
        "str dword r0 r1",
    ]

    backend = QprocCodegenBackend()
    backend.emit_store_to_stack(4, 2, "r1")
    assert backend.output.splitlines() == [
        "push r1",
        "mov r0 bp",
        "movi r1 4",
        "sub r0 r1",
        "pop r1",
        "str word r0 r1",
    ]


@pytest.mark.parametrize(
    ("size", "width"),
    [(1, "byte"), (2, "word"), (3, "dword"), (4, "dword"), (8, "dword"), (16, "dword")],
)
def test_qproc_access_width_fallthrough(size: int, width: str) -> None:
    assert qproc_access_width(size) == width

    backend = QprocCodegenBackend()
    backend.emit_load_from_stack(4, size, "r5")
    # Exactly one access, even for sizes that are not special cased
    access_lines = [line for line in backend.output.splitlines() if line.startswith("lod")]
    assert access_lines == [f"lod r5 {width} r0"]


def test_qproc_load_address_skips_scratch_register() -> None:
    backend = QprocCodegenBackend()
    assert backend.emit_load_address_from_stack(12) == "r1"
    assert backend.output.splitlines() == [
        "mov r1 bp",
        "movi r0 12",
        "sub r1 r0",
    ]


def test_qproc_codegen_comments() -> None:
    backend = QprocCodegenBackend(config=CodegenConfig(codegen_comments=True))
    backend.emit_label("loop")
    backend.emit_call("foo")
    backend.emit_single_ret()
    assert backend.output.splitlines() == [
        "; emit_label",
        "loop:",
        "; emit_call",
        "call foo",
        "// emit_single_ret",
        "pop ip",
    ]


def test_qproc_comments_do_not_change_instructions() -> None:
    plain = QprocCodegenBackend()
    commented = QprocCodegenBackend(config=CodegenConfig(codegen_comments=True))
    for backend in (plain, commented):
        backend.emit_function_prologue("f")
        register = backend.emit_load_from_stack(4, 4)
        backend.emit_push(register)
        backend.emit_pop("r3")
        backend.emit_function_epilogue()

    instructions = [
        line
        for line in commented.output.splitlines()
        if not line.startswith((";", "//"))
    ]
    assert instructions == plain.output.splitlines()


def test_qproc_invalid_arguments() -> None:
    backend = QprocCodegenBackend()
    with pytest.raises(InvalidRegisterError):
        backend.emit_move("x1", "r1")
    with pytest.raises(InvalidRegisterError):
        backend.emit_store_to_stack(4, 4, "")
    with pytest.raises(InvalidStackSizeError):
        backend.emit_reserve_stack_space(-4)
    with pytest.raises(InvalidStackSizeError):
        backend.emit_load_address_from_stack(-1)
    assert backend.output == ""


def test_qproc_register_wraparound_warning() -> None:
    warnings: list[str] = []
    backend = QprocCodegenBackend(on_warning=warnings.append)
    registers = [backend.emit_mov_const(i) for i in range(14)]
    assert registers[12] == "r12"
    assert registers[13] == "r0"
    assert len(warnings) == 1


def test_qproc_load_address_into_scratch_register() -> None:
    backend = QprocCodegenBackend()
    assert backend.emit_load_address_from_stack(8, "r0") == "r0"
    assert backend.output.splitlines() == [
        "mov r0 bp",
        "movi r1 8",
        "sub r0 r1",
    ]


class _FailingStoreQprocBackend(QprocCodegenBackend):
    def _store_to_stack(self, align: int, size: int, register: str) -> None:
        self._instruction("push", register)
        raise InvalidRegisterError(register=register, architecture="QProc")


def test_qproc_failed_operation_emits_nothing() -> None:
    backend = _FailingStoreQprocBackend(config=CodegenConfig(codegen_comments=True))
    backend.emit_label("entry")
    emitted = backend.output

    with pytest.raises(InvalidRegisterError):
        backend.emit_store_to_stack(4, 4, "r3")

    assert backend.output == emitted
    assert len(backend.writer) == 2
