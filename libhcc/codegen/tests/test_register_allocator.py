from libhcc.codegen.abi import HyperCPUABI, QprocABI
from libhcc.codegen.registers import RegisterAllocator


def test_register_allocator_rotation() -> None:
    allocator = RegisterAllocator(register_prefix="x", max_index=7)
    assert allocator.capacity == 8

    allocated = [allocator.allocate() for _ in range(8 * 2 + 3)]
    expected = [f"x{i % 8}" for i in range(8 * 2 + 3)]
    assert allocated == expected


def test_register_allocator_wraparound_warning() -> None:
    warnings: list[str] = []
    allocator = RegisterAllocator(
        register_prefix="r",
        max_index=12,
        on_wraparound=warnings.append,
    )

    for _ in range(12):
        allocator.allocate()
    assert not warnings

    assert allocator.allocate() == "r12"
    assert len(warnings) == 1
    assert allocator.next_index == 0
    assert allocator.allocate() == "r0"


def test_abi_descriptors() -> None:
    hypercpu = HyperCPUABI()
    assert hypercpu.return_register == "x0"
    assert list(hypercpu.arguments_registers) == ["x2", "x3", "x4", "x5", "x6", "x7"]

    qproc = QprocABI()
    assert qproc.return_register == "r0"
    assert len(qproc.arguments_registers) == 11
    assert qproc.arguments_registers[0] == "r2"
    assert qproc.arguments_registers[-1] == "r12"
