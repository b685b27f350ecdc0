from pathlib import Path

from libhcc.codegen.backends import QprocCodegenBackend
from libhcc.codegen.config import CodegenConfig
from libhcc.codegen.generator import generate_code_for_assembler
from libhcc.codegen.writer import CodeBuffer


def test_generate_code_for_assembler(tmp_path: Path) -> None:
    backend = QprocCodegenBackend()
    backend.emit_function_prologue("main")
    backend.emit_mov_const(0, "r0")
    backend.emit_function_epilogue()

    output_path = tmp_path / "build" / "main.asm"
    generate_code_for_assembler(output_path, backend)
    assert output_path.read_text(encoding="UTF-8") == backend.output
    assert backend.output.startswith("main:\npush bp\n")


def test_code_buffer_truncate() -> None:
    writer = CodeBuffer(CodegenConfig(codegen_comments=False), comment_token="//")
    writer.comment("skipped")
    writer.label("a")
    writer.instruction("ret;")
    assert len(writer) == 2

    writer.truncate(1)
    assert writer.getvalue() == "a:\n"
    assert [line.type for line in writer.lines] == ["label"]
