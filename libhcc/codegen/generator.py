from pathlib import Path

from .backends import CodeGeneratorBackend


def generate_code_for_assembler(
    output_path: Path,
    backend: CodeGeneratorBackend,
) -> None:
    """Write everything given backend emitted into given file, for an assembler to consume."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open(
        mode="w",
        errors="strict",
        buffering=1,
        newline="",
        encoding="UTF-8",
    ) as fd:
        backend.flush(fd)
