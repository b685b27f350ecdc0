from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO, Literal

from libhcc.codegen.config import CodegenConfig


@dataclass
class CISLine:
    type: Literal["instruction", "label", "comment"]
    text: str


class CodeBuffer:
    """Append-only accumulator of emitted assembly lines.

    Lines are kept separately until the buffer is read or flushed,
    so an failed operation can discard what it has emitted (see `truncate`).
    """

    buffer: list[CISLine]
    config: CodegenConfig

    def __init__(self, config: CodegenConfig, comment_token: str) -> None:
        self.buffer = []
        self.config = config
        self.comment_token = comment_token

    def comment(self, line: str, *, token: str | None = None) -> None:
        if not self.config.codegen_comments:
            return
        self.buffer.append(
            CISLine(type="comment", text=f"{token or self.comment_token} {line}"),
        )

    def label(self, label: str) -> None:
        """Emit label to code."""
        self.buffer.append(CISLine(type="label", text=f"{label}:"))

    def instruction(self, instruction: str) -> None:
        self.buffer.append(CISLine(type="instruction", text=instruction))

    def truncate(self, length: int) -> None:
        """Drop every line emitted after buffer had given length."""
        assert 0 <= length <= len(self.buffer)
        del self.buffer[length:]

    @property
    def lines(self) -> Sequence[CISLine]:
        return tuple(self.buffer)

    def getvalue(self) -> str:
        return "".join(f"{cis_line.text}\n" for cis_line in self.buffer)

    def full_buffer_flush(self, fd: IO[str]) -> None:
        for cis_line in self.buffer:
            fd.write(cis_line.text)
            fd.write("\n")

    def __len__(self) -> int:
        return len(self.buffer)
