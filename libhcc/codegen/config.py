from dataclasses import dataclass, field


@dataclass
class CodegenConfig:
    """Configuration for codegen.

    Only affects how emitted text looks, never which instructions are emitted.
    """

    # Emit comment with name of an backend operation before its instructions
    codegen_comments: bool = field(default=False)
