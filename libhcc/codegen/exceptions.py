from libhcc.exceptions import HccError
from libhcc.targets import Target


class CodegenUnsupportedBackendTargetError(HccError):
    def __init__(
        self,
        *args: object,
        target: Target,
    ) -> None:
        super().__init__(*args)
        self.target = target

    def __repr__(self) -> str:
        return f"""Code generation failed

Unsupported target '{self.target.name}' ({self.target.architecture})!
Please read documentation to find available targets!

{self.generic_error_name}"""


class InvalidRegisterError(HccError):
    def __init__(
        self,
        *args: object,
        register: str,
        architecture: str,
    ) -> None:
        super().__init__(*args)
        self.register = register
        self.architecture = architecture

    def __repr__(self) -> str:
        return f"""Invalid register '{self.register}'!

Register is empty or is not a part of {self.architecture} register file.

{self.generic_error_name}"""


class InvalidStackSizeError(HccError):
    def __init__(
        self,
        *args: object,
        size: int,
        reason: str,
    ) -> None:
        super().__init__(*args)
        self.size = size
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Invalid stack size {self.size}!

{self.reason}

{self.generic_error_name}"""


class UnsupportedWidthError(HccError):
    def __init__(
        self,
        *args: object,
        size: int,
        architecture: str,
    ) -> None:
        super().__init__(*args)
        self.size = size
        self.architecture = architecture

    def __repr__(self) -> str:
        return f"""Unsupported memory access width!

Cannot access {self.size} byte(s) at once on {self.architecture}.

{self.generic_error_name}"""
