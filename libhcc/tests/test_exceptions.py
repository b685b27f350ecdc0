from libhcc.codegen.exceptions import InvalidRegisterError, UnsupportedWidthError
from libhcc.exceptions import camel_to_kebab


def test_error_message_is_headline() -> None:
    error = InvalidRegisterError(register="x9", architecture="HyperCPU")
    assert str(error) == "Invalid register 'x9'!"
    assert "[invalid-register-error]" in repr(error)

    error = UnsupportedWidthError(size=3, architecture="HyperCPU")
    assert str(error) == "Unsupported memory access width!"


def test_camel_to_kebab() -> None:
    assert camel_to_kebab("UnknownTypeError") == "unknown-type-error"
