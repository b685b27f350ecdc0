from collections.abc import Callable


class RegisterAllocator:
    """Rotating dispenser of scratch registers.

    Has no liveness tracking: after `max_index` it wraps back to first register,
    so caller is responsible to not request registers when still-live one will be returned.
    """

    next_index: int

    def __init__(
        self,
        register_prefix: str,
        max_index: int,
        on_wraparound: Callable[[str], None] | None = None,
    ) -> None:
        assert max_index >= 0, "Register file must contain at least one register"
        self.register_prefix = register_prefix
        self.max_index = max_index
        self.on_wraparound = on_wraparound
        self.next_index = 0

    @property
    def capacity(self) -> int:
        return self.max_index + 1

    def allocate_index(self) -> int:
        index = self.next_index
        self.next_index += 1
        if self.next_index > self.max_index:
            self.next_index = 0
            if self.on_wraparound:
                self.on_wraparound(
                    f"Register allocator wrapped around after {self.register_prefix}{index}, "
                    "previously allocated registers will be handed out again",
                )
        return index

    def allocate(self) -> str:
        return self.format(self.allocate_index())

    def format(self, index: int) -> str:
        return f"{self.register_prefix}{index}"

    def __repr__(self) -> str:
        return f"RegisterAllocator [{self.register_prefix}{self.next_index}/{self.max_index}]"
