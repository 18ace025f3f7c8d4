from uuid import uuid4

ID_PREFIX = "pay_"


class UuidIdGenerator:
    """Generates a unique payment id per call from a random UUID."""

    def generate(self) -> str:
        return f"{ID_PREFIX}{uuid4().hex}"


class FixedIdGenerator:
    """Always hands out the same placeholder id.

    Kept for parity with the demo behaviour where every payment was
    created as pay_12345.
    """

    def __init__(self, value: str = "12345"):
        self.value = value

    def generate(self) -> str:
        return f"{ID_PREFIX}{self.value}"
