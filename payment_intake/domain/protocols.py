from typing import Protocol


class IdGenerator(Protocol):
    def generate(self) -> str:
        """Return the identifier for a newly created payment."""
        ...
