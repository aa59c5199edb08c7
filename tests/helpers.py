from __future__ import annotations


class FakeClock:
    """Epoch-seconds clock that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.value = start

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value
