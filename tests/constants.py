"""
Shared test constants.

Values used across several test modules so hashes and timestamps stay
consistent between them.
"""

# Unix time every fixture clock starts from (2026-01-01T00:00:00Z).
FIXED_TIME = 1_767_225_600


class StepClock:
    """Callable clock that advances by ``step`` seconds on every call."""

    def __init__(self, start: int = FIXED_TIME, step: int = 0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current
