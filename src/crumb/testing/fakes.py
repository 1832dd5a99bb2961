"""Fake hosts and clocks for exercising cookie code in tests."""

from dataclasses import dataclass, field


class FrozenClock:
    """A clock that only moves when told to. Pass it as ``MemoryJar(clock=...)``."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class StaticJar:
    """A jar whose string is set verbatim and never merged.

    Reads return ``text``; writes are only recorded in ``writes``.
    """

    text: str = ""
    writes: list[str] = field(default_factory=list)

    def get_jar(self) -> str:
        return self.text

    def set_jar(self, fragment: str) -> None:
        self.writes.append(fragment)
