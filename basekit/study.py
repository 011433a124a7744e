"""A named learner that listens, speaks, reads and writes, and a product spec."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Study:
    """A learner identified by name; each action returns a descriptive line."""

    name: str

    def listen(self, message: str) -> str:
        return f"{self.name} 听 {message}"

    def speak(self, message: str) -> str:
        return f"{self.name} 说 {message}"

    def read(self, message: str) -> str:
        return f"{self.name} 读 {message}"

    def write(self, message: str) -> str:
        return f"{self.name} 写 {message}"


def new_study(name: str) -> Study:
    """Create a learner; ``name`` must not be empty."""
    if not name:
        raise ValueError("name required")
    return Study(name)


@dataclass
class Spec:
    """A computer's maker, model and price; the model is kept out of its repr."""

    maker: str = ""
    price: int = 0
    model: str = field(default="", repr=False)