"""Picking example functions at random."""

from __future__ import annotations

import random
from collections.abc import Iterable
from os import PathLike


class RandomFunctionPicker:
    """Chooses function strings uniformly from a fixed list."""

    def __init__(self, functions: Iterable[str], rng: random.Random | None = None) -> None:
        self.functions = list(functions)
        if not self.functions:
            raise ValueError("no functions to pick from")
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_file(
        cls, path: str | PathLike[str], rng: random.Random | None = None
    ) -> RandomFunctionPicker:
        """Load whitespace-separated function strings from a file."""
        with open(path, encoding="utf-8") as handle:
            functions = handle.read().split()
        return cls(functions, rng)

    def pick(self) -> str:
        """Return one of the functions, chosen uniformly."""
        return self._rng.choice(self.functions)