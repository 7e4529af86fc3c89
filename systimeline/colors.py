from __future__ import annotations

# Task color sources. The hash source is stdlib-only; only the seeded source
# needs NumPy, and only once it draws a color.

import hashlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

try:
    import numpy as np
except ModuleNotFoundError as exc:  # pragma: no cover
    np = None  # type: ignore[assignment]
    _NUMPY_IMPORT_ERROR = exc
else:
    _NUMPY_IMPORT_ERROR = None

if TYPE_CHECKING:  # pragma: no cover
    from numpy.random import Generator

IDLE_COLOR = "#c2ffcc"
SCHEDULER_COLOR = "#444444"


def _require_numpy() -> None:
    if np is None:  # pragma: no cover
        raise ModuleNotFoundError(
            "NumPy is required for seeded task colors. Install with: pip install numpy"
        ) from _NUMPY_IMPORT_ERROR


def _hex(value: int) -> str:
    return f"#{value & 0xFFFFFF:06x}"


class ColorSource(Protocol):
    def color_for(self, name: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class HashColorSource:
    """Derive a color from the task name alone; identical across runs."""

    def color_for(self, name: str) -> str:
        digest = hashlib.blake2b(name.encode("utf-8"), digest_size=3).digest()
        return _hex(int.from_bytes(digest, "big"))


@dataclass
class SeededColorSource:
    """Random palette drawn from a seeded NumPy generator.

    Colors depend on the order names are requested in, so the same trace and
    seed always produce the same palette.
    """

    seed: int
    _rng: "Generator | None" = field(default=None, init=False, repr=False)

    def color_for(self, name: str) -> str:
        if self._rng is None:
            _require_numpy()
            self._rng = np.random.default_rng(self.seed)
        return _hex(int(self._rng.integers(0, 1 << 24)))


def default_color_source(seed: int | None = None) -> ColorSource:
    if seed is None:
        return HashColorSource()
    return SeededColorSource(seed=seed)
