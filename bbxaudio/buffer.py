"""A fixed-size container of audio samples."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from bbxaudio.sample import EQUILIBRIUM


class AudioBuffer:
    """A fixed-length sequence of float samples, initially silent."""

    __slots__ = ("_data",)

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._data: list[float] = [EQUILIBRIUM] * capacity

    @classmethod
    def from_values(cls, values: Iterable[float]) -> AudioBuffer:
        """Create a buffer holding a copy of ``values``."""
        buffer = cls(0)
        buffer._data = [float(v) for v in values]
        return buffer

    def as_list(self) -> list[float]:
        """Return the samples as a new list."""
        return list(self._data)

    def copy_from(self, values: Iterable[float]) -> None:
        """Overwrite every sample; ``values`` must have the buffer's length."""
        new_data = [float(v) for v in values]
        if len(new_data) != len(self._data):
            raise ValueError(
                f"source length ({len(new_data)}) does not match "
                f"buffer length ({len(self._data)})"
            )
        self._data = new_data

    def __len__(self) -> int:
        return len(self._data)

    def apply(self, func: Callable[[float], float]) -> None:
        """Replace each sample with ``func(sample)``, in order."""
        self._data = [func(s) for s in self._data]

    def clear(self) -> None:
        """Reset every sample to silence, keeping the length."""
        self._data = [EQUILIBRIUM] * len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._data))

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioBuffer):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AudioBuffer({self._data!r})"