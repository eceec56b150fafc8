# aniline/shaders/handle.py
from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass

_counter = itertools.count()
_counter_lock = threading.Lock()


def allocate_handle() -> ShaderHandle:
    """Issue the next process-wide handle. Handles are never reused."""
    with _counter_lock:
        value = next(_counter)
    return ShaderHandle(value)


@dataclass(frozen=True, order=True, slots=True)
class ShaderHandle:
    """
    Lightweight reference to a registered shader unit.
    Holding this does not guarantee the unit is still registered.
    """

    value: int

    @classmethod
    def new(cls) -> ShaderHandle:
        return allocate_handle()

    def __str__(self) -> str:
        return f"ShaderHandle({self.value})"
