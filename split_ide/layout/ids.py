"""Identifier generation for pane tree nodes."""

from __future__ import annotations

import random
import string
from typing import Optional

from ..config.defaults import ID_SUFFIX_LENGTH, PANE_ID_PREFIX, SPLIT_ID_PREFIX

_ALPHABET = string.digits + string.ascii_lowercase


class IdGenerator:
    """Produces ids of the form ``<prefix>-<counter>-<random>``.

    The counter alone keeps ids unique within one store. The random suffix
    keeps ids from separate sessions apart.

    Args:
        seed: Seed for the suffix generator. With a seed, the same sequence
            of calls yields the same ids, also after ``reset()``.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)
        self._counter = 0

    @property
    def counter(self) -> int:
        return self._counter

    def next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}-{self._counter}-{self._suffix()}"

    def pane_id(self) -> str:
        return self.next_id(PANE_ID_PREFIX)

    def split_id(self) -> str:
        return self.next_id(SPLIT_ID_PREFIX)

    def reset(self) -> None:
        self._counter = 0
        if self._seed is not None:
            self._rng.seed(self._seed)

    def _suffix(self) -> str:
        return "".join(self._rng.choice(_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
