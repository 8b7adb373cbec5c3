"""Key-value store port – KeysIterator."""
from __future__ import annotations

from typing import Any, Iterable, Iterator

from kv_keystore.resilience.deadline import DeadlineContext, DeadlineExceededError


class KeysIterator:
    """Forward-only cursor over a snapshot of keys.

    :meth:`next` returns the current key together with a flag telling whether
    another key follows it. Once exhausted it keeps returning ``("", False)``.

    The deadline active when the snapshot was taken is remembered;
    :meth:`close` raises :class:`DeadlineExceededError` if it has passed.

    Usage::

        it = await store.list()
        with it:
            for key in it:
                ...
    """

    def __init__(self, keys: Iterable[str]) -> None:
        self._keys: tuple[str, ...] = tuple(keys)
        self._index = 0
        self._deadline = DeadlineContext.get()

    def next(self) -> tuple[str, bool]:
        key = ""
        if self._index < len(self._keys):
            key = self._keys[self._index]
            self._index += 1
        return key, self._index < len(self._keys)

    def __iter__(self) -> Iterator[str]:
        while self._index < len(self._keys):
            key, _ = self.next()
            yield key

    def __len__(self) -> int:
        return len(self._keys) - self._index

    def close(self) -> None:
        self._keys = ()
        self._index = 0
        if self._deadline is not None and self._deadline.is_expired:
            raise DeadlineExceededError()

    def __enter__(self) -> "KeysIterator":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


__all__ = ["KeysIterator"]
