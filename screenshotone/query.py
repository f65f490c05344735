"""
Ordered multi-map of query parameters and its form-urlencoded serialization.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple
from urllib.parse import quote_plus

Pair = Tuple[str, str]


def form_urlencode(value: str) -> str:
    """
    Encode one key or value the way browsers serialize form data.

    Alphanumerics and `*-._` pass through, space becomes `+` and every other
    UTF-8 byte is percent-encoded.
    """

    # quote_plus keeps "~" unescaped and escapes "*"; form encoding does the opposite.
    return quote_plus(value, safe="*").replace("~", "%7E")


class QueryParams:
    """
    Insertion-ordered (key, value) pairs.

    Order is significant: it fixes the serialized bytes and therefore the
    request signature.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Optional[Iterable[Pair]] = None) -> None:
        self._pairs: List[Pair] = [(str(key), str(value)) for key, value in pairs or ()]

    def set(self, key: str, value: str) -> None:
        """Single-value write: replace the first pair in place, drop the rest."""

        replaced = False
        pairs: List[Pair] = []
        for existing_key, existing_value in self._pairs:
            if existing_key != key:
                pairs.append((existing_key, existing_value))
            elif not replaced:
                pairs.append((key, value))
                replaced = True
        if not replaced:
            pairs.append((key, value))
        self._pairs = pairs

    def append(self, key: str, *values: str) -> None:
        """Multi-value write: one pair per value, in the order given."""

        for value in values:
            self._pairs.append((key, value))

    def get(self, key: str) -> Optional[str]:
        for existing_key, value in self._pairs:
            if existing_key == key:
                return value
        return None

    def get_all(self, key: str) -> List[str]:
        return [value for existing_key, value in self._pairs if existing_key == key]

    def copy(self) -> "QueryParams":
        return QueryParams(self._pairs)

    def encode(self) -> str:
        return "&".join(f"{form_urlencode(key)}={form_urlencode(value)}" for key, value in self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(existing_key == key for existing_key, _ in self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"QueryParams({self._pairs!r})"

    def __str__(self) -> str:
        return self.encode()


__all__ = ["Pair", "QueryParams", "form_urlencode"]
