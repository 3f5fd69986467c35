"""Query parameter set and canonical query-string encoding."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, urlencode, urlsplit

if TYPE_CHECKING:
    from .options import QueryOption


class ParameterSet:
    """Ordered multimap of query parameter name to string values."""

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._values: dict[str, list[str]] = {}
        for name, value in items:
            self.add(name, value)

    @classmethod
    def from_url(cls, url: str) -> "ParameterSet":
        """Seed a parameter set from the query component of url."""

        return cls(parse_qsl(urlsplit(url).query, keep_blank_values=True))

    def set(self, name: str, value: str) -> None:
        self._values[name] = [value]

    def add(self, name: str, value: str) -> None:
        self._values.setdefault(name, []).append(value)

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str) -> str | None:
        values = self._values.get(name)
        if not values:
            return None
        return values[0]

    def get_all(self, name: str) -> tuple[str, ...]:
        return tuple(self._values.get(name, ()))

    def items(self) -> Iterator[tuple[str, str]]:
        for name, values in self._values.items():
            for value in values:
                yield name, value

    def copy(self) -> "ParameterSet":
        return ParameterSet(self.items())

    def encode(self) -> str:
        """Encode as a query string with keys sorted; values keep insertion order."""

        return urlencode(
            [(name, value) for name in sorted(self._values) for value in self._values[name]]
        )

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ParameterSet({list(self.items())!r})"


def apply_options(
    options: Iterable["QueryOption"],
    *,
    base_params: ParameterSet | None = None,
) -> ParameterSet:
    """Apply options in order; the first failing option raises."""

    params = base_params.copy() if base_params is not None else ParameterSet()
    for option in options:
        option.apply(params)
    return params


def build_query(
    options: Iterable["QueryOption"],
    *,
    base_params: ParameterSet | None = None,
) -> str:
    return apply_options(options, base_params=base_params).encode()


__all__ = [
    "ParameterSet",
    "apply_options",
    "build_query",
]
