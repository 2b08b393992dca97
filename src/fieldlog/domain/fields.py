from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

EMPTY_PLACEHOLDER = "<empty>"


@dataclass(frozen=True, slots=True)
class FieldSet:
    # Immutable name -> value mapping; every addition yields a new FieldSet.
    _items: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    placeholder: str = EMPTY_PLACEHOLDER

    @classmethod
    def empty(cls, *, placeholder: str = EMPTY_PLACEHOLDER) -> FieldSet:
        return cls(MappingProxyType({}), placeholder)

    @classmethod
    def of(cls, fields: Mapping[str, str], *, placeholder: str = EMPTY_PLACEHOLDER) -> FieldSet:
        result = cls.empty(placeholder=placeholder)
        for name, value in fields.items():
            result = result.with_field(name, value)
        return result

    def with_field(self, name: str, value: str) -> FieldSet:
        if value == "":
            # Keep empty fields visible instead of rendering a blank value.
            value = self.placeholder
        items = dict(self._items)
        items[name] = str(value)
        return FieldSet(MappingProxyType(items), self.placeholder)

    def names(self) -> list[str]:
        # Lexicographic order keeps rendered output reproducible.
        return sorted(self._items)

    def max_name_length(self) -> int:
        return max((len(name) for name in self._items), default=0)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._items.get(name, default)

    def as_dict(self) -> dict[str, str]:
        return {name: self._items[name] for name in self.names()}

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __getitem__(self, name: str) -> str:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


def empty() -> FieldSet:
    return FieldSet.empty()


def with_field(fields: FieldSet, name: str, value: str) -> FieldSet:
    return fields.with_field(name, value)
