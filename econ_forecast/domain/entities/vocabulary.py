"""
Domain Entities - Country Vocabulary

The vocabulary maps every country of the training corpus to the numeric
code the forecasting model was trained with. It is built once when the
process starts and is read-only afterwards.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional


class Vocabulary:
    """Immutable country name -> numeric code mapping."""

    __slots__ = ("_codes",)

    def __init__(self, codes: Mapping[str, int]):
        self._codes: Mapping[str, int] = MappingProxyType(dict(codes))

    @classmethod
    def from_countries(cls, countries: Iterable[str]) -> "Vocabulary":
        """Assign codes by sorted country name, starting at zero."""
        names = sorted({name.strip() for name in countries if name and name.strip()})
        return cls({name: code for code, name in enumerate(names)})

    def code_for(self, country: str) -> Optional[int]:
        return self._codes.get(country)

    def countries(self) -> List[str]:
        return sorted(self._codes)

    def __contains__(self, country: object) -> bool:
        return country in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self.countries())

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self._codes)})"
