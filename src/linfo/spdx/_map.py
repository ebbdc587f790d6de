# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Fixed-size, ordinal-indexed storage for per-license values.

:class:`LicenseMap` holds exactly one value per license in a flat list
indexed by :attr:`SpdxLicense.ordinal`, so lookups never hash.

Usage::

    from linfo.spdx import LicenseMap, SpdxLicense

    seen = LicenseMap.filled(0)
    seen[SpdxLicense.MIT] += 1
    assert seen[SpdxLicense.MIT] == 1
    assert len(seen) == SpdxLicense.count()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from linfo.spdx._decl import COUNT, SpdxLicense

__all__ = [
    'LicenseMap',
]

T = TypeVar('T')


class LicenseMap(Generic[T]):
    """One value per license, indexed by :class:`SpdxLicense`.

    The size is fixed at :data:`~linfo.spdx.COUNT`; keys cannot be added
    or removed, only reassigned.

    Args:
        values: Exactly ``COUNT`` values in ordinal order.

    Raises:
        ValueError: If *values* does not hold exactly ``COUNT`` items.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Iterable[T]) -> None:
        self._values: list[T] = list(values)
        if len(self._values) != COUNT:
            msg = f'LicenseMap needs exactly {COUNT} values, got {len(self._values)}'
            raise ValueError(msg)

    @classmethod
    def filled(cls, value: T) -> LicenseMap[T]:
        """Return a map with every license set to *value*."""
        return cls([value] * COUNT)

    @classmethod
    def from_factory(cls, factory: Callable[[SpdxLicense], T]) -> LicenseMap[T]:
        """Return a map with each license set to ``factory(license)``."""
        return cls(factory(lic) for lic in SpdxLicense.all())

    @staticmethod
    def _index(key: object) -> int:
        if not isinstance(key, SpdxLicense):
            msg = f'LicenseMap keys must be SpdxLicense, got {type(key).__name__}'
            raise TypeError(msg)
        return key.ordinal

    def __getitem__(self, key: SpdxLicense) -> T:
        return self._values[self._index(key)]

    def __setitem__(self, key: SpdxLicense, value: T) -> None:
        self._values[self._index(key)] = value

    def __len__(self) -> int:
        return COUNT

    def __iter__(self) -> Iterator[SpdxLicense]:
        return iter(SpdxLicense.all())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, SpdxLicense)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LicenseMap):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._values!r})'

    def values(self) -> list[T]:
        """Return a copy of the values in ordinal order."""
        return list(self._values)

    def items(self) -> Iterator[tuple[SpdxLicense, T]]:
        """Iterate ``(license, value)`` pairs in ordinal order."""
        return zip(SpdxLicense.all(), self._values, strict=True)
