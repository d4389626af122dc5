from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, NamedTuple, Optional

from statusname import utils
from statusname.exceptions import (
    DuplicateCode,
    DuplicateName,
    EmptyTable,
    MalformedEntry,
)

__all__ = ["StatusEntry", "StatusRegistry", "build"]

logger = logging.getLogger(__name__)


class StatusEntry(NamedTuple):
    name: str
    code: int


def _coerce_entry(index, entry) -> StatusEntry:
    if isinstance(entry, StatusEntry):
        name, code = entry
    else:
        try:
            name, code = entry
        except (TypeError, ValueError):
            raise MalformedEntry(
                "entry #%d is not a (name, code) pair: %r" % (index, entry)
            ) from None

    if not isinstance(name, str) or not name:
        raise MalformedEntry("entry #%d has an invalid name: %r" % (index, name))
    if isinstance(code, bool) or not isinstance(code, int):
        raise MalformedEntry("entry #%d has an invalid code: %r" % (index, code))
    return StatusEntry(name, int(code))


class StatusRegistry:
    """Immutable two-way mapping between status names and status codes.

    Instances are created with `StatusRegistry.build` and never change
    afterwards, so they can be shared between threads without locking.

    Lookups signal a miss with `None`. Code `0` is a regular code, so
    callers must test results with `is None` rather than for truthiness.
    """

    __slots__ = ["_entries", "_codes_by_name", "_names_by_code"]

    def __init__(self):
        raise TypeError("Use StatusRegistry.build() to create a registry")

    @classmethod
    def build(
        cls, entries: Iterable, strict_names: Optional[bool] = None
    ) -> StatusRegistry:
        """Builds a registry from an ordered table of `(name, code)` pairs.

        If several entries share a name, the first one wins for name lookups.
        With `strict_names` (defaulting to the `STATUSNAME_STRICT_NAMES`
        setting) such a table is rejected instead.

        Raises a `ConstructionError` subclass when the table is empty, holds
        a malformed entry or registers the same code twice.
        """
        if strict_names is None:
            strict_names = utils.settings.strict_names

        kept = []
        codes_by_name = {}
        names_by_code = {}

        for index, raw in enumerate(entries):
            entry = _coerce_entry(index, raw)

            if entry.code in names_by_code:
                raise DuplicateCode(
                    "code %d is registered as both %r and %r"
                    % (entry.code, names_by_code[entry.code], entry.name)
                )
            names_by_code[entry.code] = entry.name
            kept.append(entry)

            if entry.name in codes_by_name:
                if strict_names:
                    raise DuplicateName(
                        "name %r is registered for both %d and %d"
                        % (entry.name, codes_by_name[entry.name], entry.code)
                    )
                logger.log(
                    logging.WARNING if utils.settings.debug else logging.DEBUG,
                    "Duplicate status name %r for code %d, keeping code %d",
                    entry.name,
                    entry.code,
                    codes_by_name[entry.name],
                )
                continue
            codes_by_name[entry.name] = entry.code

        if not kept:
            raise EmptyTable("status table has no entries")

        rv = object.__new__(cls)
        rv._entries = tuple(kept)
        rv._codes_by_name = MappingProxyType(codes_by_name)
        rv._names_by_code = MappingProxyType(names_by_code)
        logger.debug(
            "Built status registry with %d entries (%d distinct names)",
            len(kept),
            len(codes_by_name),
        )
        return rv

    def code_of(self, name: str) -> Optional[int]:
        """Returns the code registered for `name`, or `None`."""
        return self._codes_by_name.get(name)

    def name_of(self, code: int) -> Optional[str]:
        """Returns the canonical name of `code`, or `None`."""
        return self._names_by_code.get(code)

    @property
    def entries(self) -> tuple:
        return self._entries

    @property
    def names(self):
        """Read-only `name -> code` view."""
        return self._codes_by_name

    @property
    def codes(self):
        """Read-only `code -> name` view."""
        return self._names_by_code

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[StatusEntry]:
        return iter(self._entries)

    def __contains__(self, name):
        return name in self._codes_by_name

    def __eq__(self, other):
        if not isinstance(other, StatusRegistry):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        return "<StatusRegistry entries=%d>" % len(self._entries)


def build(entries: Iterable, strict_names: Optional[bool] = None) -> StatusRegistry:
    """Shortcut for `StatusRegistry.build`."""
    return StatusRegistry.build(entries, strict_names=strict_names)
