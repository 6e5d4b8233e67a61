"""Stable ordinals for label values."""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from functools import lru_cache

from seqtag.errors import InvalidArgumentError


def ordinal(label: Hashable) -> int:
    """Return the matrix index of an `Enum` member or plain integer label.

    Enum members (including `IntEnum`) are indexed by definition position in
    their class, so the ordinal does not depend on member values.
    """
    if isinstance(label, Enum):
        return _enum_ordinals(type(label))[label]
    if isinstance(label, int) and not isinstance(label, bool):
        if label < 0:
            raise InvalidArgumentError(f"label ordinal must be non-negative, got {label}")
        return label
    raise InvalidArgumentError(
        f"label {label!r} has no ordinal; pass an explicit label domain to TransitionModel"
    )


@lru_cache(maxsize=None)
def _enum_ordinals(enum_type: type[Enum]) -> dict[Enum, int]:
    return {member: index for index, member in enumerate(enum_type)}
