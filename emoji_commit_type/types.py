"""Commit Types - the fixed set of emoji commit categories."""

from enum import Enum
from functools import total_ordering
from typing import Optional


class CommitTypeError(ValueError):
    """Raised when a name or emoji does not match any commit type."""
    pass


class BumpLevel(Enum):
    """SemVer bump level. The value is the display name."""
    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


@total_ordering
class CommitType(Enum):
    """A commit category, ordered Breaking < Feature < Bugfix < Other < Meta."""
    BREAKING = "breaking"
    FEATURE = "feature"
    BUGFIX = "bugfix"
    OTHER = "other"
    META = "meta"

    @classmethod
    def first_variant(cls) -> 'CommitType':
        return cls.BREAKING

    @classmethod
    def last_variant(cls) -> 'CommitType':
        return cls.META

    @classmethod
    def iter_variants(cls) -> 'CommitTypeIterator':
        """Single-pass iterator over all commit types in canonical order."""
        return CommitTypeIterator()

    @classmethod
    def from_name(cls, text: str) -> 'CommitType':
        """Look up a commit type by name, ignoring case."""
        key = text.strip().lower()
        for commit_type in cls:
            if commit_type.value == key:
                return commit_type
        raise CommitTypeError(
            f"Unknown commit type '{text}'. Choose from: {', '.join(t.value for t in cls)}"
        )

    @classmethod
    def from_emoji(cls, glyph: str) -> 'CommitType':
        key = glyph.strip()
        for commit_type, emoji in _EMOJI.items():
            if emoji == key:
                return commit_type
        raise CommitTypeError(
            f"Unknown commit emoji '{glyph}'. Choose from: {' '.join(_EMOJI.values())}"
        )

    @property
    def position(self) -> int:
        return _POSITIONS[self]

    def next_variant(self) -> Optional['CommitType']:
        """Return the following commit type, or None after Meta."""
        idx = self.position + 1
        return _ORDER[idx] if idx < len(_ORDER) else None

    def prev_variant(self) -> Optional['CommitType']:
        """Return the preceding commit type, or None before Breaking."""
        idx = self.position - 1
        return _ORDER[idx] if idx >= 0 else None

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def bump_level(self) -> BumpLevel:
        return _BUMP_LEVELS[self]

    def __lt__(self, other):
        if not isinstance(other, CommitType):
            return NotImplemented
        return self.position < other.position

    def __repr__(self) -> str:
        return f"<CommitType.{self.name}: {self.emoji}>"


# Canonical order is definition order
_ORDER: list[CommitType] = list(CommitType)
_POSITIONS = {commit_type: idx for idx, commit_type in enumerate(_ORDER)}

_EMOJI = {
    CommitType.BREAKING: '💥',
    CommitType.FEATURE: '🎉',
    CommitType.BUGFIX: '🐛',
    CommitType.OTHER: '🔥',
    CommitType.META: '🌹',
}

_DESCRIPTIONS = {
    CommitType.BREAKING: 'Breaking change',
    CommitType.FEATURE: 'New functionality',
    CommitType.BUGFIX: 'Bugfix',
    CommitType.OTHER: 'Cleanup / Performance',
    CommitType.META: 'Meta',
}

_BUMP_LEVELS = {
    CommitType.BREAKING: BumpLevel.MAJOR,
    CommitType.FEATURE: BumpLevel.MINOR,
    CommitType.BUGFIX: BumpLevel.PATCH,
    CommitType.OTHER: BumpLevel.PATCH,
    CommitType.META: BumpLevel.NONE,
}


class CommitTypeIterator:
    """Forward-only cursor over commit types. Not restartable, not thread-safe.

    len() is the exact number of types still to be produced.
    """

    def __init__(self):
        self._current: Optional[CommitType] = CommitType.first_variant()

    def __iter__(self) -> 'CommitTypeIterator':
        return self

    def __next__(self) -> CommitType:
        if self._current is None:
            raise StopIteration
        current = self._current
        self._current = current.next_variant()
        return current

    def __len__(self) -> int:
        if self._current is None:
            return 0
        return len(_ORDER) - self._current.position

    def __length_hint__(self) -> int:
        return len(self)


__all__ = [
    "BumpLevel",
    "CommitType",
    "CommitTypeIterator",
    "CommitTypeError",
]
