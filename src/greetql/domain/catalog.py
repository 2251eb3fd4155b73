"""Fixed greeting catalog addressed by 1-based identifiers.

Contents:
    * :class:`GreetingRecord` - One immutable catalog entry.
    * :class:`Catalog` - Ordered, read-only container with bounds-checked lookup.
    * :func:`default_catalog` - The ten International Women's Day greetings.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

DEFAULT_GREETINGS: tuple[str, ...] = (
    "С 8 Марта! Пусть каждый день дарит улыбки, радость и вдохновение!",
    "Поздравляю с Международным женским днём! Желаю весеннего настроения, любви и счастья!",
    "С 8 Марта! Оставайтесь такой же прекрасной, нежной и удивительной!",
    "Пусть в этот день сбудутся самые заветные мечты. С праздником весны!",
    "С 8 Марта! Желаю море цветов, тепла, уюта и приятных сюрпризов!",
    "Поздравляю с днём очарования! Будьте счастливы, любимы и неповторимы!",
    "С Международным женским днём! Пусть весна расцветает в душе, а сердце согревает любовь.",
    "С 8 Марта! Желаю, чтобы каждый день был таким же ярким и прекрасным, как первые весенние цветы.",
    "Поздравляю с праздником! Пусть жизнь играет яркими красками, а рядом будут только верные и любящие люди.",
    "С 8 Марта! Желаю женского счастья, крепкого здоровья и исполнения желаний!",
)

DEFAULT_FLOWERS: tuple[str, ...] = (
    "🌷🌹🌸",
    "🌼🌻🌺",
    "🌷🌷🌷",
    "🌸🌸🌸",
    "🌹🌹🌹",
    "🌺🌺🌺",
    "🌻🌻🌻",
    "🌼🌼🌼",
    "🌷🌹🌺",
    "🌸🌼🌻",
)


@dataclass(frozen=True, slots=True)
class GreetingRecord:
    """A single greeting with its decoration.

    Attributes:
        id: 1-based position inside the catalog.
        text: Greeting text.
        decoration: Flower emoji string, may be empty.

    Example:
        >>> record = GreetingRecord(id=1, text="Hi", decoration="🌷")
        >>> record.text
        'Hi'
    """

    id: int
    text: str
    decoration: str = ""


class Catalog:
    """Immutable ordered greeting collection.

    Identifiers are positions plus one. Every identifier in ``[1, len]`` maps to
    exactly one record, anything else maps to ``None``.

    Example:
        >>> catalog = Catalog.from_pairs(["a", "b"], ["x", "y"])
        >>> catalog.get(2).text
        'b'
        >>> catalog.get(3) is None
        True
    """

    __slots__ = ("_records",)

    def __init__(self, records: Sequence[GreetingRecord]) -> None:
        if not records:
            raise ValueError("catalog must contain at least one greeting")
        for position, record in enumerate(records, start=1):
            if record.id != position:
                raise ValueError(f"record at position {position} has id {record.id}")
        self._records: tuple[GreetingRecord, ...] = tuple(records)

    @classmethod
    def from_pairs(cls, texts: Sequence[str], decorations: Sequence[str] | None = None) -> Catalog:
        """Build a catalog from parallel text and decoration sequences.

        Args:
            texts: Greeting texts in identifier order.
            decorations: Matching decorations. ``None`` leaves every decoration empty.

        Raises:
            ValueError: If the sequences differ in length or are empty.
        """
        if decorations is None:
            decorations = [""] * len(texts)
        if len(texts) != len(decorations):
            raise ValueError(f"got {len(texts)} greetings but {len(decorations)} decorations")
        return cls(
            [
                GreetingRecord(id=position, text=text, decoration=decoration)
                for position, (text, decoration) in enumerate(zip(texts, decorations, strict=True), start=1)
            ]
        )

    def get(self, greeting_id: int) -> GreetingRecord | None:
        """Return the record for ``greeting_id`` or ``None`` when out of range."""
        if greeting_id < 1 or greeting_id > len(self._records):
            return None
        return self._records[greeting_id - 1]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GreetingRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Catalog(size={len(self._records)})"


def default_catalog() -> Catalog:
    """Return a fresh catalog holding the bundled greetings and flowers.

    Example:
        >>> len(default_catalog())
        10
    """
    return Catalog.from_pairs(DEFAULT_GREETINGS, DEFAULT_FLOWERS)


__all__ = [
    "DEFAULT_FLOWERS",
    "DEFAULT_GREETINGS",
    "Catalog",
    "GreetingRecord",
    "default_catalog",
]
