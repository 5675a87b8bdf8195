"""Structured field values and the field set attached to each log call."""

from collections.abc import ItemsView, Iterator, Mapping
from enum import Enum

# Closed set of value types a field may carry
FieldValue = int | float | str | bool


class FieldKind(Enum):
    """Tag identifying which variant of FieldValue a value holds."""

    INT = "int"
    FLOAT = "float"
    TEXT = "text"
    BOOL = "bool"


def field_kind(value: object) -> FieldKind:
    """Classify a value as one of the four field kinds.

    ``bool`` is checked before ``int`` since it is an int subclass.

    Raises:
        TypeError: If the value is not an int, float, str or bool.
    """
    if isinstance(value, bool):
        return FieldKind.BOOL
    if isinstance(value, int):
        return FieldKind.INT
    if isinstance(value, float):
        return FieldKind.FLOAT
    if isinstance(value, str):
        return FieldKind.TEXT
    raise TypeError(
        f"field value must be int, float, str or bool, got {type(value).__name__}"
    )


class FieldSet:
    """Insertion-ordered mapping of field names to typed values.

    Adding a field under an existing key replaces the value in place;
    the number of fields does not change. Formatters only read from a
    FieldSet, they never modify it.

    Example:
        ```python
        fields = FieldSet(user_id=123).add("ip", "192.168.1.1")
        logger.info("user login", fields)
        ```
    """

    __slots__ = ("_fields",)

    def __init__(
        self,
        fields: "Mapping[str, FieldValue] | FieldSet | None" = None,
        **kwargs: FieldValue,
    ) -> None:
        self._fields: dict[str, FieldValue] = {}
        if fields is not None:
            self.update(fields)
        self.update(kwargs)

    def add(self, key: str, value: FieldValue) -> "FieldSet":
        """Insert or overwrite a field.

        Args:
            key: Field name.
            value: An int, float, str or bool.

        Returns:
            This FieldSet, for chaining.

        Raises:
            TypeError: If value is not one of the supported types.
        """
        field_kind(value)
        self._fields[key] = value
        return self

    def add_int(self, key: str, value: int) -> "FieldSet":
        """Store value as an integer field."""
        return self.add(key, int(value))

    def add_float(self, key: str, value: float) -> "FieldSet":
        """Store value as a floating-point field."""
        return self.add(key, float(value))

    def add_text(self, key: str, value: str) -> "FieldSet":
        """Store value as a text field."""
        return self.add(key, str(value))

    def add_bool(self, key: str, value: bool) -> "FieldSet":
        """Store value as a boolean field."""
        return self.add(key, bool(value))

    def update(self, other: "Mapping[str, FieldValue] | FieldSet") -> "FieldSet":
        """Add every field of another mapping, overwriting duplicates."""
        for key, value in other.items():
            self.add(key, value)
        return self

    def contains(self, key: str) -> bool:
        return key in self._fields

    def size(self) -> int:
        return len(self._fields)

    def get(self, key: str, default: FieldValue | None = None) -> FieldValue | None:
        return self._fields.get(key, default)

    def items(self) -> ItemsView[str, FieldValue]:
        """View of (key, value) pairs in insertion order."""
        return self._fields.items()

    def copy(self) -> "FieldSet":
        return FieldSet(self)

    def merged(self, other: "Mapping[str, FieldValue] | FieldSet") -> "FieldSet":
        """Return a new FieldSet with other's fields applied over a copy."""
        return self.copy().update(other)

    def __setitem__(self, key: str, value: FieldValue) -> None:
        self.add(key, value)

    def __getitem__(self, key: str) -> FieldValue:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSet):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"FieldSet({self._fields!r})"
