"""Base column builder shared by every dialect.

A column is built through chained calls::

    column.big_int().unsigned().foreign_key().references("users", "id")

Type methods are dialect specific and implemented by the concrete builders.
Constraint methods and shortcuts live here and only touch the column's
``ConstraintSet``, replacing it with an updated copy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, ClassVar

from tablegen.core.exceptions import ColumnError
from tablegen.domain.entities.constraints import (
    ColumnSnapshot,
    ConstraintSet,
    ForeignKey,
    Reference,
    ReferentialAction,
    quote_literal,
    render_default,
)
from tablegen.domain.entities.dialect import Dialect
from tablegen.domain.services.identifier_validator import is_snake_case

MAX_CHAR_LENGTH = 255
MAX_VARCHAR_LENGTH = 65535
DEFAULT_VARCHAR_LENGTH = 200


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_full_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class Column(ABC):
    """Fluent builder for a single table column.

    Attributes:
        dialect: Engine the concrete builder renders types for.
    """

    dialect: ClassVar[Dialect]

    def __init__(self, name: str) -> None:
        """Create a column.

        Args:
            name: Column name in snake_case.

        Raises:
            ColumnError: If the name is not a snake_case string.
        """
        if not is_snake_case(name):
            raise ColumnError(f"Invalid column name: {name!r}")

        self._name: str | None = name
        self._type: str | None = None
        self._constraints = ConstraintSet()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, type={self._type!r})"

    @property
    def name(self) -> str | None:
        """Column name."""
        return self._name

    @property
    def type(self) -> str | None:
        """Rendered SQL type, or None until a type method is called."""
        return self._type

    @property
    def constraints(self) -> ConstraintSet:
        """Constraints accumulated so far, as an immutable set."""
        return self._constraints

    def snapshot(self) -> ColumnSnapshot:
        """Return a frozen copy of the column for DDL generation."""
        return ColumnSnapshot(
            name=self._name,
            type=self._type,
            constraints=self._constraints,
        )

    # =========================================================================
    # ARGUMENT VALIDATION
    # =========================================================================

    @staticmethod
    def _validate_decimal(total: Any, places: Any) -> None:
        if (
            not _is_integer(total)
            or not _is_integer(places)
            or total < 0
            or places < 0
            or places > total
        ):
            raise ColumnError(
                f"Invalid decimal arguments: total={total!r}, places={places!r} "
                "(total must be >= 0, places must be >= 0 and <= total)"
            )

    @staticmethod
    def _validate_length(length: Any, maximum: int) -> None:
        if not _is_integer(length) or length < 0 or length > maximum:
            raise ColumnError(
                f"Invalid length: {length!r} (must be between 0 and {maximum})"
            )

    @staticmethod
    def _validate_enum(values: tuple[Any, ...]) -> None:
        if not values or not all(isinstance(value, str) for value in values):
            raise ColumnError(f"Invalid enum values: {list(values)!r}")

    @staticmethod
    def _quote_values(values: tuple[str, ...]) -> str:
        return ", ".join(quote_literal(value) for value in values)

    def _emulate_enum(self, sql_type: str, values: tuple[str, ...]) -> Column:
        """Store enum values as text guarded by a membership check."""
        self._type = sql_type
        return self.check(f"{self._name} IN ({self._quote_values(values)})")

    # =========================================================================
    # CONSTRAINTS
    # =========================================================================

    def unsigned(self) -> Column:
        """Restrict the column to non-negative values."""
        self._constraints = self._constraints.update(unsigned=True)
        return self

    def not_null(self) -> Column:
        """Reject NULL values."""
        self._constraints = self._constraints.update(not_null=True)
        return self

    def auto_increment(self) -> Column:
        """Generate sequential values. Requires a primary key at resolve time."""
        self._constraints = self._constraints.update(auto_increment=True)
        return self

    def default(self, value: str | int | float | bool | None) -> Column:
        """Set the value used when an insert omits this column.

        The value is rendered to SQL immediately: strings are quoted,
        booleans become ``1``/``0`` and None becomes ``NULL``.

        Args:
            value: A string, number, boolean or None.

        Raises:
            ColumnError: If the value has any other type.
        """
        self._constraints = self._constraints.update(default=render_default(value))
        return self

    def unique(self) -> Column:
        """Require distinct values."""
        self._constraints = self._constraints.update(unique=True)
        return self

    def primary_key(self) -> Column:
        """Mark the column as the table's primary key."""
        self._constraints = self._constraints.update(primary_key=True)
        return self

    def foreign_key(self) -> Column:
        """Start a foreign key. Call ``references`` to complete it."""
        self._constraints = self._constraints.update(foreign_key=ForeignKey())
        return self

    def references(self, table: str, column: str) -> Column:
        """Point the foreign key at ``table(column)``.

        Args:
            table: Referenced table name.
            column: Referenced column name.

        Raises:
            ColumnError: If either name is empty or no foreign key was started.
        """
        if not _is_full_string(table):
            raise ColumnError(f"Invalid table name: {table!r}")

        if not _is_full_string(column):
            raise ColumnError(f"Invalid column name: {column!r}")

        self._update_foreign_key(references=Reference(table=table, column=column))
        return self

    def ref(self, table: str, column: str) -> Column:
        """Alias for ``references``."""
        return self.references(table, column)

    def on_update(self, action: ReferentialAction) -> Column:
        """Set the foreign key's ON UPDATE action."""
        self._update_foreign_key(on_update=self._validate_action(action))
        return self

    def on_delete(self, action: ReferentialAction) -> Column:
        """Set the foreign key's ON DELETE action."""
        self._update_foreign_key(on_delete=self._validate_action(action))
        return self

    @staticmethod
    def _validate_action(action: Any) -> ReferentialAction:
        if not isinstance(action, ReferentialAction):
            raise ColumnError(f"Invalid referential action: {action!r}")
        return action

    def _update_foreign_key(self, **changes: Any) -> None:
        foreign_key = self._constraints.foreign_key
        if foreign_key is None:
            raise ColumnError("Undefined foreign key")

        self._constraints = self._constraints.update(foreign_key=replace(foreign_key, **changes))

    def check(self, condition: str) -> Column:
        """Add a CHECK constraint.

        Checks keep their insertion order, which also determines their
        generated constraint names.

        Args:
            condition: SQL boolean expression, e.g. ``age >= 18``.

        Raises:
            ColumnError: If the condition is not a non-empty string.
        """
        if not _is_full_string(condition):
            raise ColumnError(f"Invalid check condition: {condition!r}")

        self._constraints = self._constraints.with_check(condition)
        return self

    def index(self) -> Column:
        """Create an index on the column once the table exists."""
        self._constraints = self._constraints.update(index=True)
        return self

    # =========================================================================
    # SHORTCUTS
    # =========================================================================

    def pk(self) -> Column:
        """Auto-incrementing unsigned big integer primary key."""
        return self.big_int().unsigned().auto_increment().primary_key()

    def fk(self) -> Column:
        """Unsigned big integer foreign key. Call ``references`` afterwards."""
        return self.big_int().unsigned().foreign_key()

    def ip(self) -> Column:
        """Text column wide enough for an IPv6 address."""
        return self.varchar(39)

    def uuid(self) -> Column:
        """Text column for a 36 character UUID."""
        return self.varchar(36)

    # =========================================================================
    # TYPES
    # =========================================================================

    @abstractmethod
    def tiny_int(self) -> Column:
        """Very small integer."""
        ...

    @abstractmethod
    def small_int(self) -> Column:
        """Small integer."""
        ...

    @abstractmethod
    def medium_int(self) -> Column:
        """Medium integer."""
        ...

    @abstractmethod
    def int(self) -> Column:
        """Standard integer."""
        ...

    @abstractmethod
    def big_int(self) -> Column:
        """Large integer."""
        ...

    @abstractmethod
    def float(self) -> Column:
        """Single precision floating point number."""
        ...

    @abstractmethod
    def double(self) -> Column:
        """Double precision floating point number."""
        ...

    @abstractmethod
    def decimal(self, total: int, places: int) -> Column:
        """Fixed point number with ``total`` digits, ``places`` after the point."""
        ...

    @abstractmethod
    def char(self, length: int) -> Column:
        """Fixed length string of 0 to 255 characters."""
        ...

    @abstractmethod
    def varchar(self, length: int = DEFAULT_VARCHAR_LENGTH) -> Column:
        """Variable length string of 0 to 65535 characters."""
        ...

    @abstractmethod
    def tiny_text(self) -> Column:
        """Text up to 255 characters."""
        ...

    @abstractmethod
    def text(self) -> Column:
        """Text up to 65535 characters."""
        ...

    @abstractmethod
    def medium_text(self) -> Column:
        """Text up to 16777215 characters."""
        ...

    @abstractmethod
    def long_text(self) -> Column:
        """Unbounded text."""
        ...

    @abstractmethod
    def boolean(self) -> Column:
        """True or false."""
        ...

    @abstractmethod
    def date(self) -> Column:
        """Calendar date."""
        ...

    @abstractmethod
    def time(self) -> Column:
        """Time of day."""
        ...

    @abstractmethod
    def datetime(self) -> Column:
        """Date and time."""
        ...

    @abstractmethod
    def timestamp(self) -> Column:
        """Point in time."""
        ...

    @abstractmethod
    def year(self) -> Column:
        """Year."""
        ...

    @abstractmethod
    def json(self) -> Column:
        """JSON document."""
        ...

    @abstractmethod
    def enum(self, *values: str) -> Column:
        """One of a fixed list of string values."""
        ...
