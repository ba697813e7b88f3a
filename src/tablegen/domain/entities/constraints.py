"""Column constraint entities.

A column accumulates its constraints in a sparse, immutable ``ConstraintSet``:
every field stays ``None`` until the corresponding builder method is called.
The resolver works on the ``ColumnSnapshot`` taken when the table is built.
"""

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

from tablegen.core.exceptions import ColumnError


class ReferentialAction(Enum):
    """Action applied to dependent rows when a referenced row changes."""

    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"
    RESTRICT = "RESTRICT"
    NO_ACTION = "NO ACTION"

    @property
    def sql(self) -> str:
        """SQL phrase used in ON DELETE / ON UPDATE clauses."""
        return self.value


CASCADE = ReferentialAction.CASCADE
SET_NULL = ReferentialAction.SET_NULL
SET_DEFAULT = ReferentialAction.SET_DEFAULT
RESTRICT = ReferentialAction.RESTRICT
NO_ACTION = ReferentialAction.NO_ACTION

# Shortcuts
CA = CASCADE
SN = SET_NULL
SD = SET_DEFAULT
RE = RESTRICT
NA = NO_ACTION


@dataclass(frozen=True)
class Reference:
    """Table and column a foreign key points at."""

    table: str
    column: str


@dataclass(frozen=True)
class ForeignKey:
    """Foreign key descriptor, completed step by step by the builder."""

    references: Reference | None = None
    on_delete: ReferentialAction | None = None
    on_update: ReferentialAction | None = None


@dataclass(frozen=True)
class ConstraintSet:
    """Sparse set of constraints applied to a single column.

    The set is immutable. Builder methods replace a column's set with an
    updated copy, so a set handed out by a column never changes afterwards.
    """

    unsigned: bool | None = None
    not_null: bool | None = None
    auto_increment: bool | None = None
    default: str | None = None
    unique: bool | None = None
    primary_key: bool | None = None
    foreign_key: ForeignKey | None = None
    checks: tuple[str, ...] | None = None
    index: bool | None = None

    def __post_init__(self) -> None:
        if self.checks is not None and not isinstance(self.checks, tuple):
            object.__setattr__(self, "checks", tuple(self.checks))

    def to_dict(self) -> dict[str, Any]:
        """Return only the constraints that have been set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def update(self, **changes: Any) -> "ConstraintSet":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def with_check(self, condition: str) -> "ConstraintSet":
        """Return a copy with ``condition`` appended to the checks."""
        return replace(self, checks=(*(self.checks or ()), condition))


@dataclass(frozen=True)
class ColumnSnapshot:
    """Read-only view of a column at the moment it is resolved."""

    name: str | None
    type: str | None
    constraints: ConstraintSet = field(default_factory=ConstraintSet)


def render_default(value: Any) -> str:
    """Render a Python value as a SQL literal for a DEFAULT clause.

    Args:
        value: A string, number, boolean or None.

    Returns:
        The SQL literal text.

    Raises:
        ColumnError: If the value has any other type.
    """
    if value is None:
        return "NULL"

    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return "1" if value else "0"

    if isinstance(value, int):
        return str(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ColumnError(f"Invalid default value: {value!r}")
        return str(value)

    if isinstance(value, str):
        return quote_literal(value)

    raise ColumnError(f"Invalid default value: {value!r}")


def quote_literal(value: str) -> str:
    """Quote a string as a SQL literal, doubling embedded single quotes."""
    escaped = value.replace("'", "''")
    return f"'{escaped}'"
