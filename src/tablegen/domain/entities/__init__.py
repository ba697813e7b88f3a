"""Domain entities for tablegen.

Entities are plain dataclasses and enums describing engines and constraints.
They have no dependencies on infrastructure.
"""

from tablegen.domain.entities.constraints import (
    CA,
    CASCADE,
    NA,
    NO_ACTION,
    RE,
    RESTRICT,
    SD,
    SET_DEFAULT,
    SET_NULL,
    SN,
    ColumnSnapshot,
    ConstraintSet,
    ForeignKey,
    Reference,
    ReferentialAction,
    quote_literal,
    render_default,
)
from tablegen.domain.entities.dialect import Dialect

__all__ = [
    "CA",
    "CASCADE",
    "ColumnSnapshot",
    "ConstraintSet",
    "Dialect",
    "ForeignKey",
    "NA",
    "NO_ACTION",
    "RE",
    "RESTRICT",
    "Reference",
    "ReferentialAction",
    "quote_literal",
    "SD",
    "SET_DEFAULT",
    "SET_NULL",
    "SN",
    "render_default",
]
