"""
Pydantic base classes shared by every extinit model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ExtinitBaseModel(BaseModel):
    """Mutable model: strict types, unknown fields rejected, checked on assignment."""

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(ExtinitBaseModel):
    """Frozen, hashable record.

    Lax mode so that lists read from TOML become the tuples and frozensets
    the records declare.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=False,
        validate_assignment=False,
    )
