"""Shared bases for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable record compared by its fields.

    Stamps, patches and snapshot records embedded in entities derive from
    this, so an entity can never change a copy it shares with another.
    """

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive.

    ``model_dump()`` yields the primitive itself, which is how such values
    are stored in table columns.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
