from __future__ import annotations

from typing import Any, ClassVar, Self

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict


class EquatableModel(BaseModel):
    """
    Pydantic model base for domain entities compared by a business key.

    Subclasses list the fields that identify an entity in `equality_fields`.
    When it is left empty every declared field takes part in the comparison.
    Two entities of unrelated types never compare equal.

    Example:
        ```python
        class Task(EquatableModel):
            equality_fields = ("title",)

            title: str
            data: str = ""

        Task(title="a", data="x").compare(Task(title="a", data="y"))  # True
        ```
    """

    model_config = ConfigDict(validate_assignment=True)

    equality_fields: ClassVar[tuple[str, ...]] = ()

    def compare(self, other: Self) -> bool:
        if not isinstance(other, EquatableModel):
            return False

        if not isinstance(other, type(self)) and not isinstance(self, type(other)):
            return False

        return self.equality_key() == other.equality_key()

    def equality_key(self) -> tuple[Any, ...]:
        """The values `compare` looks at, in `equality_fields` order."""
        fields = self.equality_fields or tuple(type(self).model_fields)
        return tuple(getattr(self, field) for field in fields)
