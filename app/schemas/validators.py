"""Custom validators and types."""

from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import BaseModel, Field, model_validator

# Currency columns are Numeric(12, 2): at most 10 integer digits, 2 fractional.
Money = Annotated[
    Decimal,
    Field(gt=0, max_digits=12, decimal_places=2),
]

NonEmptyStr = Annotated[str, Field(min_length=1, max_length=255)]


class PatchModel(BaseModel):
    """
    Base class for partial-update schemas.

    Only fields present in the request are applied (see ``model_dump(exclude_unset=True)``).
    Fields listed in ``required_fields`` may be omitted but not explicitly set to null.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        for field in self.model_fields_set & self.required_fields:
            if getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self
