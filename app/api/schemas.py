from typing import ClassVar

from pydantic import BaseModel, model_validator


class UpdateSchema(BaseModel):
    """Partial update body: omitted fields are left alone.

    Fields named in ``not_nullable`` may be omitted but not explicitly set to null.
    """
    not_nullable: ClassVar[tuple[str, ...]] = ("name",)

    @model_validator(mode="after")
    def _reject_nulls(self):
        for field in self.not_nullable:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
