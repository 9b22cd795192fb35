"""Base model class for all record models."""

from pydantic import BaseModel


class RecordModel(BaseModel):
    """Base model for immutable records.

    Attribute names are snake_case; the persisted JSON uses the camelCase
    aliases declared on each field. Either spelling is accepted on input.
    """

    class Config:
        """Pydantic config."""

        frozen = True
        populate_by_name = True

    def to_json_dict(self) -> dict:
        """Dump the record using its persisted (aliased) field names."""
        return self.model_dump(mode="json", by_alias=True)
