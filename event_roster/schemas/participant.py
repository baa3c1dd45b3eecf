"""
Pydantic model for event participants.

The events service binds request bodies to a PascalCase ``Participant``
class (``Id``, ``UserName``, ``Name``, ``Confirmed``) but serializes its
responses in camelCase.  The model therefore writes PascalCase aliases
and accepts either spelling when reading.  Every field is optional
when reading because the service owns the data; writes always fill in
the user name and display name.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Participant(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int | str | None = Field(
        default=None,
        validation_alias=AliasChoices("Id", "id"),
        serialization_alias="Id",
    )
    user_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("UserName", "userName"),
        serialization_alias="UserName",
    )
    name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Name", "name"),
        serialization_alias="Name",
    )
    confirmed: bool = Field(
        default=False,
        validation_alias=AliasChoices("Confirmed", "confirmed"),
        serialization_alias="Confirmed",
    )

    def to_payload(self) -> dict:
        """Request body as the service expects it; ``Id`` is omitted when unset."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=set(self.model_extra or {}))
