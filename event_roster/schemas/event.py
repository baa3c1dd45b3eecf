"""
Read view of an event returned by the events service.

Events are owned by the remote service and may carry any number of
descriptive fields; only the identifier, the name and the participant
list are modelled explicitly.  Everything else is kept as extra data.
"""

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .participant import Participant


class Event(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int | str | None = Field(default=None, validation_alias=AliasChoices("id", "Id"))
    name: str | None = Field(default=None, validation_alias=AliasChoices("name", "Name", "title", "Title"))
    participants: List[Participant] = Field(
        default_factory=list,
        validation_alias=AliasChoices("participants", "Participants"),
    )

    @property
    def confirmed_count(self) -> int:
        return sum(1 for p in self.participants if p.confirmed)
