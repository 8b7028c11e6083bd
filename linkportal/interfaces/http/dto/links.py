from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from linkportal.domain.links.entities import Link


class LinkRequestDTO(BaseModel):
    url: str = Field(min_length=1)
    title: str | None = None


class LinkDTO(BaseModel):
    id: int
    url: str
    title: str | None
    owner_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_entity(cls, link: Link) -> LinkDTO:
        return cls(
            id=link.id,
            url=link.url,
            title=link.title,
            owner_id=link.owner_id,
            created_at=link.created_at,
            updated_at=link.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class DeletedDTO(BaseModel):
    success: bool = True
