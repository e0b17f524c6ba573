from __future__ import annotations
from typing import Any, Generic, TypeVar
from pydantic import BaseModel, ConfigDict


class ResourceLinks(BaseModel):
    self: str | None = None


class DocumentLinks(BaseModel):
    self: str | None = None


class RelationshipData(BaseModel):
    type: str
    id: str


class RelationshipDeclaration(BaseModel):
    """Relationship block embedded in create requests to point at a parent."""
    data: RelationshipData | None = None


class Attributes(BaseModel):
    """
    Base for every attributes structure.
    All fields are optional and presence is tracked through `model_fields_set`,
    so an unset field and an explicit None or 0 are serialized differently.
    """
    model_config = ConfigDict(extra="allow")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


AttrT = TypeVar("AttrT", bound=Attributes)


class Resource(BaseModel, Generic[AttrT]):
    """
    Resource object as returned by App Store Connect.
    Each resource family pins its type discriminator and attributes class;
    members the server adds later (relationships, meta) are kept as extras.
    """
    model_config = ConfigDict(extra="allow")
    type: str
    id: str
    attributes: AttrT | None = None
    links: ResourceLinks | None = None


ResT = TypeVar("ResT", bound=Resource)


class Document(BaseModel, Generic[ResT]):
    """Single-resource response envelope; `data` is null for an empty to-one relationship."""
    data: ResT | None
    links: DocumentLinks
    included: list[dict[str, Any]] | None = None


class RequestData(BaseModel):
    """`data` member of a create or update request body."""
    type: str


class RequestDocument(BaseModel):
    data: RequestData

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class Query(BaseModel):
    """
    Query options for a GET call.
    Fields carry their bracketed wire name as alias, list values go out
    comma-joined in the order given.
    """
    model_config = ConfigDict(populate_by_name=True)

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        for key, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, list):
                if not value:
                    continue
                value = ",".join(str(v) for v in value)
            params[key] = value
        return params
