from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal
from pydantic import BaseModel, ConfigDict, Field
from asc_publishing.models.base import (
    Attributes,
    Document,
    Query,
    RelationshipDeclaration,
    RequestData,
    RequestDocument,
    Resource,
)

PHASED_RELEASES = "appStoreVersionPhasedReleases"


class PhasedReleaseState(str, Enum):
    INACTIVE = "INACTIVE"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETE = "COMPLETE"


# states are owned by the server; unknown values decode as plain strings
StateValue = Annotated[PhasedReleaseState | str | None, Field(union_mode="left_to_right")]


class AppStoreVersionPhasedReleaseAttributes(Attributes):
    currentDayNumber: int | None = None
    phasedReleaseState: StateValue = None
    startDate: datetime | None = None
    totalPauseDuration: int | None = None


class AppStoreVersionPhasedRelease(Resource[AppStoreVersionPhasedReleaseAttributes]):
    type: Literal["appStoreVersionPhasedReleases"] = PHASED_RELEASES


class AppStoreVersionPhasedReleaseResponse(Document[AppStoreVersionPhasedRelease]):
    pass


class AppStoreVersionPhasedReleaseCreateRequestAttributes(Attributes):
    model_config = ConfigDict(extra="forbid")
    phasedReleaseState: StateValue = None


class AppStoreVersionPhasedReleaseCreateRequestRelationships(BaseModel):
    appStoreVersion: RelationshipDeclaration


class AppStoreVersionPhasedReleaseCreateRequestData(RequestData):
    type: Literal["appStoreVersionPhasedReleases"]
    attributes: AppStoreVersionPhasedReleaseCreateRequestAttributes | None = None
    relationships: AppStoreVersionPhasedReleaseCreateRequestRelationships


class AppStoreVersionPhasedReleaseCreateRequest(RequestDocument):
    data: AppStoreVersionPhasedReleaseCreateRequestData


class AppStoreVersionPhasedReleaseUpdateRequestAttributes(Attributes):
    """Only the fields set on an instance are sent; the rest stay untouched server-side."""
    model_config = ConfigDict(extra="forbid")
    phasedReleaseState: StateValue = None


class AppStoreVersionPhasedReleaseUpdateRequestData(RequestData):
    type: Literal["appStoreVersionPhasedReleases"]
    id: str
    attributes: AppStoreVersionPhasedReleaseUpdateRequestAttributes | None = None


class AppStoreVersionPhasedReleaseUpdateRequest(RequestDocument):
    data: AppStoreVersionPhasedReleaseUpdateRequestData


class GetAppStoreVersionPhasedReleaseForAppStoreVersionQuery(Query):
    fields_app_store_version_phased_releases: list[str] | None = Field(
        None, alias="fields[appStoreVersionPhasedReleases]"
    )
