from __future__ import annotations
from datetime import date
from typing import Literal
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

PRE_ORDERS = "appPreOrders"


class AppPreOrderAttributes(Attributes):
    appReleaseDate: date | None = None
    preOrderAvailableDate: date | None = None


class AppPreOrder(Resource[AppPreOrderAttributes]):
    type: Literal["appPreOrders"] = PRE_ORDERS


class AppPreOrderResponse(Document[AppPreOrder]):
    pass


class AppPreOrderCreateRequestAttributes(Attributes):
    model_config = ConfigDict(extra="forbid")
    appReleaseDate: date | None = None


class AppPreOrderCreateRequestRelationships(BaseModel):
    app: RelationshipDeclaration


class AppPreOrderCreateRequestData(RequestData):
    type: Literal["appPreOrders"]
    attributes: AppPreOrderCreateRequestAttributes | None = None
    relationships: AppPreOrderCreateRequestRelationships


class AppPreOrderCreateRequest(RequestDocument):
    data: AppPreOrderCreateRequestData


class AppPreOrderUpdateRequestAttributes(Attributes):
    model_config = ConfigDict(extra="forbid")
    appReleaseDate: date | None = None


class AppPreOrderUpdateRequestData(RequestData):
    type: Literal["appPreOrders"]
    id: str
    attributes: AppPreOrderUpdateRequestAttributes | None = None


class AppPreOrderUpdateRequest(RequestDocument):
    data: AppPreOrderUpdateRequestData


class GetAppPreOrderQuery(Query):
    fields_app_pre_orders: list[str] | None = Field(None, alias="fields[appPreOrders]")
    fields_apps: list[str] | None = Field(None, alias="fields[apps]")
    include: list[str] | None = None


class GetPreOrderForAppQuery(Query):
    fields_app_pre_orders: list[str] | None = Field(None, alias="fields[appPreOrders]")
