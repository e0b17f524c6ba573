from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import requests

from asc_publishing.models.base import RelationshipData, RelationshipDeclaration
from asc_publishing.models.phased_releases import (
    PHASED_RELEASES,
    AppStoreVersionPhasedReleaseCreateRequest,
    AppStoreVersionPhasedReleaseCreateRequestAttributes,
    AppStoreVersionPhasedReleaseCreateRequestData,
    AppStoreVersionPhasedReleaseCreateRequestRelationships,
    AppStoreVersionPhasedReleaseResponse,
    AppStoreVersionPhasedReleaseUpdateRequest,
    AppStoreVersionPhasedReleaseUpdateRequestAttributes,
    AppStoreVersionPhasedReleaseUpdateRequestData,
    GetAppStoreVersionPhasedReleaseForAppStoreVersionQuery,
    PhasedReleaseState,
)
from asc_publishing.models.pre_orders import (
    PRE_ORDERS,
    AppPreOrderCreateRequest,
    AppPreOrderCreateRequestAttributes,
    AppPreOrderCreateRequestData,
    AppPreOrderCreateRequestRelationships,
    AppPreOrderResponse,
    AppPreOrderUpdateRequest,
    AppPreOrderUpdateRequestAttributes,
    AppPreOrderUpdateRequestData,
    GetAppPreOrderQuery,
    GetPreOrderForAppQuery,
)

if TYPE_CHECKING:
    from asc_publishing.client import AppStoreConnectClient


class PublishingService:
    """
    Phased releases and app pre-orders.
    Each method is one round trip through the client's transport.
    """

    def __init__(self, client: AppStoreConnectClient) -> None:
        self.client = client

    # Phased releases

    def create_phased_release(
        self,
        app_store_version_id: str,
        phased_release_state: PhasedReleaseState | str | None = None,
    ) -> tuple[AppStoreVersionPhasedReleaseResponse, requests.Response]:
        """
        Enables phased release for an App Store version.
        Corresponds to: POST /v1/appStoreVersionPhasedReleases
        """
        data = AppStoreVersionPhasedReleaseCreateRequestData(
            type=PHASED_RELEASES,
            relationships=AppStoreVersionPhasedReleaseCreateRequestRelationships(
                appStoreVersion=RelationshipDeclaration(
                    data=RelationshipData(id=app_store_version_id, type="appStoreVersions")
                )
            ),
        )
        if phased_release_state is not None:
            data.attributes = AppStoreVersionPhasedReleaseCreateRequestAttributes(
                phasedReleaseState=phased_release_state
            )
        body = AppStoreVersionPhasedReleaseCreateRequest(data=data)
        return self.client.post(PHASED_RELEASES, body, AppStoreVersionPhasedReleaseResponse)

    def update_phased_release(
        self,
        id: str,
        attributes: AppStoreVersionPhasedReleaseUpdateRequestAttributes | None = None,
    ) -> tuple[AppStoreVersionPhasedReleaseResponse, requests.Response]:
        """
        Pauses or resumes a phased release, or releases to all users at once.
        Only the attributes explicitly set are sent.
        Corresponds to: PATCH /v1/appStoreVersionPhasedReleases/{id}
        """
        data = AppStoreVersionPhasedReleaseUpdateRequestData(type=PHASED_RELEASES, id=id)
        if attributes is not None:
            data.attributes = attributes
        body = AppStoreVersionPhasedReleaseUpdateRequest(data=data)
        return self.client.patch(
            f"{PHASED_RELEASES}/{id}", body, AppStoreVersionPhasedReleaseResponse
        )

    def delete_phased_release(self, id: str) -> requests.Response:
        """
        Cancels a planned phased release that has not been started.
        Corresponds to: DELETE /v1/appStoreVersionPhasedReleases/{id}
        """
        return self.client.delete(f"{PHASED_RELEASES}/{id}")

    def get_app_store_version_phased_release_for_app_store_version(
        self,
        id: str,
        params: GetAppStoreVersionPhasedReleaseForAppStoreVersionQuery | None = None,
    ) -> tuple[AppStoreVersionPhasedReleaseResponse, requests.Response]:
        """
        Reads the phased release status and configuration of an App Store version.
        Corresponds to: GET /v1/appStoreVersions/{id}/appStoreVersionPhasedRelease
        """
        return self.client.get(
            f"appStoreVersions/{id}/appStoreVersionPhasedRelease",
            params,
            AppStoreVersionPhasedReleaseResponse,
        )

    # Pre-orders

    def create_pre_order(
        self, app_id: str, app_release_date: date | None = None
    ) -> tuple[AppPreOrderResponse, requests.Response]:
        """
        Turns on pre-order for an app and sets its expected release date.
        Corresponds to: POST /v1/appPreOrders
        """
        data = AppPreOrderCreateRequestData(
            type=PRE_ORDERS,
            relationships=AppPreOrderCreateRequestRelationships(
                app=RelationshipDeclaration(data=RelationshipData(id=app_id, type="apps"))
            ),
        )
        if app_release_date is not None:
            data.attributes = AppPreOrderCreateRequestAttributes(appReleaseDate=app_release_date)
        return self.client.post(
            PRE_ORDERS, AppPreOrderCreateRequest(data=data), AppPreOrderResponse
        )

    def update_pre_order(
        self, id: str, attributes: AppPreOrderUpdateRequestAttributes | None = None
    ) -> tuple[AppPreOrderResponse, requests.Response]:
        """Corresponds to: PATCH /v1/appPreOrders/{id}"""
        data = AppPreOrderUpdateRequestData(type=PRE_ORDERS, id=id)
        if attributes is not None:
            data.attributes = attributes
        return self.client.patch(
            f"{PRE_ORDERS}/{id}", AppPreOrderUpdateRequest(data=data), AppPreOrderResponse
        )

    def delete_pre_order(self, id: str) -> requests.Response:
        """Corresponds to: DELETE /v1/appPreOrders/{id}"""
        return self.client.delete(f"{PRE_ORDERS}/{id}")

    def get_pre_order(
        self, id: str, params: GetAppPreOrderQuery | None = None
    ) -> tuple[AppPreOrderResponse, requests.Response]:
        """Corresponds to: GET /v1/appPreOrders/{id}"""
        return self.client.get(f"{PRE_ORDERS}/{id}", params, AppPreOrderResponse)

    def get_pre_order_for_app(
        self, id: str, params: GetPreOrderForAppQuery | None = None
    ) -> tuple[AppPreOrderResponse, requests.Response]:
        """
        Reads the pre-order information of an app.
        Corresponds to: GET /v1/apps/{id}/preOrder
        """
        return self.client.get(f"apps/{id}/preOrder", params, AppPreOrderResponse)
