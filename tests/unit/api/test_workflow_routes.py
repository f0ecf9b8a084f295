"""Unit tests for the workflow HTTP routes.

Key Test Scenarios:
1. SUCCEEDED -> 200/201 with the action payload
2. REJECTED -> 409 (422 for mandate creation) with the French reason
3. FAILED -> 503 with the generic message
4. Notification inbox endpoints scope every call to user_id
"""

from collections.abc import Iterator
from datetime import timedelta
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from argus.api.dependencies.workflow import set_workflow_services
from argus.api.main import create_app
from argus.application.dtos.workflow import GENERIC_FAILURE_MESSAGE
from argus.bootstrap.workflow import WorkflowRepositories, WorkflowServices
from argus.domain.models.candidature import CandidatureStatus
from argus.domain.models.mandate import MandateStatus
from argus.infrastructure.observability.correlation import CORRELATION_ID_HEADER
from tests.helpers import FakeTimeAuthority, make_candidature, make_mandate, make_profile


@pytest.fixture
def client(services: WorkflowServices) -> Iterator[TestClient]:
    set_workflow_services(services)
    with TestClient(create_app()) as test_client:
        yield test_client
    set_workflow_services(None)


def _mandate_payload(agency_id: UUID, fake_time: FakeTimeAuthority, **overrides):
    payload = {
        "agency_id": str(agency_id),
        "title": "Filature à Sherbrooke",
        "type": "surveillance",
        "description": "Filature sur deux jours",
        "location": {
            "city": "Sherbrooke",
            "region": "Estrie",
            "postal_code": "J1H 5N4",
        },
        "date_required": (fake_time.now() + timedelta(days=5)).isoformat(),
        "duration": "2 jours",
    }
    payload.update(overrides)
    return payload


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.get("/v1/health", headers={CORRELATION_ID_HEADER: "req-123"})

        assert response.headers[CORRELATION_ID_HEADER] == "req-123"

    def test_correlation_id_generated(self, client: TestClient) -> None:
        response = client.get("/v1/health")

        assert response.headers[CORRELATION_ID_HEADER]


class TestCreateMandateRoute:
    def test_create_public_mandate(
        self,
        client: TestClient,
        agency_id: UUID,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        response = client.post(
            "/v1/mandates", json=_mandate_payload(agency_id, fake_time_authority)
        )

        assert response.status_code == 201
        body = response.json()
        assert body["outcome"] == "succeeded"
        assert body["mandate"]["status"] == "open"
        assert body["mandate"]["type"] == "surveillance"
        assert body["redirect_url"] == f"/agence/mandats/{body['mandate']['id']}"

    def test_past_date_is_422_with_reason(
        self,
        client: TestClient,
        agency_id: UUID,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        payload = _mandate_payload(
            agency_id,
            fake_time_authority,
            date_required=(fake_time_authority.now() - timedelta(days=1)).isoformat(),
        )

        response = client.post("/v1/mandates", json=payload)

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["outcome"] == "rejected"
        assert detail["detail"] == "La date requise doit être dans le futur"

    def test_schema_violation(self, client: TestClient, agency_id: UUID) -> None:
        response = client.post("/v1/mandates", json={"agency_id": str(agency_id)})

        assert response.status_code == 422


class TestCandidatureRoutes:
    def test_submit_then_accept(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
        agency_id: UUID,
    ) -> None:
        profile = make_profile()
        repositories.investigators.add_profile(profile)  # type: ignore[attr-defined]
        mandate = make_mandate(agency_id=agency_id)
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]

        submitted = client.post(
            f"/v1/mandates/{mandate.id}/candidatures",
            json={"investigator_id": str(profile.id)},
        )
        assert submitted.status_code == 201
        candidature_id = submitted.json()["candidature"]["id"]

        accepted = client.post(
            f"/v1/candidatures/{candidature_id}/accept",
            json={"mandate_id": str(mandate.id), "investigator_id": str(profile.id)},
        )

        assert accepted.status_code == 200
        body = accepted.json()
        assert body["mandate"]["status"] == "in-progress"
        assert body["candidature"]["status"] == "accepted"
        assert body["redirect_url"] == f"/agence/mandats/{mandate.id}?success=accepted"

    def test_accept_unknown_candidature_is_409(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
    ) -> None:
        profile = make_profile()
        repositories.investigators.add_profile(profile)  # type: ignore[attr-defined]
        mandate = make_mandate()
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]

        response = client.post(
            f"/v1/candidatures/{uuid4()}/accept",
            json={"mandate_id": str(mandate.id), "investigator_id": str(profile.id)},
        )

        assert response.status_code == 409
        assert response.json()["detail"]["detail"] == "Candidature introuvable"

    def test_persistence_failure_is_503(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
    ) -> None:
        mandate = make_mandate()
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]
        candidature = make_candidature(mandate.id, uuid4())
        repositories.candidatures.add_candidature(candidature)  # type: ignore[attr-defined]
        repositories.candidatures.set_should_fail("update_status")  # type: ignore[attr-defined]

        response = client.post(f"/v1/candidatures/{candidature.id}/reject")

        assert response.status_code == 503
        detail = response.json()["detail"]
        assert detail["outcome"] == "failed"
        assert detail["detail"] == GENERIC_FAILURE_MESSAGE

    def test_reject(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
    ) -> None:
        mandate = make_mandate()
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]
        candidature = make_candidature(mandate.id, uuid4())
        repositories.candidatures.add_candidature(candidature)  # type: ignore[attr-defined]

        response = client.post(f"/v1/candidatures/{candidature.id}/reject")

        assert response.status_code == 200
        assert (
            repositories.candidatures.get(candidature.id).status  # type: ignore[attr-defined]
            == CandidatureStatus.REJECTED
        )


class TestMandateActionRoutes:
    def test_complete_then_rate(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
        agency_id: UUID,
    ) -> None:
        investigator_id = uuid4()
        mandate = make_mandate(
            agency_id=agency_id,
            status=MandateStatus.IN_PROGRESS,
            assigned_to=investigator_id,
        )
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]

        completed = client.post(f"/v1/mandates/{mandate.id}/complete")
        rated = client.post(
            f"/v1/mandates/{mandate.id}/rating",
            json={"agency_id": str(agency_id), "rating": 4, "on_time": True},
        )

        assert completed.status_code == 200
        assert completed.json()["redirect_url"].endswith(
            f"?action=rate&investigator={investigator_id}"
        )
        assert rated.status_code == 201
        assert rated.json()["rating"]["rating"] == 4

    def test_rating_out_of_schema_range(self, client: TestClient) -> None:
        response = client.post(
            f"/v1/mandates/{uuid4()}/rating",
            json={"agency_id": str(uuid4()), "rating": 9},
        )

        assert response.status_code == 422

    def test_cancel_and_unassign(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
    ) -> None:
        mandate = make_mandate(status=MandateStatus.IN_PROGRESS, assigned_to=uuid4())
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]

        unassigned = client.post(f"/v1/mandates/{mandate.id}/unassign")
        cancelled = client.post(f"/v1/mandates/{mandate.id}/cancel")
        reopened = client.post(f"/v1/mandates/{mandate.id}/reopen")

        assert unassigned.json()["mandate"]["status"] == "open"
        assert cancelled.json()["mandate"]["status"] == "cancelled"
        assert reopened.status_code == 409


class TestNotificationRoutes:
    async def _seed(self, services: WorkflowServices, user_id: UUID) -> None:
        await services.notifications.notify_mandate_completed(user_id, uuid4(), "Filature")
        await services.notifications.notify_new_candidature(
            user_id, uuid4(), "Filature", "Julie Tremblay"
        )

    async def test_list_mark_read_delete(
        self, client: TestClient, services: WorkflowServices
    ) -> None:
        user_id = uuid4()
        await self._seed(services, user_id)

        listed = client.get("/v1/notifications", params={"user_id": str(user_id)})
        assert listed.status_code == 200
        body = listed.json()
        assert body["unread_count"] == 2
        notification_id = body["notifications"][0]["id"]

        read = client.post(
            f"/v1/notifications/{notification_id}/read",
            params={"user_id": str(user_id)},
        )
        assert read.status_code == 204

        unread = client.get(
            "/v1/notifications",
            params={"user_id": str(user_id), "unread_only": "true"},
        )
        assert len(unread.json()["notifications"]) == 1

        deleted = client.delete(
            f"/v1/notifications/{notification_id}", params={"user_id": str(user_id)}
        )
        assert deleted.status_code == 204

    def test_unknown_notification_is_404(self, client: TestClient) -> None:
        response = client.post(
            f"/v1/notifications/{uuid4()}/read", params={"user_id": str(uuid4())}
        )

        assert response.status_code == 404
        assert response.json()["detail"]["title"] == "Notification Not Found"

    def test_inbox_failure_is_503(
        self, client: TestClient, repositories: WorkflowRepositories
    ) -> None:
        repositories.notifications.set_should_fail("list_for_user")  # type: ignore[attr-defined]

        response = client.get("/v1/notifications", params={"user_id": str(uuid4())})

        assert response.status_code == 503
        assert response.json()["detail"]["detail"] == GENERIC_FAILURE_MESSAGE


class TestListingRoutes:
    def test_list_agency_mandates_with_status_filter(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
        agency_id: UUID,
    ) -> None:
        repositories.mandates.add_mandate(make_mandate(agency_id=agency_id))  # type: ignore[attr-defined]
        repositories.mandates.add_mandate(  # type: ignore[attr-defined]
            make_mandate(agency_id=agency_id, status=MandateStatus.CANCELLED)
        )
        repositories.mandates.add_mandate(make_mandate())  # type: ignore[attr-defined]

        everything = client.get("/v1/mandates", params={"agency_id": str(agency_id)})
        open_only = client.get(
            "/v1/mandates", params={"agency_id": str(agency_id), "status": "open"}
        )

        assert everything.status_code == 200
        assert everything.json()["total"] == 2
        assert open_only.json()["total"] == 1
        assert open_only.json()["mandates"][0]["status"] == "open"

    def test_list_candidatures_of_mandate(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
    ) -> None:
        mandate = make_mandate()
        repositories.mandates.add_mandate(mandate)  # type: ignore[attr-defined]
        for _ in range(2):
            repositories.candidatures.add_candidature(  # type: ignore[attr-defined]
                make_candidature(mandate.id, uuid4())
            )
        repositories.candidatures.add_candidature(  # type: ignore[attr-defined]
            make_candidature(uuid4(), uuid4())
        )

        response = client.get(f"/v1/mandates/{mandate.id}/candidatures")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert {c["mandate_id"] for c in body["candidatures"]} == {str(mandate.id)}

    def test_listing_failure_is_503(
        self,
        client: TestClient,
        repositories: WorkflowRepositories,
    ) -> None:
        repositories.candidatures.set_should_fail("list_by_mandate")  # type: ignore[attr-defined]

        response = client.get(f"/v1/mandates/{uuid4()}/candidatures")

        assert response.status_code == 503
        assert response.json()["detail"]["outcome"] == "failed"
