"""HTTP tests for the event and ad endpoints.

Handlers run against the in-memory registry from conftest.
Run with: pytest tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from ads.handlers.views import AdServiceView
from ads.services.ad_service import AdService
from ads.stores.memory_store import InMemoryAdStore
from conftest import ORGANIZER_ID
from events.handlers.views import RegistryView
from events.services.reference_validator import ValidationOutcome

MISSING_ID = "1b4e28ba-2fa1-11d2-883f-0016d3cca427"


@pytest.fixture(autouse=True)
def use_test_registry(monkeypatch, registry):
    monkeypatch.setattr(RegistryView, "get_registry", lambda self: registry)


@pytest.fixture
def ad_service(monkeypatch) -> AdService:
    service = AdService(InMemoryAdStore())
    monkeypatch.setattr(AdServiceView, "get_service", lambda self: service)
    return service


def create_event(api_client: APIClient, **overrides) -> dict:
    payload = {
        "organizer_id": ORGANIZER_ID,
        "title": "Chess Open",
        "references": [{"kind": "url", "payload": "https://chess.campus.edu/open"}],
    }
    payload.update(overrides)
    response = api_client.post("/api/events", payload, format="json")
    assert response.status_code == 201
    return response.json()


class TestEventEndpoints:
    """Tests for /api/events"""

    def test_create_event_is_draft(self, api_client: APIClient):
        body = create_event(api_client, capacity=40)
        assert body["status"] == "draft"
        assert body["capacity"] == 40
        assert body["attendee_count"] == 0
        assert body["references"] == [{"kind": "url", "payload": "https://chess.campus.edu/open"}]

    def test_create_event_rejects_unknown_reference_kind(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"organizer_id": "o", "title": "t", "references": [{"kind": "fax", "payload": "x"}]},
            format="json",
        )
        assert response.status_code == 400

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/events/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400

    def test_publish_then_get(self, api_client: APIClient):
        event = create_event(api_client)
        assert api_client.post(f"/api/events/{event['id']}/publish").status_code == 200
        assert api_client.get(f"/api/events/{event['id']}").json()["status"] == "published"

    def test_publish_twice_is_forbidden(self, api_client: APIClient):
        event = create_event(api_client)
        api_client.post(f"/api/events/{event['id']}/publish")
        response = api_client.post(f"/api/events/{event['id']}/publish")
        assert response.status_code == 403
        assert response.json()["code"] == "INVALID_STATE"

    def test_publish_with_invalid_reference(self, api_client: APIClient, validator):
        validator.outcomes["https://chess.campus.edu/open"] = ValidationOutcome(False, "404")
        event = create_event(api_client)
        response = api_client.post(f"/api/events/{event['id']}/publish")
        assert response.status_code == 422
        assert response.json()["details"] == "404"

    def test_cancel(self, api_client: APIClient):
        event = create_event(api_client)
        assert api_client.post(f"/api/events/{event['id']}/cancel").json()["status"] == "cancelled"
        assert api_client.post(f"/api/events/{event['id']}/cancel").status_code == 403


class TestRegistrationEndpoint:
    """Tests for /api/events/{id}/registrations"""

    def _published(self, api_client: APIClient) -> str:
        event = create_event(api_client)
        api_client.post(f"/api/events/{event['id']}/publish")
        return event["id"]

    def test_register(self, api_client: APIClient):
        event_id = self._published(api_client)
        response = api_client.post(
            f"/api/events/{event_id}/registrations", {"student_id": "stu42"}, format="json"
        )
        assert response.status_code == 201
        body = response.json()
        assert body["student_id"] == "stu42"
        assert body["event_id"] == event_id
        assert body["warnings"] == []

        listing = api_client.get(f"/api/events/{event_id}/registrations").json()
        assert [row["student_id"] for row in listing] == ["stu42"]

    def test_duplicate_is_conflict(self, api_client: APIClient):
        event_id = self._published(api_client)
        url = f"/api/events/{event_id}/registrations"
        api_client.post(url, {"student_id": "stu42"}, format="json")
        response = api_client.post(url, {"student_id": "stu42"}, format="json")
        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_REGISTRATION"

    def test_draft_is_forbidden(self, api_client: APIClient):
        event = create_event(api_client)
        response = api_client.post(
            f"/api/events/{event['id']}/registrations", {"student_id": "stu1"}, format="json"
        )
        assert response.status_code == 403

    def test_unknown_event(self, api_client: APIClient):
        response = api_client.post(
            f"/api/events/{MISSING_ID}/registrations", {"student_id": "stu1"}, format="json"
        )
        assert response.status_code == 404

    def test_validator_unavailable_is_503(self, api_client: APIClient, validator):
        event_id = self._published(api_client)
        validator.outcomes["https://chess.campus.edu/open"] = ValidationOutcome(
            False, "timed out", unavailable=True
        )
        response = api_client.post(
            f"/api/events/{event_id}/registrations", {"student_id": "stu1"}, format="json"
        )
        assert response.status_code == 503
        assert response.json()["code"] == "VALIDATOR_UNAVAILABLE"

    def test_missing_student_id(self, api_client: APIClient):
        event_id = self._published(api_client)
        response = api_client.post(f"/api/events/{event_id}/registrations", {}, format="json")
        assert response.status_code == 400

    def test_notification_failure_is_reported(self, api_client: APIClient, email_channel, push_channel):
        email_channel.fail = True
        push_channel.fail = True
        event_id = self._published(api_client)
        response = api_client.post(
            f"/api/events/{event_id}/registrations", {"student_id": "stu1"}, format="json"
        )
        assert response.status_code == 201
        assert len(response.json()["warnings"]) == 1


class TestAdEndpoints:
    """Tests for /api/ads"""

    def test_placements(self, api_client: APIClient, ad_service: AdService):
        for n in range(6):
            ad_service.create_ad(f"biz{n}", f"Ad {n}", {"major": "cs"})

        response = api_client.post(
            "/api/ads/placements",
            {"event_count": 47, "user_interests": {"major": "cs"}},
            format="json",
        )

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_placements_small_calendar(self, api_client: APIClient, ad_service: AdService):
        ad_service.create_ad("biz", "Ad")
        response = api_client.post("/api/ads/placements", {"event_count": 9}, format="json")
        assert response.json() == []

    def test_placements_rejects_negative_count(self, api_client: APIClient, ad_service: AdService):
        response = api_client.post("/api/ads/placements", {"event_count": -3}, format="json")
        assert response.status_code == 400

    def test_track_view(self, api_client: APIClient, ad_service: AdService):
        ad = ad_service.create_ad("biz", "Ad")
        response = api_client.post(f"/api/ads/{ad.id}/views")
        assert response.status_code == 202
        assert ad_service.get_ad(str(ad.id)).view_count == 1

    def test_track_view_unknown_ad(self, api_client: APIClient, ad_service: AdService):
        assert api_client.post("/api/ads/unknown/views").status_code == 202
