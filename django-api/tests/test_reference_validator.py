"""Tests for reference verification.

URL checks run against httpx.MockTransport; no network access is needed.
"""

import threading

import httpx
import pytest

from events.domain import Reference, ReferenceKind
from events.services.reference_validator import (
    LiveReferenceValidator,
    ReferenceValidator,
    ValidationOutcome,
    find_invalid_reference,
    sign_qr_payload,
)


def make_validator(handler) -> LiveReferenceValidator:
    client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
    return LiveReferenceValidator(timeout=1.0, client=client)


def status_handler(status_code: int):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code)

    return handler


class TestUrlReferences:
    def test_live_url_is_valid(self):
        outcome = make_validator(status_handler(200)).validate(
            Reference(ReferenceKind.URL, "https://clubs.campus.edu/chess")
        )
        assert outcome.valid
        assert "200" in outcome.details

    def test_client_error_is_invalid(self):
        outcome = make_validator(status_handler(404)).validate(
            Reference(ReferenceKind.URL, "https://clubs.campus.edu/gone")
        )
        assert not outcome.valid
        assert not outcome.unavailable

    def test_server_error_is_unavailable(self):
        outcome = make_validator(status_handler(503)).validate(
            Reference(ReferenceKind.URL, "https://clubs.campus.edu/chess")
        )
        assert not outcome.valid
        assert outcome.unavailable

    def test_timeout_fails_closed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        outcome = make_validator(handler).validate(
            Reference(ReferenceKind.URL, "https://clubs.campus.edu/chess")
        )
        assert not outcome.valid
        assert outcome.unavailable
        assert "Timed out" in outcome.details

    def test_connection_error_fails_closed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        outcome = make_validator(handler).validate(
            Reference(ReferenceKind.URL, "https://clubs.campus.edu/chess")
        )
        assert not outcome.valid
        assert outcome.unavailable

    def test_relative_url_is_invalid_without_request(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        outcome = make_validator(handler).validate(Reference(ReferenceKind.URL, "/events/1"))
        assert not outcome.valid
        assert calls == []

    def test_validation_is_idempotent(self):
        validator = make_validator(status_handler(200))
        reference = Reference(ReferenceKind.URL, "https://clubs.campus.edu/chess")
        assert validator.validate(reference) == validator.validate(reference)


class TestQrReferences:
    def test_signed_payload_is_valid(self):
        token = sign_qr_payload({"issuer": "Chess Club", "event": "spring-open"})
        outcome = make_validator(status_handler(500)).validate(Reference(ReferenceKind.QR, token))
        assert outcome.valid
        assert "Chess Club" in outcome.details

    def test_tampered_payload_is_invalid(self):
        token = sign_qr_payload({"issuer": "Chess Club"})
        outcome = make_validator(status_handler(200)).validate(
            Reference(ReferenceKind.QR, token[:-2] + "xx")
        )
        assert not outcome.valid
        assert not outcome.unavailable

    def test_url_payload_is_checked_as_url(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200)

        outcome = make_validator(handler).validate(
            Reference(ReferenceKind.QR, "https://clubs.campus.edu/qr/42")
        )
        assert outcome.valid
        assert seen == ["https://clubs.campus.edu/qr/42"]


class TableValidator(ReferenceValidator):
    def __init__(self, outcomes: dict[str, ValidationOutcome], block: threading.Event | None = None):
        self.outcomes = outcomes
        self.block = block

    def validate(self, reference: Reference) -> ValidationOutcome:
        if self.block is not None and reference.payload == "slow":
            self.block.wait(timeout=2)
        return self.outcomes.get(reference.payload, ValidationOutcome(True, "ok"))


class TestFindInvalidReference:
    def test_no_references(self):
        assert find_invalid_reference(TableValidator({}), [], timeout=1.0) is None

    def test_all_valid(self):
        refs = [Reference(ReferenceKind.URL, f"https://a.edu/{i}") for i in range(5)]
        assert find_invalid_reference(TableValidator({}), refs, timeout=1.0) is None

    def test_returns_failure(self):
        bad = ValidationOutcome(False, "revoked")
        refs = [
            Reference(ReferenceKind.URL, "https://a.edu/ok"),
            Reference(ReferenceKind.URL, "https://a.edu/bad"),
        ]
        outcome = find_invalid_reference(
            TableValidator({"https://a.edu/bad": bad}), refs, timeout=1.0
        )
        assert outcome == bad

    def test_timeout_counts_as_unavailable(self):
        block = threading.Event()
        refs = [Reference(ReferenceKind.QR, "slow")]
        try:
            outcome = find_invalid_reference(TableValidator({}, block), refs, timeout=0.05)
        finally:
            block.set()
        assert outcome is not None
        assert not outcome.valid
        assert outcome.unavailable

    def test_crashing_validator_fails_closed(self):
        class Broken(ReferenceValidator):
            def validate(self, reference):
                raise RuntimeError("boom")

        outcome = find_invalid_reference(
            Broken(), [Reference(ReferenceKind.URL, "https://a.edu")], timeout=1.0
        )
        assert outcome is not None
        assert outcome.unavailable
        assert "RuntimeError" in outcome.details
