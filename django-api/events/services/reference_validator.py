"""Verification of organizer-supplied event references.

A reference is either a URL or a QR payload. URL references must answer an
HTTP GET without an error status. QR payloads either carry a URL (checked
the same way) or a token signed with the project's SECRET_KEY.

Validation is fail-closed: timeouts, network errors and unexpected
exceptions all produce an invalid outcome.
"""

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any

import httpx
import structlog
from django.core import signing
from django.core.cache import BaseCache, cache as default_cache

from events.domain import Reference, ReferenceKind
from events.domain.value_objects import is_absolute_http_url

logger = structlog.get_logger(__name__)

QR_SIGNING_SALT = "events.reference.qr"
CACHE_KEY_PREFIX = "references:valid:"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of checking a single reference.

    `unavailable` marks failures where the check itself could not complete.
    """

    valid: bool
    details: str
    unavailable: bool = False


def sign_qr_payload(data: dict[str, Any]) -> str:
    """Return a signed token suitable for encoding into an event QR code."""
    return signing.dumps(data, salt=QR_SIGNING_SALT)


class ReferenceValidator(ABC):
    """Interface for reference verification."""

    @abstractmethod
    def validate(self, reference: Reference) -> ValidationOutcome:
        """Check a reference. Must be idempotent and free of side effects."""
        ...


class LiveReferenceValidator(ReferenceValidator):
    """Checks references against the outside world on every call."""

    def __init__(self, timeout: float, client: httpx.Client | None = None) -> None:
        self.timeout = timeout
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    def validate(self, reference: Reference) -> ValidationOutcome:
        if reference.kind is ReferenceKind.URL:
            return self._check_url(reference.payload)
        return self._check_qr(reference.payload)

    def _check_url(self, url: str) -> ValidationOutcome:
        if not is_absolute_http_url(url):
            return ValidationOutcome(False, f"Not an absolute http(s) URL: {url}")
        try:
            response = self._client.get(url, timeout=self.timeout)
        except httpx.TimeoutException:
            return ValidationOutcome(False, f"Timed out checking {url}", unavailable=True)
        except httpx.HTTPError as exc:
            return ValidationOutcome(
                False, f"Could not reach {url}: {exc.__class__.__name__}", unavailable=True
            )
        if response.status_code >= 500:
            return ValidationOutcome(
                False, f"{url} answered {response.status_code}", unavailable=True
            )
        if response.status_code >= 400:
            return ValidationOutcome(False, f"{url} answered {response.status_code}")
        return ValidationOutcome(True, f"{url} answered {response.status_code}")

    def _check_qr(self, payload: str) -> ValidationOutcome:
        if is_absolute_http_url(payload):
            return self._check_url(payload)
        try:
            data = signing.loads(payload, salt=QR_SIGNING_SALT)
        except signing.BadSignature:
            return ValidationOutcome(False, "QR payload signature is not valid")
        issuer = data.get("issuer", "unknown") if isinstance(data, dict) else "unknown"
        return ValidationOutcome(True, f"QR payload signed for {issuer}")


class CachingReferenceValidator(ReferenceValidator):
    """Caches successful outcomes of another validator for a bounded TTL.

    Failures are never cached; a miss or an expired entry always goes to the
    wrapped validator.
    """

    def __init__(
        self, inner: ReferenceValidator, ttl: int, cache: BaseCache | None = None
    ) -> None:
        self._inner = inner
        self._ttl = ttl
        self._cache = cache or default_cache

    @staticmethod
    def cache_key(reference: Reference) -> str:
        digest = hashlib.sha256(
            f"{reference.kind.value}:{reference.payload}".encode()
        ).hexdigest()
        return f"{CACHE_KEY_PREFIX}{digest}"

    def validate(self, reference: Reference) -> ValidationOutcome:
        key = self.cache_key(reference)
        details = self._cache.get(key)
        if details is not None:
            return ValidationOutcome(True, details)
        outcome = self._inner.validate(reference)
        if outcome.valid and self._ttl > 0:
            self._cache.set(key, outcome.details, self._ttl)
        return outcome


def _safe_validate(validator: ReferenceValidator, reference: Reference) -> ValidationOutcome:
    try:
        return validator.validate(reference)
    except Exception as exc:
        logger.exception("reference_validator_crashed", kind=reference.kind.value)
        return ValidationOutcome(
            False, f"Validator error: {exc.__class__.__name__}", unavailable=True
        )


def find_invalid_reference(
    validator: ReferenceValidator,
    references: Sequence[Reference],
    timeout: float,
) -> ValidationOutcome | None:
    """Validate references concurrently; return the first failure, or None.

    Returns as soon as any reference fails. References still running when
    `timeout` expires count as unavailable.
    """
    if not references:
        return None

    executor = ThreadPoolExecutor(
        max_workers=len(references), thread_name_prefix="reference-validation"
    )
    futures = [executor.submit(_safe_validate, validator, ref) for ref in references]
    try:
        for future in as_completed(futures, timeout=timeout):
            outcome = future.result()
            if not outcome.valid:
                logger.info(
                    "reference_rejected",
                    details=outcome.details,
                    unavailable=outcome.unavailable,
                )
                return outcome
    except TimeoutError:
        logger.warning("reference_validation_timed_out", timeout=timeout)
        return ValidationOutcome(
            False, f"Reference validation exceeded {timeout}s", unavailable=True
        )
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    return None
