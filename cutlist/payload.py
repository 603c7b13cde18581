"""
cutlist.payload - Extractor payload encoding and decoding.

The extractor hands its result across the host boundary as a JSON string:
either the audit itself or an object with an ``error`` field. Older host
scripts signal failure with a bare string starting with ``Error:``; the
decoder accepts that form too.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from cutlist.exceptions import MalformedPayloadError
from cutlist.models import AuditFailure, AuditOutcome, FailureKind, SequenceAudit

LEGACY_ERROR_PREFIX = "Error:"


def encode_audit(audit: SequenceAudit) -> str:
    return json.dumps(audit.to_payload(), ensure_ascii=False)


def encode_outcome(outcome: AuditOutcome) -> str:
    """Encode an audit or a failure as a JSON payload string."""
    if isinstance(outcome, AuditFailure):
        return json.dumps(
            {"error": outcome.message, "kind": outcome.kind.value},
            ensure_ascii=False,
        )
    return encode_audit(outcome)


def _failure_from(data: dict[str, Any]) -> AuditFailure:
    kind = data.get("kind")
    try:
        failure_kind = FailureKind(kind) if kind else FailureKind.HOST_SCRIPT_ERROR
    except ValueError:
        failure_kind = FailureKind.HOST_SCRIPT_ERROR
    message = data["error"]
    return AuditFailure(kind=failure_kind, message="" if message is None else str(message))


def decode_payload(payload: str) -> AuditOutcome:
    """Decode an extractor payload.

    Args:
        payload: Raw string returned by the extractor

    Returns:
        SequenceAudit on success, AuditFailure when the extractor reported one

    Raises:
        MalformedPayloadError: If the payload is not valid audit JSON
    """
    if not isinstance(payload, str):
        raise MalformedPayloadError(f"Expected a string payload, got {type(payload).__name__}")

    if payload.startswith(LEGACY_ERROR_PREFIX):
        message = payload[len(LEGACY_ERROR_PREFIX) :].strip()
        return AuditFailure(kind=FailureKind.HOST_SCRIPT_ERROR, message=message)

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(
            f"Could not parse extractor result: {e}", raw=payload
        ) from e

    if not isinstance(data, dict):
        raise MalformedPayloadError("Extractor result is not a JSON object", raw=payload)

    if "error" in data:
        return _failure_from(data)

    try:
        return SequenceAudit.model_validate(data)
    except ValidationError as e:
        raise MalformedPayloadError(f"Invalid audit payload: {e}", raw=payload) from e
