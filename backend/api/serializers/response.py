"""
Response envelope helpers.

Every successful JSON response has the shape:
    {"data": ..., "meta": {"requestId": "...", ...}}
"""

from typing import Any, Dict, Optional

from flask import g


def success_envelope(
    data: Any,
    meta: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build a standardized success response envelope.

    Args:
        data: Response data (list or dict)
        meta: Optional metadata dict (count, filters, ...)
    """
    response_meta = dict(meta) if meta else {}

    # Always include request ID if available
    if hasattr(g, 'request_id'):
        response_meta['requestId'] = g.request_id

    return {"data": data, "meta": response_meta}


def outcome_envelope(result, state_view: Dict[str, Any], **extra) -> Dict[str, Any]:
    """
    Envelope for a tracking intent.

    `accepted` is false for a rejected no-op (its `notice` says why);
    `persisted` is false when the storage write failed.
    """
    data = {
        "accepted": result.accepted,
        "notice": result.notice,
        "persisted": result.persisted,
        "state": state_view,
    }
    data.update(extra)
    return success_envelope(data)
