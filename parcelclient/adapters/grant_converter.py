"""
Converters between grant domain types and their JSON wire records.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from parcelclient.domain import (
    EVERYONE, ConsentId, GrantCreateParams, GrantId, IdentityId)

from .timestamps import parse_timestamp


def grant_create_params_to_wire(params: GrantCreateParams) -> Dict[str, Any]:
    """Convert create params to a request body; ``filter`` is sent verbatim."""
    record: Dict[str, Any] = {"grantee": str(params.grantee)}
    if params.filter is not None:
        record["filter"] = params.filter
    return record


def grant_fields_from_wire(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Extract Grant constructor fields from a wire record.

    An absent, null or ``"everyone"`` grantee means the grant applies to
    everyone and maps to None.

    Args:
        record: The decoded JSON record

    Returns:
        Keyword arguments for ``parcelclient.grants.Grant``
    """
    grantee = record.get("grantee")
    consent = record.get("consent")
    return {
        "id": GrantId(record["id"]),
        "created_at": parse_timestamp(record["createdAt"]),
        "granter": IdentityId(record["granter"]),
        "grantee": (None if grantee in (None, "", EVERYONE)
                    else IdentityId(grantee)),
        "consent": ConsentId(consent) if consent else None,
        "filter": record.get("filter"),
    }


def grant_to_wire(grant) -> Dict[str, Any]:
    """Convert a Grant back to its wire record; None fields are left out."""
    record: Dict[str, Any] = {
        "id": str(grant.id),
        "createdAt": grant.created_at.isoformat(),
        "granter": str(grant.granter),
    }
    if grant.grantee is not None:
        record["grantee"] = str(grant.grantee)
    if grant.consent is not None:
        record["consent"] = str(grant.consent)
    if grant.filter is not None:
        record["filter"] = grant.filter
    return record
