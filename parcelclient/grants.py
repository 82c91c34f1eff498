"""
Access grants.

A grant gives one identity, or everyone, access to the granter's resources
that match an optional filter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from typing import Any, Mapping, Optional

from parcelclient.adapters import grant_create_params_to_wire, grant_fields_from_wire
from parcelclient.domain import (
    ConsentId,
    Constraints,
    GrantCreateParams,
    GrantId,
    IdentityId,
)
from parcelclient.errors import ParcelError
from parcelclient.http import HttpClient

LOG = logging.getLogger(__name__)

GRANTS_EP = "/grants"


def endpoint_for_id(grant_id: GrantId) -> str:
    return f"{GRANTS_EP}/{grant_id}"


@dataclass
class Grant:  # pylint: disable=too-many-instance-attributes
    """
    An existing grant.

    ``grantee`` is None when the grant applies to everyone. Deleting the
    grant revokes it on the server but leaves these fields as they were.
    """

    id: GrantId
    created_at: datetime
    granter: IdentityId
    grantee: Optional[IdentityId]
    consent: Optional[ConsentId] = None
    filter: Optional[Constraints] = None
    client: Optional[HttpClient] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_wire(cls, record: Mapping[str, Any], client: HttpClient):
        return cls(client=client, **grant_fields_from_wire(record))

    @property
    def is_for_everyone(self) -> bool:
        return self.grantee is None

    def delete(self) -> None:
        """
        Revoke this grant.

        Raises:
            ParcelError: If the grant has no transport, or the transport
                reports a failure
        """
        if self.client is None:
            raise ParcelError(f"grant {self.id} has no client to delete it with")
        delete_grant(self.client, self.id)

    def __str__(self) -> str:
        grantee = self.grantee or "everyone"
        return f"[{self.id}] {self.granter} -> {grantee}"


def create_grant(client: HttpClient, params: GrantCreateParams) -> Grant:
    """
    Create a grant.

    Args:
        client: Transport to use
        params: Grantee (an identity or EVERYONE) and optional filter

    Returns:
        The new grant
    """
    LOG.debug("create grant for %s", params.grantee)
    record = client.create(GRANTS_EP, grant_create_params_to_wire(params))
    return Grant.from_wire(record, client)


def get_grant(client: HttpClient, grant_id: GrantId) -> Grant:
    LOG.debug("get grant %s", grant_id)
    return Grant.from_wire(client.get(endpoint_for_id(grant_id)), client)


def delete_grant(client: HttpClient, grant_id: GrantId) -> None:
    LOG.debug("delete grant %s", grant_id)
    client.delete(endpoint_for_id(grant_id))
