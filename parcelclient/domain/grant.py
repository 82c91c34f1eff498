"""
Domain types for creating grants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .ids import IdentityId

# Grantee for a grant that applies to every identity.
EVERYONE = "everyone"

# Opaque filter predicate; evaluated by the server only.
Constraints = Dict[str, Any]


@dataclass(frozen=True)
class GrantCreateParams:
    """Parameters for a new grant."""

    grantee: Union[IdentityId, str]
    filter: Optional[Constraints] = None

    @property
    def is_for_everyone(self) -> bool:
        return self.grantee == EVERYONE
