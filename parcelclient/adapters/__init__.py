"""
Adapters between domain objects and the JSON records the API exchanges.
"""

from .grant_converter import (
    grant_create_params_to_wire,
    grant_fields_from_wire,
    grant_to_wire,
)
from .job_converter import (
    job_from_wire,
    job_page_from_wire,
    job_spec_from_wire,
    job_spec_to_wire,
    job_to_wire,
    page_params_to_query,
)

__all__ = [
    "grant_create_params_to_wire",
    "grant_fields_from_wire",
    "grant_to_wire",
    "job_from_wire",
    "job_page_from_wire",
    "job_spec_from_wire",
    "job_spec_to_wire",
    "job_to_wire",
    "page_params_to_query",
]
