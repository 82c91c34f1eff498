"""
Domain models for parcelclient.

This package contains plain data types with no transport coupling.
"""

from .grant import EVERYONE, Constraints, GrantCreateParams
from .ids import ConsentId, DocumentId, GrantId, IdentityId, JobId, ResourceId
from .job import (
    InputDocumentSpec,
    Job,
    JobPhase,
    JobSpec,
    JobStatus,
    OutputDocument,
    OutputDocumentSpec,
)
from .page import Page, PageParams

__all__ = [
    "EVERYONE",
    "ConsentId",
    "Constraints",
    "DocumentId",
    "GrantCreateParams",
    "GrantId",
    "IdentityId",
    "InputDocumentSpec",
    "Job",
    "JobId",
    "JobPhase",
    "JobSpec",
    "JobStatus",
    "OutputDocument",
    "OutputDocumentSpec",
    "Page",
    "PageParams",
    "ResourceId",
]
