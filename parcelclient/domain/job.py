"""
Domain model for compute jobs.

These classes carry data only. Conversion to and from the JSON records the
API exchanges lives in ``parcelclient.adapters``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Tuple

from .ids import DocumentId, IdentityId, JobId

if TYPE_CHECKING:
    from parcelclient.http import HttpClient


class JobPhase(Enum):
    """Job lifecycle phases, as reported by the server."""

    PENDING = "Pending"  # Accepted, not yet scheduled
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobPhase.SUCCEEDED, JobPhase.FAILED)


@dataclass(frozen=True)
class InputDocumentSpec:
    """A document to mount into the job before ``cmd`` runs."""

    id: DocumentId
    # Relative to /parcel/data/in
    mount_path: str


@dataclass(frozen=True)
class OutputDocumentSpec:
    """A file to upload as a document after ``cmd`` runs."""

    # Relative to /parcel/data/out
    mount_path: str
    owner: Optional[IdentityId] = None


@dataclass(frozen=True)
class OutputDocument:
    """A document produced by a job."""

    mount_path: str
    id: DocumentId


@dataclass(frozen=True)
class JobSpec:
    """
    Complete description of what a job runs and how.

    ``cmd`` is appended to the image's ``ENTRYPOINT``. ``env`` may not set
    ``PATH``; the server enforces that, not this class. Input documents that
    are missing or inaccessible fail the job; output files that were never
    written are skipped.

    Sequences are stored as tuples and ``env`` as a read-only mapping.
    """

    name: str
    cmd: Tuple[str, ...]
    image: str
    env: Optional[Mapping[str, str]] = field(default=None, hash=False)
    input_documents: Optional[Tuple[InputDocumentSpec, ...]] = None
    output_documents: Optional[Tuple[OutputDocumentSpec, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "cmd", tuple(self.cmd))
        if self.env is not None:
            object.__setattr__(self, "env", MappingProxyType(dict(self.env)))
        if self.input_documents is not None:
            object.__setattr__(self, "input_documents", tuple(self.input_documents))
        if self.output_documents is not None:
            object.__setattr__(self, "output_documents", tuple(self.output_documents))


@dataclass(frozen=True)
class JobStatus:
    """
    Most recently observed status of a job.

    ``output_documents`` stays empty until the job succeeds. ``host`` is
    for human reference only.
    """

    phase: JobPhase
    output_documents: Tuple[OutputDocument, ...] = ()
    message: Optional[str] = None
    host: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "output_documents", tuple(self.output_documents))


@dataclass(frozen=True)
class Job:
    """
    An already-submitted job, as seen at fetch time.

    A Job is never updated in place; fetch it again to observe a newer
    status.
    """

    id: JobId
    created_at: datetime
    spec: JobSpec
    status: JobStatus
    client: Optional["HttpClient"] = field(default=None, repr=False, compare=False)

    def is_active(self) -> bool:
        """Return True if the job has not reached a terminal phase."""
        return not self.status.phase.is_terminal

    def is_done(self) -> bool:
        return self.status.phase.is_terminal

    def output_document(self, mount_path: str) -> Optional[OutputDocument]:
        """Return the output document uploaded from ``mount_path``, if any."""
        for doc in self.status.output_documents:
            if doc.mount_path == mount_path:
                return doc
        return None

    def __str__(self) -> str:
        message = f" ({self.status.message})" if self.status.message else ""
        return (
            f"[{self.id}] {self.spec.name} {self.status.phase.value}{message}"
        )
