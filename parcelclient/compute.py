"""
Compute job operations.

Jobs are not mutable once fetched, so every operation is a free function
taking the transport explicitly. Errors from the transport are not caught.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from parcelclient.adapters import (
    job_from_wire,
    job_page_from_wire,
    job_spec_to_wire,
    page_params_to_query,
)
from parcelclient.domain import Job, JobId, JobSpec, Page, PageParams
from parcelclient.http import HttpClient

LOG = logging.getLogger(__name__)

COMPUTE_EP = "compute"
JOBS_EP = f"{COMPUTE_EP}/jobs"


def endpoint_for_id(job_id: JobId) -> str:
    return f"{JOBS_EP}/{job_id}"


def submit_job(client: HttpClient, spec: JobSpec) -> Job:
    """
    Submit a job for execution.

    Args:
        client: Transport to use
        spec: What the job runs; not validated locally

    Returns:
        The newly created job
    """
    LOG.debug("submit job %r image=%s", spec.name, spec.image)
    record = client.post(JOBS_EP, job_spec_to_wire(spec))
    return job_from_wire(record, client)


def list_jobs(
    client: HttpClient,
    filter: Optional[Union[PageParams, Mapping[str, Any]]] = None,  # pylint: disable=redefined-builtin
) -> Page[Job]:
    """
    List one page of jobs.

    Args:
        client: Transport to use
        filter: Page params, or any mapping passed through as the query

    Returns:
        A page of jobs in the order the server returned them
    """
    query = page_params_to_query(filter)
    LOG.debug("list jobs query=%r", query)
    record = client.get(JOBS_EP, query)
    return job_page_from_wire(record, client)


def get_job(client: HttpClient, job_id: JobId) -> Job:
    LOG.debug("get job %s", job_id)
    return job_from_wire(client.get(endpoint_for_id(job_id)), client)


def terminate_job(client: HttpClient, job_id: JobId) -> None:
    """
    Ask the server to stop a job.

    The resulting phase is up to the server; fetch the job again to see it.
    """
    LOG.debug("terminate job %s", job_id)
    client.delete(endpoint_for_id(job_id))
