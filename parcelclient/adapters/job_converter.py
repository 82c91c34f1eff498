"""
Converters between Job domain objects and their JSON wire records.

Wire records use camelCase keys. Optional fields are left out of encoded
records when unset and come back as None when absent.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from parcelclient.domain import (
    DocumentId,
    IdentityId,
    InputDocumentSpec,
    Job,
    JobId,
    JobPhase,
    JobSpec,
    JobStatus,
    OutputDocument,
    OutputDocumentSpec,
    Page,
    PageParams,
)

from .timestamps import parse_timestamp


def job_spec_to_wire(spec: JobSpec) -> Dict[str, Any]:
    """
    Convert a JobSpec to the body of a submit request.

    Args:
        spec: The spec to convert

    Returns:
        JSON-serializable dict
    """
    record: Dict[str, Any] = {
        "name": spec.name,
        "cmd": list(spec.cmd),
        "image": spec.image,
    }
    if spec.env is not None:
        record["env"] = dict(spec.env)
    if spec.input_documents is not None:
        record["inputDocuments"] = [
            {"id": str(doc.id), "mountPath": doc.mount_path}
            for doc in spec.input_documents
        ]
    if spec.output_documents is not None:
        outputs = []
        for doc in spec.output_documents:
            output: Dict[str, Any] = {"mountPath": doc.mount_path}
            if doc.owner is not None:
                output["owner"] = str(doc.owner)
            outputs.append(output)
        record["outputDocuments"] = outputs
    return record


def job_spec_from_wire(record: Mapping[str, Any]) -> JobSpec:
    env = record.get("env")
    inputs = record.get("inputDocuments")
    outputs = record.get("outputDocuments")
    return JobSpec(
        name=record["name"],
        cmd=record["cmd"],
        image=record["image"],
        env=env,
        input_documents=(
            [
                InputDocumentSpec(id=DocumentId(doc["id"]), mount_path=doc["mountPath"])
                for doc in inputs
            ]
            if inputs is not None
            else None
        ),
        output_documents=(
            [
                OutputDocumentSpec(
                    mount_path=doc["mountPath"],
                    owner=IdentityId(doc["owner"]) if doc.get("owner") else None,
                )
                for doc in outputs
            ]
            if outputs is not None
            else None
        ),
    )


def job_status_from_wire(record: Mapping[str, Any]) -> JobStatus:
    return JobStatus(
        phase=JobPhase(record["phase"]),
        output_documents=[
            OutputDocument(mount_path=doc["mountPath"], id=DocumentId(doc["id"]))
            for doc in record.get("outputDocuments") or []
        ],
        message=record.get("message"),
        host=record.get("host"),
    )


def job_status_to_wire(status: JobStatus) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "phase": status.phase.value,
        "outputDocuments": [
            {"mountPath": doc.mount_path, "id": str(doc.id)}
            for doc in status.output_documents
        ],
    }
    if status.message is not None:
        record["message"] = status.message
    if status.host is not None:
        record["host"] = status.host
    return record


def job_from_wire(record: Mapping[str, Any], client=None) -> Job:
    """
    Build a Job from a wire record.

    Args:
        record: The decoded JSON record
        client: The transport the record was fetched with

    Returns:
        A new Job snapshot
    """
    return Job(
        id=JobId(record["id"]),
        created_at=parse_timestamp(record["createdAt"]),
        spec=job_spec_from_wire(record["spec"]),
        status=job_status_from_wire(record["status"]),
        client=client,
    )


def job_to_wire(job: Job) -> Dict[str, Any]:
    return {
        "id": str(job.id),
        "createdAt": job.created_at.isoformat(),
        "spec": job_spec_to_wire(job.spec),
        "status": job_status_to_wire(job.status),
    }


def page_params_to_query(
    params: Optional[Union[PageParams, Mapping[str, Any]]],
) -> Dict[str, Any]:
    """
    Convert listing parameters to a query dict.

    PageParams are translated to their wire names; any other mapping is
    passed through unchanged.
    """
    if params is None:
        return {}
    if not isinstance(params, PageParams):
        return dict(params)
    query: Dict[str, Any] = {}
    if params.page_size is not None:
        query["pageSize"] = params.page_size
    if params.next_page_token is not None:
        query["nextPageToken"] = params.next_page_token
    return query


def job_page_from_wire(record: Mapping[str, Any], client=None) -> Page[Job]:
    """Map every record of a page to a Job, keeping server order."""
    results: List[Job] = [
        job_from_wire(item, client) for item in record.get("results") or []
    ]
    return Page(results=results, next_page_token=record.get("nextPageToken") or None)
