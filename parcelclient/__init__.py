"""
Client-side resource models for the Parcel API: compute jobs and grants.
"""

from .compute import get_job, list_jobs, submit_job, terminate_job
from .errors import AuthorizationError, NotFoundError, ParcelError, ValidationError
from .grants import Grant, create_grant, delete_grant, get_grant
from .http import HttpClient, RequestsHttpClient

__all__ = [
    "AuthorizationError",
    "Grant",
    "HttpClient",
    "NotFoundError",
    "ParcelError",
    "RequestsHttpClient",
    "ValidationError",
    "create_grant",
    "delete_grant",
    "get_grant",
    "get_job",
    "list_jobs",
    "submit_job",
    "terminate_job",
]
