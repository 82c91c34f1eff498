"""
Tests for compute job operations.
"""

import unittest

from mock import MagicMock

from parcelclient import compute
from parcelclient.domain import (
    DocumentId,
    IdentityId,
    InputDocumentSpec,
    JobId,
    JobPhase,
    JobSpec,
    OutputDocumentSpec,
    PageParams,
)
from parcelclient.errors import NotFoundError, ParcelError, ValidationError
from parcelclient.http import HttpClient

from .helpers import FakeHttpClient


def makeSpec(name="word-count", outputs=("count",)):
    return JobSpec(
        name=name,
        cmd=["-c", "wc -w /parcel/data/in/doc > /parcel/data/out/count"],
        image="bash",
        env={"LANG": "C"},
        input_documents=[InputDocumentSpec(id=DocumentId("D1"), mount_path="doc")],
        output_documents=[
            OutputDocumentSpec(mount_path=path, owner=IdentityId("I1"))
            for path in outputs
        ],
    )


class TestEndpoints(unittest.TestCase):
    def test_endpoints(self):
        self.assertEqual(compute.JOBS_EP, "compute/jobs")
        self.assertEqual(compute.endpoint_for_id(JobId("J1")), "compute/jobs/J1")


class TestJobOperations(unittest.TestCase):
    """Test job operations against an in-memory server."""

    def setUp(self):
        self.client = FakeHttpClient()

    def test_submit_then_get_returns_same_spec(self):
        spec = makeSpec()
        submitted = compute.submit_job(self.client, spec)

        self.assertIsInstance(submitted.id, JobId)
        self.assertEqual(submitted.spec, spec)
        self.assertEqual(submitted.status.phase, JobPhase.PENDING)

        fetched = compute.get_job(self.client, submitted.id)
        self.assertEqual(fetched.id, submitted.id)
        self.assertEqual(fetched.spec, spec)
        self.assertIsNot(fetched, submitted)

    def test_minimal_spec_round_trips(self):
        spec = JobSpec(name="hello", cmd=["echo", "hi"], image="alpine")
        job = compute.submit_job(self.client, spec)
        self.assertEqual(compute.get_job(self.client, job.id).spec, spec)

    def test_submit_sends_wire_spec(self):
        compute.submit_job(self.client, makeSpec())
        method, path, body = self.client.calls[0]
        self.assertEqual(method, "POST")
        self.assertEqual(path, "compute/jobs")
        self.assertEqual(body["inputDocuments"], [{"id": "D1", "mountPath": "doc"}])
        self.assertEqual(body["outputDocuments"],
                         [{"mountPath": "count", "owner": "I1"}])

    def test_get_unknown_job(self):
        with self.assertRaises(NotFoundError):
            compute.get_job(self.client, JobId("Jmissing"))

    def test_list_returns_server_order(self):
        ids = [compute.submit_job(self.client, makeSpec(name=str(i))).id
               for i in range(3)]
        # Server decides the order; the client must not re-sort.
        self.client.jobs = {
            jobId: self.client.jobs[jobId] for jobId in reversed(ids)}

        page = compute.list_jobs(self.client)
        self.assertEqual([job.id for job in page], list(reversed(ids)))
        self.assertIsNone(page.next_page_token)

    def test_list_pages(self):
        ids = [compute.submit_job(self.client, makeSpec(name=str(i))).id
               for i in range(3)]

        first = compute.list_jobs(self.client, PageParams(page_size=2))
        self.assertEqual([job.id for job in first], ids[:2])
        self.assertTrue(first.has_next)

        second = compute.list_jobs(self.client, first.next_params(2))
        self.assertEqual([job.id for job in second], ids[2:])
        self.assertFalse(second.has_next)
        self.assertEqual(self.client.calls[-1],
                         ("GET", "compute/jobs",
                          {"pageSize": 2, "nextPageToken": "2"}))

    def test_list_passes_filter_through(self):
        client = MagicMock(HttpClient)
        client.get.return_value = {"results": [], "nextPageToken": ""}
        compute.list_jobs(client, {"submitter": "I1"})
        client.get.assert_called_once_with("compute/jobs", {"submitter": "I1"})

    def test_terminate(self):
        job = compute.submit_job(self.client, makeSpec())
        self.assertIsNone(compute.terminate_job(self.client, job.id))
        self.assertEqual(self.client.calls[-1],
                         ("DELETE", "compute/jobs/" + job.id, None))
        # The resulting phase is whatever the server reports next.
        self.assertTrue(compute.get_job(self.client, job.id).is_done())

    def test_terminate_unknown_job(self):
        with self.assertRaises(NotFoundError):
            compute.terminate_job(self.client, JobId("Jmissing"))

    def test_missing_output_files_are_skipped(self):
        job = compute.submit_job(self.client, makeSpec(outputs=("a.txt", "b.txt")))
        self.client.completeJob(job.id, writtenPaths={"b.txt"})

        done = compute.get_job(self.client, job.id)
        self.assertEqual(done.status.phase, JobPhase.SUCCEEDED)
        self.assertEqual([doc.mount_path for doc in done.status.output_documents],
                         ["b.txt"])
        self.assertIsNone(done.output_document("a.txt"))

    def test_job_failure_is_a_status_not_an_error(self):
        job = compute.submit_job(self.client, makeSpec())
        self.client.jobs[job.id]["status"] = {
            "phase": "Failed", "message": "exit status 1", "outputDocuments": []}

        failed = compute.get_job(self.client, job.id)
        self.assertEqual(failed.status.phase, JobPhase.FAILED)
        self.assertEqual(failed.status.message, "exit status 1")

    def test_transport_errors_propagate_unchanged(self):
        client = MagicMock(HttpClient)
        error = ValidationError("PATH may not be set", status_code=400)
        client.post.side_effect = error
        spec = JobSpec(name="n", cmd=[], image="alpine", env={"PATH": "/bin"})

        with self.assertRaises(ParcelError) as ctx:
            compute.submit_job(client, spec)
        self.assertIs(ctx.exception, error)


if __name__ == "__main__":
    unittest.main()
