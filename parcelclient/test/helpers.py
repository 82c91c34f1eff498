from contextlib import contextmanager
from io import StringIO
import copy
import itertools
import os
import sys

from parcelclient.errors import NotFoundError
from parcelclient.http import HttpClient

CREATED_AT = '2021-03-04T05:06:07.000Z'
GRANTER = 'I0000000000000000granter'


def resetEnv():
    os.environ['PARCEL_STATE_DIR'] = '/tmp/BADDIR'
    for var in ('PARCEL_API_URL', 'PARCEL_API_TOKEN'):
        if var in os.environ:
            del os.environ[var]


@contextmanager
def capturedOutput():
    ''' Used to capture stdout or stderr.
    eg.
    with capturedOutput() as (out, err):
        print("foo")

    self.assertEqual(out.getvalue(), "foo")
    '''
    newOut, newErr = StringIO(), StringIO()
    oldOut, oldErr = sys.stdout, sys.stderr
    try:
        sys.stdout, sys.stderr = newOut, newErr
        yield sys.stdout, sys.stderr
    finally:
        sys.stdout, sys.stderr = oldOut, oldErr


class FakeHttpClient(HttpClient):
    """
    In-memory stand-in for the API server.

    Stores wire records keyed by path, serves jobs and grants, and records
    every call made in ``calls``.
    """

    def __init__(self):
        self.jobs = {}
        self.grants = {}
        self.calls = []
        self._ids = itertools.count(1)

    def _newId(self, prefix):
        return '{}{:015d}'.format(prefix, next(self._ids))

    def _collection(self, path):
        path = path.strip('/')
        if path.startswith('compute/jobs'):
            return self.jobs, path[len('compute/jobs'):].strip('/')
        if path.startswith('grants'):
            return self.grants, path[len('grants'):].strip('/')
        raise NotFoundError('no such endpoint: ' + path, status_code=404)

    def _lookup(self, path):
        store, resourceId = self._collection(path)
        if resourceId not in store:
            raise NotFoundError('not found: ' + path, status_code=404)
        return store, resourceId

    def get(self, path, params=None):
        self.calls.append(('GET', path, params))
        store, resourceId = self._collection(path)
        if resourceId:
            return copy.deepcopy(self._lookup(path)[0][resourceId])
        records = list(store.values())
        pageSize = (params or {}).get('pageSize')
        start = int((params or {}).get('nextPageToken') or 0)
        end = start + pageSize if pageSize else len(records)
        return {
            'results': copy.deepcopy(records[start:end]),
            'nextPageToken': str(end) if end < len(records) else '',
        }

    def post(self, path, body):
        self.calls.append(('POST', path, body))
        self._collection(path)
        jobId = self._newId('J')
        record = {
            'id': jobId,
            'createdAt': CREATED_AT,
            'spec': copy.deepcopy(body),
            'status': {'phase': 'Pending', 'outputDocuments': []},
        }
        self.jobs[jobId] = record
        return copy.deepcopy(record)

    def create(self, path, body):
        self.calls.append(('CREATE', path, body))
        grantId = self._newId('G')
        record = {
            'id': grantId,
            'createdAt': CREATED_AT,
            'granter': GRANTER,
        }
        if body.get('grantee') != 'everyone':
            record['grantee'] = body['grantee']
        if 'filter' in body:
            record['filter'] = copy.deepcopy(body['filter'])
        self.grants[grantId] = record
        return copy.deepcopy(record)

    def delete(self, path):
        self.calls.append(('DELETE', path, None))
        store, resourceId = self._lookup(path)
        if store is self.grants:
            del store[resourceId]
        else:
            store[resourceId]['status']['phase'] = 'Failed'
            store[resourceId]['status']['message'] = 'terminated'

    def completeJob(self, jobId, writtenPaths, phase='Succeeded'):
        """Finish a job as if its command wrote only ``writtenPaths``."""
        record = self.jobs[jobId]
        outputs = []
        for output in record['spec'].get('outputDocuments') or []:
            if output['mountPath'] in writtenPaths:
                outputs.append({
                    'mountPath': output['mountPath'],
                    'id': self._newId('D'),
                })
        record['status'] = {'phase': phase, 'outputDocuments': outputs}
