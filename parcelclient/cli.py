#!/usr/bin/env python

import argparse
import os
import sys

import simplejson as json

from parcelclient import compute, grants, logging
from parcelclient.adapters import grant_to_wire, job_spec_from_wire, job_to_wire
from parcelclient.argparse import addArgumentParserBaseFlags
from parcelclient.binutils import binDescriptionWithStandardFooter
from parcelclient.config import Config, ConfigError
from parcelclient.domain import (
    EVERYONE, GrantCreateParams, GrantId, IdentityId, JobId, PageParams)
from parcelclient.errors import ParcelError

DESC = binDescriptionWithStandardFooter("""
parcel - submit and inspect compute jobs, and manage access grants

Job specs are JSON files in the API's wire format, e.g.:

    {"name": "hello", "image": "bash", "cmd": ["-c", "echo hi > /parcel/data/out/hi"],
     "outputDocuments": [{"mountPath": "hi"}]}
""")

_DEBUG_LOG_FILE_NAME = "parcel-debug"

LOG = logging.getLogger(__name__)

OK = 0
ERROR = 1


def _output(config, record, text):
    if config.outputJson:
        print(json.dumps(record, indent=2, sort_keys=True))
    else:
        print(text)


def _loadJson(text, what):
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise ParcelError("invalid {} JSON: {}".format(what, error)) from None


def _jobSubmit(client, config, opts):
    with open(opts.specFile) as specFile:
        record = _loadJson(specFile.read(), "job spec")
    try:
        spec = job_spec_from_wire(record)
    except (KeyError, TypeError, AttributeError) as error:
        raise ParcelError("invalid job spec: {!r}".format(error)) from None
    job = compute.submit_job(client, spec)
    _output(config, job_to_wire(job), str(job))


def _jobList(client, config, opts):
    page = compute.list_jobs(
        client, PageParams(page_size=opts.pageSize, next_page_token=opts.pageToken))
    record = {
        'results': [job_to_wire(job) for job in page],
        'nextPageToken': page.next_page_token,
    }
    lines = [str(job) for job in page]
    if page.has_next:
        lines.append("next page: --page-token {}".format(page.next_page_token))
    _output(config, record, "\n".join(lines))


def _jobGet(client, config, opts):
    job = compute.get_job(client, JobId(opts.jobId))
    _output(config, job_to_wire(job), str(job))


def _jobTerminate(client, _config, opts):
    compute.terminate_job(client, JobId(opts.jobId))


def _grantCreate(client, config, opts):
    grantee = EVERYONE if opts.everyone else IdentityId(opts.grantee)
    grantFilter = _loadJson(opts.filter, "filter") if opts.filter else None
    grant = grants.create_grant(
        client, GrantCreateParams(grantee=grantee, filter=grantFilter))
    _output(config, grant_to_wire(grant), str(grant))


def _grantGet(client, config, opts):
    grant = grants.get_grant(client, GrantId(opts.grantId))
    _output(config, grant_to_wire(grant), str(grant))


def _grantDelete(client, _config, opts):
    grants.delete_grant(client, GrantId(opts.grantId))


def parseArgs(args=None):
    if args is None:
        prog = sys.argv[0]
        args = sys.argv[1:]
    else:
        prog = None

    # pylint: disable=invalid-name
    ap = argparse.ArgumentParser(
        prog=os.path.basename(prog) if prog else None,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=DESC)
    addArgumentParserBaseFlags(ap, _DEBUG_LOG_FILE_NAME)
    resources = ap.add_subparsers(dest='resource', metavar='RESOURCE')
    resources.required = True

    job = resources.add_parser('job', help='Compute jobs')
    jobCmds = job.add_subparsers(dest='command', metavar='COMMAND')
    jobCmds.required = True
    submit = jobCmds.add_parser('submit', help='Submit a job from a JSON spec')
    submit.add_argument('specFile', metavar='SPEC')
    submit.set_defaults(func=_jobSubmit)
    jobList = jobCmds.add_parser('list', help='List one page of jobs')
    jobList.add_argument('--page-size', dest='pageSize', type=int)
    jobList.add_argument('--page-token', dest='pageToken')
    jobList.set_defaults(func=_jobList)
    for name, func, helpText in (('get', _jobGet, 'Show a job'),
                                 ('terminate', _jobTerminate, 'Terminate a job')):
        cmd = jobCmds.add_parser(name, help=helpText)
        cmd.add_argument('jobId', metavar='JOB_ID')
        cmd.set_defaults(func=func)

    grant = resources.add_parser('grant', help='Access grants')
    grantCmds = grant.add_subparsers(dest='command', metavar='COMMAND')
    grantCmds.required = True
    create = grantCmds.add_parser('create', help='Create a grant')
    grantee = create.add_mutually_exclusive_group(required=True)
    grantee.add_argument('--grantee', metavar='IDENTITY_ID')
    grantee.add_argument('--everyone', action='store_true',
                         help='Grant access to every identity')
    create.add_argument('--filter', metavar='JSON',
                        help='Only grant access to matching resources')
    create.set_defaults(func=_grantCreate)
    for name, func, helpText in (('get', _grantGet, 'Show a grant'),
                                 ('delete', _grantDelete, 'Revoke a grant')):
        cmd = grantCmds.add_parser(name, help=helpText)
        cmd.add_argument('grantId', metavar='GRANT_ID')
        cmd.set_defaults(func=func)

    return ap.parse_args(args)


def main(args=None):
    opts = parseArgs(args=args)
    debug = opts.debugFile or opts.debug
    try:
        config = Config(opts)
        logging.setup(config.logDir if debug is True else None,
                      _DEBUG_LOG_FILE_NAME + ".log", debug=debug)
    except (ConfigError, OSError) as error:
        print("parcel:", error, file=sys.stderr)
        return ERROR

    LOG.debug("api %s, %s %s", config.apiUrl, opts.resource, opts.command)

    with config.httpClient() as client:
        try:
            opts.func(client, config, opts)
        except (ParcelError, OSError) as error:
            LOG.debug("request failed", exc_info=1)
            print("parcel:", error, file=sys.stderr)
            return ERROR
    return OK


if __name__ == '__main__':
    sys.exit(main())
