"""
Workflow Errors
===============

Failures raised inside the admin workflows. Every workflow entry point turns
these into a {'success': False, 'message': ...} result; http_status is only
used by the JSON routes.
"""


class WorkflowError(Exception):
    """Base class for errors a workflow reports back to its caller"""
    http_status = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class Unauthorized(WorkflowError):
    """Missing or invalid session, or an identity other than the admin"""
    http_status = 401


class ValidationError(WorkflowError):
    """A required field or file is missing"""
    http_status = 400


class NotFound(WorkflowError):
    http_status = 404


class UpstreamError(WorkflowError):
    """The media host or the document store failed"""
    http_status = 502
