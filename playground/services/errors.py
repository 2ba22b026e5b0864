class CompileError(Exception):
    """Base class for everything that stops a compile request from producing a result."""


class InvalidCompileRequest(CompileError):
    """The request did not carry a usable ``code`` string."""


class CompileServiceUnavailable(CompileError):
    """The compile service could not be reached or answered with a non-2xx status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
