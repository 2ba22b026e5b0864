import time

import requests
from flask import current_app

from playground.services.errors import CompileServiceUnavailable, InvalidCompileRequest
from playground.services.normalizer import NormalizedResult, UpstreamResult, normalize

# Fixed toolchain profile: latest GCC, C++2b with GNU extensions, warnings on, -O2.
COMPILER = 'gcc-head'
COMPILER_OPTIONS = 'warning,gnu++2b'
COMPILER_RAW_OPTIONS = '-O2'

CODE_REQUIRED = 'Code is required'
SERVICE_UNAVAILABLE = 'Compilation service unavailable. Please try again.'
UNEXPECTED_ERROR = 'An unexpected error occurred. Please try again.'


class WandboxClient:
    """Thin HTTP client for the Wandbox ``compile.json`` endpoint."""

    def __init__(self, url, timeout=None, session=None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_payload(self, code):
        return {
            'code': code,
            'compiler': COMPILER,
            'options': COMPILER_OPTIONS,
            'compiler-option-raw': COMPILER_RAW_OPTIONS,
        }

    def compile(self, code):
        """Send ``code`` upstream once and return the decoded JSON body.

        Transport failures and non-2xx answers raise
        ``CompileServiceUnavailable``. A body that is not valid JSON raises
        ``ValueError`` from ``response.json()``.
        """
        try:
            response = self.session.post(
                self.url,
                json=self.build_payload(code),
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise CompileServiceUnavailable(f'Compile service request failed: {e}') from e

        if not response.ok:
            raise CompileServiceUnavailable(
                f'Compile service answered with HTTP {response.status_code}',
                status_code=response.status_code,
            )
        return response.json()


def validate_code(data):
    if not isinstance(data, dict):
        raise InvalidCompileRequest(CODE_REQUIRED)
    code = data.get('code')
    if not code or not isinstance(code, str):
        raise InvalidCompileRequest(CODE_REQUIRED)
    return code


class CompileService:
    def __init__(self, client=None):
        self.client = client

    def init_app(self, app):
        if self.client is None:
            self.client = WandboxClient(
                app.config['COMPILE_SERVICE_URL'],
                timeout=app.config.get('COMPILE_SERVICE_TIMEOUT'),
            )
        app.extensions['compile_service'] = self

    def run(self, code):
        """Compile and run ``code`` upstream and normalize what comes back."""
        current_app.logger.info(f"Sending {len(code)} characters to the compile service.")
        started = time.monotonic()
        payload = self.client.compile(code)
        execution_time = int((time.monotonic() - started) * 1000)

        upstream = UpstreamResult.from_payload(payload)
        output, error = normalize(upstream)
        current_app.logger.info(
            f"Compile service finished in {execution_time}ms (status={upstream.status!r}, signal={upstream.signal!r})"
        )
        return NormalizedResult(output=output, error=error, execution_time=execution_time)

    def handle(self, data):
        """Map a raw request body to a ``(body, status)`` pair.

        Shared by the HTTP endpoint and the socket event so both report the
        same messages and status codes.
        """
        try:
            code = validate_code(data)
            result = self.run(code)
        except InvalidCompileRequest as e:
            current_app.logger.warning(f"Rejected compile request: {e}")
            return {'error': CODE_REQUIRED}, 400
        except CompileServiceUnavailable as e:
            current_app.logger.warning(f"Compile service unavailable: {e}")
            return {'error': SERVICE_UNAVAILABLE}, 503
        except Exception:
            current_app.logger.exception("Unexpected error while handling a compile request")
            return {'error': UNEXPECTED_ERROR}, 500
        return result.to_dict(), 200
