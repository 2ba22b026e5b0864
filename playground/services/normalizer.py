"""
Turns a raw compile service payload into the result shape the editor renders.

The compile service returns up to eight independently optional fields. The
editor only knows about ``output``, ``error`` and ``executionTime``; the rules
below decide which upstream field lands where.
"""
from dataclasses import dataclass, fields
from typing import Optional

NO_OUTPUT_MESSAGE = 'Program executed successfully with no output.'
SUCCESS_STATUS = '0'


@dataclass(frozen=True)
class UpstreamResult:
    status: Optional[str] = None
    signal: Optional[str] = None
    compiler_output: Optional[str] = None
    compiler_error: Optional[str] = None
    compiler_message: Optional[str] = None
    program_output: Optional[str] = None
    program_error: Optional[str] = None
    program_message: Optional[str] = None

    @classmethod
    def from_payload(cls, payload):
        """Build from the decoded JSON body, ignoring keys we don't know.

        Numbers are kept as their string form (Wandbox sends ``status`` as a
        string, but nothing guarantees it). Any other non-string value means
        the payload is not what we expect and raises ``ValueError``.
        """
        if not isinstance(payload, dict):
            raise ValueError(f'Expected a JSON object from the compile service, got {type(payload).__name__}')

        values = {}
        for field in fields(cls):
            value = payload.get(field.name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise ValueError(f'Unexpected type {type(value).__name__} for field {field.name!r}')
            values[field.name] = value if isinstance(value, str) else str(value)
        return cls(**values)

    @property
    def compile_failed(self):
        """Gate for compiler messages: any status other than the literal "0", including ""."""
        return self.status is not None and self.status != SUCCESS_STATUS

    @property
    def failed(self):
        """Gate for the synthesized exit message; an empty status does not count."""
        return bool(self.status) and self.status != SUCCESS_STATUS


@dataclass(frozen=True)
class NormalizedResult:
    output: str
    error: str
    execution_time: int

    def to_dict(self):
        return {
            'output': self.output,
            'error': self.error,
            'executionTime': self.execution_time,
        }


def normalize(result: UpstreamResult):
    """Return the ``(output, error)`` pair for an upstream result.

    The steps run in a fixed order and accumulate into the two strings, so
    the order of the ``if`` blocks below is part of the contract.
    """
    output = ''
    error = ''

    # Compiler diagnostics
    if result.compiler_error:
        error += result.compiler_error
    if result.compiler_message and result.compile_failed:
        error += result.compiler_message

    # Program streams
    if result.program_output:
        output += result.program_output
    if result.program_error:
        error += ('\n' if error else '') + result.program_error
    if result.program_message and not result.program_output:
        output += result.program_message

    # Non-zero exit without any diagnostics
    if result.failed and not error:
        error = f'Program exited with code {result.status}'
        if result.signal:
            error += f' ({result.signal})'

    if not output and not error:
        output = NO_OUTPUT_MESSAGE

    return output, error
