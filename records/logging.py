"""
Logging helpers that keep patient contact details out of the logs.

Request payloads are logged on every write, so the filter below masks
the contact fields of a patient or insurance form before a record is
emitted.
"""
import logging

PHI_FIELDS = frozenset({
    'phone',
    'email',
    'address',
    'contactNumber',
    'contact_number',
    'policyNumber',
    'policy_number',
})

MASK = '***'


def redact(payload):
    """Return a copy of ``payload`` with contact fields masked."""
    if isinstance(payload, dict):
        return {k: (MASK if k in PHI_FIELDS and v else redact(v)) for k, v in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [redact(v) for v in payload]
    return payload


class RedactPHIFilter(logging.Filter):
    """Mask contact fields in dict arguments of a log record."""

    def filter(self, record):
        if isinstance(record.args, dict):
            record.args = redact(record.args)
        elif isinstance(record.args, tuple):
            record.args = tuple(redact(a) for a in record.args)
        return True
