"""sshfp-validate: validation of DNS SSHFP record fields (RFC 4255).

Validates the algorithm number, fingerprint type and fingerprint string of an
SSHFP record. Every validator returns the cleaned value on success and None
on failure; invalid input never raises.

Example usage:
    from sshfp_validate import validate_sshfp_fingerprint

    if validate_sshfp_fingerprint(2, fingerprint) is not None:
        ...

    # Or through a validator object
    validator = SSHFPValidator()
    validator.algorithm("4", strict=False)
"""

from sshfp_validate.constants import (
    FINGERPRINT_TYPE_HEX_LENGTHS,
    SSHFP_ALGORITHMS,
    SSHFP_FINGERPRINT_TYPES,
)
from sshfp_validate.fields import SSHFPFields
from sshfp_validate.options import ValidationOptions
from sshfp_validate.validation import (
    SSHFPValidator,
    is_sshfp_algorithm,
    is_sshfp_fingerprint,
    is_sshfp_fptype,
    validate_sshfp_algorithm,
    validate_sshfp_fingerprint,
    validate_sshfp_fptype,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Validators
    "SSHFPValidator",
    "validate_sshfp_algorithm",
    "validate_sshfp_fptype",
    "validate_sshfp_fingerprint",
    "is_sshfp_algorithm",
    "is_sshfp_fptype",
    "is_sshfp_fingerprint",
    # Options
    "ValidationOptions",
    # Record fields
    "SSHFPFields",
    # Registries
    "SSHFP_ALGORITHMS",
    "SSHFP_FINGERPRINT_TYPES",
    "FINGERPRINT_TYPE_HEX_LENGTHS",
]
