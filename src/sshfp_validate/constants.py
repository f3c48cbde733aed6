"""SSHFP registry constants for sshfp-validate.

Values mirror the IANA "DNS SSHFP Resource Record Parameters" registry:
https://www.iana.org/assignments/dns-sshfp-rr-parameters/dns-sshfp-rr-parameters.xhtml

All tables are read-only; nothing in the package modifies them at runtime.
"""

from types import MappingProxyType
from typing import Mapping

# ============================================================================
# SSHFP Algorithm Numbers (RFC 4255, RFC 6594, RFC 7479)
# ============================================================================

# 0 is reserved
SSHFP_ALGORITHMS: Mapping[int, str] = MappingProxyType(
    {
        1: "RSA",
        2: "DSA",
        3: "ECDSA",
        4: "Ed25519",
    }
)

# Strict validation range (inclusive)
MIN_SSHFP_ALGORITHM: int = 1
MAX_SSHFP_ALGORITHM: int = 4

# ============================================================================
# SSHFP Fingerprint Types (RFC 4255, RFC 6594)
# ============================================================================

# 0 is reserved
SSHFP_FINGERPRINT_TYPES: Mapping[int, str] = MappingProxyType(
    {
        1: "SHA-1",
        2: "SHA-256",
    }
)

# Strict validation range (inclusive)
MIN_SSHFP_FINGERPRINT_TYPE: int = 1
MAX_SSHFP_FINGERPRINT_TYPE: int = 2

# Required fingerprint length in hex characters, per fingerprint type
# SHA-1 = 20 bytes = 40 hex chars, SHA-256 = 32 bytes = 64 hex chars
FINGERPRINT_TYPE_HEX_LENGTHS: Mapping[int, int] = MappingProxyType(
    {
        1: 40,
        2: 64,
    }
)
