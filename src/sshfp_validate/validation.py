"""SSHFP field validators.

Validates the three fields of an SSHFP record (RFC 4255):
    algorithm    - SSH key algorithm number
    fptype       - fingerprint (digest) type number
    fingerprint  - hex fingerprint, length set by the fingerprint type

Each validator returns the value's string form when it is valid and None
otherwise. Invalid input never raises; only bad options do.

Each field is available as a free function and as a method of the stateless
SSHFPValidator. Both forms call the same private implementation.

Example usage:
    validate_sshfp_algorithm("3")                 # "3"
    validate_sshfp_fptype("5")                    # None
    validate_sshfp_fptype("5", strict=False)      # "5"
    validate_sshfp_fingerprint(1, "ab:cd:...")    # original string, colons kept
"""

from __future__ import annotations

import logging
import re
from typing import Any

from sshfp_validate.constants import (
    FINGERPRINT_TYPE_HEX_LENGTHS,
    MAX_SSHFP_ALGORITHM,
    MAX_SSHFP_FINGERPRINT_TYPE,
    MIN_SSHFP_ALGORITHM,
    MIN_SSHFP_FINGERPRINT_TYPE,
)
from sshfp_validate.options import ValidationOptions

__all__ = [
    "SSHFPValidator",
    "is_sshfp_algorithm",
    "is_sshfp_fingerprint",
    "is_sshfp_fptype",
    "validate_sshfp_algorithm",
    "validate_sshfp_fingerprint",
    "validate_sshfp_fptype",
]

logger = logging.getLogger(__name__)

# ASCII only: str.isdigit() and \d also accept non-ASCII digits
_NON_DIGIT = re.compile(r"[^0-9]")
_NON_HEX = re.compile(r"[^0-9a-fA-F]")

# Keyed by the fingerprint type exactly as the caller wrote it, so "01" has
# no entry even though it passes the fingerprint type check.
_HEX_LENGTH_BY_RAW_FPTYPE: dict[str, int] = {
    str(fptype): length for fptype, length in FINGERPRINT_TYPE_HEX_LENGTHS.items()
}


def _reject(field: str, reason: str, **details: Any) -> None:
    logger.debug({"event": "sshfp_value_rejected", "field": field, "reason": reason, **details})
    return None


def _check_number(
    field: str,
    value: Any,
    minimum: int,
    maximum: int,
    options: ValidationOptions,
) -> str | None:
    """Validate an unsigned decimal field against an inclusive registry range."""
    if value is None:
        return _reject(field, "missing")

    text = str(value)
    if _NON_DIGIT.search(text):
        return _reject(field, "non_numeric")

    if options.strict and not _in_range(text, minimum, maximum):
        return _reject(field, "out_of_range", minimum=minimum, maximum=maximum)

    return text


def _in_range(digits: str, minimum: int, maximum: int) -> bool:
    number = _bounded_int(digits, maximum)
    return number is not None and minimum <= number


def _bounded_int(digits: str, maximum: int) -> int | None:
    """Parse an all-digit string, or None if it is above maximum."""
    significant = digits.lstrip("0") or "0"
    # Bounded before int(): very long digit strings exceed the int conversion limit
    if len(significant) > len(str(maximum)):
        return None
    number = int(significant)
    return number if number <= maximum else None


def _hex_digit_count(text: str) -> int:
    return len(_NON_HEX.sub("", text))


def _check_algorithm(value: Any, options: ValidationOptions) -> str | None:
    return _check_number("algorithm", value, MIN_SSHFP_ALGORITHM, MAX_SSHFP_ALGORITHM, options)


def _check_fptype(value: Any, options: ValidationOptions) -> str | None:
    return _check_number(
        "fptype",
        value,
        MIN_SSHFP_FINGERPRINT_TYPE,
        MAX_SSHFP_FINGERPRINT_TYPE,
        options,
    )


def _check_fingerprint(fptype: Any, value: Any, options: ValidationOptions) -> str | None:
    """Validate a fingerprint string for the given fingerprint type.

    Non-hex characters (colons, spaces) are ignored when counting digits but
    are kept in the returned value.
    """
    if value is None:
        return _reject("fingerprint", "missing")

    if _check_fptype(fptype, options) is None:
        return _reject("fingerprint", "invalid_fptype")

    # Looked up with the raw fptype: only registered types have a length,
    # whatever the strict option says.
    required = _HEX_LENGTH_BY_RAW_FPTYPE.get(str(fptype))
    if required is None:
        return _reject("fingerprint", "unregistered_fptype")

    text = str(value)
    digits = _hex_digit_count(text)
    if digits != required:
        return _reject("fingerprint", "length_mismatch", expected=required, actual=digits)

    return text


# =============================================================================
# Function interface
# =============================================================================


def validate_sshfp_algorithm(value: Any, **options: Any) -> str | None:
    """Validate an SSHFP algorithm number.

    Args:
        value: Candidate algorithm number (string or int). None is allowed.
        **options: See ValidationOptions. ``strict`` (default True) limits
            values to the IANA-assigned range 1-4.

    Returns:
        The value as a string if valid, otherwise None.

    Raises:
        pydantic.ValidationError: If an option is unknown or malformed.
    """
    return _check_algorithm(value, ValidationOptions.from_kwargs(**options))


def validate_sshfp_fptype(value: Any, **options: Any) -> str | None:
    """Validate an SSHFP fingerprint type number.

    Args:
        value: Candidate fingerprint type (string or int). None is allowed.
        **options: See ValidationOptions. ``strict`` (default True) limits
            values to the IANA-assigned range 1-2.

    Returns:
        The value as a string if valid, otherwise None.

    Raises:
        pydantic.ValidationError: If an option is unknown or malformed.
    """
    return _check_fptype(value, ValidationOptions.from_kwargs(**options))


def validate_sshfp_fingerprint(fptype: Any, value: Any, **options: Any) -> str | None:
    """Validate an SSHFP fingerprint for a fingerprint type.

    The fingerprint type is checked with the same options first. The hex
    digits of ``value`` must then number exactly 40 (type 1) or 64 (type 2).
    Fingerprint types without a known digest length always fail, even with
    strict=False.

    Args:
        fptype: Candidate fingerprint type (string or int).
        value: Candidate fingerprint string. None is allowed.
        **options: See ValidationOptions.

    Returns:
        The original value as a string (case and separators preserved) if
        valid, otherwise None.

    Raises:
        pydantic.ValidationError: If an option is unknown or malformed.
    """
    return _check_fingerprint(fptype, value, ValidationOptions.from_kwargs(**options))


# Names used by the original is_* interface
is_sshfp_algorithm = validate_sshfp_algorithm
is_sshfp_fptype = validate_sshfp_fptype
is_sshfp_fingerprint = validate_sshfp_fingerprint


# =============================================================================
# Object interface
# =============================================================================


class SSHFPValidator:
    """Stateless object wrapper around the SSHFP validators.

    Holds no configuration; options are passed per call exactly as for the
    free functions.

    Example:
        validator = SSHFPValidator()
        validator.fptype("2")              # "2"
        validator.fingerprint("2", digest) # digest or None
    """

    def algorithm(self, value: Any, **options: Any) -> str | None:
        """Validate an SSHFP algorithm number. See validate_sshfp_algorithm."""
        return _check_algorithm(value, ValidationOptions.from_kwargs(**options))

    def fptype(self, value: Any, **options: Any) -> str | None:
        """Validate an SSHFP fingerprint type. See validate_sshfp_fptype."""
        return _check_fptype(value, ValidationOptions.from_kwargs(**options))

    def fingerprint(self, fptype: Any, value: Any, **options: Any) -> str | None:
        """Validate an SSHFP fingerprint. See validate_sshfp_fingerprint."""
        return _check_fingerprint(fptype, value, ValidationOptions.from_kwargs(**options))

    is_sshfp_algorithm = algorithm
    is_sshfp_fptype = fptype
    is_sshfp_fingerprint = fingerprint

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
