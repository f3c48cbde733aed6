"""SSHFP record field model.

Validates all three fields of an SSHFP record together and reports a reason
for every field that fails, for callers that need more than the yes/no
answer of the scalar validators.

Example usage:
    fields = SSHFPFields(algorithm=4, fingerprint_type=2, fingerprint=digest)
    fields.rdata_text  # "4 2 <digest>"

    SSHFPFields.check(algorithm="9", fingerprint_type="1", fingerprint="ab")
    # ['unrecognized algorithm "9"', 'fingerprint must have 40 hex digits for SHA-1, got 2']
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from sshfp_validate.constants import (
    SSHFP_ALGORITHMS,
    SSHFP_FINGERPRINT_TYPES,
)
from sshfp_validate.validation import (
    _HEX_LENGTH_BY_RAW_FPTYPE,
    _bounded_int,
    _hex_digit_count,
    validate_sshfp_algorithm,
    validate_sshfp_fingerprint,
    validate_sshfp_fptype,
)

__all__ = ["SSHFPFields"]


class SSHFPFields(BaseModel):
    """The algorithm, fingerprint type and fingerprint of one SSHFP record.

    Field values are stored as the cleaned strings returned by the
    validators. Construction raises pydantic.ValidationError listing every
    invalid field.

    Attributes:
        strict: Require IANA-registered algorithm and fingerprint type.
        algorithm: SSH key algorithm number.
        fingerprint_type: Digest type number.
        fingerprint: Hex fingerprint, separators preserved.
    """

    # Declared first so the field validators below can read it
    strict: bool = True
    algorithm: str
    fingerprint_type: str
    fingerprint: str

    model_config = ConfigDict(frozen=True)

    @field_validator("strict", mode="before")
    @classmethod
    def _none_means_default(cls, value: Any) -> Any:
        return True if value is None else value

    @field_validator("algorithm", mode="before")
    @classmethod
    def _validate_algorithm(cls, value: Any, info: ValidationInfo) -> str:
        cleaned = validate_sshfp_algorithm(value, strict=info.data.get("strict", True))
        if cleaned is not None:
            return cleaned
        raise _field_error("algorithm", value, validate_sshfp_algorithm)

    @field_validator("fingerprint_type", mode="before")
    @classmethod
    def _validate_fingerprint_type(cls, value: Any, info: ValidationInfo) -> str:
        cleaned = validate_sshfp_fptype(value, strict=info.data.get("strict", True))
        if cleaned is not None:
            return cleaned
        raise _field_error("fingerprint type", value, validate_sshfp_fptype)

    @field_validator("fingerprint", mode="before")
    @classmethod
    def _validate_fingerprint(cls, value: Any, info: ValidationInfo) -> str:
        if value is None:
            raise PydanticCustomError("sshfp_missing", "missing fingerprint")

        fptype = info.data.get("fingerprint_type")
        if fptype is None:
            # Already reported against fingerprint_type
            return str(value)

        cleaned = validate_sshfp_fingerprint(fptype, value, strict=info.data.get("strict", True))
        if cleaned is not None:
            return cleaned

        required = _HEX_LENGTH_BY_RAW_FPTYPE.get(fptype)
        if required is None:
            raise PydanticCustomError(
                "sshfp_fingerprint",
                'no fingerprint length known for fingerprint type "{fptype}"',
                {"fptype": fptype},
            )
        raise PydanticCustomError(
            "sshfp_fingerprint",
            "fingerprint must have {required} hex digits for {digest}, got {actual}",
            {
                "required": required,
                "digest": _registered_name(SSHFP_FINGERPRINT_TYPES, fptype),
                "actual": _hex_digit_count(str(value)),
            },
        )

    @property
    def algorithm_name(self) -> str | None:
        """Key algorithm name, or None for an unregistered number."""
        return _registered_name(SSHFP_ALGORITHMS, self.algorithm)

    @property
    def digest_name(self) -> str | None:
        """Digest algorithm name, or None for an unregistered number."""
        return _registered_name(SSHFP_FINGERPRINT_TYPES, self.fingerprint_type)

    @property
    def rdata_text(self) -> str:
        """Record data in zone-file presentation order."""
        return f"{self.algorithm} {self.fingerprint_type} {self.fingerprint}"

    @classmethod
    def check(cls, **fields: Any) -> list[str]:
        """Validate fields without raising.

        Returns:
            One reason per invalid field; empty if the fields are valid.
        """
        try:
            cls(**fields)
        except ValidationError as e:
            return [error["msg"] for error in e.errors()]
        return []


def _registered_name(registry: Mapping[int, str], digits: str) -> str | None:
    number = _bounded_int(digits, max(registry))
    return None if number is None else registry.get(number)


def _field_error(name: str, value: Any, validator: Callable[..., str | None]) -> PydanticCustomError:
    if value is None:
        return PydanticCustomError("sshfp_missing", "missing {name}", {"name": name})
    # Passes without strict: well-formed but not in the registry
    if validator(value, strict=False) is not None:
        return PydanticCustomError(
            "sshfp_unrecognized",
            'unrecognized {name} "{value}"',
            {"name": name, "value": str(value)},
        )
    return PydanticCustomError(
        "sshfp_invalid",
        'invalid {name} "{value}"',
        {"name": name, "value": str(value)},
    )
