"""Validation options for sshfp-validate.

Every validator accepts its options as keyword arguments and turns them into
a ValidationOptions model, so an unknown option name fails loudly instead of
being ignored.

Example usage:
    options = ValidationOptions.from_kwargs(strict=False)
    options.strict  # False
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ValidationOptions(BaseModel):
    """Options shared by all SSHFP validators.

    Attributes:
        strict: Require values registered in the IANA registry (default True).
            When False, any well-formed number is accepted, but a fingerprint
            still needs a fingerprint type with a known digest length.
    """

    strict: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("strict", mode="before")
    @classmethod
    def _none_means_default(cls, value: Any) -> Any:
        # strict=None behaves like an omitted option
        return True if value is None else value

    @classmethod
    def from_kwargs(cls, **options: Any) -> ValidationOptions:
        """Build options from validator keyword arguments.

        Raises:
            pydantic.ValidationError: If an option is unknown or has the wrong type.
        """
        if not options:
            return DEFAULT_OPTIONS
        return cls.model_validate(options)


DEFAULT_OPTIONS = ValidationOptions()
