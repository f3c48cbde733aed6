"""Tests for the SSHFPFields record model.

Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

import pytest
from pydantic import ValidationError

from sshfp_validate import SSHFPFields


# --- Fixtures ---


@pytest.fixture
def sha256_hex() -> str:
    return "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


# --- Valid Fields ---


class TestValidFields:
    """Tests for valid field combinations."""

    def test_ints_stored_as_strings(self, sha256_hex: str):
        # Act
        fields = SSHFPFields(algorithm=4, fingerprint_type=2, fingerprint=sha256_hex)

        # Assert
        assert fields.algorithm == "4"
        assert fields.fingerprint_type == "2"
        assert fields.fingerprint == sha256_hex

    def test_names(self, sha256_hex: str):
        fields = SSHFPFields(algorithm="3", fingerprint_type="2", fingerprint=sha256_hex)

        assert fields.algorithm_name == "ECDSA"
        assert fields.digest_name == "SHA-256"

    def test_rdata_text(self, sha256_hex: str):
        fields = SSHFPFields(algorithm="1", fingerprint_type="2", fingerprint=sha256_hex)

        assert fields.rdata_text == f"1 2 {sha256_hex}"

    def test_unregistered_algorithm_when_not_strict(self, sha256_hex: str):
        # Act
        fields = SSHFPFields(strict=False, algorithm="7", fingerprint_type="2", fingerprint=sha256_hex)

        # Assert
        assert fields.algorithm == "7"
        assert fields.algorithm_name is None

    def test_zero_padded_algorithm_name(self, sha256_hex: str):
        fields = SSHFPFields(algorithm="04", fingerprint_type="2", fingerprint=sha256_hex)

        assert fields.algorithm_name == "Ed25519"

    def test_strict_none_means_strict(self, sha256_hex: str):
        # Act
        fields = SSHFPFields(strict=None, algorithm="1", fingerprint_type="2", fingerprint=sha256_hex)

        # Assert
        assert fields.strict is True
        assert SSHFPFields.check(strict=None, algorithm="7", fingerprint_type="2", fingerprint=sha256_hex) == [
            'unrecognized algorithm "7"'
        ]

    def test_rdata_text_keeps_separators(self):
        fingerprint = ":".join(["ab"] * 20)

        fields = SSHFPFields(algorithm=2, fingerprint_type=1, fingerprint=fingerprint)

        assert fields.rdata_text == f"2 1 {fingerprint}"

    def test_frozen(self, sha256_hex: str):
        fields = SSHFPFields(algorithm="1", fingerprint_type="2", fingerprint=sha256_hex)

        with pytest.raises(ValidationError):
            fields.algorithm = "2"


# --- Invalid Fields ---


class TestInvalidFields:
    """Tests for reasons reported on invalid fields."""

    def test_raises_validation_error(self):
        with pytest.raises(ValidationError):
            SSHFPFields(algorithm="9", fingerprint_type="1", fingerprint="ab")

    def test_one_reason_per_invalid_field(self):
        # Act
        reasons = SSHFPFields.check(algorithm="9", fingerprint_type="1", fingerprint="ab")

        # Assert
        assert reasons == [
            'unrecognized algorithm "9"',
            "fingerprint must have 40 hex digits for SHA-1, got 2",
        ]

    def test_invalid_versus_unrecognized(self, sha256_hex: str):
        reasons = SSHFPFields.check(algorithm="x1", fingerprint_type="5", fingerprint=sha256_hex)

        assert reasons == ['invalid algorithm "x1"', 'unrecognized fingerprint type "5"']

    def test_missing_values(self):
        reasons = SSHFPFields.check(algorithm=None, fingerprint_type=None, fingerprint=None)

        assert reasons == [
            "missing algorithm",
            "missing fingerprint type",
            "missing fingerprint",
        ]

    def test_unregistered_fingerprint_type_when_not_strict(self, sha256_hex: str):
        reasons = SSHFPFields.check(strict=False, algorithm="1", fingerprint_type="3", fingerprint=sha256_hex)

        assert reasons == ['no fingerprint length known for fingerprint type "3"']

    def test_valid_fields_have_no_reasons(self, sha256_hex: str):
        assert SSHFPFields.check(algorithm="4", fingerprint_type="2", fingerprint=sha256_hex) == []
