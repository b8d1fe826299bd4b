"""Tests for core/domain/models.py."""

import pytest
from pydantic import ValidationError

from core.domain.models import DataType, FetchOutcome, OutcomeKind, RequestParameters
from core.errors import ParameterValidationError


class TestRequestParameters:
    """Block size invariant and bounds."""

    def test_hex16_requires_block_size(self):
        with pytest.raises(ValidationError, match="block_size is required"):
            RequestParameters(data_type=DataType.HEX16, length=4)

    def test_uint8_rejects_block_size(self):
        with pytest.raises(ValidationError, match="only valid for hex16"):
            RequestParameters(data_type=DataType.UINT8, length=4, block_size=2)

    @pytest.mark.parametrize("length", [0, 1025, -1])
    def test_length_out_of_range(self, length):
        with pytest.raises(ValidationError):
            RequestParameters(data_type=DataType.UINT16, length=length)

    def test_build_drops_block_size_for_numeric_types(self):
        params = RequestParameters.build(DataType.UINT16, 5, 99)

        assert params.block_size is None
        assert params.length == 5

    def test_build_keeps_block_size_for_hex16(self):
        params = RequestParameters.build(DataType.HEX16, 5, 8)

        assert params.block_size == 8

    def test_build_wraps_validation_errors(self):
        with pytest.raises(ParameterValidationError):
            RequestParameters.build(DataType.HEX16, 5, 2048)

    def test_data_type_choices_are_wire_values(self):
        assert DataType.choices() == ["uint8", "uint16", "hex16"]


class TestFetchOutcome:
    """Outcome classification helpers."""

    @pytest.mark.parametrize(
        "kind, upstream, decode",
        [
            (OutcomeKind.OK, False, False),
            (OutcomeKind.SERVER_ERROR, True, False),
            (OutcomeKind.HTTP_ERROR, True, False),
            (OutcomeKind.API_REJECTED, False, True),
            (OutcomeKind.MALFORMED, False, True),
        ],
    )
    def test_categories(self, kind, upstream, decode):
        outcome = FetchOutcome(kind=kind, url="https://example.test")

        assert outcome.ok is (kind is OutcomeKind.OK)
        assert outcome.is_upstream_error is upstream
        assert outcome.is_decode_error is decode

    def test_hex_values_stay_strings(self):
        outcome = FetchOutcome(kind=OutcomeKind.OK, url="u", values=["0012", "ab"])

        assert outcome.values == ["0012", "ab"]
