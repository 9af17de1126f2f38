"""
Unit tests for the record codec.
"""

import pytest
from boat import Boat, BayLetter, PlaceKind, SlipNumber, StorageNumber, TrailerTag
from errors import ParseError
from record import RecordCodec


@pytest.fixture
def codec():
    return RecordCodec()


class TestDecode:
    """Test decoding record lines into boats."""

    def test_decode_slip(self, codec):
        boat = codec.decode("Betty,24,slip,24,500.00\n")
        assert boat.name == "Betty"
        assert boat.length == 24.0
        assert boat.place_kind is PlaceKind.SLIP
        assert boat.location == SlipNumber(24)
        assert boat.amount_owed == 500.0

    def test_decode_each_place_kind(self, codec):
        assert codec.decode("Sea Breeze,30,land,Cxyz,0").location == BayLetter("C")
        assert codec.decode("Gloria,18,trailor,XR12,0.00").location == TrailerTag("XR12")
        assert codec.decode("Hold,12,storage,41,0.00").location == StorageNumber(41)

    def test_place_kind_case_insensitive(self, codec):
        assert codec.decode("Betty,24,SLIP,24,500.00").place_kind is PlaceKind.SLIP
        assert codec.decode("Gloria,18,TraiLor,XR12,0.00").place_kind is PlaceKind.TRAILER

    def test_unrecognised_place_is_unknown(self, codec):
        boat = codec.decode("Drifter,15,dock,7,10.00")
        assert boat.place_kind is PlaceKind.UNKNOWN
        assert boat.location is None
        assert boat.amount_owed == 10.0

    def test_unknown_accepts_empty_location(self, codec):
        boat = codec.decode("Drifter,15,no_place,,10.00")
        assert boat.place_kind is PlaceKind.UNKNOWN

    def test_trailer_tag_truncated(self, codec):
        assert codec.decode("Gloria,18,trailor,ABCDEFGHIJK,0").location.tag == "ABCDEFGHI"

    def test_slip_number_parsed_leniently(self, codec):
        assert codec.decode("Betty,24,slip,7b,0").location == SlipNumber(7)
        assert codec.decode("Betty,24,slip,x,0").location == SlipNumber(0)

    def test_numeric_fields_allow_whitespace(self, codec):
        boat = codec.decode("Betty, 24 ,slip,24, 1.5 \r\n")
        assert boat.length == 24.0
        assert boat.amount_owed == 1.5

    def test_name_kept_verbatim(self, codec):
        assert codec.decode("The Salty Dog,24,slip,3,0").name == "The Salty Dog"

    @pytest.mark.parametrize("line", [
        "Betty,24,slip,500.00",
        "Betty,24,slip,24,500.00,extra",
        "",
        "\n",
        "Betty,long,slip,24,500.00",
        "Betty,24,slip,24,lots",
        ",24,slip,24,500.00",
        "Betty,24,slip,,500.00",
        "Sea Breeze,30,land,,0",
    ])
    def test_malformed_lines(self, codec, line):
        with pytest.raises(ParseError):
            codec.decode(line)

    def test_parse_error_keeps_line(self, codec):
        with pytest.raises(ParseError) as exc_info:
            codec.decode("Betty,24")
        assert exc_info.value.line == "Betty,24"


class TestEncode:
    """Test encoding boats into record lines."""

    def test_encode_formats_numbers(self, codec):
        boat = Boat("Betty", 24.0, SlipNumber(24), 500.0)
        assert codec.encode(boat) == "Betty,24,slip,24,500.00"

    def test_encode_each_place_kind(self, codec):
        assert codec.encode(Boat("Sea Breeze", 30, BayLetter("C"), 12.5)) == "Sea Breeze,30,land,C,12.50"
        assert codec.encode(Boat("Gloria", 18, TrailerTag("XR12"))) == "Gloria,18,trailor,XR12,0.00"
        assert codec.encode(Boat("Hold", 12, StorageNumber(41), 3)) == "Hold,12,storage,41,3.00"

    def test_encode_unknown_place(self, codec):
        assert codec.encode(Boat("Drifter", 15, None, 10)) == "Drifter,15,no_place,,10.00"

    def test_place_label_normalised(self, codec):
        assert codec.encode(codec.decode("Betty,24,SLIP,24,500.00")) == "Betty,24,slip,24,500.00"

    @pytest.mark.parametrize("line", [
        "Betty,24,slip,24,500.00",
        "Sea Breeze,30,land,C,12.50",
        "Gloria,18,trailor,XR12,0.00",
        "Hold,12,storage,41,3.00",
        "Drifter,15,no_place,,10.00",
    ])
    def test_encoded_line_decodes_to_same_boat(self, codec, line):
        boat = codec.decode(line)
        assert codec.encode(boat) == line
        assert codec.decode(codec.encode(boat)) == boat
