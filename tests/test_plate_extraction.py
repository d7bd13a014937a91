"""
Tests for Plate Text Extraction

Tests normalization, pattern priority and the token fallback.
"""

import pytest

from placa.plates.extract import (
    candidate_tokens,
    extract_plate_from_text,
    normalize_text,
    plate_result_from_text,
)


class TestNormalizeText:
    """Test OCR text normalization"""

    def test_line_breaks_and_spaces(self):
        """Test line breaks and runs of whitespace collapse"""
        assert normalize_text("abc\r\n1234\n\n  brasil") == "ABC 1234 BRASIL"
        assert normalize_text("a\t\tb") == "A B"

    def test_empty(self):
        """Test empty input"""
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    def test_candidate_tokens(self):
        """Test alphanumeric runs keep their order"""
        assert candidate_tokens("placa: abc-1234\nbr") == ["PLACA", "ABC", "1234", "BR"]


class TestExtractPlate:
    """Test plate extraction from OCR text"""

    def test_noise_around_plate(self):
        """Test plate surrounded by labels"""
        assert extract_plate_from_text("PLACA: ABC1234 BR") == "ABC1234"

    def test_dash_separated_plate(self):
        """Test loose old-format plate loses its separator"""
        assert extract_plate_from_text("PLACA: ABC-1234 BRASIL") == "ABC1234"
        assert extract_plate_from_text("abc - 1234") == "ABC1234"

    def test_loose_mercosul(self):
        """Test loose Mercosul plate"""
        assert extract_plate_from_text("BRASIL\nRIO 2E19") == "RIO2E19"

    def test_lowercase_and_line_breaks(self):
        """Test plate split across lines"""
        assert extract_plate_from_text("mercosul\r\nabc1d23\r\n") == "ABC1D23"

    def test_tight_mercosul_beats_earlier_loose_old(self):
        """Test pattern priority outranks position"""
        assert extract_plate_from_text("ABC - 1234 ... XYZ9A87") == "XYZ9A87"

    def test_tight_old_beats_earlier_loose_mercosul(self):
        """Test tight old format beats loose Mercosul"""
        assert extract_plate_from_text("ABC 1D23 then XYZ9876") == "XYZ9876"

    def test_tight_mercosul_beats_tight_old(self):
        """Test Mercosul is tried before old format"""
        assert extract_plate_from_text("XYZ9876 ABC1D23") == "ABC1D23"

    def test_first_match_of_pattern_wins(self):
        """Test the earliest match of the winning pattern is returned"""
        assert extract_plate_from_text("AAA1111 BBB2222") == "AAA1111"

    @pytest.mark.parametrize("text", ["", None, "####", "12", "BRASIL", "AB 12", "ABC 12 34"])
    def test_no_plate(self, text):
        """Test text without a plate"""
        assert extract_plate_from_text(text) is None


class TestPlateResultFromText:
    """Test extraction plus validation"""

    def test_valid_plate(self):
        """Test noisy text yields a validated result"""
        result = plate_result_from_text("PLACA: ABC1234 BR")
        assert result.plate == "ABC1234"
        assert result.is_valid
        assert result.format == "Old format"
        assert result.confidence == 1.0

    @pytest.mark.parametrize("text", ["", "####", "12"])
    def test_garbage(self, text):
        """Test empty or garbage text gives the empty result"""
        result = plate_result_from_text(text)
        assert result.plate == ""
        assert not result.is_valid
        assert result.confidence == 0
        assert result.format == "Unknown format"
