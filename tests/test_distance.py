"""Tests for the distance metrics."""

import inspect

import pytest

from asosim.core.distance import (
    SIFT3_MAX_OFFSET,
    DistanceMetric,
    get_distance_function,
    hamming,
    levenshtein,
    sift3,
)

SEQUENCES = ["", "A", "ACGT", "AATX", "GCTAGCTAGGCTTACGGA"]


@pytest.mark.parametrize("seq", SEQUENCES)
def test_identical_strings_have_zero_distance(seq):
    assert hamming(seq, seq) == 0
    assert levenshtein(seq, seq) == 0
    assert sift3(seq, seq) == 0


def test_hamming_counts_differing_positions():
    assert hamming("AATA", "AAAT") == 2
    assert hamming("ACGT", "TGCA") == 4
    assert hamming("ACGT", "ACGA") == 1


def test_hamming_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        hamming("ACGT", "ACG")


def test_levenshtein():
    assert levenshtein("ACGT", "AGCT") == 2
    assert levenshtein("ACGT", "ACG") == 1
    assert levenshtein("", "ACG") == 3


def test_sift3_known_values():
    assert sift3("AATA", "AAAT") == 2.0
    assert sift3("ACGT", "AGCT") == 2.0
    assert sift3("ACGT", "ACGA") == 1.0


def test_sift3_empty_operand_returns_other_length():
    assert sift3("", "ACG") == 3.0
    assert sift3("ACGT", "") == 4.0


def test_hamming_accepts_lone_surrogates():
    assert hamming("AA\udcffA", "AANA") == 1


def test_sift3_look_ahead_not_configurable():
    assert list(inspect.signature(sift3).parameters) == ["a", "b"]
    assert SIFT3_MAX_OFFSET == 5


def test_sift3_is_non_negative_real():
    result = sift3("ACGTACGT", "TTTT")
    assert isinstance(result, float)
    assert result >= 0


class TestDistanceMetric:
    """Tests for metric selection."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("hamming", DistanceMetric.HAMMING),
            ("Levenshtein", DistanceMetric.LEVENSHTEIN),
            ("SIFT3", DistanceMetric.SIFT3),
        ],
    )
    def test_from_name_case_insensitive(self, name, expected):
        assert DistanceMetric.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown distance metric"):
            DistanceMetric.from_name("jaccard")

    @pytest.mark.parametrize("metric", list(DistanceMetric))
    def test_distance_functions_return_float(self, metric):
        fn = get_distance_function(metric)
        result = fn("AATA", "AAAT")
        assert isinstance(result, float)
        assert result == 2.0

    def test_str_is_value(self):
        assert str(DistanceMetric.SIFT3) == "sift3"
