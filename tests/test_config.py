import pytest

from enzymatic_digest.config import DigestionConfig
from enzymatic_digest.core.constants import DEFAULT_LOG_THRESHOLD
from enzymatic_digest.core.types import (
    Enzyme,
    Specificity,
    NAMES_OF_ENZYMES,
    NAMES_OF_SPECIFICITY,
    get_enzyme_by_name,
    get_specificity_by_name,
)


def test_defaults():
    config = DigestionConfig()
    assert config.enzyme == Enzyme.TRYPSIN
    assert config.specificity == Specificity.FULL
    assert config.missed_cleavages == 0
    assert config.log_model_enabled is False
    assert config.log_threshold == DEFAULT_LOG_THRESHOLD
    assert config.min_length == 1
    assert config.max_length is None


def test_negative_missed_cleavages_rejected():
    with pytest.raises(ValueError):
        DigestionConfig(missed_cleavages=-1)


def test_sentinels_are_accepted():
    config = DigestionConfig(
        enzyme=Enzyme.UNKNOWN_ENZYME,
        specificity=Specificity.UNKNOWN_SPECIFICITY,
    )
    assert config.enzyme == Enzyme.UNKNOWN_ENZYME
    assert config.specificity == Specificity.UNKNOWN_SPECIFICITY


def test_enzyme_lookup():
    assert get_enzyme_by_name("Trypsin") == Enzyme.TRYPSIN
    assert get_enzyme_by_name("DoesNotExist") == Enzyme.UNKNOWN_ENZYME
    assert get_enzyme_by_name("trypsin") == Enzyme.UNKNOWN_ENZYME


def test_enzyme_names_round_trip():
    for enzyme in Enzyme:
        if enzyme == Enzyme.UNKNOWN_ENZYME:
            continue
        assert get_enzyme_by_name(NAMES_OF_ENZYMES[enzyme]) == enzyme


def test_specificity_lookup():
    assert get_specificity_by_name(NAMES_OF_SPECIFICITY[0]) == Specificity.FULL
    assert get_specificity_by_name(NAMES_OF_SPECIFICITY[1]) == Specificity.SEMI
    assert get_specificity_by_name(NAMES_OF_SPECIFICITY[2]) == Specificity.NONE
    assert get_specificity_by_name("DoesNotExist") == Specificity.UNKNOWN_SPECIFICITY
    assert get_specificity_by_name("FULL") == Specificity.UNKNOWN_SPECIFICITY


def test_specificity_names_are_distinct_and_indexable_by_enum():
    assert NAMES_OF_SPECIFICITY[Specificity.FULL] == "full"
    assert NAMES_OF_SPECIFICITY[Specificity.SEMI] == "semi"
    assert NAMES_OF_SPECIFICITY[Specificity.NONE] == "none"
    assert len(set(NAMES_OF_SPECIFICITY)) == 3


@pytest.mark.parametrize("name", [None, "", 42])
def test_lookups_never_raise(name):
    assert get_enzyme_by_name(name) == Enzyme.UNKNOWN_ENZYME
    assert get_specificity_by_name(name) == Specificity.UNKNOWN_SPECIFICITY
