from enzymatic_digest.core.sequence import AASequence
from enzymatic_digest.core.types import Specificity
from enzymatic_digest.logic.validation import is_c_term_valid, is_n_term_valid, is_valid_product

PROTEIN = AASequence.from_string("ABCDEFGKABCRAAAKAARPBBBB")
SITES = {8, 12, 16}


def test_n_term():
    assert is_n_term_valid(PROTEIN, 0, SITES)
    assert is_n_term_valid(PROTEIN, 8, SITES)
    assert not is_n_term_valid(PROTEIN, 1, SITES)
    assert not is_n_term_valid(PROTEIN, 19, SITES)


def test_n_term_after_initiator_methionine():
    protein = AASequence.from_string("MBCDEFGKABCRAAAKAA")
    assert is_n_term_valid(protein, 1, set())
    assert not is_n_term_valid(protein, 2, set())


def test_modified_initiator_methionine_still_counts():
    protein = AASequence.from_string("(Acetyl)M(Oxidation)PEPTIDE")
    assert is_n_term_valid(protein, 1, set())


def test_c_term():
    assert is_c_term_valid(PROTEIN, len(PROTEIN), SITES)
    assert is_c_term_valid(PROTEIN, 12, SITES)
    assert not is_c_term_valid(PROTEIN, 19, SITES)


def test_prechecks():
    assert not is_valid_product(PROTEIN, 24, 1, SITES, Specificity.NONE)
    assert not is_valid_product(PROTEIN, 0, 0, SITES, Specificity.NONE)
    assert not is_valid_product(PROTEIN, 20, 5, SITES, Specificity.NONE)
    assert not is_valid_product(PROTEIN, -1, 2, SITES, Specificity.NONE)
    assert not is_valid_product(AASequence(), 0, 1, SITES, Specificity.NONE)
    assert is_valid_product(PROTEIN, 20, 4, SITES, Specificity.NONE)


def test_specificities():
    # Enzymatic N-terminus, C-terminus before a proline.
    assert not is_valid_product(PROTEIN, 16, 3, SITES, Specificity.FULL)
    assert is_valid_product(PROTEIN, 16, 3, SITES, Specificity.SEMI)
    assert is_valid_product(PROTEIN, 16, 3, SITES, Specificity.NONE)
    assert not is_valid_product(PROTEIN, 16, 3, SITES, Specificity.UNKNOWN_SPECIFICITY)
