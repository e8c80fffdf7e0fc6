"""
This module decides whether a sub-sequence of a protein could have been
produced by the enzyme under a given specificity.
"""
from typing import Collection

from ..core.constants import INITIATOR_METHIONINE
from ..core.sequence import AASequence
from ..core.types import Specificity


def is_n_term_valid(protein: AASequence, start: int, sites: Collection[int]) -> bool:
    """
    A peptide N-terminus is enzymatic at the protein N-terminus, at a cleavage
    site, or directly after an initiator methionine.
    """
    if start == 0 or start in sites:
        return True
    return start == 1 and protein.code_at(0) == INITIATOR_METHIONINE


def is_c_term_valid(protein: AASequence, end: int, sites: Collection[int]) -> bool:
    """A peptide C-terminus is enzymatic at the protein C-terminus or at a cleavage site."""
    return end == len(protein) or end in sites


def is_valid_product(
    protein: AASequence,
    start: int,
    length: int,
    sites: Collection[int],
    specificity: Specificity = Specificity.FULL,
) -> bool:
    """
    Checks whether protein[start:start + length] is an enzymatic product.

    Args:
        protein: The protein the peptide comes from.
        start: Index of the first residue of the peptide.
        length: Number of residues in the peptide.
        sites: The enzyme's cleavage sites in the protein.
        specificity: FULL requires both termini to be enzymatic, SEMI at least
            one, NONE neither. UNKNOWN_SPECIFICITY is treated as FULL.

    Returns:
        False for out-of-range or empty peptides, otherwise whether the termini
        satisfy the specificity.
    """
    n = len(protein)
    if start < 0 or start >= n or length <= 0 or start + length > n:
        return False
    if specificity == Specificity.NONE:
        return True

    n_term_ok = is_n_term_valid(protein, start, sites)
    c_term_ok = is_c_term_valid(protein, start + length, sites)
    if specificity == Specificity.SEMI:
        return n_term_ok or c_term_ok
    return n_term_ok and c_term_ok
