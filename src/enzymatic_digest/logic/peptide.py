"""
This module turns the cleavage sites of a protein into peptides, allowing a
certain number of missed cleavages.
"""
from typing import Iterator, Optional, Sequence

from ..config import validate_missed_cleavages
from ..core.sequence import AASequence
from ..core.types import Enzyme, get_enzyme_by_name
from .cleavage import cleavage_sites


def _within_length(start: int, end: int, min_length: int, max_length: Optional[int]) -> bool:
    length = end - start
    return length >= min_length and (max_length is None or length <= max_length)


def peptide_spans(
    length: int,
    sites: Sequence[int],
    missed_cleavages: int,
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> Iterator[tuple[int, int]]:
    """
    Yields the (start, end) residue ranges of the peptides of a protein.

    Peptides are produced tier by tier: first every fully cleaved peptide from
    left to right, then every peptide containing exactly one missed cleavage
    from left to right, and so on up to `missed_cleavages`.

    Args:
        length: The number of residues in the protein.
        sites: Strictly increasing cleavage sites within (0, length).
        missed_cleavages: The maximum number of sites a peptide may span.
        min_length: Peptides shorter than this are skipped.
        max_length: Peptides longer than this are skipped; None for no limit.
    """
    if length == 0:
        # An empty protein is its own single, empty peptide.
        yield 0, 0
        return
    boundaries = [0, *sites, length]
    segments = len(boundaries) - 1
    for missed in range(min(missed_cleavages, segments - 1) + 1):
        for k in range(segments - missed):
            start, end = boundaries[k], boundaries[k + missed + 1]
            if _within_length(start, end, min_length, max_length):
                yield start, end


def count_peptides(
    length: int,
    sites: Sequence[int],
    missed_cleavages: int,
    min_length: int = 1,
    max_length: Optional[int] = None,
) -> int:
    """
    Counts the peptides peptide_spans would yield for the same arguments.
    """
    if length == 0:
        return 1
    if min_length > 1 or max_length is not None:
        return sum(1 for _ in peptide_spans(length, sites, missed_cleavages, min_length, max_length))

    fragments = len(sites) + 1
    # One tier per allowed missed cleavage, each one peptide shorter.
    return sum(fragments - missed for missed in range(min(missed_cleavages, fragments - 1) + 1))


def digest_sequence(sequence: str, enzyme: str = 'Trypsin', missed_cleavages: int = 0) -> list[str]:
    """
    Performs in-silico digestion of a protein sequence using a specified enzyme
    and allows for a certain number of missed cleavages.

    Args:
        sequence: The protein, optionally with parenthesised modifications.
        enzyme: The name of the enzyme to use (currently only 'Trypsin').
        missed_cleavages: The maximum number of missed cleavages to allow.

    Returns:
        The peptides in digestion order, rendered with their modifications.
    """
    enzyme_id = get_enzyme_by_name(enzyme)
    if enzyme_id == Enzyme.UNKNOWN_ENZYME:
        raise ValueError(f"Enzyme '{enzyme}' is not supported.")
    validate_missed_cleavages(missed_cleavages)

    protein = AASequence.from_string(sequence)
    sites = cleavage_sites(protein, enzyme_id)
    return [
        protein[start:end].to_string()
        for start, end in peptide_spans(len(protein), sites, missed_cleavages)
    ]
