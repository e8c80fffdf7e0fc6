"""
This module locates the peptide bonds an enzyme hydrolyses in a protein.

A cleavage site is an integer k with 0 < k < len(sequence) meaning the bond
between residue k-1 and residue k is cut. Protein termini are never reported.
"""
import logging
import re

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from pyteomics.parser import psims_rules

from ..core.constants import (
    DEFAULT_LOG_THRESHOLD,
    LOG_MODEL_ROW,
    LOG_MODEL_SCORES,
    LOG_MODEL_WINDOW,
    TRYPSIN_CLEAVAGE_RESIDUES,
)
from ..core.sequence import AASequence
from ..core.types import Enzyme

logger = logging.getLogger(__name__)

# PSI-MS trypsin rule: after K or R, unless followed by P.
TRYPSIN_RULE = re.compile(psims_rules["Trypsin"])

# Score table with an extra all-zero row for non-canonical codes and for
# window positions that fall outside the protein.
_SCORE_TABLE = np.vstack([LOG_MODEL_SCORES, np.zeros(len(LOG_MODEL_WINDOW))])
_SCORE_TABLE.setflags(write=False)
_UNSCORED_ROW = len(LOG_MODEL_SCORES)
_WINDOW_COLUMNS = np.arange(len(LOG_MODEL_WINDOW))


def trypsin_cleavage_sites(sequence: AASequence) -> list[int]:
    """
    Cleavage sites of the deterministic trypsin rule. Modifications do not
    inhibit cleavage and non-standard residues never trigger it.
    """
    codes = sequence.codes
    return [
        match.start()
        for match in TRYPSIN_RULE.finditer(codes)
        if 0 < match.start() < len(codes)
    ]


def log_model_scores(sequence: AASequence) -> np.ndarray:
    """
    Computes the log-odds cleavage score of every bond in the sequence.

    Each residue in the window P3 P2 P1 | P1' P2' P3' around the bond adds its
    position-specific score; non-canonical residues and positions beyond the
    protein termini add nothing.

    Args:
        sequence: The protein to score.

    Returns:
        An array of length max(len(sequence) - 1, 0) whose entry i is the score
        of cleavage site i + 1.
    """
    n = len(sequence)
    if n < 2:
        return np.zeros(0)

    rows = np.fromiter(
        (LOG_MODEL_ROW.get(code, _UNSCORED_ROW) for code in sequence.codes),
        dtype=np.intp,
        count=n,
    )
    padded = np.concatenate([
        np.full(-LOG_MODEL_WINDOW[0], _UNSCORED_ROW, dtype=np.intp),
        rows,
        np.full(LOG_MODEL_WINDOW[-1], _UNSCORED_ROW, dtype=np.intp),
    ])
    # Window k covers residues k-3 .. k+2, i.e. the bond at site k.
    windows = sliding_window_view(padded, len(LOG_MODEL_WINDOW))[1:n]
    return _SCORE_TABLE[windows, _WINDOW_COLUMNS].sum(axis=1)


def log_model_cleavage_sites(sequence: AASequence, threshold: float = DEFAULT_LOG_THRESHOLD) -> list[int]:
    """
    Cleavage sites of the log-odds model: bonds C-terminal to K or R whose
    score reaches the threshold. Unlike the deterministic rule, the model may
    cleave before a proline and may skip K/R sites that the rule would cut.
    """
    if len(sequence) < 2:
        return []
    p1_codes = np.array(list(sequence.codes[:-1]))
    candidates = np.isin(p1_codes, list(TRYPSIN_CLEAVAGE_RESIDUES))
    accepted = candidates & (log_model_scores(sequence) >= threshold)
    return (np.flatnonzero(accepted) + 1).tolist()


def cleavage_sites(
    sequence: AASequence,
    enzyme: Enzyme = Enzyme.TRYPSIN,
    log_model_enabled: bool = False,
    log_threshold: float = DEFAULT_LOG_THRESHOLD,
) -> list[int]:
    """
    Returns the strictly increasing cleavage sites of `enzyme` in `sequence`.
    Enzymes without a cleavage rule, including UNKNOWN_ENZYME, cleave nowhere.
    """
    if enzyme != Enzyme.TRYPSIN:
        logger.debug("No cleavage rule for enzyme %r, sequence left intact.", enzyme)
        return []
    if log_model_enabled:
        sites = log_model_cleavage_sites(sequence, log_threshold)
    else:
        sites = trypsin_cleavage_sites(sequence)
    logger.debug("Found %d cleavage sites in a %d residue sequence.", len(sites), len(sequence))
    return sites
