from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_LOG_THRESHOLD
from .core.types import Enzyme, Specificity


@dataclass
class DigestionConfig:
    """
    Configuration for an in-silico enzymatic digestion.

    Attributes:
        enzyme: The protease. UNKNOWN_ENZYME is accepted and cleaves nowhere.
        specificity: How strictly isValidProduct checks peptide termini.
            UNKNOWN_SPECIFICITY is accepted and behaves like FULL.
        missed_cleavages: The maximum number of cleavage sites a peptide may
            contain. Ignored while the log-odds model is enabled.
        log_model_enabled: Replace the deterministic cleavage rule with the
            position-specific log-odds model.
        log_threshold: Minimum log-odds score for the model to cleave.
        min_length: Shortest peptide, in residues, returned by a digest.
        max_length: Longest peptide, in residues, returned by a digest.
            None means unlimited.
    """
    enzyme: Enzyme = Enzyme.TRYPSIN
    specificity: Specificity = Specificity.FULL
    missed_cleavages: int = 0
    log_model_enabled: bool = False
    log_threshold: float = DEFAULT_LOG_THRESHOLD
    min_length: int = 1
    max_length: Optional[int] = None

    def __post_init__(self):
        validate_missed_cleavages(self.missed_cleavages)


def validate_missed_cleavages(missed_cleavages: int) -> int:
    if missed_cleavages < 0:
        raise ValueError(
            f"Number of missed cleavages must be non-negative, got {missed_cleavages}."
        )
    return missed_cleavages
