"""
This module provides the EnzymaticDigestion engine, which digests proteins
in silico and validates candidate peptides against the configured enzyme.
"""
import logging
from dataclasses import replace
from typing import Optional

from ..config import DigestionConfig, validate_missed_cleavages
from ..core.sequence import AASequence
from ..core.types import (
    Enzyme,
    Specificity,
    NAMES_OF_ENZYMES,
    NAMES_OF_SPECIFICITY,
    get_enzyme_by_name,
    get_specificity_by_name,
)
from .cleavage import cleavage_sites
from .peptide import count_peptides, peptide_spans
from .validation import is_valid_product

logger = logging.getLogger(__name__)


class EnzymaticDigestion:
    """
    Digests proteins with a protease.

    The engine only reads its configuration while digesting, so a single
    instance may serve several threads as long as none of them changes the
    settings concurrently.
    """
    NAMES_OF_ENZYMES = NAMES_OF_ENZYMES
    NAMES_OF_SPECIFICITY = NAMES_OF_SPECIFICITY

    get_enzyme_by_name = staticmethod(get_enzyme_by_name)
    get_specificity_by_name = staticmethod(get_specificity_by_name)

    def __init__(self, config: Optional[DigestionConfig] = None):
        self._config = replace(config) if config is not None else DigestionConfig()

    def __copy__(self) -> "EnzymaticDigestion":
        return self.__class__(self._config)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._config!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, EnzymaticDigestion):
            return NotImplemented
        return self._config == other._config

    __hash__ = None

    @property
    def config(self) -> DigestionConfig:
        """A copy of the settings. Change them through the engine's properties."""
        return replace(self._config)

    # --- Settings ---

    @property
    def missed_cleavages(self) -> int:
        return self._config.missed_cleavages

    @missed_cleavages.setter
    def missed_cleavages(self, value: int):
        self._config.missed_cleavages = validate_missed_cleavages(value)

    @property
    def enzyme(self) -> Enzyme:
        return self._config.enzyme

    @enzyme.setter
    def enzyme(self, value: Enzyme):
        self._config.enzyme = value

    @property
    def specificity(self) -> Specificity:
        return self._config.specificity

    @specificity.setter
    def specificity(self, value: Specificity):
        self._config.specificity = value

    @property
    def log_model_enabled(self) -> bool:
        return self._config.log_model_enabled

    @log_model_enabled.setter
    def log_model_enabled(self, value: bool):
        self._config.log_model_enabled = value

    @property
    def log_threshold(self) -> float:
        return self._config.log_threshold

    @log_threshold.setter
    def log_threshold(self, value: float):
        self._config.log_threshold = value

    @property
    def min_length(self) -> int:
        return self._config.min_length

    @min_length.setter
    def min_length(self, value: int):
        self._config.min_length = value

    @property
    def max_length(self) -> Optional[int]:
        return self._config.max_length

    @max_length.setter
    def max_length(self, value: Optional[int]):
        self._config.max_length = value

    @property
    def effective_missed_cleavages(self) -> int:
        """
        The missed-cleavage budget used when digesting. The log-odds model
        decides itself which sites are missed, so it always digests fully.
        """
        return 0 if self._config.log_model_enabled else self._config.missed_cleavages

    # --- Digestion ---

    def cleavage_sites(self, protein: AASequence) -> list[int]:
        return cleavage_sites(
            protein,
            enzyme=self._config.enzyme,
            log_model_enabled=self._config.log_model_enabled,
            log_threshold=self._config.log_threshold,
        )

    def digest_spans(self, protein: AASequence) -> list[tuple[int, int]]:
        """The (start, end) residue ranges of the peptides, in digest order."""
        return list(peptide_spans(
            len(protein),
            self.cleavage_sites(protein),
            self.effective_missed_cleavages,
            self._config.min_length,
            self._config.max_length,
        ))

    def peptide_count(self, protein: AASequence) -> int:
        """
        The number of peptides digest() returns for `protein`, computed without
        building them.
        """
        return count_peptides(
            len(protein),
            self.cleavage_sites(protein),
            self.effective_missed_cleavages,
            self._config.min_length,
            self._config.max_length,
        )

    def digest(self, protein: AASequence, output: Optional[list] = None) -> list[AASequence]:
        """
        Digests a protein.

        Peptides come fully cleaved first, then with one missed cleavage, then
        with two, and so on, each group ordered by position in the protein.

        Args:
            protein: The protein to digest.
            output: An optional list to receive the peptides. It is cleared
                before being filled, so earlier contents are discarded.

        Returns:
            The list of peptides (`output` itself when one was given).
        """
        if output is None:
            output = []
        else:
            output.clear()
        spans = self.digest_spans(protein)
        output.extend(protein[start:end] for start, end in spans)
        logger.debug(
            "Digested %d residues into %d peptides (%d missed cleavages allowed).",
            len(protein), len(output), self.effective_missed_cleavages,
        )
        return output

    def is_valid_product(self, protein: AASequence, start: int, length: int) -> bool:
        """
        Checks whether protein[start:start + length] could be produced by the
        enzyme under the configured specificity. A peptide starting right
        after an initiator methionine counts as having an enzymatic N-terminus.
        """
        if len(protein) == 0:
            return False
        return is_valid_product(
            protein, start, length, set(self.cleavage_sites(protein)), self._config.specificity
        )
