from enum import IntEnum


class Enzyme(IntEnum):
    """
    Proteases known to the digestion engine.

    UNKNOWN_ENZYME is the sentinel returned by failed name lookups. It is a
    valid setting: a digestion configured with it finds no cleavage sites.
    """
    TRYPSIN = 0
    UNKNOWN_ENZYME = 1


class Specificity(IntEnum):
    """
    How many termini of a candidate peptide must be enzymatic.

    Attributes:
        FULL: Both termini must be cleavage sites (or protein termini).
        SEMI: At least one terminus must be.
        NONE: Any sub-sequence is accepted.
        UNKNOWN_SPECIFICITY: Sentinel for failed lookups, treated as FULL.
    """
    FULL = 0
    SEMI = 1
    NONE = 2
    UNKNOWN_SPECIFICITY = 3


# Names indexed by enum value; the sentinels have no name.
NAMES_OF_ENZYMES = ("Trypsin",)
NAMES_OF_SPECIFICITY = ("full", "semi", "none")


def get_enzyme_by_name(name: str) -> Enzyme:
    """Case-sensitive lookup of an enzyme, UNKNOWN_ENZYME if there is none."""
    try:
        return Enzyme(NAMES_OF_ENZYMES.index(name))
    except ValueError:
        return Enzyme.UNKNOWN_ENZYME


def get_specificity_by_name(name: str) -> Specificity:
    """Case-sensitive lookup of a specificity, UNKNOWN_SPECIFICITY if there is none."""
    try:
        return Specificity(NAMES_OF_SPECIFICITY.index(name))
    except ValueError:
        return Specificity.UNKNOWN_SPECIFICITY
