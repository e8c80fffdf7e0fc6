import numpy as np
from pyteomics.parser import std_amino_acids

# --- Amino-acid alphabet ---
# The 20 canonical one-letter codes, in alphabetical order so they can index
# the rows of the score table below.
CANONICAL_AMINO_ACIDS = "".join(sorted(std_amino_acids))

# Non-standard codes that are recognised by name but never cleaved and never
# scored: ambiguous Asx/Xle/Glx, pyrrolysine, selenocysteine and unknown.
NON_STANDARD_AMINO_ACIDS = "BJOUXZ"

# N-terminal residue of nascent proteins, frequently removed in vivo.
INITIATOR_METHIONINE = "M"

# Residues at which trypsin hydrolyses the C-terminal peptide bond.
TRYPSIN_CLEAVAGE_RESIDUES = "KR"


# --- Log-odds cleavage model ---
# Window around a candidate cut between residues k-1 and k, as offsets from
# the cut position: P3, P2, P1 | P1', P2', P3'.
LOG_MODEL_WINDOW = (-3, -2, -1, 0, 1, 2)

DEFAULT_LOG_THRESHOLD = 0.25

# Position-specific cleavage scores. Rows follow CANONICAL_AMINO_ACIDS,
# columns follow LOG_MODEL_WINDOW. A positive entry favours hydrolysis of the
# bond, a negative entry favours a missed cleavage. Only the P1 entries of
# K and R are ever read in the P1 column.
LOG_MODEL_SCORES = np.array([
    #  P3     P2     P1     P1'    P2'    P3'
    [-0.20, -0.10,  0.00, -0.10, -0.10, -0.10],  # A
    [ 0.10, -0.10,  0.00, -0.10, -0.10, -0.10],  # C
    [-0.10,  0.10,  0.00, -0.10,  0.00, -0.10],  # D
    [ 0.10, -0.20,  0.00, -0.10,  0.00, -0.20],  # E
    [-0.20, -0.10,  0.00,  0.10,  0.00,  0.10],  # F
    [ 0.00,  0.10,  0.00, -0.10,  0.10,  0.00],  # G
    [-0.20,  0.00,  0.00, -0.10, -0.10, -0.10],  # H
    [-0.10, -0.10,  0.00,  0.00,  0.00,  0.10],  # I
    [ 0.00,  0.10,  0.05, -0.10, -0.10,  0.10],  # K
    [ 0.00,  0.00,  0.00,  0.00,  0.00,  0.00],  # L
    [ 0.00, -0.10,  0.00,  0.00,  0.00,  0.00],  # M
    [ 0.10, -0.10,  0.00,  0.00, -0.10,  0.10],  # N
    [ 0.00,  0.00,  0.00,  0.50,  0.10,  0.00],  # P
    [-0.10,  0.10,  0.00, -0.20, -0.10,  0.10],  # Q
    [ 0.00,  0.00, -0.05,  0.00, -0.10,  0.00],  # R
    [ 0.00,  0.00,  0.00,  0.10,  0.00, -0.10],  # S
    [ 0.20, -0.10,  0.00, -0.10, -0.10,  0.00],  # T
    [ 0.00,  0.00,  0.00,  0.10, -0.10, -0.20],  # V
    [-0.10,  0.00,  0.00, -0.10,  0.10,  0.00],  # W
    [ 0.00,  0.00,  0.00, -0.20,  0.00, -0.10],  # Y
])
LOG_MODEL_SCORES.setflags(write=False)

# Row index of each canonical code in LOG_MODEL_SCORES. Any other code maps to
# the extra all-zero row appended in the scorer.
LOG_MODEL_ROW = {aa: i for i, aa in enumerate(CANONICAL_AMINO_ACIDS)}
