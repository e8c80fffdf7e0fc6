"""
This module provides the amino-acid sequence representation consumed by the
digestion engine: an immutable run of residues, each of which may carry
opaque modification tags that survive slicing.
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Residue:
    """
    A single amino-acid position.

    Attributes:
        code: The one-letter amino-acid code.
        modification: A tag rendered after the code, e.g. "E(Amidated)".
        n_term_modification: A tag rendered before the code, used for an
            N-terminal modification carried by the first residue,
            e.g. "(ICPL:2H(4))A".
    """
    code: str
    modification: Optional[str] = None
    n_term_modification: Optional[str] = None

    def __str__(self) -> str:
        text = self.code
        if self.n_term_modification is not None:
            text = f"({self.n_term_modification}){text}"
        if self.modification is not None:
            text = f"{text}({self.modification})"
        return text


def _read_modification(text: str, start: int) -> tuple[str, int]:
    """
    Reads a parenthesised tag starting at text[start] == "(". Tags may nest
    parentheses, e.g. "(ICPL:2H(4))". Returns the tag and the index just past
    its closing parenthesis.
    """
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                tag = text[start + 1:i]
                if not tag:
                    raise ValueError(f"Empty modification at position {start} of '{text}'.")
                return tag, i + 1
    raise ValueError(f"Unbalanced parenthesis at position {start} of '{text}'.")


def parse_residues(text: str) -> Tuple[Residue, ...]:
    """
    Parses a sequence such as "(ICPL:2H(4))ARCDRE" or "ARCDRE(Amidated)".

    A tag before the first residue becomes that residue's N-terminal tag; a tag
    after a residue becomes its modification. Any upper-case letter is
    accepted as a residue code.

    Raises:
        ValueError: If the text is not a well-formed sequence.
    """
    residues: list[Residue] = []
    n_term_modification = None
    i = 0
    while i < len(text):
        char = text[i]
        if char == "(":
            tag, i = _read_modification(text, i)
            if not residues:
                if n_term_modification is not None:
                    raise ValueError(f"Multiple N-terminal modifications in '{text}'.")
                n_term_modification = tag
            elif residues[-1].modification is not None:
                raise ValueError(
                    f"Residue {len(residues) - 1} of '{text}' has more than one modification."
                )
            else:
                residues[-1] = replace(residues[-1], modification=tag)
            continue
        if char == ")":
            raise ValueError(f"Unbalanced parenthesis at position {i} of '{text}'.")
        if not ("A" <= char <= "Z"):
            raise ValueError(f"Invalid residue '{char}' at position {i} of '{text}'.")
        residues.append(Residue(
            code=char,
            n_term_modification=n_term_modification if not residues else None,
        ))
        i += 1

    if n_term_modification is not None and not residues:
        raise ValueError(f"N-terminal modification without residues in '{text}'.")
    return tuple(residues)


@dataclass(frozen=True)
class AASequence:
    """
    An immutable amino-acid sequence.

    Indexing with an integer returns a Residue, slicing returns a new
    AASequence that keeps the modifications of every residue it contains.
    """
    residues: Tuple[Residue, ...] = ()

    @classmethod
    def from_string(cls, text: str) -> "AASequence":
        return cls(parse_residues(text))

    @property
    def codes(self) -> str:
        """The one-letter codes without any modification."""
        return "".join(residue.code for residue in self.residues)

    def size(self) -> int:
        return len(self.residues)

    def code_at(self, index: int) -> str:
        return self.residues[index].code

    def subsequence(self, start: int, length: int) -> "AASequence":
        return AASequence(self.residues[start:start + length])

    def to_string(self) -> str:
        return "".join(str(residue) for residue in self.residues)

    def __len__(self) -> int:
        return len(self.residues)

    def __getitem__(self, item):
        if isinstance(item, slice):
            if item.step not in (None, 1):
                raise ValueError("Sequence slices must be contiguous.")
            return AASequence(self.residues[item])
        return self.residues[item]

    def __iter__(self):
        return iter(self.residues)

    def __str__(self) -> str:
        return self.to_string()
