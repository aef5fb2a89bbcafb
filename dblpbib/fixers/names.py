"""Author and editor name reordering.

DBLP lists names as `<first> <middle> <last>`; BibTeX is least ambiguous with
`<last>, <first> <middle>`. Finding where the last name starts has no exact
answer, so it is decided by an ordered list of rules:

1. a token (other than the first) starting with a lowercase letter starts the
   last name (`Maria Garcia de la Banda`);
2. a token (other than the first) that is a known particle starts the last
   name (`Daniel Le Berre`);
3. otherwise the last token alone is the last name.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

DEFAULT_PARTICLES = frozenset({"Le", "La", "Van", "Von"})


def last_name_start(tokens: List[str], particles: Iterable[str] = DEFAULT_PARTICLES) -> int:
    """Return the index of the first last-name token (requires >= 2 tokens)."""
    for idx, token in enumerate(tokens[1:], start=1):
        if token[0].islower():
            return idx

    particle_set = set(particles)
    for idx, token in enumerate(tokens[1:], start=1):
        if token in particle_set:
            return idx

    return len(tokens) - 1


def reorder_name(name: str, particles: Optional[Iterable[str]] = None) -> str:
    """Convert `<first> <middle> <last>` into `<last>, <first> <middle>`.

    Single-word names and names already in `last, first` form are returned
    unchanged.
    """
    if "," in name:
        return name
    tokens = name.split()
    if len(tokens) < 2:
        return name

    start = last_name_start(tokens, DEFAULT_PARTICLES if particles is None else particles)
    return f"{' '.join(tokens[start:])}, {' '.join(tokens[:start])}"
