"""LaTeX package.

Reading citation keys from LaTeX build artifacts.
"""

from .aux import AuxParseError, CiteKeyIter, aux_path_for, collect_dblp_keys

__all__ = [
    "AuxParseError",
    "CiteKeyIter",
    "aux_path_for",
    "collect_dblp_keys",
]
