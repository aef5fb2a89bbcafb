"""Citation keys from LaTeX `.aux` files.

LaTeX records every `\\cite` of a document in the `.aux` file, either as
`\\citation{k1,k2}` (BibTeX) or `\\abx@aux@cite{<refsection>}{k1,k2}`
(biblatex). Documents using `\\include` get one `.aux` file per included file,
pulled in with `\\@input{<file>.aux}`.

`CiteKeyIter` reads these files lazily. Nested files are tracked with an
explicit stack of open files: an included file is read to the end before the
including file is resumed.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Deque, Iterator, List, Optional, TextIO

from loguru import logger

from dblpbib.config import DBLP_KEY_PREFIX


CITATION_PREFIX = "\\citation{"
BIBLATEX_CITATION_PREFIX = "\\abx@aux@cite{"
INPUT_PREFIX = "\\@input{"


class AuxParseError(ValueError):
    """A citation line in an `.aux` file cannot be parsed."""

    def __init__(self, message: str, *, path: Path, line_no: int):
        super().__init__(f"{path}:{line_no}: {message}")
        self.path = path
        self.line_no = line_no


def aux_path_for(path: str | Path) -> Path:
    """Map `main`, `main.tex` or `main.aux` to `main.aux`."""
    return Path(path).with_suffix(".aux")


class _Scope:
    """One open `.aux` file on the include stack."""

    def __init__(self, path: Path, handle: TextIO):
        self.path = path
        self.handle = handle
        self.line_no = 0

    def readline(self) -> Optional[str]:
        line = self.handle.readline()
        if not line:
            return None
        self.line_no += 1
        return line

    def close(self) -> None:
        self.handle.close()


class CiteKeyIter(Iterator[str]):
    """Single-pass iterator over the raw citation keys of an `.aux` file.

    Args:
        path: The root `.aux` file.
        follow_inputs: Also read files pulled in with `\\@input`. Include
            paths are resolved relative to the directory of the root file.

    Keys are yielded as written, including non-DBLP keys. A missing root file
    raises `OSError` on construction; a missing included file is logged and
    skipped.

    Raises:
        AuxParseError: while iterating, on a citation line without closing
            brace.
    """

    def __init__(self, path: str | Path, follow_inputs: bool = True):
        self.root = Path(path)
        self.base_dir = self.root.parent
        self.follow_inputs = follow_inputs
        self._stack: List[_Scope] = []
        self._pending: Deque[str] = deque()
        self._push(self.root)

    def _push(self, path: Path) -> None:
        handle = path.open("r", encoding="utf-8", errors="replace")
        self._stack.append(_Scope(path, handle))

    def _push_input(self, scope: _Scope, target: str) -> None:
        path = self.base_dir / target
        if not path.suffix:
            path = path.with_suffix(".aux")
        try:
            self._push(path)
        except OSError as e:
            logger.warning(f"{scope.path}:{scope.line_no}: skipping `\\@input{{{target}}}`: {e}")
            return
        logger.debug(f"Following `\\@input` into {path}")

    def __iter__(self) -> "CiteKeyIter":
        return self

    def __next__(self) -> str:
        while not self._pending:
            if not self._stack:
                raise StopIteration
            scope = self._stack[-1]
            line = scope.readline()
            if line is None:
                scope.close()
                self._stack.pop()
                continue
            self._handle_line(scope, line)
        return self._pending.popleft()

    def close(self) -> None:
        """Close every open file; the iterator is exhausted afterwards."""
        while self._stack:
            self._stack.pop().close()
        self._pending.clear()

    def _handle_line(self, scope: _Scope, line: str) -> None:
        if line.startswith(CITATION_PREFIX):
            body = line[len(CITATION_PREFIX) :]
            self._pending.extend(_split_keys(body, scope))
        elif line.startswith(BIBLATEX_CITATION_PREFIX):
            rest = line[len(BIBLATEX_CITATION_PREFIX) :]
            sep = rest.find("}{")
            if sep == -1:
                raise AuxParseError("invalid biblatex citation line", path=scope.path, line_no=scope.line_no)
            self._pending.extend(_split_keys(rest[sep + 2 :], scope))
        elif line.startswith(INPUT_PREFIX) and self.follow_inputs:
            rest = line[len(INPUT_PREFIX) :]
            end = rest.find("}")
            if end == -1:
                raise AuxParseError("invalid \\@input line", path=scope.path, line_no=scope.line_no)
            self._push_input(scope, rest[:end].strip())


def _split_keys(body: str, scope: _Scope) -> List[str]:
    end = body.find("}")
    if end == -1:
        raise AuxParseError("citation line is not terminated", path=scope.path, line_no=scope.line_no)
    return [key.strip() for key in body[:end].split(",") if key.strip()]


def collect_dblp_keys(path: str | Path, follow_inputs: bool = True) -> List[str]:
    """Return the sorted, deduplicated DBLP keys cited by a LaTeX document.

    `path` may point to the `.tex` file, the `.aux` file or the bare job name.
    """
    keys = CiteKeyIter(aux_path_for(path), follow_inputs=follow_inputs)
    try:
        dblp_keys = {key for key in keys if key.startswith(DBLP_KEY_PREFIX)}
    finally:
        keys.close()
    logger.info(f"Found {len(dblp_keys)} distinct DBLP keys in {path}")
    return sorted(dblp_keys)
