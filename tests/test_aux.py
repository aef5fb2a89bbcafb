"""Tests for citation key extraction from LaTeX .aux files."""

import pytest

from dblpbib.latex.aux import AuxParseError, CiteKeyIter, aux_path_for, collect_dblp_keys


@pytest.fixture
def document(tmp_path):
    (tmp_path / "main.aux").write_text(
        "\\relax\n"
        "\\citation{DBLP:a,DBLP:b}\n"
        "\\@input{sub.aux}\n"
        "\\bibdata{refs}\n",
        encoding="utf-8",
    )
    (tmp_path / "sub.aux").write_text("\\citation{DBLP:c}\n", encoding="utf-8")
    return tmp_path / "main.aux"


@pytest.mark.unit
def test_follows_inputs_depth_first(document):
    assert list(CiteKeyIter(document)) == ["DBLP:a", "DBLP:b", "DBLP:c"]


@pytest.mark.unit
def test_inputs_can_be_ignored(document):
    assert list(CiteKeyIter(document, follow_inputs=False)) == ["DBLP:a", "DBLP:b"]


@pytest.mark.unit
def test_inner_file_is_read_before_outer_continues(tmp_path):
    (tmp_path / "main.aux").write_text(
        "\\citation{one}\n\\@input{chapters/intro}\n\\citation{three}\n",
        encoding="utf-8",
    )
    (tmp_path / "chapters").mkdir()
    (tmp_path / "chapters" / "intro.aux").write_text("\\citation{two}\n", encoding="utf-8")

    assert list(CiteKeyIter(tmp_path / "main.aux")) == ["one", "two", "three"]


@pytest.mark.unit
def test_biblatex_citations(tmp_path):
    path = tmp_path / "main.aux"
    path.write_text("\\abx@aux@cite{0}{DBLP:x, DBLP:y}\n\\abx@aux@segm{0}{0}{DBLP:x}\n", encoding="utf-8")

    assert list(CiteKeyIter(path)) == ["DBLP:x", "DBLP:y"]


@pytest.mark.unit
def test_missing_input_is_skipped(tmp_path):
    path = tmp_path / "main.aux"
    path.write_text("\\@input{missing.aux}\n\\citation{DBLP:a}\n", encoding="utf-8")

    assert list(CiteKeyIter(path)) == ["DBLP:a"]


@pytest.mark.unit
def test_missing_root_file_raises(tmp_path):
    with pytest.raises(OSError):
        CiteKeyIter(tmp_path / "nothing.aux")


@pytest.mark.unit
def test_unterminated_citation_is_fatal(tmp_path):
    path = tmp_path / "main.aux"
    path.write_text("\\citation{DBLP:a}\n\\citation{DBLP:b,DBLP:c\n", encoding="utf-8")

    keys = CiteKeyIter(path)
    assert next(keys) == "DBLP:a"
    with pytest.raises(AuxParseError) as exc_info:
        next(keys)
    assert exc_info.value.line_no == 2
    assert exc_info.value.path == path
    keys.close()


@pytest.mark.unit
def test_aux_path_for():
    assert aux_path_for("paper.tex").name == "paper.aux"
    assert aux_path_for("paper").name == "paper.aux"
    assert aux_path_for("paper.aux").name == "paper.aux"


@pytest.mark.unit
def test_collect_dblp_keys_filters_sorts_and_dedups(tmp_path):
    (tmp_path / "paper.aux").write_text(
        "\\citation{DBLP:journals/b,knuth84}\n\\citation{DBLP:conf/a,DBLP:journals/b}\n",
        encoding="utf-8",
    )

    assert collect_dblp_keys(tmp_path / "paper.tex") == ["DBLP:conf/a", "DBLP:journals/b"]
