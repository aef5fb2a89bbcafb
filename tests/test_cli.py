"""Tests for the dblpbib command line."""

import sys

import pytest
from loguru import logger

from dblpbib import cli


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def use_fake(monkeypatch):
    def _use(fake):
        monkeypatch.setattr(cli, "DblpClient", lambda server: fake.client())
        return fake

    return _use


@pytest.mark.unit
def test_get_prints_entry(use_fake, fake_dblp, capsys):
    use_fake(fake_dblp)

    assert cli.main(["get", "DBLP:conf/cpaior/JabsBJ24"]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert out.startswith("@inproceedings{DBLP:conf/cpaior/JabsBJ24,\n")
    assert "  editor       = {Dilkina, Bistra},\n" in out
    assert "crossref" not in out


@pytest.mark.unit
def test_get_crossref_style_prints_target(use_fake, fake_dblp, capsys):
    use_fake(fake_dblp)

    assert cli.main(["get", "--crossref", "conf/cpaior/JabsBJ24"]) == cli.EXIT_OK

    out = capsys.readouterr().out
    entries = out.strip().split("\n\n")
    assert entries[0].startswith("@inproceedings{DBLP:conf/cpaior/JabsBJ24,")
    assert "  crossref     = {DBLP:conf/cpaior/2024-2}," in entries[0]
    assert entries[1].startswith("@proceedings{DBLP:conf/cpaior/2024-2,")


@pytest.mark.unit
def test_get_unknown_key(use_fake, fake_dblp, capsys):
    use_fake(fake_dblp)

    assert cli.main(["get", "DBLP:conf/nope/X"]) == cli.EXIT_UNKNOWN_KEYS

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "conf/nope/X" in captured.err


@pytest.mark.unit
def test_get_all_reports_unknown_after_output(use_fake, fake_dblp, capsys, tmp_path):
    use_fake(fake_dblp)
    (tmp_path / "paper.aux").write_text(
        "\\citation{DBLP:journals/jair/JabsBNJ24,knuth84}\n\\citation{DBLP:conf/nope/X}\n",
        encoding="utf-8",
    )

    code = cli.main(["get-all", str(tmp_path / "paper.tex"), "--dont-expand-journals", "--no-trailing-comma"])

    captured = capsys.readouterr()
    assert code == cli.EXIT_UNKNOWN_KEYS
    assert "@article{DBLP:journals/jair/JabsBNJ24," in captured.out
    assert "  journal      = {J. Artif. Intell. Res.}," in captured.out
    assert "  doi          = {10.1613/jair.1.15333}\n}" in captured.out
    assert "  - conf/nope/X" in captured.err
    assert "knuth84" not in captured.err


@pytest.mark.unit
def test_get_all_crossref_style(use_fake, fake_dblp, capsys, tmp_path):
    use_fake(fake_dblp)
    (tmp_path / "paper.aux").write_text(
        "\\citation{DBLP:series/faia/0001LM21,DBLP:conf/cpaior/JabsBJ24}\n",
        encoding="utf-8",
    )

    assert cli.main(["get-all", str(tmp_path / "paper.aux"), "--crossref", "-j", "2"]) == cli.EXIT_OK

    headers = [line for line in capsys.readouterr().out.splitlines() if line.startswith("@")]
    assert headers == [
        "@inproceedings{DBLP:conf/cpaior/JabsBJ24,",
        "@incollection{DBLP:series/faia/0001LM21,",
        "@proceedings{DBLP:conf/cpaior/2024-2,",
        "@book{DBLP:series/faia/336,",
    ]


@pytest.mark.unit
def test_get_all_missing_aux_is_fatal(use_fake, fake_dblp, tmp_path):
    use_fake(fake_dblp)

    assert cli.main(["get-all", str(tmp_path / "missing.tex")]) == cli.EXIT_FATAL


@pytest.mark.unit
def test_transport_error_is_fatal(use_fake, make_fake_dblp, capsys):
    use_fake(make_fake_dblp(errors={"/rec/conf/cpaior/2024-2.xml": 502}))

    assert cli.main(["get", "conf/cpaior/2024-2"]) == cli.EXIT_FATAL
    assert "502" in capsys.readouterr().err


@pytest.mark.unit
def test_invalid_concurrency(tmp_path):
    assert cli.main(["get-all", str(tmp_path / "paper.tex"), "-j", "0"]) == cli.EXIT_FATAL


@pytest.mark.unit
def test_fixup_options_from_flags():
    args = cli.build_parser().parse_args(["get", "k", "--unicode", "--all-externals", "--escape-quotes"])
    options = cli.fixup_options(args)

    assert options.unicode
    assert options.all_externals
    assert options.escape_quotes
    assert options.expand_journals
    assert not options.crossref
