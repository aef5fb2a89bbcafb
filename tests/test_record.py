"""Tests for DBLP record decoding and assembly."""

import pytest

from dblp_samples import (
    ARTICLE_XML,
    BOOK_XML,
    INCOLLECTION_XML,
    INPROCEEDINGS_XML,
    PROCEEDINGS_XML,
)
from dblpbib.dblp.client import MalformedRecordError, UnknownKeyError
from dblpbib.dblp.record import (
    Article,
    Book,
    CrossrefKey,
    Doi,
    InCollection,
    InProceedings,
    Proceedings,
    ResolvedCrossref,
    Url,
    crossref_key,
    external_from_link,
    fetch_record,
    journal_code,
    parse_record_xml,
)


class TestParseRecordXml:
    """Decoding of the five record variants."""

    @pytest.mark.unit
    def test_article(self):
        rec = parse_record_xml(ARTICLE_XML, key="journals/jair/JabsBNJ24")

        assert isinstance(rec, Article)
        assert rec.author == ["Christoph Jabs", "Jeremias Berg", "Andreas Niskanen", "Matti Järvisalo"]
        assert rec.title == "From Single-Objective to Bi-Objective Maximum Satisfiability Solving."
        assert rec.journal == "J. Artif. Intell. Res."
        assert rec.year == 2024
        assert rec.pages == "1223-1269"
        assert rec.volume == "80"
        assert rec.external == [Doi("10.1613/jair.1.15333")]

    @pytest.mark.unit
    def test_inproceedings(self):
        rec = parse_record_xml(INPROCEEDINGS_XML, key="conf/cpaior/JabsBJ24")

        assert isinstance(rec, InProceedings)
        assert rec.booktitle == "CPAIOR (2)"
        assert rec.crossref == CrossrefKey("conf/cpaior/2024-2")
        assert rec.pages == "1-19"
        assert crossref_key(rec) == "conf/cpaior/2024-2"

    @pytest.mark.unit
    def test_proceedings(self):
        rec = parse_record_xml(PROCEEDINGS_XML, key="conf/cpaior/2024-2")

        assert isinstance(rec, Proceedings)
        assert rec.editor == ["Bistra Dilkina"]
        assert rec.publisher == "Springer"
        assert rec.series == "Lecture Notes in Computer Science"
        assert rec.volume == "14743"
        assert rec.isbn == ["978-3-031-60601-4", "978-3-031-60599-4"]
        assert crossref_key(rec) is None

    @pytest.mark.unit
    def test_incollection(self):
        rec = parse_record_xml(INCOLLECTION_XML, key="series/faia/0001LM21")

        assert isinstance(rec, InCollection)
        assert rec.author == ["João Marques-Silva 0001", "Inês Lynce", "Sharad Malik"]
        assert rec.crossref == CrossrefKey("series/faia/336")

    @pytest.mark.unit
    def test_book(self):
        rec = parse_record_xml(BOOK_XML, key="series/faia/336")

        assert isinstance(rec, Book)
        assert rec.author == []
        assert rec.editor == ["Armin Biere", "Marijn Heule", "Hans van Maaren", "Toby Walsh"]
        assert rec.title == "Handbook of Satisfiability - Second Edition"
        assert rec.series == "Frontiers in Artificial Intelligence and Applications"
        assert rec.isbn == ["978-1-64368-160-3", "978-1-64368-161-0"]

    @pytest.mark.unit
    def test_unsupported_variant(self):
        xml = "<dblp><phdthesis key='phd/x'><title>T</title><year>2020</year></phdthesis></dblp>"
        with pytest.raises(MalformedRecordError, match="phdthesis"):
            parse_record_xml(xml, key="phd/x")

    @pytest.mark.unit
    def test_missing_required_field(self):
        xml = "<dblp><article key='journals/x/A'><title>T</title><year>2020</year></article></dblp>"
        with pytest.raises(MalformedRecordError, match="journal"):
            parse_record_xml(xml, key="journals/x/A")

    @pytest.mark.unit
    def test_invalid_year(self):
        xml = "<dblp><proceedings key='conf/x/1'><title>T</title><year>soon</year></proceedings></dblp>"
        with pytest.raises(MalformedRecordError, match="year"):
            parse_record_xml(xml, key="conf/x/1")

    @pytest.mark.unit
    def test_broken_xml(self):
        with pytest.raises(MalformedRecordError):
            parse_record_xml("<dblp><article>", key="journals/x/A")

    @pytest.mark.unit
    def test_more_than_one_record(self):
        xml = (
            "<dblp><proceedings key='a'><title>A</title><year>1</year></proceedings>"
            "<proceedings key='b'><title>B</title><year>2</year></proceedings></dblp>"
        )
        with pytest.raises(MalformedRecordError, match="exactly one"):
            parse_record_xml(xml, key="a")


@pytest.mark.unit
def test_external_from_link():
    assert external_from_link("https://doi.org/10.1/x") == Doi("10.1/x")
    assert external_from_link("https://example.org/paper.pdf") == Url("https://example.org/paper.pdf")


@pytest.mark.unit
def test_journal_code():
    assert journal_code("DBLP:journals/jair/JabsBNJ24") == "jair"
    with pytest.raises(MalformedRecordError):
        journal_code("journals/jair")


@pytest.mark.unit
def test_crossref_key_rejects_non_records():
    with pytest.raises(TypeError):
        crossref_key("conf/x/1")  # type: ignore[arg-type]


@pytest.mark.unit
def test_resolved_crossref_can_only_be_set_once():
    rec = parse_record_xml(INPROCEEDINGS_XML, key="conf/cpaior/JabsBJ24")
    rec.set_resolved_crossref(ResolvedCrossref(editor=["Bistra Dilkina"]))
    with pytest.raises(ValueError):
        rec.set_resolved_crossref(ResolvedCrossref())


class TestFetchRecord:
    """Assembling records from one or more DBLP requests."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_article_journal_is_expanded(self, fake_dblp):
        rec = await fetch_record(fake_dblp.client(), "DBLP:journals/jair/JabsBNJ24")

        assert rec.journal == "Journal of Artificial Intelligence Research"
        assert fake_dblp.requests == [
            "/rec/journals/jair/JabsBNJ24.xml",
            "/streams/journals/jair.xml",
        ]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_article_journal_expansion_can_be_disabled(self, fake_dblp):
        rec = await fetch_record(fake_dblp.client(), "journals/jair/JabsBNJ24", expand_journal=False)

        assert rec.journal == "J. Artif. Intell. Res."
        assert fake_dblp.requests == ["/rec/journals/jair/JabsBNJ24.xml"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_crossref_is_resolved_inline(self, fake_dblp):
        rec = await fetch_record(fake_dblp.client(), "conf/cpaior/JabsBJ24")

        assert rec.booktitle.startswith("Integration of Constraint Programming")
        assert rec.crossref == ResolvedCrossref(
            editor=["Bistra Dilkina"],
            publisher="Springer",
            series="Lecture Notes in Computer Science",
            volume="14743",
        )
        assert crossref_key(rec) is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_crossref_kept_as_key(self, fake_dblp):
        rec = await fetch_record(fake_dblp.client(), "conf/cpaior/JabsBJ24", resolve_crossref=False)

        assert rec.booktitle == "CPAIOR (2)"
        assert rec.crossref == CrossrefKey("conf/cpaior/2024-2")
        assert fake_dblp.requests == ["/rec/conf/cpaior/JabsBJ24.xml"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_incollection_crossref_to_book(self, fake_dblp):
        rec = await fetch_record(fake_dblp.client(), "series/faia/0001LM21")

        assert rec.booktitle == "Handbook of Satisfiability - Second Edition"
        assert rec.crossref.volume == "336"
        assert rec.crossref.editor == ["Armin Biere", "Marijn Heule", "Hans van Maaren", "Toby Walsh"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_key(self, fake_dblp):
        with pytest.raises(UnknownKeyError) as exc_info:
            await fetch_record(fake_dblp.client(), "DBLP:conf/nope/Missing24")
        assert exc_info.value.key == "conf/nope/Missing24"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_dangling_crossref_is_malformed(self, make_fake_dblp, dblp_documents):
        del dblp_documents["/rec/conf/cpaior/2024-2.xml"]
        fake = make_fake_dblp(dblp_documents)

        with pytest.raises(MalformedRecordError, match="conf/cpaior/2024-2"):
            await fetch_record(fake.client(), "conf/cpaior/JabsBJ24")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_crossref_of_wrong_type_is_malformed(self, make_fake_dblp, dblp_documents):
        dblp_documents["/rec/conf/cpaior/2024-2.xml"] = dblp_documents["/rec/series/faia/336.xml"]
        fake = make_fake_dblp(dblp_documents)

        with pytest.raises(MalformedRecordError, match="expected Proceedings"):
            await fetch_record(fake.client(), "conf/cpaior/JabsBJ24")
