from pathlib import Path

from tradeparser.app.extraction import document_reader
from tradeparser.app.extraction.document_reader import read_document, split_lines


class FakePage:
    def __init__(self, text):
        self.text = text

    def extract_text(self):
        return self.text


class FakePdf:
    def __init__(self, texts):
        self.pages = [FakePage(t) for t in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_split_lines_trims_and_drops_blank_lines():
    assert split_lines("  comdirect bank \n\n   \nWertpapierkauf\n") == ["comdirect bank", "Wertpapierkauf"]
    assert split_lines(None) == []
    assert split_lines("") == []


def test_read_document_keeps_page_order(monkeypatch):
    opened = []

    def fake_open(path):
        opened.append(path)
        return FakePdf(["Seite 1\nKurswert", None, "Seite 3"])

    monkeypatch.setattr(document_reader.pdfplumber, "open", fake_open)
    pages = read_document(Path("abrechnung.pdf"))

    assert opened == [Path("abrechnung.pdf")]
    assert pages == [["Seite 1", "Kurswert"], [], ["Seite 3"]]
