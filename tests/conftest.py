import threading
import time

import pytest

from cest_extractor.errors import PageFetchError


class FakeTextSource:
    """In-memory stand-in for the PDF text source."""

    def __init__(self, pages, delays=None):
        self.pages = [list(page) for page in pages]
        self.delays = delays or {}
        self.requested = []
        self._lock = threading.Lock()

    def page_count(self):
        return len(self.pages)

    def page_text(self, page_number):
        with self._lock:
            self.requested.append(page_number)
        if not 1 <= page_number <= len(self.pages):
            raise PageFetchError(page_number, "out of range")
        time.sleep(self.delays.get(page_number, 0))
        return list(self.pages[page_number - 1])


SUMMARY_PAGE = [
    "CONVÊNIO ICMS 142/18",
    "ANEXO I",
    "01. Autopeças",
    "02. Bebidas alcoólicas, exceto cervejas e chope",
    "",
]

AUTOPECAS_PAGE = [
    "AUTOPEÇAS",
    "ITEM",
    "CEST",
    "NCM/SH",
    "DESCRIÇÃO",
    "",
    "1.0",
    "",
    "01.001.00",
    "3815.12.10",
    "",
    "3815.12.90",
    "Catalisadores em colmeia",
    "cerâmica",
    "2.0",
    "",
    "01.002.00",
    "Capítulos 84 e 85",
    "",
    "Peças para motores",
    "Convênio ICMS 142/18",
    "Publicado no DOU",
    "Republicado",
    "Anexo II",
]

BEBIDAS_PAGE = [
    "  BEBIDAS ALCOÓLICAS, EXCETO CERVEJAS E CHOPE  ",
    "ITEM",
    "CEST",
    "NCM/SH",
    "DESCRIÇÃO",
    "",
    "",
    "1.0",
    "",
    "02.001.00",
    "2205",
    "",
    "Vermute e outros vinhos",
    "de uvas frescas",
]


@pytest.fixture
def annex_pages():
    return [SUMMARY_PAGE, AUTOPECAS_PAGE, BEBIDAS_PAGE]


@pytest.fixture
def annex_source(annex_pages):
    return FakeTextSource(annex_pages)


@pytest.fixture
def make_source():
    return FakeTextSource


@pytest.fixture
def build_pdf():
    """Render pages of text lines into PDF bytes, one text line per entry."""
    import fitz

    def _build(pages):
        doc = fitz.open()
        for lines in pages:
            page = doc.new_page()
            for offset, line in enumerate(lines):
                page.insert_text((72, 72 + 20 * offset), line, fontsize=11)
        data = doc.tobytes()
        doc.close()
        return data

    return _build
