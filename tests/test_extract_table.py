import json
import logging

import pytest

from cest_extractor.errors import PageFetchError
from cest_extractor.ingestion.extract_table import extract_table, serialize


def test_extract_table_end_to_end(annex_source):
    result = extract_table(annex_source)

    assert [entry.index for entry in result.summary] == ["01", "02"]
    assert [segment.segment for segment in result.segments] == [
        "Autopeças",
        "Bebidas alcoólicas, exceto cervejas e chope",
    ]
    assert result.to_output() == [
        [
            {
                "item": "1.0",
                "cest": "01.001.00",
                "ncms": ["3815.12.10", "3815.12.90"],
                "description": "Catalisadores em colmeia cerâmica",
            },
            {
                "item": "2.0",
                "cest": "01.002.00",
                "ncms": ["Capítulos 84 e 85"],
                "description": "Peças para motores",
            },
        ],
        [
            {
                "item": "1.0",
                "cest": "02.001.00",
                "ncms": ["2205"],
                "description": "Vermute e outros vinhos de uvas frescas",
            }
        ],
    ]


def test_annex_footer_is_left_out_of_segment(annex_source):
    result = extract_table(annex_source)

    autopecas = result.segments[0]
    assert autopecas.rows[-1].description == "Peças para motores"
    assert autopecas.span.end - autopecas.span.start == 19


def test_serialize_strips_lines_consumed(annex_source):
    output = serialize(extract_table(annex_source), indent=2)

    parsed = json.loads(output)
    assert len(parsed) == 2
    assert all("linesConsumed" not in row and "lines_consumed" not in row for rows in parsed for row in rows)
    assert "Peças para motores" in output
    assert output.startswith("[\n  [")


def test_page_selection_always_reads_first_page(annex_pages, make_source, caplog):
    source = make_source(annex_pages)

    with caplog.at_level(logging.WARNING):
        result = extract_table(source, pages=[3])

    assert source.requested[0] == 1
    assert sorted(source.requested) == [1, 3]
    assert [segment.segment for segment in result.segments] == [
        "Bebidas alcoólicas, exceto cervejas e chope"
    ]
    assert "Autopeças" in caplog.text


def test_line_order_does_not_depend_on_fetch_completion(annex_pages, make_source):
    slow_first = make_source(annex_pages, delays={2: 0.05})
    slow_last = make_source(annex_pages, delays={3: 0.05})

    assert extract_table(slow_first, workers=2) == extract_table(slow_last, workers=2)


def test_missing_page_aborts_run(annex_source):
    with pytest.raises(PageFetchError):
        extract_table(annex_source, pages=[2, 7])


def test_document_without_summary_yields_nothing(make_source):
    source = make_source([["capa"], ["DESCRIÇÃO", "", "1.0", "", "01.001.00"]])

    result = extract_table(source)

    assert result.summary == []
    assert result.to_output() == []
