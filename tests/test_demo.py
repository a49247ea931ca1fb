import io

import pytest

from printfmt.demo import main, run_demo
from printfmt.demo_cases import demo_sections
from printfmt.formatter import format_bytes


def _demo_bytes() -> bytes:
    out = io.BytesIO()
    run_demo(out)
    return out.getvalue()


def test_returns_number_of_bytes_written():
    out = io.BytesIO()
    written = run_demo(out)
    assert written == len(out.getvalue())
    assert written > 0


def test_every_section_title_is_shown_in_order():
    data = _demo_bytes()
    positions = [data.index(section.title.encode()) for section in demo_sections()]
    assert positions == sorted(positions)


def test_every_case_output_appears():
    data = _demo_bytes()
    for section in demo_sections():
        for case in section.cases:
            assert format_bytes(case.fmt, *case.args) in data
            assert format_bytes(case.reference_fmt, *case.args) in data


def test_every_description_appears():
    data = _demo_bytes()
    for section in demo_sections():
        for case in section.cases:
            assert case.description.encode("utf-8") + b"\n" in data


def test_pinned_outputs():
    data = _demo_bytes()
    assert b"formatted = \n|Hello World|\n" in data
    assert b"formatted = \n|%|\n" in data
    assert b"formatted = \n|H|\n" in data


def test_output_is_deterministic():
    first = _demo_bytes()
    second = _demo_bytes()
    assert first == second
    assert b"Simple Test" in first
    assert b"formatted = \n|Hello World|\n" in second


def test_text_stream_receives_decoded_output():
    out = io.StringIO()
    written = run_demo(out)
    text = out.getvalue()
    assert text.encode("utf-8") == _demo_bytes()
    assert written == len(text.encode("utf-8"))
    assert "|\u2620|" in text


def test_main_prints_demo(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Simple Test" in captured
    assert "And Finaly" in captured


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])