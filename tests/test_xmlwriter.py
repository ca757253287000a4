import io
import xml.etree.ElementTree as ET

import pytest

from embedkit.xmlwriter import XMLWriter


def make():
    buf = io.StringIO()
    return XMLWriter(buf), buf


def test_header_line():
    w, buf = make()
    w.header()
    assert buf.getvalue() == '<?xml version="1.0" encoding="UTF-8"?>' + w.newline


def test_nested_document_round_trip():
    w, buf = make()
    w.header()
    w.tag_open("root")
    w.tag_open("item", "first")
    w.write_node("label", "hello")
    w.write_node("count", 42)
    w.write_node("flag", True)
    w.tag_close()
    w.tag_close()
    root = ET.fromstring(buf.getvalue().encode())
    assert root.tag == "root"
    item = root.find("item")
    assert item.get("name") == "first"
    assert item.find("label").text == "hello"
    assert int(item.find("count").text) == 42
    assert item.find("flag").text == "true"


def test_escape_round_trip():
    w, buf = make()
    text = "a<b & \"c\" 'd'>"
    w.write_node("t", text)
    assert ET.fromstring(buf.getvalue()).text == text
    assert "&lt;" in buf.getvalue()
    assert "&amp;" in buf.getvalue()


def test_field_escape_round_trip():
    w, buf = make()
    w.tag_start("e")
    w.tag_field("v", "x<y")
    w.tag_end()
    assert ET.fromstring(buf.getvalue()).get("v") == "x<y"


@pytest.mark.parametrize("value, base", [(255, 16), (5, 2), (100, 8), (-37, 10)])
def test_integer_bases_round_trip(value, base):
    w, buf = make()
    w.write_node("n", value, base=base)
    assert int(ET.fromstring(buf.getvalue()).text, base) == value


def test_float_decimals():
    w, buf = make()
    w.write_node("f", 3.14159, decimals=3)
    text = ET.fromstring(buf.getvalue()).text
    assert len(text.split(".")[1]) == 3
    assert float(text) == pytest.approx(3.14159, abs=5e-4)


def test_float_field_and_bool_field():
    w, buf = make()
    w.tag_start("e")
    w.tag_field("x", -2.5, decimals=1)
    w.tag_field("ok", False)
    w.tag_end()
    el = ET.fromstring(buf.getvalue())
    assert float(el.get("x")) == -2.5
    assert el.get("ok") == "false"


def test_indentation_follows_nesting():
    w, buf = make()
    w.set_indent_size(4)
    w.tag_open("a")
    w.tag_open("b")
    w.tag_close()
    w.tag_close()
    lines = buf.getvalue().split(w.newline)
    assert lines[1].startswith(" " * 4 + "<b")
    assert lines[2].startswith(" " * 4 + "</b")
    assert lines[3].startswith("</a")


def test_comment_contains_text():
    w, buf = make()
    w.comment("note")
    out = buf.getvalue()
    assert "<!-- note -->" in out


def test_close_without_open_raises():
    w, _ = make()
    with pytest.raises(IndexError):
        w.tag_close()


def test_depth_limit():
    w, _ = make()
    for i in range(w.max_level):
        w.tag_open(f"t{i}")
    with pytest.raises(OverflowError):
        w.tag_open("deep")


def test_tag_name_limit():
    w, _ = make()
    with pytest.raises(ValueError):
        w.tag_open("x" * (w.max_tag_size + 1))


def test_reset_clears_stack():
    w, _ = make()
    w.tag_open("a")
    w.reset()
    with pytest.raises(IndexError):
        w.tag_close()


def test_raw_and_self_closing():
    w, buf = make()
    w.tag_start("img")
    w.tag_field("src", "pic")
    w.tag_end()
    w.raw("<!-- raw -->")
    first = buf.getvalue().split(w.newline)[0]
    assert ET.fromstring(first).get("src") == "pic"
    assert buf.getvalue().endswith("<!-- raw -->")