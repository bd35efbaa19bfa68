import io
import xml.etree.ElementTree as ET

import pytest

from yml_generator.exceptions import WriterError
from yml_generator.writer import StreamWriter

DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>\n"


class BrokenStream(io.BytesIO):
    def write(self, data):
        raise OSError("disk is full")


@pytest.fixture
def stream():
    return io.BytesIO()


@pytest.fixture
def writer(stream):
    writer = StreamWriter(stream)
    writer.start_document("1.0", "UTF-8")
    return writer


def _output(stream) -> str:
    return stream.getvalue().decode("utf-8")


def test_compact_document(writer, stream):
    writer.start_element("a")
    writer.write_attribute("x", 1)
    writer.write_element("b", "text")
    writer.end_document()

    assert _output(stream) == DECLARATION + '<a x="1"><b>text</b></a>'


def test_empty_element_is_self_closing(writer, stream):
    writer.start_element("a")
    writer.start_element("c")
    writer.write_attribute("id", "RUR")
    writer.end_element()
    writer.end_element()
    writer.end_document()

    assert _output(stream) == DECLARATION + '<a><c id="RUR"/></a>'


def test_full_end_element(writer, stream):
    writer.start_element("a")
    writer.start_element("offers")
    writer.end_element(full=True)
    writer.end_document()

    assert _output(stream) == DECLARATION + "<a><offers></offers></a>"


def test_indentation(stream):
    writer = StreamWriter(stream, indent_string="  ")
    writer.start_document()
    writer.start_element("a")
    writer.start_element("b")
    writer.write_element("c", "x")
    writer.end_element()
    writer.end_document()

    assert _output(stream) == (
        DECLARATION + "<a>\n" "  <b>\n" "    <c>x</c>\n" "  </b>\n" "</a>"
    )


def test_text_and_attributes_are_escaped(writer, stream):
    writer.start_element("a")
    writer.write_attribute("title", 'say "hi" & <go>')
    writer.write_text("a < b & c")
    writer.end_document()

    output = _output(stream)
    assert "a &lt; b &amp; c" in output
    assert "&quot;hi&quot;" in output

    element = ET.fromstring(output)
    assert element.get("title") == 'say "hi" & <go>'
    assert element.text == "a < b & c"


def test_attribute_after_text(writer):
    writer.start_element("a")
    writer.write_text("x")

    with pytest.raises(WriterError):
        writer.write_attribute("id", "1")


def test_attribute_after_child(writer):
    writer.start_element("a")
    writer.start_element("b")
    writer.end_element()

    with pytest.raises(WriterError):
        writer.write_attribute("id", "1")


def test_nesting_errors(writer):
    with pytest.raises(WriterError):
        writer.end_element()

    with pytest.raises(WriterError):
        writer.write_text("x")

    writer.start_element("a")
    writer.end_element()

    with pytest.raises(WriterError):
        writer.start_element("b")


def test_write_after_end_document(writer):
    writer.start_element("a")
    writer.end_document()

    with pytest.raises(WriterError):
        writer.start_element("b")


def test_end_document_without_start(stream):
    with pytest.raises(WriterError):
        StreamWriter(stream).end_document()


@pytest.mark.parametrize("name", ["sale price", "", "1st", "a<b"])
def test_invalid_element_name(writer, name):
    writer.start_element("a")

    with pytest.raises(WriterError):
        writer.write_element(name, "x")


def test_invalid_element_name_with_children(writer):
    writer.start_element("bad name")

    with pytest.raises(WriterError):
        writer.start_element("child")


@pytest.mark.parametrize("text", ["bad\x0bchar", "null\x00byte", "lone \ud800 surrogate"])
def test_invalid_text(writer, text):
    writer.start_element("a")

    with pytest.raises(WriterError):
        writer.write_element("b", text)


def test_invalid_attribute_value(writer):
    writer.start_element("a")
    writer.write_attribute("id", "bad\x01id")

    with pytest.raises(WriterError):
        writer.end_element()


def test_broken_stream():
    writer = StreamWriter(BrokenStream())

    with pytest.raises(WriterError):
        writer.start_document()
        writer.start_element("a")
        writer.write_text("x" * 100000)
        writer.end_document()
