import contextlib
import typing

from lxml import etree

from yml_generator.exceptions import WriterError


class _Frame:
    """Element on the writer's stack, `context` is set once its start tag is out"""

    __slots__ = ("name", "attrib", "text", "context", "has_children")

    def __init__(self, name: str):
        self.name = name
        self.attrib: typing.Dict[str, str] = {}
        self.text: typing.List[str] = []
        self.context = None
        self.has_children = False


@contextlib.contextmanager
def _lxml_errors():
    try:
        yield
    except (etree.LxmlError, ValueError, TypeError, OSError) as exc:
        raise WriterError(f"Can't write XML: {exc}") from exc


class StreamWriter:
    """
    Sequential XML writer on top of `lxml.etree.xmlfile`.

    Calls must form a proper start/end sequence, attributes are
    allowed only right after `start_element`. An element is kept
    until its first child or its end, so leaf elements are serialized
    by lxml as a whole (names, attributes and text are checked there).
    With `indent_string` every element starts on its own line.
    """

    def __init__(self, stream: typing.BinaryIO, indent_string: str = ""):
        """
        Initializes `self`
        :param stream: An open binary stream
        :param indent_string: One indentation level, empty for compact output
        """
        self._stream = stream
        self._indent_string = indent_string or ""
        self._stack: typing.List[_Frame] = []
        self._file = None
        self._xf = None
        self._has_root = False
        self._finished = False

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _check_writable(self):
        if self._xf is None:
            raise WriterError("Document is not started.")
        if self._finished:
            raise WriterError("Document is already finished.")

    def _newline(self, level: int):
        if self._indent_string:
            self._xf.write("\n" + self._indent_string * level)

    def _open(self, frame: _Frame):
        """Writes start tag of kept element"""
        # lxml checks the name & attributes here
        element = etree.Element(frame.name, frame.attrib)
        frame.context = self._xf.element(element.tag, dict(element.attrib))
        frame.context.__enter__()

        if frame.text:
            self._xf.write("".join(frame.text))

    def start_document(self, version: str = "1.0", encoding: str = "UTF-8"):
        if self._xf is not None:
            raise WriterError("Document is already started.")

        with _lxml_errors():
            self._file = etree.xmlfile(self._stream, encoding=encoding)
            self._xf = self._file.__enter__()
            self._xf.write_declaration(version=version)

    def start_element(self, name: str):
        self._check_writable()

        with _lxml_errors():
            if self._stack:
                parent = self._stack[-1]
                if parent.context is None:
                    self._open(parent)
                parent.has_children = True
                self._newline(len(self._stack))
            elif self._has_root:
                raise WriterError("Document can have only one root element.")
            else:
                self._has_root = True

        self._stack.append(_Frame(name))

    def write_attribute(self, name: str, value):
        self._check_writable()

        frame = self._stack[-1] if self._stack else None
        if frame is None or frame.context is not None or frame.text:
            raise WriterError(f"Attribute {name!r} is outside of a start tag.")

        frame.attrib[name] = str(value)

    def write_text(self, text):
        self._check_writable()

        if not self._stack:
            raise WriterError("Text is outside of any element.")

        frame = self._stack[-1]
        if frame.context is None:
            frame.text.append(str(text))
        else:
            with _lxml_errors():
                self._xf.write(str(text))

    def end_element(self, full: bool = False):
        """
        Closes the innermost open element
        :param full: Write `</name>` even for an empty element instead of `<name/>`
        """
        self._check_writable()

        if not self._stack:
            raise WriterError("There is no open element to close.")

        frame = self._stack.pop()

        with _lxml_errors():
            if frame.context is None:
                element = etree.Element(frame.name, frame.attrib)
                if frame.text or full:
                    # Empty text keeps the end tag
                    element.text = "".join(frame.text)
                self._xf.write(element)
                return

            if frame.has_children:
                self._newline(len(self._stack))
            frame.context.__exit__(None, None, None)

    def write_element(self, name: str, value):
        self.start_element(name)
        self.write_text(value)
        self.end_element(full=True)

    def end_document(self):
        """Closes all open elements & flushes the stream"""
        self._check_writable()

        while self._stack:
            self.end_element()

        with _lxml_errors():
            self._file.__exit__(None, None, None)
            self._finished = True
            self._stream.flush()
