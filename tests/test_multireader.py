import io

import pytest

from crawltools.multireader import MultipleReader


def test_reader_returns_data_repeatedly():
    expected = "0987dcba"
    mr = MultipleReader(io.StringIO(expected))
    assert mr.reader().read().decode() == expected
    assert mr.reader().read().decode() == expected


def test_reader_from_binary_stream():
    mr = MultipleReader(io.BytesIO(b"\x00\x01abc"))
    first = mr.reader()
    assert first.read() == b"\x00\x01abc"
    assert first.read() == b""
    assert mr.reader().read() == b"\x00\x01abc"


def test_none_source_gives_empty_data():
    mr = MultipleReader(None)
    assert mr.data == b""
    assert mr.reader().read() == b""


def test_failing_source_raises():
    class Broken:
        def read(self):
            raise OSError("boom")

    with pytest.raises(OSError, match="multiple reader: couldn't create a new one: boom"):
        MultipleReader(Broken())