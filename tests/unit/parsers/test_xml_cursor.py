"""Tests for the streaming XML cursor."""

from __future__ import annotations

import pytest

from gdtfkit.core.errors import MalformedXmlError, TextEncodingError
from gdtfkit.core.parsers.xml import XmlCursor


class TestChildren:
    """Tests for XmlCursor.children."""

    def test_yields_direct_children_only(self) -> None:
        cursor = XmlCursor("<root><a><nested/></a><b/><c>text</c></root>")
        root = cursor.root()
        assert [child.tag for child in cursor.children(root)] == ["a", "b", "c"]
        assert cursor.last_closed is root

    def test_attributes_available_at_start(self) -> None:
        cursor = XmlCursor('<root><item Name="One" Value="1"/></root>', chunk_size=3)
        root = cursor.root()
        attrs = [dict(child.attrib) for child in cursor.children(root)]
        assert attrs == [{"Name": "One", "Value": "1"}]

    def test_self_closing_parent_has_no_children(self) -> None:
        cursor = XmlCursor("<root><empty/><after/></root>")
        root = cursor.root()
        tags = []
        for child in cursor.children(root):
            tags.append(child.tag)
            if child.tag == "empty":
                assert list(cursor.children(child)) == []
                assert cursor.last_closed is child
        assert tags == ["empty", "after"]

    def test_unconsumed_deep_subtree_is_skipped(self) -> None:
        xml = "<root><skip><x><y><z/></y></x><x/></skip><keep/></root>"
        cursor = XmlCursor(xml, chunk_size=4)
        root = cursor.root()
        assert [child.tag for child in cursor.children(root)] == ["skip", "keep"]

    def test_partially_consumed_child_is_finished(self) -> None:
        cursor = XmlCursor("<root><a><b/><c/></a><d/></root>")
        root = cursor.root()
        seen = []
        for child in cursor.children(root):
            seen.append(child.tag)
            if child.tag == "a":
                # Read only the first grandchild, leave the rest to the cursor
                event = cursor.next_event()
                assert event is not None and event[1].tag == "b"
        assert seen == ["a", "d"]

    def test_same_tag_nesting_is_tracked_by_identity(self) -> None:
        cursor = XmlCursor("<root><n><n><n/></n></n><n/></root>")
        root = cursor.root()
        assert len(list(cursor.children(root))) == 2


class TestSkip:
    """Tests for XmlCursor.skip."""

    def test_skip_positions_after_end_tag(self) -> None:
        cursor = XmlCursor("<root><a><b/></a><c/></root>")
        root = cursor.root()
        first = cursor.next_event()
        assert first is not None
        cursor.skip(first[1])
        assert cursor.last_closed is first[1]
        kind, element = cursor.next_event()
        assert (kind, element.tag) == ("start", "c")
        assert root.tag == "root"

    def test_skip_of_closed_element_is_a_no_op(self) -> None:
        cursor = XmlCursor("<root><a/><b/></root>")
        root = cursor.root()
        children = cursor.children(root)
        a = next(children)
        cursor.skip(a)
        cursor.skip(a)
        assert next(children).tag == "b"


class TestMalformedInput:
    """Malformed markup surfaces as MalformedXmlError."""

    def test_truncated_document(self) -> None:
        cursor = XmlCursor("<root><a><b/>")
        root = cursor.root()
        with pytest.raises(MalformedXmlError):
            list(cursor.children(root))

    def test_mismatched_tags(self) -> None:
        cursor = XmlCursor("<root><a></b></root>")
        with pytest.raises(MalformedXmlError):
            root = cursor.root()
            list(cursor.children(root))

    def test_empty_document(self) -> None:
        with pytest.raises(MalformedXmlError):
            XmlCursor("").root()

    def test_trailing_garbage_is_reported(self) -> None:
        cursor = XmlCursor("<root/><second/>")
        with pytest.raises(MalformedXmlError):
            root = cursor.root()
            list(cursor.children(root))
            cursor.close()

    def test_invalid_chunk_size(self) -> None:
        with pytest.raises(ValueError):
            XmlCursor("<root/>", chunk_size=0)


def test_accepts_bytes_with_declaration() -> None:
    cursor = XmlCursor('<?xml version="1.0" encoding="UTF-8"?>\n<root Name="Grün"/>'.encode())
    root = cursor.root()
    assert root.attrib["Name"] == "Grün"
    assert list(cursor.children(root)) == []
    cursor.close()


class TestEncoding:
    """Input is checked as UTF-8 chunk by chunk."""

    @pytest.mark.parametrize("chunk_size", [1, 2, 3])
    def test_multibyte_character_split_across_chunks(self, chunk_size: int) -> None:
        cursor = XmlCursor('<root Name="Grün €"/>'.encode(), chunk_size=chunk_size)
        root = cursor.root()
        assert root.attrib["Name"] == "Grün €"

    @pytest.mark.parametrize("chunk_size", [1, 7, 64])
    def test_truncated_character_at_end_of_input(self, chunk_size: int) -> None:
        cursor = XmlCursor(b"<root>\xc3", chunk_size=chunk_size)
        with pytest.raises(TextEncodingError) as exc_info:
            cursor.root()
            cursor.close()
        assert exc_info.value.position == 6

    def test_invalid_byte_is_reported_before_later_markup(self) -> None:
        cursor = XmlCursor(b"<root><a>\xff</a><b></root>", chunk_size=4)
        root = cursor.root()
        with pytest.raises(TextEncodingError) as exc_info:
            list(cursor.children(root))
        assert exc_info.value.position == 9

    def test_unencodable_text(self) -> None:
        with pytest.raises(TextEncodingError) as exc_info:
            XmlCursor('<root Name="\udcff"/>')
        assert exc_info.value.position == 12
