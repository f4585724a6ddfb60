"""Tests for the streaming JSON reformatter."""

import pytest

from hxprint.services.json_formatter import JsonFormatter, get_json_formatter


def _format(data: bytes) -> bytes:
    return get_json_formatter().format_bytes(data)


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_nested(self) -> None:
        """Test indentation of nested containers."""
        output = _format(b'{"a":1,"b":[true,null]}')
        assert output == b'{\n    "a": 1,\n    "b": [\n        true,\n        null\n    ]\n}'

    def test_empty_containers_stay_inline(self) -> None:
        """Test that empty objects and arrays are not split."""
        assert _format(b'{"a" : { }, "b":[ ]}') == b'{\n    "a": {},\n    "b": []\n}'

    def test_strings_untouched(self) -> None:
        """Test that structural characters inside strings are left alone."""
        output = _format(b'{"k":"a, {b}: [c] \\" d"}')
        assert output == b'{\n    "k": "a, {b}: [c] \\" d"\n}'

    def test_non_ascii_passthrough(self) -> None:
        """Test that UTF-8 text is copied unchanged."""
        output = _format('{"é":"ü €"}'.encode())
        assert output == '{\n    "é": "ü €"\n}'.encode()

    def test_top_level_values_on_separate_lines(self) -> None:
        """Test that a stream of documents is split into lines."""
        assert _format(b"{}{} 1 2") == b"{}\n{}\n1\n2"

    def test_malformed_input_best_effort(self) -> None:
        """Test that truncated JSON is reformatted without errors."""
        assert _format(b'{"a":') == b'{\n    "a": '

    def test_custom_indent(self) -> None:
        """Test a different indent string."""
        assert JsonFormatter(indent="\t").format_bytes(b"[1]") == b"[\n\t1\n]"

    @pytest.mark.parametrize(
        "document",
        [
            b'{"a":1,"b":[true,null,{"c":"x\\\\"}],"d":{}}',
            b'[ "s p a c e s" , -1.5e3 ]',
            b"null",
        ],
    )
    def test_idempotent(self, document: bytes) -> None:
        """Test that already formatted output is left as it is."""
        once = _format(document)
        assert _format(once) == once

    def test_chunking_does_not_matter(self) -> None:
        """Test that output is the same however the input is split."""
        document = b'{"key": "va\\"lue", "list": [1, 2, {"x": []}]}'
        chunks: list[bytes] = []

        get_json_formatter().format_stream(
            (document[i : i + 1] for i in range(len(document))),
            chunks.append,
        )

        assert b"".join(chunks) == _format(document)
