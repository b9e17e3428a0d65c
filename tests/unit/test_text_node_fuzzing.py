"""Property-based tests for text node construction and finalization.

Test Coverage:
- Property: any non-empty text becomes a single unmarked text leaf
- Property: empty text is always rejected, whatever the marks
- Property: bare tags are accepted iff they are known mark kinds
- Property: structured marks with string types are always accepted
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adf_builder import InvalidMarkError, Mark, MissingRequiredFieldError, TextNode
from adf_builder.constants import KNOWN_MARK_TYPES

known_tags = st.sampled_from(sorted(KNOWN_MARK_TYPES))
mark_inputs = st.one_of(known_tags, st.text(), st.integers(), st.none())


@pytest.mark.unit
@pytest.mark.fuzzing
class TestTextNodeProperties:
    """Property-based tests for TextNode using Hypothesis."""

    @given(st.text(min_size=1))
    def test_non_empty_text_yields_single_leaf(self, text: str) -> None:
        """Property: a non-empty string becomes one text node without marks."""
        paragraph = TextNode(text).paragraph()
        assert paragraph.to_dict()["content"] == [{"type": "text", "text": text}]

    @given(st.lists(mark_inputs, max_size=5))
    def test_empty_text_always_rejected(self, marks: list) -> None:
        """Property: empty text fails at construction regardless of marks."""
        with pytest.raises(MissingRequiredFieldError):
            TextNode("", *marks)

    @given(st.text())
    def test_bare_tag_accepted_iff_known(self, tag: str) -> None:
        """Property: a bare tag is accepted exactly when it is a known mark kind."""
        node = TextNode("x", tag)
        if tag in KNOWN_MARK_TYPES:
            assert node.paragraph().content[0].marks == [Mark(type=tag)]
        else:
            with pytest.raises(InvalidMarkError):
                node.paragraph()

    @given(st.text(), st.dictionaries(st.text(), st.integers(), max_size=3))
    def test_structured_string_type_always_accepted(self, mark_type: str, attrs: dict) -> None:
        """Property: structured marks with a string type always pass through."""
        paragraph = TextNode("x", {"type": mark_type, "attrs": attrs}).paragraph()
        assert paragraph.content[0].marks == [Mark(type=mark_type, attrs=attrs)]

    @given(st.one_of(st.integers(), st.floats(allow_nan=False), st.booleans(), st.none()))
    def test_structured_non_string_type_always_rejected(self, mark_type) -> None:
        """Property: structured marks with a non-string type always fail."""
        node = TextNode("x", {"type": mark_type})
        with pytest.raises(InvalidMarkError):
            node.paragraph()
