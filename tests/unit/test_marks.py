#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for mark inputs, links and mark validation."""
import pytest

from adf_builder import InvalidMarkError, Link, Mark, MarkTag, MarkType, TextNode
from adf_builder.ast.marks import classify_mark, validate_mark, validate_marks
from adf_builder.constants import KNOWN_MARK_TYPES


@pytest.mark.unit
class TestClassifyMark:
    """Test classification of raw mark inputs."""

    def test_string_is_tag(self) -> None:
        """Test that a bare string is classified as tag shorthand."""
        assert classify_mark("strong") == MarkTag("strong")

    def test_enum_member_is_tag(self) -> None:
        """Test that a MarkType member is classified by its value."""
        assert classify_mark(MarkType.TEXT_COLOR) == MarkTag("textColor")

    def test_mark_instance_passes_through(self) -> None:
        """Test that a Mark instance is returned unchanged."""
        mark = Mark(type="em")
        assert classify_mark(mark) is mark

    def test_mapping_with_type_is_structured(self) -> None:
        """Test that a mapping with a type key becomes a Mark."""
        variant = classify_mark({"type": "textColor", "attrs": {"color": "#ff0000"}})
        assert variant == Mark(type="textColor", attrs={"color": "#ff0000"})

    def test_mapping_without_attrs(self) -> None:
        """Test that a mapping without attrs yields a Mark without attrs."""
        assert classify_mark({"type": "em"}) == Mark(type="em")

    @pytest.mark.parametrize("value", [123, 1.5, None, ["strong"], {"attrs": {}}, object()])
    def test_other_shapes_rejected(self, value) -> None:
        """Test that inputs of any other shape are rejected."""
        with pytest.raises(InvalidMarkError):
            classify_mark(value)


@pytest.mark.unit
class TestValidateMark:
    """Test the asymmetric validation policy."""

    @pytest.mark.parametrize("tag", sorted(KNOWN_MARK_TYPES))
    def test_known_tags_accepted(self, tag: str) -> None:
        """Test that every known tag is accepted as a bare string."""
        assert validate_mark(tag) == Mark(type=tag)

    def test_unknown_tag_rejected(self) -> None:
        """Test that an unknown bare tag is rejected."""
        with pytest.raises(InvalidMarkError) as exc_info:
            validate_mark("bogus")
        assert exc_info.value.mark == "bogus"
        assert "bogus" in str(exc_info.value)

    def test_tags_are_case_sensitive(self) -> None:
        """Test that tag matching is case-sensitive."""
        with pytest.raises(InvalidMarkError):
            validate_mark("Strong")
        with pytest.raises(InvalidMarkError):
            validate_mark("textcolor")

    def test_structured_unknown_type_accepted(self) -> None:
        """Test that structured marks with unknown string types pass through."""
        assert validate_mark({"type": "custom-thing"}) == Mark(type="custom-thing")
        assert validate_mark(Mark(type="custom-thing")) == Mark(type="custom-thing")

    def test_structured_mark_passed_through_as_is(self) -> None:
        """Test that structured mark attrs are kept verbatim."""
        mark = Mark(type="annotation", attrs={"id": "abc", "annotationType": "inlineComment"})
        assert validate_mark(mark) is mark

    def test_structured_non_string_type_rejected(self) -> None:
        """Test that a structured mark with a non-string type is rejected."""
        with pytest.raises(InvalidMarkError) as exc_info:
            validate_mark({"type": 123})
        assert exc_info.value.mark == {"type": 123}

        with pytest.raises(InvalidMarkError):
            validate_mark(Mark(type=123))  # type: ignore[arg-type]

    def test_structured_none_type_rejected(self) -> None:
        """Test that a structured mark with a None type is rejected."""
        with pytest.raises(InvalidMarkError):
            validate_mark({"type": None})


@pytest.mark.unit
class TestValidateMarks:
    """Test validation of mark sequences."""

    def test_empty(self) -> None:
        """Test that no marks validate to an empty list."""
        assert validate_marks([]) == []

    def test_order_preserved(self) -> None:
        """Test that mixed inputs keep their order."""
        link = Link("https://example.com").to_mark()
        marks = validate_marks(["strong", link, {"type": "custom"}, MarkType.EM])

        assert [mark.type for mark in marks] == ["strong", "link", "custom", "em"]
        assert marks[1] is link

    def test_first_invalid_mark_reported(self) -> None:
        """Test that the first rejected input is reported."""
        with pytest.raises(InvalidMarkError) as exc_info:
            validate_marks(["strong", "bogus", 42])
        assert exc_info.value.mark == "bogus"
        assert exc_info.value.parameter_name == "marks"


@pytest.mark.unit
class TestLink:
    """Test Link conversion to marks."""

    def test_href_only(self) -> None:
        """Test that absent optional fields are omitted from attrs."""
        mark = Link("https://example.com").to_mark()
        assert mark.type == "link"
        assert mark.attrs == {"href": "https://example.com"}
        assert mark.to_dict() == {"type": "link", "attrs": {"href": "https://example.com"}}

    def test_all_fields(self) -> None:
        """Test that every supplied field appears with its wire name."""
        mark = Link(
            "https://example.com",
            title="Example",
            collection="docs",
            id="link-1",
            occurrence_key="occ-1",
        ).to_mark()
        assert mark.attrs == {
            "href": "https://example.com",
            "title": "Example",
            "collection": "docs",
            "id": "link-1",
            "occurrenceKey": "occ-1",
        }

    def test_partial_fields(self) -> None:
        """Test that only supplied fields are emitted."""
        mark = Link("https://example.com", id="link-1").to_mark()
        assert mark.attrs == {"href": "https://example.com", "id": "link-1"}

    def test_empty_title_is_kept(self) -> None:
        """Test that an empty string counts as supplied."""
        mark = Link("https://example.com", title="").to_mark()
        assert mark.attrs == {"href": "https://example.com", "title": ""}

    def test_fields_accessible(self) -> None:
        """Test link field access."""
        link = Link("https://example.com", title="Example")
        assert link.href == "https://example.com"
        assert link.title == "Example"
        assert link.collection is None
        assert link.id is None
        assert link.occurrence_key is None

    def test_link_mark_validates(self) -> None:
        """Test that a link mark is accepted by validation."""
        mark = Link("https://example.com").to_mark()
        assert validate_marks([mark]) == [mark]


@pytest.mark.unit
class TestStructuredMarkKeys:
    """Test that structured mappings are passed through with all their keys."""

    def test_extra_keys_kept(self) -> None:
        """Test that keys besides type and attrs survive validation and serialization."""
        mark = validate_mark({"type": "x", "attrs": {"k": 1}, "extra": 2})
        assert mark.extra == {"extra": 2}
        assert mark.to_dict() == {"type": "x", "attrs": {"k": 1}, "extra": 2}

    def test_no_extra_keys(self) -> None:
        """Test that plain mappings carry no extra keys."""
        assert validate_mark({"type": "em"}).extra is None

    def test_extra_keys_in_text_node(self) -> None:
        """Test that extra keys reach the emitted text node."""
        leaf = TextNode("Hello", {"type": "annotation", "annotationType": "inlineComment"}).finalize()
        assert leaf.to_dict()["marks"] == [{"type": "annotation", "annotationType": "inlineComment"}]
