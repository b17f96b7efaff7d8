"""Tests for value descriptions."""

from schemadoc.describe import NO_COMMENT, ValueDescriber
from schemadoc.tree import Kind, ValueNode


def _node(**kwargs) -> ValueNode:
    kwargs.setdefault("path", ("#Build", "tag"))
    kwargs.setdefault("kind", Kind.STRING)
    return ValueNode(**kwargs)


class TestFormatValue:
    """Tests for type strings."""

    def test_plain_type(self) -> None:
        assert ValueDescriber().format_value(_node(type_name="string")) == "string"

    def test_default(self) -> None:
        """Test defaults are shown before the type."""
        node = _node(type_name="string", default="latest")

        assert ValueDescriber().format_value(node) == '*"latest" | string'

    def test_enum(self) -> None:
        node = _node(type_name="string", enum=["tcp", "udp"])

        assert ValueDescriber().format_value(node) == '"tcp" | "udp"'

    def test_secret_and_artifact(self) -> None:
        """Test special attributes replace the type."""
        describer = ValueDescriber()

        assert describer.format_value(_node(attrs=frozenset({"secret"}))) == "#Secret"
        assert describer.format_value(_node(attrs=frozenset({"artifact"}))) == "#Artifact"

    def test_newlines_escaped(self) -> None:
        """Test the result stays on one line."""
        node = _node(type_name="string", default="a\nb")

        result = ValueDescriber().format_value(node)

        assert "\n" not in result
        assert result == '*"a\\nb" | string'

    def test_falls_back_to_kind(self) -> None:
        assert ValueDescriber().format_value(_node(kind=Kind.STRUCT)) == "struct"


class TestDocString:
    """Tests for documentation strings."""

    def test_missing_doc_is_sentinel(self) -> None:
        assert ValueDescriber().doc_string(_node()) == NO_COMMENT

    def test_lines_joined(self) -> None:
        """Test comment lines and groups are joined with spaces."""
        node = _node(doc=["  First line\n  second line  ", "Another group"])

        assert ValueDescriber().doc_string(node) == "First line second line Another group"

    def test_maintainer_notes_removed(self) -> None:
        """Test FIXME, TODO and INTERNAL lines are hidden."""
        node = _node(doc=["Visible\nTODO: later\nFIXME: broken\nINTERNAL: detail"])

        assert ValueDescriber().doc_string(node) == "Visible"

    def test_only_notes_is_sentinel(self) -> None:
        node = _node(doc=["TODO: document this"])

        assert ValueDescriber().doc_string(node) == NO_COMMENT


class TestFormatLabel:
    """Tests for short labels."""

    def test_owner_prefix_removed(self) -> None:
        node = _node(path=("#Container", "shell", "path"))

        assert ValueDescriber().format_label("#Container", node) == "shell.path"

    def test_other_owner_keeps_path(self) -> None:
        node = _node(path=("#Container", "dir"))

        assert ValueDescriber().format_label("#File", node) == "#Container.dir"
