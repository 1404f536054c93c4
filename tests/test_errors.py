"""Tests for the void element guard and IllegalContentOperation."""

import unittest

from htmltag import IllegalContentOperation, Tag

CONTENT_MESSAGE = "Void elements cannot have any contents."
CLOSING_TAG_MESSAGE = "Void elements do not have a closing tag."


class TestVoidElementGuard(unittest.TestCase):
    """Every content operation on a void element fails and changes nothing."""

    def assert_rejected(self, operation):
        tag = Tag("img", {"src": "x.png"})
        before = tag.render()
        with self.assertRaises(IllegalContentOperation) as ctx:
            operation(tag)
        assert str(ctx.exception) == CONTENT_MESSAGE
        assert ctx.exception.code == "void-element-content"
        assert ctx.exception.tag_name == "img"
        assert tag.render() == before
        assert tag.is_empty()

    def test_empty(self):
        self.assert_rejected(lambda tag: tag.empty())

    def test_set_text_content(self):
        self.assert_rejected(lambda tag: tag.set_text_content("text_content"))

    def test_set_html_content(self):
        self.assert_rejected(lambda tag: tag.set_html_content("<p>html_content</p>"))

    def test_append_text_content(self):
        self.assert_rejected(lambda tag: tag.append_text_content("this_is_appended_text_content"))

    def test_append_html_content(self):
        self.assert_rejected(lambda tag: tag.append_html_content("<span>this_is_appended_html_content</span>"))

    def test_append(self):
        self.assert_rejected(lambda tag: tag.append(Tag("img")))

    def test_append_checks_void_before_argument_type(self):
        """A void parent reports the void error even for a bad argument."""
        self.assert_rejected(lambda tag: tag.append("<b>not a tag</b>"))

    def test_render_closing_tag(self):
        tag = Tag("img")
        with self.assertRaises(IllegalContentOperation) as ctx:
            tag.render_closing_tag()
        assert str(ctx.exception) == CLOSING_TAG_MESSAGE
        assert ctx.exception.code == "void-element-closing-tag"

    def test_uppercase_void_name_is_guarded(self):
        with self.assertRaises(IllegalContentOperation):
            Tag("BR").set_text_content("x")

    def test_rejection_is_logged_at_debug(self):
        with self.assertLogs("htmltag.tag", level="DEBUG") as logs:
            with self.assertRaises(IllegalContentOperation):
                Tag("hr").empty()
        assert any("<hr>" in line for line in logs.output)

    def test_attribute_operations_never_fail_on_void(self):
        tag = Tag("input")
        tag.set_attribute("Type", "text").set_attributes({"value": 1}).remove_attribute("missing")
        assert tag.has_attribute("type")
        assert tag.get_attribute("VALUE") == "1"
        assert tag.get_attributes() == {"type": "text", "value": "1"}
        assert tag.render_opening_tag() == '<input type="text" value="1">'
        assert tag.render() == '<input type="text" value="1">'


class TestIllegalContentOperation(unittest.TestCase):
    """Test IllegalContentOperation class behavior."""

    def test_is_an_exception(self):
        assert issubclass(IllegalContentOperation, Exception)

    def test_repr(self):
        error = IllegalContentOperation("void-element-content", "br")
        assert "void-element-content" in repr(error)
        assert "tag_name='br'" in repr(error)

    def test_repr_without_tag_name(self):
        error = IllegalContentOperation("void-element-closing-tag")
        assert "tag_name=" not in repr(error)
        assert str(error) == CLOSING_TAG_MESSAGE

    def test_custom_message(self):
        error = IllegalContentOperation("void-element-content", message="No content here")
        assert str(error) == "No content here"
        assert error.message == "No content here"

    def test_unknown_code_falls_back_to_code(self):
        error = IllegalContentOperation("something-else")
        assert str(error) == "something-else"


class TestTypeErrors(unittest.TestCase):
    def test_append_non_tag(self):
        tag = Tag("p")
        with self.assertRaises(TypeError):
            tag.append("<br>")
        assert tag.is_empty()


if __name__ == "__main__":
    unittest.main()
