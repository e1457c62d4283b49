from data_designer_deslop.markup import (
    ElementNode,
    TextNode,
    parse_html,
    plain_text,
    replace_in_document,
    replace_in_html,
    sanitize_html,
    serialize_html,
    strip_html,
)


def _tags(node):
    if isinstance(node, TextNode):
        return None
    return (node.tag, tuple(_tags(child) for child in node.children))


DOCUMENT = ElementNode(
    tag="div",
    children=(
        ElementNode(tag="p", children=(TextNode("We delve into it."),)),
        ElementNode(
            tag="pre",
            children=(ElementNode(tag="code", children=(TextNode("delve into"),)),),
        ),
        ElementNode(
            tag="a",
            attributes=(("href", "https://example.com"), ("target", "_blank")),
            children=(TextNode("the realm"),),
        ),
    ),
)


class TestReplaceInDocument:
    def test_rewrites_prose_but_not_verbatim_blocks(self):
        result = replace_in_document(DOCUMENT)
        assert result.children[0].children[0].text == "We explore it."
        assert result.children[1] is DOCUMENT.children[1]
        assert result.children[1].children[0].children[0].text == "delve into"

    def test_shape_and_attributes_are_kept(self):
        result = replace_in_document(DOCUMENT)
        assert _tags(result) == _tags(DOCUMENT)
        assert result.children[2].attributes == DOCUMENT.children[2].attributes
        assert result.children[2].children[0].text == "the area"

    def test_untouched_tree_is_returned_as_is(self):
        tree = ElementNode(tag="p", children=(TextNode("Nothing to change."),))
        assert replace_in_document(tree) is tree

    def test_verbatim_flag(self):
        assert ElementNode(tag="code").verbatim
        assert ElementNode(tag="PRE").verbatim
        assert not ElementNode(tag="p").verbatim

    def test_input_tree_is_not_mutated(self):
        replace_in_document(DOCUMENT)
        assert DOCUMENT.children[0].children[0].text == "We delve into it."

    def test_plain_text(self):
        assert plain_text(DOCUMENT) == "We delve into it.delve intothe realm"


class TestHtml:
    def test_parse_and_serialize(self):
        markup = '<p>One<br>two <a href="https://example.com">three</a></p>'
        assert serialize_html(parse_html(markup)) == markup

    def test_replace_in_html_keeps_markup(self):
        markup = '<p>We <b>delve into</b> the <a href="https://example.com" target="_blank">realm</a>.</p>'
        assert replace_in_html(markup) == (
            '<p>We <b>explore</b> the <a href="https://example.com" target="_blank">area</a>.</p>'
        )

    def test_replace_in_html_skips_code(self):
        markup = "<p>delve into</p><pre><code>delve into</code></pre>"
        assert replace_in_html(markup) == "<p>explore</p><pre><code>delve into</code></pre>"

    def test_plain_fragment(self):
        assert replace_in_html("delve into it") == "explore it"

    def test_entities_stay_escaped(self):
        assert replace_in_html("<p>5 &lt; 6 &amp; typically</p>") == "<p>5 &lt; 6 &amp; usually</p>"

    def test_sanitize_drops_scripts_and_attributes(self):
        markup = '<p onclick="steal()">Hi<script>alert(1)</script> <em class="x">there</em></p>'
        assert sanitize_html(markup) == "<p>Hi <em>there</em></p>"

    def test_sanitize_keeps_content_of_disallowed_tags(self):
        assert sanitize_html("<section>Keep <b>me</b></section>") == "Keep <b>me</b>"

    def test_sanitize_keeps_content_of_form_controls(self):
        assert sanitize_html("<p>Press <button>Submit</button> now</p>") == "<p>Press Submit now</p>"
        assert sanitize_html("<textarea>typically</textarea>") == "typically"
        assert sanitize_html("<select><option>Realm</option></select>") == "Realm"

    def test_strip_html(self):
        assert strip_html("<p>One <b>two</b></p><p>three</p>") == "One twothree"
