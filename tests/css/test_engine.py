from seasoning.config import EngineSettings
from seasoning.css.engine import parse_stylesheet, transform_stylesheet
from seasoning.css.serialize import stringify_selector
from seasoning.models.selector import ClassComponent


def identity_selector(selector):
    return [selector]


def identity_ident(ident):
    return ident


class TestParseStylesheet:
    def test_parses_css(self):
        tree = parse_stylesheet(b".a { color: red; }")
        assert tree.root_node.type == "stylesheet"
        assert not tree.root_node.has_error


class TestVerbatim:
    """Without minification untouched source is copied byte for byte."""

    def test_identity_visitors_keep_source(self):
        css = "/* keep */\n.a > .b, #c {\n  --x: 1px;\n  color: var(--x);\n}\n\n@media (min-width: 100px) {\n  div .d { margin: 0 auto; }\n}\n"
        output = transform_stylesheet(css, identity_selector, identity_ident, EngineSettings(minify=False))

        assert output.css == css
        assert output.warnings == []

    def test_visitors_see_document_order(self):
        selectors = []
        idents = []

        def record_selector(selector):
            selectors.append(stringify_selector(selector))
            return [selector]

        def record_ident(ident):
            idents.append(ident)
            return ident

        transform_stylesheet(
            ":root { --main: red; } .a, .b { color: var(--main); } @media print { .c { --other: 0; } }",
            record_selector,
            record_ident,
            EngineSettings(minify=False),
        )

        assert selectors == [":root", ".a", ".b", ".c"]
        assert idents == ["--main", "--main", "--other"]

    def test_selector_replacement(self):
        def rename(selector):
            return [[ClassComponent(name="renamed") if c.type == "class" else c for c in selector]]

        output = transform_stylesheet(
            "div .a { color: red; }", rename, identity_ident, EngineSettings(minify=False)
        )
        assert output.css == "div .renamed { color: red; }"

    def test_visitor_may_return_several_selectors(self):
        output = transform_stylesheet(
            ".a { color: red; }",
            lambda selector: [selector, [ClassComponent(name="b")]],
            identity_ident,
            EngineSettings(minify=False),
        )
        assert output.css == ".a, .b { color: red; }"

    def test_ident_replacement(self):
        output = transform_stylesheet(
            ".a { --main-color: red; color: var(--main-color); }",
            identity_selector,
            lambda ident: "--m",
            EngineSettings(minify=False),
        )
        assert output.css == ".a { --m: red; color: var(--m); }"

    def test_ident_result_is_escaped(self):
        output = transform_stylesheet(
            ".a { --x: red; }",
            identity_selector,
            lambda ident: "--a.b",
            EngineSettings(minify=False),
        )
        assert output.css == ".a { --a\\.b: red; }"


class TestMinify:
    def test_drops_comments_and_whitespace(self):
        output = transform_stylesheet(
            "/* header */\n.a  >  .b {\n  color: red;\n  margin: 0 auto;\n}\n",
            identity_selector,
            identity_ident,
            EngineSettings(minify=True),
        )
        assert output.css == ".a>.b{color:red;margin:0 auto}"

    def test_keeps_numbers_and_units(self):
        output = transform_stylesheet(
            ".a { padding: 10px 1.5em; }",
            identity_selector,
            identity_ident,
            EngineSettings(minify=True),
        )
        assert output.css == ".a{padding:10px 1.5em}"

    def test_important(self):
        output = transform_stylesheet(
            ".a { color: red !important; }",
            identity_selector,
            identity_ident,
            EngineSettings(minify=True),
        )
        assert output.css == ".a{color:red!important}"


class TestWarnings:
    def test_unparseable_selector_is_left_unchanged(self):
        css = ".a !b { color: red; }\n.c { color: blue; }\n"
        output = transform_stylesheet(
            css,
            identity_selector,
            identity_ident,
            EngineSettings(minify=False, filename="broken.css"),
        )

        assert ".a !b" in output.css
        assert ".c { color: blue; }" in output.css
        assert output.warnings
        assert all(warning.startswith("broken.css:") for warning in output.warnings)
