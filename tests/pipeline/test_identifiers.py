from seasoning.pipeline.identifiers import IdentifierRewriter
from seasoning.pipeline.naming import DebugStrategy, MinimalStrategy


class TestIdentifierRewriter:
    def test_renames_dashed_identifier(self):
        table: dict[str, str] = {}
        rewriter = IdentifierRewriter(MinimalStrategy(), table)

        assert rewriter.rewrite("--main-color") == "--a"
        assert rewriter.rewrite("--accent-color") == "--b"
        assert rewriter.rewrite("--main-color") == "--a"
        assert table == {"main-color": "a", "accent-color": "b"}

    def test_uses_existing_entries(self):
        rewriter = IdentifierRewriter(MinimalStrategy(), {"existing-var": "preserved-var"})
        assert rewriter.rewrite("--existing-var") == "--preserved-var"

    def test_non_dashed_identifier_is_unchanged(self):
        table: dict[str, str] = {}
        rewriter = IdentifierRewriter(MinimalStrategy(), table)

        assert rewriter.rewrite("color") == "color"
        assert table == {}

    def test_debug_mode(self):
        strategy = DebugStrategy(prefix="prefix-", suffix="-suffix", debug_symbol="__DEBUG__")
        rewriter = IdentifierRewriter(strategy, {})
        assert rewriter.rewrite("--custom-prop") == "--__DEBUG__prefix-custom-prop-suffix"

    def test_strategy_shared_with_selectors(self):
        strategy = MinimalStrategy()
        strategy.rename(".button", {})
        rewriter = IdentifierRewriter(strategy, {})
        assert rewriter.rewrite("--main-color") == "--b"
