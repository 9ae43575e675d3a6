import re

import pytest

from seasoning.config import NamingSettings
from seasoning.models.naming import NamingMode
from seasoning.pipeline.hashing import initialize_hash
from seasoning.pipeline.naming import (
    DebugStrategy,
    HashStrategy,
    MinimalStrategy,
    build_strategy,
    get_available_strategies,
    number_to_letters,
)


@pytest.mark.parametrize(
    "number,expected",
    [
        (0, "a"),
        (1, "b"),
        (25, "z"),
        (26, "aa"),
        (27, "ab"),
        (51, "az"),
        (52, "ba"),
        (701, "zz"),
        (702, "aaa"),
    ],
)
def test_number_to_letters(number, expected):
    assert number_to_letters(number) == expected


class TestRename:
    """Tests for the shared rename contract."""

    def test_miss_stores_escaped_entry_and_returns_bare_value(self):
        strategy = MinimalStrategy()
        table: dict[str, str] = {}

        assert strategy.rename(".button", table) == "a"
        assert table == {"\\.button": "a"}

    def test_hit_returns_unescaped_stored_value(self):
        strategy = MinimalStrategy()
        table = {"\\.button": "\\.x\\.y"}

        assert strategy.rename(".button", table) == ".x.y"
        assert strategy.counter == 0

    def test_hit_uses_existence_handler(self):
        strategy = MinimalStrategy()
        table = {"main": "stored"}
        calls = []

        def on_existence_found(original, stored):
            calls.append((original, stored))
            return "handled"

        assert strategy.rename("main", table, on_existence_found=on_existence_found) == "handled"
        assert calls == [("main", "stored")]

    def test_new_value_handler_changes_stored_value_only(self):
        strategy = MinimalStrategy()
        table: dict[str, str] = {}

        result = strategy.rename(".button", table, on_new_value_before_add=lambda original, new: "." + new)

        assert result == "a"
        assert table == {"\\.button": "\\.a"}

    def test_counter_advances_only_on_new_entries(self):
        strategy = MinimalStrategy()
        selectors: dict[str, str] = {}
        idents: dict[str, str] = {}

        assert strategy.rename("main-color", idents) == "a"
        assert strategy.rename("main-color", idents) == "a"
        assert strategy.rename(".button", selectors) == "b"
        assert strategy.rename(".button", selectors) == "b"
        assert strategy.rename(".primary", selectors) == "c"
        assert strategy.counter == 3


class TestStrategies:
    def setup_method(self):
        initialize_hash()

    def test_minimal_with_prefix_and_suffix(self):
        strategy = MinimalStrategy(prefix="p-", suffix="-s")
        assert strategy.generate(".one") == "p-a-s"
        assert strategy.generate(".two") == "p-b-s"

    def test_debug_keeps_original_value(self):
        strategy = DebugStrategy(prefix="prefix-", suffix="-suffix", debug_symbol="__DEBUG__")
        assert strategy.generate(".test") == "__DEBUG__prefix-.test-suffix"

    def test_hash_is_deterministic(self):
        first = HashStrategy(seed=3).generate(".button")
        second = HashStrategy(seed=3).generate(".button")
        assert first == second
        assert re.fullmatch(r"[a-z][0-9a-f]{7}", first)

    def test_hash_seed_sensitivity(self):
        assert HashStrategy(seed=1).generate(".button") != HashStrategy(seed=2).generate(".button")

    def test_hash_prefix_and_suffix(self):
        result = HashStrategy(prefix="x-", suffix="-y").generate(".button")
        assert result.startswith("x-")
        assert result.endswith("-y")
        assert len(result) == 12


class TestBuildStrategy:
    @pytest.mark.parametrize(
        "mode,expected_type",
        [
            (NamingMode.HASH, HashStrategy),
            (NamingMode.MINIMAL, MinimalStrategy),
            (NamingMode.DEBUG, DebugStrategy),
        ],
    )
    def test_builds_strategy_for_mode(self, mode, expected_type):
        strategy = build_strategy(NamingSettings(mode=mode))
        assert isinstance(strategy, expected_type)
        assert strategy.mode == mode

    def test_passes_settings_through(self):
        strategy = build_strategy(
            NamingSettings(mode="debug", debug_symbol="!", prefix="p", suffix="s")
        )
        assert isinstance(strategy, DebugStrategy)
        assert strategy.debug_symbol == "!"
        assert strategy.generate("x") == "!pxs"

    def test_each_build_has_its_own_counter(self):
        settings = NamingSettings(mode="minimal")
        first = build_strategy(settings)
        first.rename("one", {})
        second = build_strategy(settings)
        assert second.rename("one", {}) == "a"

    def test_unknown_mode_raises(self):
        settings = NamingSettings().model_copy(update={"mode": "fancy"})
        with pytest.raises(ValueError):
            build_strategy(settings)

    def test_registry_covers_every_mode(self):
        assert {spec.mode for spec in get_available_strategies()} == set(NamingMode)
