"""Naming strategies and the factory that builds them from settings."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from seasoning.config import NamingSettings
from seasoning.models.naming import NamingMode
from seasoning.models.tables import ConversionTable
from seasoning.pipeline.escape import css_escape, css_unescape
from seasoning.pipeline.hashing import generate_hash

logger = logging.getLogger(__name__)

# (original value, escaped stored value) -> whatever the caller wants back
ExistenceHandler = Callable[[str, str], Any]
# (original value, new bare value) -> value to store (before escaping)
NewValueHandler = Callable[[str, str], str]


def number_to_letters(number: int) -> str:
    """Convert a 0-based counter to bijective base-26 letters.

    0 -> a, 25 -> z, 26 -> aa, 27 -> ab, 701 -> zz, 702 -> aaa
    """
    letters = ""
    number += 1
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters = chr(ord("a") + remainder) + letters
    return letters


class NamingStrategy(ABC):
    """Base class for renaming strategies.

    One instance is created per transform and shared by every table it
    renames against, so any state it keeps (such as a counter) spans both
    the selector and the ident table.
    """

    mode: NamingMode

    def __init__(self, prefix: str = "", suffix: str = ""):
        self.prefix = prefix
        self.suffix = suffix

    @abstractmethod
    def generate(self, value: str) -> str:
        """Compute a fresh name for a value that is not in the table yet."""
        pass

    def rename(
        self,
        value: str,
        table: ConversionTable,
        on_existence_found: Optional[ExistenceHandler] = None,
        on_new_value_before_add: Optional[NewValueHandler] = None,
    ) -> Any:
        """Look a value up in the table, creating an entry on a miss.

        Args:
            value: Original (unescaped) value
            table: Conversion table to read and extend
            on_existence_found: Called with the original value and the escaped
                stored value on a hit; its result is returned instead
            on_new_value_before_add: Rewrites the bare new value before it is
                escaped and stored

        Returns:
            The bare new value on a miss; the unescaped stored value (or the
            result of on_existence_found) on a hit
        """
        key = css_escape(value)
        if key in table:
            stored = table[key]
            if on_existence_found is not None:
                return on_existence_found(value, stored)
            return css_unescape(stored)

        new_value = self.generate(value)
        to_save = on_new_value_before_add(value, new_value) if on_new_value_before_add else new_value
        table[key] = css_escape(to_save)
        logger.debug("New %s entry: %s -> %s", self.mode.value, key, table[key])
        return new_value


class HashStrategy(NamingStrategy):
    mode = NamingMode.HASH

    def __init__(self, prefix: str = "", suffix: str = "", seed: int | None = None):
        super().__init__(prefix, suffix)
        self.seed = seed

    def generate(self, value: str) -> str:
        return self.prefix + generate_hash(value, self.seed) + self.suffix


class MinimalStrategy(NamingStrategy):
    """Assigns a, b, ..., z, aa, ab, ... in first-seen order."""

    mode = NamingMode.MINIMAL

    def __init__(self, prefix: str = "", suffix: str = ""):
        super().__init__(prefix, suffix)
        self.counter = 0

    def generate(self, value: str) -> str:
        new_value = self.prefix + number_to_letters(self.counter) + self.suffix
        self.counter += 1
        return new_value


class DebugStrategy(NamingStrategy):
    """Keeps the original value legible: symbol + prefix + value + suffix."""

    mode = NamingMode.DEBUG

    def __init__(self, prefix: str = "", suffix: str = "", debug_symbol: str = "_"):
        super().__init__(prefix, suffix)
        self.debug_symbol = debug_symbol

    def generate(self, value: str) -> str:
        return self.debug_symbol + self.prefix + value + self.suffix


class StrategySpec:
    """Specification for a naming strategy."""

    def __init__(
        self,
        mode: NamingMode,
        description: str,
        factory: Callable[[NamingSettings], NamingStrategy],
    ):
        self.mode = mode
        self.description = description
        self.factory = factory


# All available strategies
STRATEGY_REGISTRY: list[StrategySpec] = [
    StrategySpec(
        mode=NamingMode.HASH,
        description="Deterministic keyed hash of the original name (seeded)",
        factory=lambda s: HashStrategy(prefix=s.prefix, suffix=s.suffix, seed=s.seed),
    ),
    StrategySpec(
        mode=NamingMode.MINIMAL,
        description="Shortest sequential names: a, b, ..., z, aa, ab, ...",
        factory=lambda s: MinimalStrategy(prefix=s.prefix, suffix=s.suffix),
    ),
    StrategySpec(
        mode=NamingMode.DEBUG,
        description="Original name wrapped in debug symbol, prefix and suffix",
        factory=lambda s: DebugStrategy(prefix=s.prefix, suffix=s.suffix, debug_symbol=s.debug_symbol),
    ),
]


def get_available_strategies() -> list[StrategySpec]:
    """Get list of all available naming strategies."""
    return STRATEGY_REGISTRY


def build_strategy(settings: NamingSettings) -> NamingStrategy:
    """Build the naming strategy selected by the settings.

    Args:
        settings: Naming settings

    Returns:
        A fresh strategy instance (with its own counter state)

    Raises:
        ValueError: If no strategy is registered for the mode
    """
    mode = NamingMode(settings.mode)
    for spec in STRATEGY_REGISTRY:
        if spec.mode == mode:
            logger.debug("Built %s naming strategy", mode.value)
            return spec.factory(settings)
    raise ValueError(f"No naming strategy registered for mode '{mode.value}'")
