"""Top-level transform orchestration.

Seed tables → build naming strategy → rewrite stylesheet (selectors and
dashed identifiers) → hand back css, tables and warnings.
"""

import logging
from typing import Any, Optional, Union

from seasoning.config import EngineSettings, NamingSettings, get_settings
from seasoning.css.engine import transform_stylesheet
from seasoning.models.naming import NamingMode
from seasoning.models.tables import TransformResult
from seasoning.pipeline.hashing import initialize_hash
from seasoning.pipeline.identifiers import IdentifierRewriter
from seasoning.pipeline.naming import build_strategy
from seasoning.pipeline.selector_walker import SelectorWalker
from seasoning.pipeline.tables import TablesInput, seed_tables

logger = logging.getLogger(__name__)

initialize_hash()


def _resolve_naming(**overrides: Any) -> NamingSettings:
    """Apply explicit options on top of the configured naming settings."""
    naming = get_settings().naming
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return naming
    return naming.model_copy(update=update)


def transform(
    css: str,
    *,
    mode: Optional[Union[NamingMode, str]] = None,
    debug_symbol: Optional[str] = None,
    prefix: Optional[str] = None,
    suffix: Optional[str] = None,
    seed: Optional[int] = None,
    conversion_tables: TablesInput = None,
    engine: Optional[EngineSettings] = None,
) -> TransformResult:
    """Rename class, id and custom property names in a stylesheet.

    Options left as None fall back to the configured settings.

    Args:
        css: Stylesheet text
        mode: Naming mode (hash, minimal or debug)
        debug_symbol: Symbol placed in front of names in debug mode
        prefix: Text placed before every generated name
        suffix: Text placed after every generated name
        seed: Hash key for hash mode
        conversion_tables: Tables from an earlier run; existing entries are
            reused and new ones are added
        engine: Engine settings (minify, filename)

    Returns:
        TransformResult with the rewritten css, the grown tables and warnings

    Raises:
        ConversionTableError: If conversion_tables is malformed
        ValueError: If the naming mode is unknown
    """
    naming = _resolve_naming(
        mode=mode, debug_symbol=debug_symbol, prefix=prefix, suffix=suffix, seed=seed
    )
    engine = engine or get_settings().engine
    tables = seed_tables(conversion_tables)
    strategy = build_strategy(naming)

    walker = SelectorWalker(strategy, tables.selector)
    rewriter = IdentifierRewriter(strategy, tables.ident)

    initial_size = tables.size
    output = transform_stylesheet(css, walker.visit, rewriter.rewrite, engine)

    logger.info(
        "Transformed %s in %s mode: %d new table entries, %d warning(s)",
        engine.filename,
        strategy.mode.value,
        tables.size - initial_size,
        len(output.warnings),
    )
    return TransformResult(css=output.css, conversion_tables=tables, warnings=output.warnings)
