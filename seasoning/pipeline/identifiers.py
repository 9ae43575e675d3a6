"""Identifier rewriter for dashed identifiers (custom properties)."""

import logging

from seasoning.models.tables import ConversionTable
from seasoning.pipeline.naming import NamingStrategy

logger = logging.getLogger(__name__)

DASHED_PREFIX = "--"


class IdentifierRewriter:
    """Renames ``--name`` identifiers against the ident table.

    Table keys and values omit the ``--`` prefix.
    """

    def __init__(self, strategy: NamingStrategy, table: ConversionTable):
        self.strategy = strategy
        self.table = table

    def rewrite(self, ident: str) -> str:
        if not ident.startswith(DASHED_PREFIX):
            logger.debug("Skipping non-dashed identifier: %s", ident)
            return ident

        renamed = self.strategy.rename(ident[len(DASHED_PREFIX) :], self.table)
        return DASHED_PREFIX + renamed
