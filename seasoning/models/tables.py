"""Models for conversion tables and transform results."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

# Escaped original token -> escaped replacement token
ConversionTable = dict[str, str]


class ConversionTables(BaseModel):
    """The two conversion tables of a transform.

    Keys and values are stored CSS-escaped. Selector keys carry their sigil
    (``\\.button``, ``\\#main``); ident keys omit the ``--`` prefix.
    """

    model_config = ConfigDict(extra="forbid")

    selector: dict[StrictStr, StrictStr] = Field(
        default_factory=dict, description="Mapping for class and id selectors"
    )
    ident: dict[StrictStr, StrictStr] = Field(
        default_factory=dict, description="Mapping for custom property names"
    )

    @property
    def size(self) -> int:
        """Total number of entries across both tables."""
        return len(self.selector) + len(self.ident)


class TransformResult(BaseModel):
    """Result of transforming one stylesheet."""

    css: str = Field(description="Rewritten stylesheet")
    conversion_tables: ConversionTables = Field(description="Tables after the transform")
    warnings: list[str] = Field(
        default_factory=list, description="Parse problems that were passed through unchanged"
    )
