from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class DeslopColumnConfig(SingleColumnConfig):
    """Rewrite a text column to remove phrases typical of AI-generated prose.

    Each row's text is passed through an ordered table of phrase rules that swap
    formulaic wording ("delve into", "cutting-edge", "underscores") for plainer
    alternatives in the same capitalization style.

    Attributes:
        target_column: Column whose text is rewritten.
        markup: ``"text"`` treats the cell as plain text. ``"html"`` sanitizes the
            cell against a formatting allow-list and rewrites only its prose, leaving
            tags, attributes and ``<code>``/``<pre>`` content untouched.
        strip_markup: With ``markup="html"``, emit the rewritten document as plain
            text instead of HTML.
    """

    target_column: str
    markup: Literal["text", "html"] = Field(default="text", description="How to interpret the target column's contents")
    strip_markup: bool = Field(default=False, description="Emit plain text instead of HTML when markup='html'")
    column_type: Literal["deslop"] = "deslop"

    @staticmethod
    def get_column_emoji() -> str:
        return "\u270f\ufe0f"

    @property
    def required_columns(self) -> list[str]:
        return [self.target_column]

    @property
    def side_effect_columns(self) -> list[str]:
        return []
