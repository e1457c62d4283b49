from __future__ import annotations

import logging

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_deslop.config import DeslopColumnConfig
from data_designer_deslop.core import apply_replacements
from data_designer_deslop.markup import replace_in_html, strip_html

logger = logging.getLogger(__name__)


def rewrite_text(text: str, config: DeslopColumnConfig) -> str:
    if config.markup == "text":
        return apply_replacements(text)
    rewritten = replace_in_html(text)
    return strip_html(rewritten) if config.strip_markup else rewritten


class DeslopColumnGenerator(ColumnGeneratorFullColumn[DeslopColumnConfig]):
    """Column generator that rewrites AI-typical phrases in a text column."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\u270f\ufe0f Rewriting column {self.config.target_column!r} into {self.config.name!r}")
        logger.info(f"   markup: {self.config.markup}")
        if self.config.strip_markup and self.config.markup == "text":
            logger.warning("strip_markup has no effect when markup='text'")

        results = []
        changed = 0
        for value in data[self.config.target_column]:
            text = "" if pd.isna(value) else str(value)
            rewritten = rewrite_text(text, self.config)
            if rewritten != text:
                changed += 1
            results.append(rewritten)
        logger.info(f"   rewrote {changed} of {len(results)} rows")

        data = data.copy()
        data[self.config.name] = results
        return data
