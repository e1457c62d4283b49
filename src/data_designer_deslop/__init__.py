# SPDX-License-Identifier: Apache-2.0
"""De-slop plugin for NeMo Data Designer.

Adds a ``deslop`` column type that rewrites phrases characteristic of AI-generated
prose ("delve into", "at its core", "cutting-edge", ...) into plainer wording while
keeping each match's capitalization. HTML columns keep their markup: only text
outside ``<code>`` and ``<pre>`` is rewritten. No LLM calls, no API dependencies.

Usage::

    from data_designer_deslop import DeslopColumnConfig

    builder.add_column(DeslopColumnConfig(
        name="article_clean",
        target_column="article",
        markup="html",
    ))
"""

from data_designer_deslop.config import DeslopColumnConfig
from data_designer_deslop.core import apply_replacements
from data_designer_deslop.markup import replace_in_document, replace_in_html

__all__ = ["DeslopColumnConfig", "apply_replacements", "replace_in_document", "replace_in_html"]
