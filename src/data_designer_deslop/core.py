# Phrase rewriter for formulaic AI writing.
#
# Applies an ordered table of case-insensitive regex rules to text, replacing each
# matched phrase with a plainer alternative rendered in the match's capitalization
# style, then normalizes hyphen spacing and whitespace runs.

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

# ---------------------------------------------------------------------------
# Capitalization
# ---------------------------------------------------------------------------


class CapitalizationStyle(str, Enum):
    LOWERCASE = "lowercase"
    CAPITALIZED = "capitalized"
    TITLECASE = "titlecase"
    UPPERCASE = "uppercase"


_WHITESPACE_RE = re.compile(r"\s+")


def detect_capitalization_style(text: str) -> CapitalizationStyle:
    """Classify the casing of a matched span.

    Precedence is uppercase > titlecase > capitalized > lowercase, so a single
    all-caps word is never reported as capitalized.
    """
    if text == text.upper() and text != text.lower():
        return CapitalizationStyle.UPPERCASE

    words = _WHITESPACE_RE.split(text)
    capitalized_words = [w for w in words if w and w[0] == w[0].upper()]
    if len(capitalized_words) == len(words) and len(words) > 1:
        return CapitalizationStyle.TITLECASE

    first, rest = text[:1], text[1:]
    if first and first == first.upper() and rest == rest.lower():
        return CapitalizationStyle.CAPITALIZED

    return CapitalizationStyle.LOWERCASE


def apply_capitalization_style(text: str, style: CapitalizationStyle) -> str:
    if style is CapitalizationStyle.UPPERCASE:
        return text.upper()
    if style is CapitalizationStyle.TITLECASE:
        return " ".join(w[:1].upper() + w[1:].lower() for w in _WHITESPACE_RE.split(text))
    if style is CapitalizationStyle.CAPITALIZED:
        return text[:1].upper() + text[1:].lower()
    return text.lower()


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    """One entry of the replacement table: a pattern and a per-match transform."""

    name: str
    pattern: re.Pattern[str]
    transform: Callable[[str], str]

    def apply(self, text: str) -> str:
        return self.pattern.sub(lambda m: self.transform(m.group(0)), text)


INFLECTIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    lemma: MappingProxyType(forms)
    for lemma, forms in {
        "underscore": {
            "underscores": "highlights",
            "underscored": "highlighted",
            "underscoring": "highlighting",
        },
        "facilitate": {
            "facilitate": "enable",
            "facilitates": "enables",
            "facilitated": "enabled",
            "facilitating": "enabling",
        },
        "bolster": {
            "bolster": "support",
            "bolsters": "supports",
            "bolstered": "supported",
            "bolstering": "supporting",
        },
        "streamline": {
            "streamline": "simplify",
            "streamlines": "simplifies",
            "streamlined": "simplified",
            "streamlining": "simplifying",
        },
        "revolutionize": {
            "revolutionize": "transform",
            "revolutionizes": "transforms",
            "revolutionized": "transformed",
            "revolutionizing": "transforming",
        },
        "harness": {
            "harness": "use",
            "harnesses": "uses",
            "harnessed": "used",
            "harnessing": "using",
        },
        "illuminate": {
            "illuminate": "explain",
            "illuminates": "explains",
            "illuminated": "explained",
            "illuminating": "explaining",
        },
    }.items()
})

_EM_DASH_RE = re.compile("\u2014|\u00e2\u20ac\u201d")  # em dash and its cp1252 mojibake
_ARTICLE_RE = re.compile(r"(an?)(\s+)(.*)", re.IGNORECASE | re.DOTALL)
_VOWELS = frozenset("aeiou")


def _phrase_pattern(phrase: str, article: bool = False) -> re.Pattern[str]:
    body = r"\s+".join(re.escape(word) for word in phrase.split())
    if article:
        body = r"(?:an?\s+)?" + body
    return re.compile(r"\b" + body + r"\b", re.IGNORECASE)


def _restyle(replacement: str) -> Callable[[str], str]:
    def _transform(matched: str) -> str:
        return apply_capitalization_style(replacement, detect_capitalization_style(matched))
    return _transform


def _inflect(lemma: str, fallback: str) -> Callable[[str], str]:
    forms = INFLECTIONS[lemma]

    def _transform(matched: str) -> str:
        replacement = forms.get(matched.lower(), fallback)
        return apply_capitalization_style(replacement, detect_capitalization_style(matched))
    return _transform


def _at_its_core(matched: str) -> str:
    # The only rule whose phrase, not just its casing, depends on the style.
    style = detect_capitalization_style(matched)
    if style in (CapitalizationStyle.CAPITALIZED, CapitalizationStyle.TITLECASE):
        return apply_capitalization_style("fundamentally", style)
    return apply_capitalization_style("as its backbone", style)


def _indefinite_article(article: str, phrase: str) -> str:
    word = "an" if phrase[:1].lower() in _VOWELS else "a"
    if article.isupper() and phrase.isupper():
        return word.upper()
    if article[:1].isupper():
        return word.capitalize()
    return word


def _with_article(transform: Callable[[str], str]) -> Callable[[str], str]:
    """Wrap a transform so a leading "a"/"an" in the match agrees with the replacement.

    Matching is lexical, so a standalone "A" that is not an article is treated as
    one too ("Plan A realm" becomes "Plan An area").
    """

    def _transform(matched: str) -> str:
        m = _ARTICLE_RE.fullmatch(matched)
        if m is None:
            return transform(matched)
        article, gap, rest = m.groups()
        phrase = transform(rest)
        return _indefinite_article(article, phrase) + gap + phrase
    return _transform


def _phrase(name: str, phrase: str, replacement: str) -> Rule:
    return Rule(name, _phrase_pattern(phrase), _restyle(replacement))


def _modifier(name: str, phrase: str, replacement: str) -> Rule:
    return Rule(name, _phrase_pattern(phrase, article=True), _with_article(_restyle(replacement)))


def _inflection(lemma: str, pattern: str, fallback: str) -> Rule:
    return Rule(lemma, re.compile(r"\b(" + pattern + r")\b", re.IGNORECASE), _inflect(lemma, fallback))


# Order matters: "delve into" must run before "delve", and later rules see the
# output of earlier ones. A new replacement must not re-match any pattern here.
RULES: tuple[Rule, ...] = (
    Rule("em_dash", _EM_DASH_RE, lambda _matched: " - "),
    _phrase("delve_into", "delve into", "explore"),
    _phrase("delve", "delve", "dive deep"),
    Rule("at_its_core", _phrase_pattern("at its core"), _at_its_core),
    _phrase("to_put_it_simply", "to put it simply", "in simpler terms"),
    _phrase("that_being_said", "that being said", "however"),
    _phrase("a_key_takeaway_is", "a key takeaway is", "one important lesson is"),
    _phrase("from_a_broader_perspective", "from a broader perspective", "on a larger scale"),
    _phrase("generally_speaking", "generally speaking", "in most cases"),
    _phrase("broadly_speaking", "broadly speaking", "in a general sense"),
    _phrase("seamless_integration", "seamless integration", "smooth compatibility"),
    _inflection("underscore", r"underscore[sd]?|underscoring", "highlights"),
    _inflection("facilitate", r"facilitate[sd]?|facilitating", "enable"),
    _inflection("bolster", r"bolster(?:s|ed|ing)?", "support"),
    _inflection("streamline", r"streamline[sd]?|streamlining", "simplify"),
    _inflection("revolutionize", r"revolutionize[sd]?|revolutionizing", "transform"),
    _inflection("harness", r"harness(?:es)?|harnessed|harnessing", "use"),
    _inflection("illuminate", r"illuminate[sd]?|illuminating", "explain"),
    _phrase("typically", "typically", "usually"),
    _phrase("tends_to", "tends to", "is often"),
    _modifier("cutting_edge", "cutting-edge", "advanced"),
    _modifier("game_changing", "game-changing", "significant"),
    _modifier("transformative", "transformative", "impactful"),
    _modifier("realm", "realm", "area"),
)

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

_SPACED_HYPHEN_RE = re.compile(r"\s+-\s+")
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


def normalize_whitespace(text: str) -> str:
    """Tighten spacing around hyphens to " - " and collapse whitespace runs to one space."""
    text = _SPACED_HYPHEN_RE.sub(" - ", text)
    return _WHITESPACE_RUN_RE.sub(" ", text)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def apply_replacements(text: str, rules: tuple[Rule, ...] = RULES) -> str:
    """Rewrite AI-typical phrases in text.

    Args:
        text: Plain text to rewrite. Any string is accepted, including "".
        rules: Ordered rule table. Defaults to the built-in table.

    Returns:
        The rewritten text. Text without any recognized phrase comes back
        unchanged apart from whitespace normalization.
    """
    result = text
    for rule in rules:
        result = rule.apply(result)
    return normalize_whitespace(result)
