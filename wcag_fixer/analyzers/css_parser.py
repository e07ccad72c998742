"""
CSS Parser - Minimal stylesheet and declaration parsing.

Enough CSS to resolve the cascade for a handful of properties:
- split a stylesheet into style rules (at-rule blocks are skipped)
- split declaration blocks and inline style attributes
- compute selector specificity
- expand the outline shorthand into longhands
- rewrite inline style attributes
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

Specificity = Tuple[int, int, int]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_IMPORTANT_RE = re.compile(r"!\s*important\s*$", re.IGNORECASE)

OUTLINE_STYLES = frozenset({
    "none", "auto", "hidden", "dotted", "dashed", "solid",
    "double", "groove", "ridge", "inset", "outset",
})
OUTLINE_WIDTHS = frozenset({"thin", "medium", "thick"})
CSS_WIDE_KEYWORDS = frozenset({"inherit", "initial", "unset", "revert", "revert-layer"})


@dataclass
class Declaration:
    """A single `name: value` pair."""

    name: str
    value: str
    important: bool = False


@dataclass
class StyleRule:
    """A qualified rule: selector list plus declarations."""

    selectors: List[str]
    declarations: List[Declaration] = field(default_factory=list)
    order: int = 0
    """Position of the rule across all stylesheets of the document."""


# =============================================================================
# SPLITTING
# =============================================================================


def strip_comments(css: str) -> str:
    """Remove /* ... */ comments."""
    return _COMMENT_RE.sub("", css)


def split_top_level(text: str, separator: str) -> List[str]:
    """
    Split text on a separator that is not inside quotes, () or [].

    Args:
        text: Text to split
        separator: Single separator character

    Returns:
        Stripped, non-empty parts
    """
    parts = []
    depth = 0
    quote: Optional[str] = None
    current = []

    for char in text:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
            continue
        if char in ("'", '"'):
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    parts.append("".join(current).strip())
    return [p for p in parts if p]


def parse_declarations(text: str) -> List[Declaration]:
    """
    Parse a declaration block or inline style attribute.

    Example:
        parse_declarations("outline: none; color: red !important")
        # [Declaration("outline", "none"), Declaration("color", "red", True)]
    """
    declarations = []
    for chunk in split_top_level(strip_comments(text), ";"):
        name, sep, value = chunk.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        value = value.strip()
        if not name or not value:
            continue
        important = bool(_IMPORTANT_RE.search(value))
        if important:
            value = _IMPORTANT_RE.sub("", value).strip()
        declarations.append(Declaration(name=name, value=value, important=important))
    return declarations


def parse_stylesheet(css: str, start_order: int = 0) -> List[StyleRule]:
    """
    Parse stylesheet text into style rules.

    At-rules are skipped entirely, both block at-rules (@media, @supports,
    @keyframes, ...) and statement at-rules (@import, @charset).

    Args:
        css: Stylesheet text
        start_order: Order index for the first rule

    Returns:
        Style rules in source order
    """
    css = strip_comments(css)
    rules: List[StyleRule] = []
    order = start_order
    pos = 0
    length = len(css)

    while pos < length:
        brace = css.find("{", pos)
        prelude_end = brace if brace != -1 else length
        prelude = css[pos:prelude_end].strip()

        # Statement at-rule before the next block (@import url(x);)
        if prelude.startswith("@") and ";" in prelude:
            pos += css[pos:prelude_end].find(";") + 1
            continue

        if brace == -1:
            break

        end = _find_block_end(css, brace)
        body = css[brace + 1:end]
        pos = end + 1

        if not prelude or prelude.startswith("@"):
            continue

        selectors = split_top_level(prelude, ",")
        if not selectors:
            continue
        rules.append(StyleRule(
            selectors=selectors,
            declarations=parse_declarations(body),
            order=order,
        ))
        order += 1

    return rules


def _find_block_end(css: str, open_brace: int) -> int:
    """Index of the brace closing the block opened at open_brace."""
    depth = 0
    quote: Optional[str] = None
    for index in range(open_brace, len(css)):
        char = css[index]
        if quote:
            if char == quote:
                quote = None
            continue
        if char in ("'", '"'):
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return len(css)


# =============================================================================
# SPECIFICITY
# =============================================================================

_ATTR_RE = re.compile(r"\[[^\]]*\]")
_PSEUDO_ELEMENT_RE = re.compile(r"::[\w-]+(\([^)]*\))?")
_WHERE_RE = re.compile(r":where\([^)]*\)", re.IGNORECASE)
_FUNCTIONAL_RE = re.compile(r":(?:not|is|matches|has)\(", re.IGNORECASE)
_PSEUDO_CLASS_RE = re.compile(r":[\w-]+(\([^)]*\))?")
_ID_RE = re.compile(r"#[\w-]+")
_CLASS_RE = re.compile(r"\.[\w-]+")
_TYPE_RE = re.compile(r"(?<![\w-])[a-zA-Z][\w-]*")


def specificity(selector: str) -> Specificity:
    """
    Compute the (ids, classes, types) specificity of a complex selector.

    :not(), :is() and :has() count their arguments; :where() counts nothing.
    """
    text = selector
    b = len(_ATTR_RE.findall(text))
    text = _ATTR_RE.sub(" ", text)

    c = len(_PSEUDO_ELEMENT_RE.findall(text))
    text = _PSEUDO_ELEMENT_RE.sub(" ", text)

    text = _WHERE_RE.sub(" ", text)
    text = _FUNCTIONAL_RE.sub(" ", text).replace(")", " ")

    b += len(_PSEUDO_CLASS_RE.findall(text))
    text = _PSEUDO_CLASS_RE.sub(" ", text)

    a = len(_ID_RE.findall(text))
    text = _ID_RE.sub(" ", text)

    b += len(_CLASS_RE.findall(text))
    text = _CLASS_RE.sub(" ", text)

    c += len(_TYPE_RE.findall(text))
    return (a, b, c)


# =============================================================================
# SHORTHANDS
# =============================================================================


def expand_declaration(declaration: Declaration) -> Dict[str, str]:
    """
    Expand a declaration into longhand properties.

    Only the outline shorthand is expanded; other properties pass through.
    Omitted parts of a shorthand reset to their initial values.
    """
    if declaration.name != "outline":
        return {declaration.name: declaration.value}

    value = declaration.value.strip()
    if value.lower() in CSS_WIDE_KEYWORDS:
        return {
            "outline-style": value.lower(),
            "outline-width": value.lower(),
            "outline-color": value.lower(),
        }

    style, width, color = "none", "medium", "currentcolor"
    for token in split_top_level(value, " "):
        lowered = token.lower()
        if lowered in OUTLINE_STYLES:
            style = lowered
        elif lowered in OUTLINE_WIDTHS or re.match(r"^[+-]?(\d|\.\d)", lowered):
            width = token
        else:
            color = token

    return {
        "outline-style": style,
        "outline-width": width,
        "outline-color": color,
    }


# =============================================================================
# INLINE STYLE
# =============================================================================


def merge_inline_style(
    style_text: Optional[str],
    updates: Dict[str, str],
    remove: Iterable[str] = (),
) -> str:
    """
    Set properties on an inline style attribute value.

    Existing declarations keep their position; updated properties are
    written in place, new ones appended. Properties listed in `remove`
    are dropped (e.g. longhands superseded by a shorthand).

    Example:
        merge_inline_style("color: red; outline-style: none",
                           {"outline": "2px solid #00f"},
                           remove=["outline-style"])
        # "color: red; outline: 2px solid #00f;"

    Returns:
        Serialized declarations, "name: value;" separated by spaces
    """
    removed = {name.lower() for name in remove}
    pending = {name.lower(): value for name, value in updates.items()}
    updated = set(pending)
    parts = []

    for declaration in parse_declarations(style_text or ""):
        if declaration.name in updated:
            # First occurrence takes the new value, duplicates are dropped
            if declaration.name in pending:
                parts.append(f"{declaration.name}: {pending.pop(declaration.name)};")
            continue
        if declaration.name in removed:
            continue
        suffix = " !important" if declaration.important else ""
        parts.append(f"{declaration.name}: {declaration.value}{suffix};")

    for name, value in pending.items():
        parts.append(f"{name}: {value};")

    return " ".join(parts)
