"""
Message templates.

A message template is the unrendered format string of a log event, such as
``"User {UserId} logged in"``. The template is parsed into text and property
tokens once; rendering substitutes each property token with the display form
of the matching property value.

Property token grammar::

    "{" ["@" | "$"] name ["," alignment] [":" format] "}"

``{{`` and ``}}`` are literal braces. Anything that does not parse as a
property token is kept as literal text.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from jsonpropfilter.events.values import (
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

# Renders a scalar with an optional format spec, e.g. a locale-aware number formatter
FormatProvider = Callable[[Any, Optional[str]], str]

_PROPERTY_TOKEN = re.compile(
    r"^\{(?P<hint>[@$])?(?P<name>[A-Za-z0-9_]+)"
    r"(?:,(?P<alignment>-?\d+))?"
    r"(?::(?P<format>[^{}]*))?\}$"
)


@dataclass(frozen=True)
class TextToken:
    """Literal text, with escaped braces already collapsed."""

    text: str


@dataclass(frozen=True)
class PropertyToken:
    """
    A placeholder for a named property.

    Attributes:
        name: Property name (all digits for positional tokens)
        raw_text: The token exactly as written, used when the property is missing
        format: Optional format spec following ``:``
        alignment: Optional padding width, negative for left alignment
        hint: ``@`` (destructure) or ``$`` (stringify), if given
    """

    name: str
    raw_text: str
    format: Optional[str] = None
    alignment: Optional[int] = None
    hint: Optional[str] = None

    @property
    def is_positional(self) -> bool:
        return self.name.isdigit()


MessageTemplateToken = Union[TextToken, PropertyToken]


def _parse_property_token(raw: str) -> Optional[PropertyToken]:
    match = _PROPERTY_TOKEN.match(raw)
    if not match:
        return None
    alignment = match.group("alignment")
    return PropertyToken(
        name=match.group("name"),
        raw_text=raw,
        format=match.group("format"),
        alignment=int(alignment) if alignment is not None else None,
        hint=match.group("hint"),
    )


@lru_cache(maxsize=1000)
def _parse_tokens(text: str) -> Tuple[MessageTemplateToken, ...]:
    tokens: List[MessageTemplateToken] = []
    literal: List[str] = []
    length = len(text)
    i = 0

    def flush():
        if literal:
            tokens.append(TextToken("".join(literal)))
            literal.clear()

    while i < length:
        char = text[i]
        if char == "{":
            if i + 1 < length and text[i + 1] == "{":
                literal.append("{")
                i += 2
                continue
            # A token ends at the next "}"; a nested "{" makes it plain text
            end = i + 1
            while end < length and text[end] not in "{}":
                end += 1
            if end >= length or text[end] == "{":
                literal.append(text[i:end])
                i = end
                continue
            raw = text[i : end + 1]
            token = _parse_property_token(raw)
            if token is None:
                literal.append(raw)
            else:
                flush()
                tokens.append(token)
            i = end + 1
        elif char == "}":
            literal.append("}")
            i += 2 if i + 1 < length and text[i + 1] == "}" else 1
        else:
            literal.append(char)
            i += 1

    flush()
    return tuple(tokens)


def _quote(text: str) -> str:
    return '"' + text.replace('"', '\\"') + '"'


def _render_scalar(
    value: Any,
    format_spec: Optional[str],
    format_provider: Optional[FormatProvider],
) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return value if format_spec == "l" else _quote(value)
    if format_provider is not None:
        return format_provider(value, format_spec)
    if format_spec:
        try:
            return format(value, format_spec)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def render_property_value(
    value: LogEventPropertyValue,
    format_spec: Optional[str] = None,
    format_provider: Optional[FormatProvider] = None,
) -> str:
    """
    Render a property value in its human-readable display form.

    Strings are quoted unless the format is ``l``. The format spec applies to
    top-level scalars only; nested values use their default form.

    Args:
        value: The property value to render
        format_spec: Optional format spec from the template token
        format_provider: Optional callable used for non-string scalars

    Returns:
        The display text
    """
    if isinstance(value, ScalarValue):
        return _render_scalar(value.value, format_spec, format_provider)

    if isinstance(value, SequenceValue):
        items = (render_property_value(e, None, format_provider) for e in value.elements)
        return "[" + ", ".join(items) + "]"

    if isinstance(value, StructureValue):
        fields = ", ".join(
            f"{name}: {render_property_value(v, None, format_provider)}"
            for name, v in value.properties
        )
        prefix = f"{value.type_tag} " if value.type_tag else ""
        return prefix + "{ " + fields + " }"

    if isinstance(value, DictionaryValue):
        pairs = ", ".join(
            "("
            + render_property_value(key, None, format_provider)
            + ": "
            + render_property_value(v, None, format_provider)
            + ")"
            for key, v in value.elements
        )
        return "[" + pairs + "]"

    return str(value)


def _align(text: str, alignment: Optional[int]) -> str:
    if alignment is None:
        return text
    if alignment < 0:
        return text.ljust(-alignment)
    return text.rjust(alignment)


@dataclass(frozen=True)
class MessageTemplate:
    """
    A parsed message template.

    Attributes:
        text: The raw template text, preserved exactly
        tokens: Parsed text and property tokens
    """

    text: str
    tokens: Tuple[MessageTemplateToken, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "MessageTemplate":
        """
        Parse template text into tokens.

        Args:
            text: The raw template, e.g. ``"Hello {Name}"``

        Returns:
            A MessageTemplate whose ``text`` equals the input
        """
        return cls(text=text, tokens=_parse_tokens(text))

    @property
    def property_names(self) -> List[str]:
        return [t.name for t in self.tokens if isinstance(t, PropertyToken)]

    def render(
        self,
        properties: Mapping[str, LogEventPropertyValue],
        format_provider: Optional[FormatProvider] = None,
    ) -> str:
        """
        Substitute property tokens with their display values.

        Tokens without a matching property render as written.

        Args:
            properties: Property values by name
            format_provider: Optional callable used for non-string scalars

        Returns:
            The rendered message text

        Example:
            ```python
            template = MessageTemplate.parse("Hello {Name}")
            template.render({"Name": ScalarValue("World")})
            # 'Hello "World"'
            ```
        """
        parts: List[str] = []
        for token in self.tokens:
            if isinstance(token, TextToken):
                parts.append(token.text)
                continue
            value = properties.get(token.name)
            if value is None:
                parts.append(token.raw_text)
                continue
            rendered = render_property_value(value, token.format, format_provider)
            parts.append(_align(rendered, token.alignment))
        return "".join(parts)

    def __str__(self) -> str:
        return self.text
