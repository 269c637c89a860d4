"""
Plain host collaborators.

Self-contained implementations used by the CLI and in tests. They have no
dependency on a running host platform.
"""

from __future__ import annotations

import html as _html
import io as _io
import re as _re
import typing as _typing
import urllib.parse as _urlparse

import hivetheme.host.base as base

ALLOWED_TAGS = frozenset({"a", "b", "br", "code", "em", "i", "p", "strong", "span"})
"""Tags kept by PlainSanitizer.sanitize_html."""

ALLOWED_ATTRIBUTES: dict[str, frozenset[str]] = {
    "a": frozenset({"href", "target", "rel"}),
    "p": frozenset({"class"}),
    "span": frozenset({"class"}),
}
"""Attributes kept on each allowed tag. Anything else is dropped."""

URL_ATTRIBUTES = frozenset({"href"})
"""Attributes whose values are passed through escape_url."""

_TAG_PATTERN = _re.compile(r"<(/?)\s*([a-zA-Z][a-zA-Z0-9]*)\b([^>]*)>")
_ATTRIBUTE_PATTERN = _re.compile(
    r"""([^\s"'<>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?"""
)
_SCRIPT_PATTERN = _re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>",
    _re.IGNORECASE | _re.DOTALL,
)
_URL_SAFE = ":/?#[]@!$&'()*+,;=%-._~"


class DictTranslator(base.Translator):
    """
    Translator backed by dicts.

    Missing string keys resolve to "", missing translations return the
    text unchanged.
    """

    def __init__(
        self,
        strings: _typing.Mapping[str, str] | None = None,
        translations: _typing.Mapping[str, str] | None = None,
    ) -> None:
        self._strings = dict(strings or {})
        self._translations = dict(translations or {})

    def get_string(self, key: str) -> str:
        return self._strings.get(key, "")

    def translate(self, text: str) -> str:
        return self._translations.get(text, text)


class PlainSanitizer(base.Sanitizer):
    """
    Regex-based sanitizer keeping a small allow-list of inline tags.

    Kept tags are rebuilt from their allowed attributes. URL attribute
    values go through escape_url and are dropped when it rejects them.
    """

    def __init__(
        self,
        allowed_tags: _typing.Iterable[str] = ALLOWED_TAGS,
        allowed_attributes: _typing.Mapping[str, _typing.Iterable[str]] = ALLOWED_ATTRIBUTES,
    ) -> None:
        self._allowed = frozenset(tag.lower() for tag in allowed_tags)
        self._attributes = {
            tag.lower(): frozenset(name.lower() for name in names)
            for tag, names in allowed_attributes.items()
        }

    def sanitize_html(self, text: str) -> str:
        text = _SCRIPT_PATTERN.sub("", text)

        def _rebuild_allowed(match: _re.Match[str]) -> str:
            closing, tag, attributes = match.groups()
            tag = tag.lower()
            if tag not in self._allowed:
                return ""
            if closing:
                return f"</{tag}>"
            kept = self._filter_attributes(tag, attributes)
            return f"<{tag}{kept}>"

        return _TAG_PATTERN.sub(_rebuild_allowed, text)

    def _filter_attributes(self, tag: str, attributes: str) -> str:
        """Render the allowed attributes of a tag, each with a leading space."""
        allowed = self._attributes.get(tag, frozenset())
        parts: list[str] = []
        for match in _ATTRIBUTE_PATTERN.finditer(attributes):
            name = match.group(1).lower()
            if name not in allowed:
                continue
            raw = next((v for v in match.groups()[1:] if v is not None), "")
            value = _html.unescape(raw)
            if name in URL_ATTRIBUTES:
                value = self.escape_url(value)
                if not value:
                    continue
            else:
                value = _html.escape(value, quote=True)
            parts.append(f' {name}="{value}"')
        return "".join(parts)

    def escape_url(self, url: str) -> str:
        url = url.strip()
        scheme = _urlparse.urlsplit(url).scheme.lower()
        if scheme and scheme not in ("http", "https", "mailto"):
            return ""
        return _html.escape(_urlparse.quote(url, safe=_URL_SAFE), quote=True)


class PlainRenderer(base.BlockRenderer):
    """Renders HTML comment markers instead of real markup."""

    def render_template(self, template_name: str) -> str:
        return f"<!-- template:{template_name} -->"

    def render_part(self, path: str, context: dict[str, _typing.Any]) -> str:
        values = " ".join(
            f"{key}={_html.escape(str(value))}" for key, value in context.items()
        )
        return f"<!-- part:{path} {values} -->" if values else f"<!-- part:{path} -->"


class StaticSite(base.Site):
    """Site with fixed post counts, endpoint and title."""

    def __init__(
        self,
        *,
        post_counts: _typing.Mapping[str, _typing.Mapping[str, int]] | None = None,
        endpoint: str | None = None,
        title: str = "",
        template: str = "listinghive",
    ) -> None:
        self._post_counts = {k: dict(v) for k, v in (post_counts or {}).items()}
        self._endpoint = endpoint
        self._title = title
        self._template = template

    def count_posts(self, post_type: str) -> dict[str, int]:
        return dict(self._post_counts.get(post_type, {}))

    def is_endpoint(self, name: str) -> bool:
        return self._endpoint == name

    def get_title(self) -> str:
        return self._title

    def get_template(self) -> str:
        return self._template


class BufferResponse(base.Response):
    """Response collecting output in memory."""

    def __init__(self) -> None:
        self._buffer = _io.StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        """Get everything written so far."""
        return self._buffer.getvalue()
