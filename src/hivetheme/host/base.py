"""
Base classes for host platform collaborators.

Components never call the host platform directly. Everything they need
(strings, sanitization, rendering, site queries, output) is injected as one
of these interfaces:
- Translator: string tables and text translation
- Sanitizer: HTML sanitization and URL escaping
- BlockRenderer: template and template-part rendering
- Site: post counts, current endpoint, page title
- Response: output written by actions
"""

import abc as _abc
import typing as _typing


class Translator(_abc.ABC):
    """Looks up user-facing strings."""

    @_abc.abstractmethod
    def get_string(self, key: str) -> str:
        """Get a string from the marketplace plugin's string table."""
        ...

    @_abc.abstractmethod
    def translate(self, text: str) -> str:
        """Translate text in the theme's text domain."""
        ...


class Sanitizer(_abc.ABC):
    """Cleans text before it reaches the page."""

    @_abc.abstractmethod
    def sanitize_html(self, text: str) -> str:
        """Strip markup that isn't allowed in notices and labels."""
        ...

    @_abc.abstractmethod
    def escape_url(self, url: str) -> str:
        """Escape a URL for use in an href attribute."""
        ...


class BlockRenderer(_abc.ABC):
    """Renders block templates to HTML."""

    @_abc.abstractmethod
    def render_template(self, template_name: str) -> str:
        """Render a whole template, e.g. "site_header_block"."""
        ...

    @_abc.abstractmethod
    def render_part(self, path: str, context: dict[str, _typing.Any]) -> str:
        """
        Render a template part.

        Args:
            path: Part path, e.g. "page/page-title".
            context: Variables available to the part.
        """
        ...


class Site(_abc.ABC):
    """Read-only queries about the site and the current request."""

    @_abc.abstractmethod
    def count_posts(self, post_type: str) -> dict[str, int]:
        """
        Count posts of a type.

        Returns:
            Dict of post status → count. Statuses with no posts may be absent.
        """
        ...

    @_abc.abstractmethod
    def is_endpoint(self, name: str) -> bool:
        """Check if the current request is for a shop account endpoint."""
        ...

    @_abc.abstractmethod
    def get_title(self) -> str:
        """Get the current page title."""
        ...

    @_abc.abstractmethod
    def get_template(self) -> str:
        """Get the active theme's template slug."""
        ...


class Response(_abc.ABC):
    """Destination for output produced by actions."""

    @_abc.abstractmethod
    def write(self, text: str) -> None:
        """Append text to the response body."""
        ...
