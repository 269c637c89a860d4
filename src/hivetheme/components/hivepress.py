"""
HivePress integration component.

Registers the theme's callbacks on HivePress (and, when active, WooCommerce)
extension points: admin notices, header areas, the account page title, and
three template-description filters that move blocks to the places the
theme's layout expects them.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import hivetheme.components.base as base
import hivetheme.environment as environment
import hivetheme.hooks as hooks
import hivetheme.utils.trees as trees

_logger = _logging.getLogger(__name__)

LISTING_POST_TYPE = "hp_listing"

CATEGORY_ORDER = 5
"""Order hint given to the category block after it moves into the content."""

ORDER_ENDPOINTS = ("orders", "view-order")
"""Account endpoints where the theme renders its own page title."""

DEMO_IMPORT_TEXT = (
    "If you want to start with the %(theme)s demo content, please follow "
    '<a href="%(url)s" target="_blank">this screencast</a> to import it.'
)


class HivePress(base.Component):
    """HivePress component."""

    name = "hivepress"
    requires = (environment.HIVEPRESS,)

    def register(self) -> None:
        """
        Register callbacks for the current request context.

        Admin requests only get the notices filter. Site requests get the
        header areas, the template filters, and the account page callbacks
        when WooCommerce is active.
        """
        if self.environment.has(environment.ADMIN):
            self.hooks.add_filter(hooks.HookName.ADMIN_NOTICES, self.add_admin_notices)
            return

        self.hooks.add_filter(hooks.HookName.SITE_HEADER, self.render_site_header)

        if self.environment.has(environment.WOOCOMMERCE):
            self.hooks.add_filter(hooks.HookName.PAGE_HEADER, self.hide_page_header)
            self.hooks.add_action(
                hooks.HookName.ACCOUNT_CONTENT,
                self.render_page_title,
                priority=1,
            )

        self.hooks.add_filter(
            hooks.template_hook("listing_view_block"),
            self.alter_listing_view_block,
        )
        self.hooks.add_filter(
            hooks.template_hook("listing_view_page"),
            self.alter_listing_view_page,
        )
        self.hooks.add_filter(
            hooks.template_hook("listing_category_view_block"),
            self.alter_listing_category_view_block,
        )

    def get_string(self, key: str) -> str:
        """
        Get a string from the HivePress string table.

        Returns:
            The string, or "" when HivePress is not active.
        """
        if not self.environment.has(environment.HIVEPRESS):
            return ""
        return self.host.translator.get_string(key)

    def add_admin_notices(
        self,
        notices: dict[str, dict[str, _typing.Any]],
    ) -> dict[str, dict[str, _typing.Any]]:
        """
        Add the demo import notice while no listings are published.

        Args:
            notices: Notice arguments keyed by notice name.

        Returns:
            Notices, with "demo_import" added when applicable.
        """
        counts = self.host.site.count_posts(LISTING_POST_TYPE)
        if "publish" not in counts or counts["publish"]:
            return notices

        sanitizer = self.host.sanitizer
        docs_url = self.settings.get_demo_docs_url(self.host.site.get_template())
        values = {
            "theme": self.settings.theme_name,
            "url": sanitizer.escape_url(docs_url),
        }
        message = sanitizer.sanitize_html(
            self.host.translator.translate(DEMO_IMPORT_TEXT)
        )
        try:
            text = message % values
        except (ValueError, TypeError, KeyError) as e:
            _logger.warning("Invalid demo import translation, using default: %s", e)
            text = sanitizer.sanitize_html(DEMO_IMPORT_TEXT) % values

        result = dict(notices)
        result["demo_import"] = {
            "type": "info",
            "dismissible": True,
            "text": text,
        }
        return result

    def render_site_header(self, output: str) -> str:
        """Append the site header block to the header area."""
        return output + self.host.renderer.render_template("site_header_block")

    def hide_page_header(self, output: str) -> str:
        """Empty the page header on order endpoints."""
        if self._is_order_endpoint():
            return ""
        return output

    def render_page_title(self) -> None:
        """Write the page title on order endpoints."""
        if not self._is_order_endpoint():
            return
        self.host.response.write(
            self.host.renderer.render_part(
                "page/page-title",
                {"page_title": self.host.site.get_title()},
            )
        )

    def alter_listing_view_block(self, template: trees.Tree) -> trees.Tree:
        """Move the category block into the listing content."""
        return self._move_category(template, "listing_content")

    def alter_listing_view_page(self, template: trees.Tree) -> trees.Tree:
        """Move the category block into the page content."""
        return self._move_category(template, "page_content")

    def alter_listing_category_view_block(self, template: trees.Tree) -> trees.Tree:
        """Move the listing count into the header and render names as h3."""
        count = trees.locate(template, ("blocks", "listing_category_count"))

        blocks: dict[str, _typing.Any] = {}
        if count:
            blocks["listing_category_header"] = {
                "blocks": {
                    "listing_category_count": count,
                },
            }
        else:
            _logger.debug("No listing_category_count block to move")

        blocks["listing_category_name"] = {"tag": "h3"}

        return trees.merge(template, {"blocks": blocks})

    def _move_category(self, template: trees.Tree, container: str) -> trees.Tree:
        """Copy blocks.listing_category into a container's child blocks."""
        category = trees.locate(template, ("blocks", "listing_category"))
        if not category:
            _logger.debug("No listing_category block to move into %s", container)
            return trees.merge(template, {})

        return trees.merge(
            template,
            {
                "blocks": {
                    container: {
                        "blocks": {
                            "listing_category": trees.with_order(
                                category, CATEGORY_ORDER
                            ),
                        },
                    },
                },
            },
        )

    def _is_order_endpoint(self) -> bool:
        return any(self.host.site.is_endpoint(name) for name in ORDER_ENDPOINTS)
