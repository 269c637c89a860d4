"""
Shared pytest fixtures for hivetheme tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import hivetheme.config as config
import hivetheme.environment as environment
import hivetheme.host as host
import hivetheme.theme as theme


@_pytest.fixture(autouse=True)
def isolated_config(
    monkeypatch: _pytest.MonkeyPatch,
    tmp_path: _pathlib.Path,
) -> _pathlib.Path:
    """
    Isolate every test from the user's environment and config files.

    Removes HIVETHEME_* variables, points the user config directory at an
    empty temp directory and runs the test from a temp working directory.

    Returns:
        The temp user config directory.
    """
    for key in list(_os.environ):
        if key.startswith("HIVETHEME_"):
            monkeypatch.delenv(key)

    user_dir = tmp_path / "user-config"
    user_dir.mkdir()
    monkeypatch.setenv("HIVETHEME_CONFIG_DIR", str(user_dir))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return user_dir


@_pytest.fixture
def settings() -> config.Settings:
    """Settings built from the built-in defaults only."""
    return config.Settings.construct_without_dotenv()


@_pytest.fixture
def plain_host() -> host.Host:
    """Host with plain collaborators and no published listings."""
    return host.Host.plain(
        site=host.StaticSite(
            post_counts={"hp_listing": {"publish": 0, "draft": 2}},
            title="My Account",
        ),
    )


@_pytest.fixture
def make_theme(
    settings: config.Settings,
    plain_host: host.Host,
) -> _typing.Callable[..., theme.Theme]:
    """
    Factory building a Theme for a set of features.

    Usage:
        def test_something(make_theme):
            site_theme = make_theme("hivepress", "woocommerce")
    """

    def _make(*features: str, **kwargs: _typing.Any) -> theme.Theme:
        kwargs.setdefault("host", plain_host)
        return theme.Theme(
            settings,
            environment=environment.StaticEnvironment(features),
            **kwargs,
        )

    return _make


@_pytest.fixture
def listing_template() -> dict[str, _typing.Any]:
    """Template description of a listing block."""
    return {
        "template": "listing_view_block",
        "blocks": {
            "listing_container": {
                "type": "container",
                "_order": 10,
                "attributes": {"class": ["hp-listing", "hp-listing--view-block"]},
            },
            "listing_category": {
                "type": "part",
                "path": "listing/view/listing-categories",
                "_order": 20,
            },
            "listing_content": {
                "type": "container",
                "_order": 30,
                "blocks": {
                    "listing_title": {
                        "type": "part",
                        "path": "listing/view/block/listing-title",
                        "_order": 10,
                    },
                },
            },
        },
    }


@_pytest.fixture
def category_template() -> dict[str, _typing.Any]:
    """Template description of a listing category block."""
    return {
        "blocks": {
            "listing_category_header": {
                "type": "container",
                "_order": 10,
                "blocks": {
                    "listing_category_image": {
                        "type": "part",
                        "path": "listing-category/view/listing-category-image",
                        "_order": 10,
                    },
                },
            },
            "listing_category_name": {
                "type": "part",
                "path": "listing-category/view/block/listing-category-name",
                "tag": "h4",
                "_order": 20,
            },
            "listing_category_count": {
                "type": "part",
                "path": "listing-category/view/listing-category-count",
                "_order": 30,
            },
        },
    }
