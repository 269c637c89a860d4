"""
Main CLI entry point for hivetheme.

Provides developer commands for inspecting configuration, registered hooks
and template rewrites, using Click.
"""

import json as _json
import logging as _logging
import os as _os
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic
import yaml as _yaml

import hivetheme
import hivetheme.config as config
import hivetheme.hooks as hooks
import hivetheme.theme as theme
import hivetheme.utils.trees as trees

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    _logging.basicConfig(
        level=getattr(_logging, level.upper(), _logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=_sys.stderr,
        force=True,
    )


def _load_tree_file(path: _pathlib.Path) -> trees.Tree:
    """Load a YAML or JSON tree file, raising ClickException on failure."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise _click.ClickException(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix == ".json":
            return _json.loads(content)
        return _yaml.safe_load(content)
    except (ValueError, _yaml.YAMLError) as e:
        raise _click.ClickException(f"Cannot parse {path}: {e}") from e


def _echo_tree(value: _typing.Any, *, as_json: bool) -> None:
    """Print a tree as JSON or YAML, keeping key order."""
    if as_json:
        _click.echo(_json.dumps(value, indent=2, default=str))
    else:
        _click.echo(
            _yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip("\n")
        )


def _should_use_color(cli_flag: bool | None) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. CLI flag (--color / --no-color) if specified
    2. NO_COLOR env var (if set, disable color) - standard convention
    3. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
        force_color is True when color was explicitly requested.
    """
    if cli_flag is not None:
        return (cli_flag, cli_flag)

    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)

    return (_sys.stdout.isatty(), False)


def _print_yaml(yaml_text: str, *, color: bool = True, force_color: bool = False) -> None:
    """Print YAML text, optionally with syntax highlighting."""
    if color:
        import rich.console as _rich_console
        import rich.syntax as _rich_syntax

        console = _rich_console.Console(
            force_terminal=force_color,
            no_color=False if force_color else None,
            color_system="truecolor" if force_color else "auto",
        )
        syntax = _rich_syntax.Syntax(
            yaml_text,
            "yaml",
            theme="monokai",
            background_color="default",
        )
        console.print(syntax)
        return

    _click.echo(yaml_text)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(hivetheme.__version__, "-v", "--version", prog_name="hivetheme")
@_click.option("--verbose", is_flag=True, help="Enable debug logging")
@_click.option(
    "--admin/--site",
    "admin",
    default=None,
    help="Handle requests in the admin or site context (default: from config)",
)
@_click.option(
    "--plugin",
    "plugins",
    multiple=True,
    help="Active plugin slug; repeat to list several (replaces configured plugins)",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    verbose: bool,
    admin: bool | None,
    plugins: tuple[str, ...],
) -> None:
    """hivetheme - HivePress integration for the ListingHive theme."""
    overrides: dict[str, _typing.Any] = {}
    if admin is not None:
        overrides["admin"] = admin
    if plugins:
        overrides["active_plugins"] = list(plugins)

    try:
        settings = config.Settings()
        if overrides:
            settings.environment = settings.environment.model_copy(update=overrides)
    except (config.ConfigFileError, _pydantic.ValidationError) as e:
        raise _click.ClickException(str(e)) from e

    _configure_logging("debug" if verbose else settings.logging.level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


def _get_theme(ctx: _click.Context) -> theme.Theme:
    """Build the theme for the CLI's settings, once per invocation."""
    if "theme" not in ctx.obj:
        ctx.obj["theme"] = theme.Theme(ctx.obj["settings"])
    return ctx.obj["theme"]


# =============================================================================
# config
# =============================================================================


@cli.group(name="config")
def config_cmd() -> None:
    """Configuration commands."""


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.option(
    "--color/--no-color",
    "use_color",
    default=None,
    help="Enable/disable syntax highlighting (default: auto-detect TTY)",
)
@_click.pass_context
def config_show(ctx: _click.Context, as_json: bool, use_color: bool | None) -> None:
    """Show effective configuration from all sources."""
    settings: config.Settings = ctx.obj["settings"]
    full_config = settings.model_dump(mode="json")

    if as_json:
        _click.echo(_json.dumps(full_config, indent=2))
        return

    color_enabled, force_color = _should_use_color(use_color)
    yaml_text = _yaml.safe_dump(full_config, default_flow_style=False, sort_keys=False)
    _print_yaml(yaml_text, color=color_enabled, force_color=force_color)


# =============================================================================
# hooks
# =============================================================================


@cli.group(name="hooks")
def hooks_cmd() -> None:
    """Inspect registered hooks."""


@hooks_cmd.command(name="list")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_context
def hooks_list(ctx: _click.Context, as_json: bool) -> None:
    """List hooks registered for the current environment."""
    registered = _get_theme(ctx).hooks.to_dict()

    if as_json:
        _click.echo(_json.dumps(registered, indent=2))
        return

    if not registered:
        _click.echo("No hooks registered.")
        return

    for name, callbacks in registered.items():
        _click.echo(name)
        for callback in callbacks:
            _click.echo(
                f"  [{callback['priority']:>3}] {callback['kind']:<6} {callback['callback']}"
            )


# =============================================================================
# template
# =============================================================================


@cli.group(name="template")
def template_cmd() -> None:
    """Template description commands."""


@template_cmd.command(name="alter")
@_click.argument("name")
@_click.argument(
    "template_file",
    type=_click.Path(exists=True, dir_okay=False, path_type=_pathlib.Path),
)
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_context
def template_alter(
    ctx: _click.Context,
    name: str,
    template_file: _pathlib.Path,
    as_json: bool,
) -> None:
    """Run the filters for template NAME over TEMPLATE_FILE.

    TEMPLATE_FILE is a YAML or JSON template description.

    Examples:
        hivetheme template alter listing_view_block listing.yaml
        hivetheme --plugin hivepress template alter listing_view_page page.json --json
    """
    current_theme = _get_theme(ctx)
    if not current_theme.hooks.has_hooks(hooks.template_hook(name)):
        raise _click.ClickException(f"No filters registered for template: {name}")

    template = _load_tree_file(template_file)
    _echo_tree(current_theme.filter_template(name, template), as_json=as_json)


# =============================================================================
# tree
# =============================================================================


@cli.group(name="tree")
def tree_cmd() -> None:
    """Locate and merge template trees."""


@tree_cmd.command(name="locate")
@_click.argument(
    "tree_file",
    type=_click.Path(exists=True, dir_okay=False, path_type=_pathlib.Path),
)
@_click.argument("keys", nargs=-1)
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tree_locate(tree_file: _pathlib.Path, keys: tuple[str, ...], as_json: bool) -> None:
    """Print the subtree of TREE_FILE at KEYS ({} if absent)."""
    _echo_tree(trees.locate(_load_tree_file(tree_file), keys), as_json=as_json)


@tree_cmd.command(name="merge")
@_click.argument(
    "base_file",
    type=_click.Path(exists=True, dir_okay=False, path_type=_pathlib.Path),
)
@_click.argument(
    "override_file",
    type=_click.Path(exists=True, dir_okay=False, path_type=_pathlib.Path),
)
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tree_merge(base_file: _pathlib.Path, override_file: _pathlib.Path, as_json: bool) -> None:
    """Print OVERRIDE_FILE merged into BASE_FILE."""
    base = _load_tree_file(base_file)
    override = _load_tree_file(override_file)
    _echo_tree(trees.merge(base, override), as_json=as_json)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="hivetheme", obj={})


if __name__ == "__main__":
    main()
