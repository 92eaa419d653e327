"""
Steadfast CLI - Check locator files and drive quick browser runs.
"""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

console = Console()

# op -> (facade method, takes argument)
ACTIONS = {
    "click": ("click", True),
    "js-click": ("click_via_script", True),
    "hover": ("hover_element", True),
    "move-click": ("move_to_element_and_click", True),
    "move-click-js": ("move_to_element_and_click_with_js", True),
    "visible": ("is_element_visible", True),
    "verify-text": ("verify_text_in_elements", True),
    "verify-domain": ("verify_domain", True),
    "navigate": ("navigate_to_url", True),
    "switch-tab": ("switch_to_new_tab", False),
}


def parse_action(action: str):
    """
    Split ``op:arg`` into a facade method name and its arguments.

    ``verify-text`` takes ``name=expected text``.
    """
    op, _, arg = action.partition(":")
    op = op.strip().lower()
    if op not in ACTIONS:
        raise click.BadParameter(f"Unknown action '{op}'. Choose from: {', '.join(ACTIONS)}")

    method, needs_arg = ACTIONS[op]
    if not needs_arg:
        return method, ()
    if not arg:
        raise click.BadParameter(f"Action '{op}' needs an argument, e.g. {op}:value")
    if op == "verify-text":
        name, sep, expected = arg.partition("=")
        if not sep:
            raise click.BadParameter("verify-text expects name=expected text")
        return method, (name, expected)
    return method, (arg,)


@click.group()
@click.version_option(package_name="steadfast", prog_name="steadfast")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """🧭 Steadfast - Resilient element interactions for web tests."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("locators", type=click.Path(exists=True, dir_okay=False))
def validate(locators):
    """
    Resolve every entry in a locator file without opening a browser.

    \b
    Example:

        steadfast validate locators.json
    """
    from steadfast.core.errors import ConfigurationError
    from steadfast.core.locators import LocatorRepository, LocatorResolver

    try:
        repository = LocatorRepository.from_file(locators)
    except ConfigurationError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)

    resolver = LocatorResolver(repository)
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Element", style="blue")
    table.add_column("Strategy", style="green")
    table.add_column("Value", style="yellow", max_width=60)

    errors = 0
    for name in repository.names():
        try:
            ref = resolver.resolve(name)
            table.add_row(escape(name), ref.strategy, escape(ref.value))
        except ConfigurationError as e:
            errors += 1
            table.add_row(escape(name), "[red]invalid[/red]", f"[red]{escape(str(e))}[/red]")

    console.print(table)
    if errors:
        console.print(f"\n[bold red]❌ {errors} of {len(repository)} locators are invalid[/bold red]")
        sys.exit(1)
    console.print(f"\n[bold green]✅ All {len(repository)} locators resolve[/bold green]")


@cli.command()
@click.argument("url")
@click.option("--locators", "-l", "locators_path", default=None, help="Locator file (defaults to settings or locators.json)")
@click.option("--config", "config_path", default=None, help="Settings file (defaults to ./steadfast.json)")
@click.option("--action", "-a", "actions", multiple=True, help="op:arg, e.g. click:company or verify-text:jobTitles=QA")
@click.option("--headless/--headed", default=False, help="Run browser in headless mode")
@click.option("--highlight/--no-highlight", default=None, help="Override element highlighting")
@click.option("--timeout", default=None, type=float, help="Interactability wait timeout in seconds")
def run(url, locators_path, config_path, actions, headless, highlight, timeout):
    """
    Open URL and perform actions in order, stopping at the first failure.

    \b
    Examples:

        steadfast run https://useinsider.com -l locators.json -a click:company -a click:career

        steadfast run https://useinsider.com/careers/quality-assurance/ -a click:seeAllQAjobs \\
            -a "verify-text:jobTitles=Quality Assurance" -a verify-domain:useinsider.com
    """
    from steadfast.core.driver_factory import create_driver
    from steadfast.core.errors import SteadfastError
    from steadfast.core.facade import InteractionFacade
    from steadfast.core.session import SessionConfig

    steps = [(action, *parse_action(action)) for action in actions]

    console.print(Panel.fit(
        f"[bold blue]🧭 Steadfast[/bold blue]\n"
        f"[dim]{escape(url)}[/dim]",
        border_style="blue"
    ))

    try:
        config = SessionConfig.load(config_path, highlight_override=highlight)
    except SteadfastError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)
    if timeout is not None:
        config.wait_timeout = timeout

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Step", style="dim", width=6)
    table.add_column("Action", style="green")
    table.add_column("Result", justify="center")
    table.add_column("Detail", style="dim", max_width=60)

    failed = False
    driver = create_driver(headless=headless)
    try:
        ui = InteractionFacade.from_config(driver, config, locators_path)
        ui.navigate_to_url(url)
        ui.accept_cookies_if_present()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Running...", total=None)
            for i, (action, method, args) in enumerate(steps, 1):
                progress.update(task, description=f"{action}")
                try:
                    result = getattr(ui, method)(*args)
                except SteadfastError as e:
                    table.add_row(str(i), escape(action), "[red]❌[/red]", escape(str(e)))
                    failed = True
                    break

                if result is False:
                    table.add_row(str(i), escape(action), "[red]❌[/red]", "verification did not pass")
                    failed = True
                    break
                detail = f"{result.strategy.value} click" if hasattr(result, "strategy") else ""
                table.add_row(str(i), escape(action), "[green]✅[/green]", detail)
    except SteadfastError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        failed = True
    finally:
        driver.quit()

    console.print(table)
    if failed:
        sys.exit(1)
    console.print(f"\n[bold green]✅ {len(steps)} actions completed[/bold green]")


@cli.command()
def version():
    """Show version information."""
    from steadfast import __version__
    console.print(f"Steadfast v{__version__}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
