"""Typer CLI application for inspecting terminal capabilities."""

import logging
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from termenv.core.color import ANSI256Color, parse_color
from termenv.core.errors import InvalidColorError, InvalidProfileError
from termenv.core.profile import Profile
from termenv.output import Output
from termenv.style import Style


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install termenv[cli]")

    app = typer.Typer(
        name="termenv",
        help="Inspect terminal color support and preview styled text.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def resolve_profile(name: Optional[str]) -> Optional[Profile]:
        if name is None:
            return None
        try:
            return Profile.from_name(name)
        except InvalidProfileError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    def resolve_color(value: str):
        try:
            return parse_color(value)
        except InvalidColorError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log detection details")] = False,
    ) -> None:
        """Inspect terminal color support and preview styled text."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    @app.command()
    def info(
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show what the current terminal supports."""
        out = Output()
        data = {
            "tty": out.is_tty(),
            "color_profile": str(out.color_profile()),
            "env_color_profile": str(out.env_color_profile()),
            "no_color": out.env_no_color(),
            "foreground": str(out.foreground_color()) or None,
            "background": str(out.background_color()) or None,
            "dark_background": out.has_dark_background(),
            "term": out.environ.getenv("TERM") or None,
            "colorterm": out.environ.getenv("COLORTERM") or None,
        }

        if json_output:
            import json
            print(json.dumps(data, indent=2))
            return

        console.print("[bold cyan]Terminal capabilities[/]")
        console.print(f"  [bold]TTY:[/]               {data['tty']}")
        console.print(f"  [bold]TERM:[/]              {data['term'] or '(unset)'}")
        console.print(f"  [bold]COLORTERM:[/]         {data['colorterm'] or '(unset)'}")
        console.print(f"  [bold]Color profile:[/]     {data['color_profile']}")
        console.print(f"  [bold]Effective profile:[/] {data['env_color_profile']}")
        console.print(f"  [bold]Color disabled:[/]    {data['no_color']}")
        console.print(f"  [bold]Foreground:[/]        {data['foreground'] or '(unknown)'}")
        console.print(f"  [bold]Background:[/]        {data['background'] or '(unknown)'}")
        console.print(f"  [bold]Dark background:[/]   {data['dark_background']}")

    @app.command()
    def convert(
        color: Annotated[str, typer.Argument(help="Hex color (#rrggbb) or palette index (0-255)")],
        profile: Annotated[Optional[str], typer.Option("--profile", "-p", help="Only convert to this profile")] = None,
    ) -> None:
        """Show how a color is downsampled for each profile."""
        source = resolve_color(color)
        target = resolve_profile(profile)
        profiles = [target] if target is not None else list(Profile)

        table = Table(title=f"Conversions of {color}")
        table.add_column("Profile", style="bold")
        table.add_column("Type")
        table.add_column("Foreground SGR")
        table.add_column("Background SGR")
        table.add_column("Hex")

        for p in profiles:
            converted = p.convert(source)
            table.add_row(
                str(p),
                type(converted).__name__,
                converted.sequence(False) or "-",
                converted.sequence(True) or "-",
                str(converted) or "-",
            )
        console.print(table)

    @app.command()
    def style(
        text: Annotated[str, typer.Argument(help="Text to style")],
        fg: Annotated[Optional[str], typer.Option("--fg", help="Foreground color")] = None,
        bg: Annotated[Optional[str], typer.Option("--bg", help="Background color")] = None,
        bold: Annotated[bool, typer.Option("--bold", help="Bold")] = False,
        faint: Annotated[bool, typer.Option("--faint", help="Faint")] = False,
        italic: Annotated[bool, typer.Option("--italic", help="Italic")] = False,
        underline: Annotated[bool, typer.Option("--underline", help="Underline")] = False,
        overline: Annotated[bool, typer.Option("--overline", help="Overline")] = False,
        blink: Annotated[bool, typer.Option("--blink", help="Blink")] = False,
        reverse: Annotated[bool, typer.Option("--reverse", help="Reverse video")] = False,
        cross_out: Annotated[bool, typer.Option("--cross-out", help="Crossed out")] = False,
        profile: Annotated[Optional[str], typer.Option("--profile", "-p", help="Render for this profile instead of the detected one")] = None,
    ) -> None:
        """Print text with the given attributes."""
        out = Output(profile=resolve_profile(profile))
        s = out.string(text)

        attributes = [
            (bold, Style.bold),
            (faint, Style.faint),
            (italic, Style.italic),
            (underline, Style.underline),
            (overline, Style.overline),
            (blink, Style.blink),
            (reverse, Style.reverse),
            (cross_out, Style.cross_out),
        ]
        for enabled, apply in attributes:
            if enabled:
                s = apply(s)

        if fg:
            s = s.foreground(out.convert(resolve_color(fg)))
        if bg:
            s = s.background(out.convert(resolve_color(bg)))

        print(s.render())

    @app.command()
    def palette(
        profile: Annotated[Optional[str], typer.Option("--profile", "-p", help="Render for this profile instead of the detected one")] = None,
    ) -> None:
        """Print the 256-color palette as a profile displays it."""
        target = resolve_profile(profile)
        if target is None:
            target = Output().profile

        for row_start in range(0, 256, 16):
            cells = []
            for index in range(row_start, row_start + 16):
                converted = target.convert(ANSI256Color(index))
                cells.append(target.string(f"{index:>4}").background(converted).render())
            print("".join(cells))

    return app
