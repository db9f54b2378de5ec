from __future__ import annotations

import json
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from .config import AppConfig, load_config
from .easing import UnknownEasingError, curve_names
from .renderer import render_catalog
from .sampling import sample_curve
from .types import PlotConfig


app = typer.Typer(add_completion=False, no_args_is_help=True)


def _choose(val, cfg_val, prefer_config: bool, default=None):
    if prefer_config and cfg_val is not None:
        return cfg_val
    if val is not None:
        return val
    return cfg_val if cfg_val is not None else default


@app.command("list")
def list_curves():
    """Print every curve name in catalog order."""
    for name in curve_names():
        print(name)


@app.command()
def sample(
    name: str = typer.Argument(..., help="Curve name, e.g. easeOutBounce"),
    steps: Optional[int] = typer.Option(None, help="Evenly spaced progress values, at least 2 (default 11)"),
    precision: Optional[int] = typer.Option(None, help="Digits after the decimal point (default 6)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    config: Optional[str] = typer.Option(None, help="Path to YAML config"),
    prefer_config: bool = typer.Option(False, help="If true, config overrides CLI when set"),
):
    """Evaluate one curve over [0,1]."""
    cfg: Optional[AppConfig] = load_config(config) if config else None
    steps = int(_choose(steps, cfg.steps if cfg else None, prefer_config, 11))
    precision = int(_choose(precision, cfg.precision if cfg else None, prefer_config, 6))

    if steps < 2:
        raise typer.BadParameter("steps must be at least 2", param_hint="--steps")
    if precision < 0:
        raise typer.BadParameter("precision must not be negative", param_hint="--precision")
    try:
        samples = sample_curve(name, steps)
    except UnknownEasingError as exc:
        print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)

    if as_json:
        # plain stdout so the output stays machine readable
        typer.echo(json.dumps(samples.to_json()))
        return

    table = Table(title=name)
    table.add_column("progress", justify="right")
    table.add_column("value", justify="right")
    for s in samples.samples:
        table.add_row(f"{s.progress:.{precision}f}", f"{s.value:.{precision}f}")
    print(table)
    if samples.overshoots():
        print("[yellow]Curve leaves \\[0,1] (overshoot).[/yellow]")


@app.command()
def plot(
    names: Optional[List[str]] = typer.Argument(None, help="Curve names; defaults to the whole catalog"),
    output_dir: Optional[str] = typer.Option(None, help="Directory to write PNG plots (default ./plots)"),
    steps: Optional[int] = typer.Option(None, help="Samples per curve (default 101)"),
    width: Optional[int] = typer.Option(None, help="Plot width (default 640)"),
    height: Optional[int] = typer.Option(None, help="Plot height (default 360)"),
    config: Optional[str] = typer.Option(None, help="Path to YAML config"),
    prefer_config: bool = typer.Option(False, help="If true, config overrides CLI when set"),
):
    """Render curves to PNG files."""
    cfg: Optional[AppConfig] = load_config(config) if config else None

    names = _choose(names or None, cfg.curves if cfg else None, prefer_config) or curve_names()
    output_dir = _choose(output_dir, cfg.output_dir if cfg else None, prefer_config, "./plots")
    steps = int(_choose(steps, cfg.steps if cfg else None, prefer_config, 101))
    width = int(_choose(width, cfg.width if cfg else None, prefer_config, 640))
    height = int(_choose(height, cfg.height if cfg else None, prefer_config, 360))

    if steps < 2:
        raise typer.BadParameter("steps must be at least 2", param_hint="--steps")
    try:
        plot_config = PlotConfig(width=width, height=height)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    try:
        paths = render_catalog(list(names), output_dir, steps=steps, config=plot_config)
    except UnknownEasingError as exc:
        print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)

    print(f"[bold green]Done.[/bold green] Wrote {len(paths)} plots to {output_dir}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(5000, help="Port"),
    debug: bool = typer.Option(False, help="Enable Flask debug mode"),
):
    """Serve the catalog over HTTP."""
    from .web import create_app

    create_app().run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    app()
