"""Command line interface for seg-viewer."""
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import click

from seg_viewer.graph import build_graph
from seg_viewer.loader import LoadReport, PacketFileError, load_directory, load_packets
from seg_viewer.logger import set_console_level


def _load(paths: Iterable[Path], strict: bool) -> LoadReport:
    report = LoadReport()
    for path in paths:
        if path.is_dir():
            report.extend(load_directory(path, strict=strict))
        else:
            report.extend(load_packets(path, strict=strict))
    return report


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging output.")
@click.option("--strict", is_flag=True, default=False, help="Stop at the first invalid record.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, strict: bool) -> None:
    """Validate and convert seg JSONL scan data."""
    if verbose:
        set_console_level(logging.DEBUG)
    ctx.obj = {"strict": strict}


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_context
def validate(ctx: click.Context, paths) -> None:
    """Check every record in PATHS (files or directories of .jsonl files)."""
    try:
        report = _load(paths, ctx.obj["strict"])
    except PacketFileError as e:
        raise click.ClickException(str(e))

    for rejected in report.rejected:
        for violation in rejected.violations:
            click.echo(f"{rejected.path}:{rejected.line_number}: {violation}")

    click.echo(f"{len(report.packets)} valid, {len(report.rejected)} rejected")
    if not report.ok:
        ctx.exit(1)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("-o", "--out", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write graph JSON here instead of stdout.")
@click.pass_context
def graph(ctx: click.Context, paths, out: Optional[Path]) -> None:
    """Build scanner/listener graph JSON from PATHS."""
    try:
        report = _load(paths, ctx.obj["strict"])
    except PacketFileError as e:
        raise click.ClickException(str(e))

    data = build_graph(report.packets).model_dump_json(indent=2)
    if out is None:
        click.echo(data)
    else:
        out.write_text(data + "\n", encoding="utf-8")
        click.echo(f"Wrote graph with {len(report.packets)} links to {out}", err=True)


if __name__ == "__main__":
    sys.exit(cli())
