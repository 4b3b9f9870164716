"""CLI commands for shellprompt"""

import os
from typing import Optional, Tuple

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Load environment variables
load_dotenv()

from ..config import load_config
from ..context import Context, Shell
from ..formatter import ParseError, ResolutionError, StringFormatter, parse_style
from ..modules import ALL_MODULES
from ..prompt import handle_module, render_modules, render_prompt
from .display import segments_to_text
from .utils import parse_assignments, setup_logging

error_console = Console(stderr=True)

path_option = click.option(
    '--path', '-p',
    type=click.Path(file_okay=False),
    default=None,
    help='Directory to render for (default: current directory)',
)
shell_option = click.option(
    '--shell', '-s', 'shell_name',
    default=lambda: os.getenv('SHELLPROMPT_SHELL'),
    help='Shell the prompt is rendered for',
)


def get_console(ctx) -> Console:
    """Console honouring the --color/--no-color choice"""
    color = ctx.obj['color']
    if color is None:
        return Console(soft_wrap=True, highlight=False)
    return Console(soft_wrap=True, highlight=False, force_terminal=color, no_color=not color)


def build_context(ctx, path: Optional[str], shell_name: Optional[str]) -> Context:
    return Context(path=path, shell=Shell.detect(shell_name), config=ctx.obj['config'])


@click.group()
@click.option('--debug/--no-debug', default=False, help='Enable debug output')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help='Configuration file (default: $SHELLPROMPT_CONFIG or ~/.config/shellprompt.yaml)')
@click.option('--color/--no-color', default=None, help='Force or disable styled output')
@click.pass_context
def cli(ctx, debug, config_path, color):
    """Render a shell prompt from project-aware modules"""
    ctx.ensure_object(dict)
    setup_logging(debug)
    ctx.obj['debug'] = debug
    ctx.obj['color'] = color
    ctx.obj['config'] = load_config(config_path)


@cli.command()
@path_option
@shell_option
@click.pass_context
def prompt(ctx, path, shell_name):
    """Print the full prompt"""
    context = build_context(ctx, path, shell_name)
    segments = render_prompt(context)
    get_console(ctx).print(segments_to_text(segments), end='')


@cli.command()
@click.argument('name', type=click.Choice(sorted(ALL_MODULES)))
@path_option
@shell_option
@click.pass_context
def module(ctx, name, path, shell_name):
    """Print a single module"""
    context = build_context(ctx, path, shell_name)
    rendered = handle_module(name, context)
    if rendered is None or rendered.is_empty():
        return
    get_console(ctx).print(segments_to_text(rendered.segments), end='')


@cli.command()
@path_option
@shell_option
@click.pass_context
def explain(ctx, path, shell_name):
    """Show which modules are active and how long each took"""
    context = build_context(ctx, path, shell_name)
    modules = render_modules(context)
    console = get_console(ctx)

    if not modules:
        console.print(f"[yellow]No modules active in {escape(str(context.current_dir))}[/yellow]")
        return

    table = Table(title="Active modules", show_header=True, header_style="bold magenta")
    table.add_column("Module", style="cyan")
    table.add_column("Output")
    table.add_column("Time", justify="right", style="green")

    for rendered in modules:
        duration = f"{rendered.duration * 1000:.1f}ms" if rendered.duration is not None else "-"
        table.add_row(rendered.name, segments_to_text(rendered.segments), duration)

    console.print(table)


@cli.command(name='format')
@click.argument('format_string')
@click.option('--var', '-v', 'variables', multiple=True, help='Value variable as name=value')
@click.option('--meta', '-m', 'metas', multiple=True, help='Meta variable as name=format')
@click.option('--style', '-s', 'styles', multiple=True, help='Style variable as name=descriptor')
@click.option('--default-style', default=None, help='Style applied where the format sets none')
@click.pass_context
def format_command(ctx, format_string: str, variables: Tuple[str, ...], metas: Tuple[str, ...],
                   styles: Tuple[str, ...], default_style: Optional[str]):
    """Render an ad-hoc format string"""
    values = parse_assignments(variables, '--var')
    meta_values = parse_assignments(metas, '--meta')
    style_values = parse_assignments(styles, '--style')

    try:
        segments = (StringFormatter(format_string)
                    .map_meta(lambda name, _: meta_values.get(name))
                    .map_style(style_values.get)
                    .map(values.get)
                    .parse(default_style=parse_style(default_style) if default_style else None))
    except ParseError as e:
        error_console.print(f"[red]Invalid format string:[/red] {escape(str(e))}")
        ctx.exit(1)
    except ResolutionError as e:
        error_console.print(f"[red]Cannot render format string:[/red] {escape(str(e))}")
        ctx.exit(1)

    get_console(ctx).print(segments_to_text(segments))


if __name__ == '__main__':
    cli()
