# src/monkey/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import config
from ..environment import Environment
from ..errors import MonkeySyntaxError
from ..evaluator import Evaluator
from ..lexer import Lexer
from ..monkey_token import EOF
from ..object import NULL, is_error
from ..parser import Parser

console = Console()
logger = logging.getLogger("monkey.cli")


def _configure_logging(debug):
    level = logging.DEBUG if debug else getattr(logging, str(config.log_level).strip().upper(), logging.WARNING)
    package_logger = logging.getLogger("monkey")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger.addHandler(handler)


def _read_source(file):
    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


def _parse_source(source_code, filename):
    """Return the parsed program, or None after printing the errors."""
    try:
        parser = Parser(Lexer(source_code, filename))
        program = parser.parse_program()
    except MonkeySyntaxError as e:
        console.print(f"[bold red]Syntax Error:[/bold red] {escape(e.format())}")
        return None

    if parser.errors:
        console.print("[bold red]Parser Errors:[/bold red]")
        for error in parser.errors:
            console.print(f"  {escape(error)}")
        return None
    return program


def _print_result(result):
    """Print an evaluation result; returns False when it is an Error."""
    if is_error(result):
        console.print(f"[bold red]ERROR:[/bold red] {escape(result.message)}")
        return False
    if result is not None and result is not NULL:
        console.print(escape(result.inspect()))
    return True


def _execute(source_code, filename):
    program = _parse_source(source_code, filename)
    if program is None:
        sys.exit(1)

    logger.debug("evaluating %s (%d statements)", filename, len(program.statements))
    result = Evaluator().eval_node(program, Environment())
    if not _print_result(result):
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="Monkey")
@click.option('--debug', is_flag=True, help="Enable evaluator debug logging.")
def cli(debug):
    """Monkey Programming Language - a small tree-walking interpreter"""
    if debug:
        config.enable_debug_logs = True
    _configure_logging(config.enable_debug_logs)
    if sys.getrecursionlimit() < config.recursion_limit:
        sys.setrecursionlimit(config.recursion_limit)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def run(file):
    """Run a Monkey program"""
    _execute(_read_source(file), file)


@cli.command(name='eval')
@click.argument('source')
def eval_command(source):
    """Evaluate SOURCE given on the command line"""
    _execute(source, "<command-line>")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Monkey file"""
    if _parse_source(_read_source(file), file) is None:
        sys.exit(1)
    console.print("[bold green]Syntax is valid![/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the parsed program of a Monkey file"""
    program = _parse_source(_read_source(file), file)
    if program is None:
        sys.exit(1)

    console.print(Panel.fit(
        escape("\n".join(str(stmt) for stmt in program.statements)),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Monkey file"""
    lexer = Lexer(_read_source(file), file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    try:
        while True:
            token = lexer.next_token()
            if token.type == EOF:
                break
            table.add_row(escape(token.type), escape(token.literal), str(token.line), str(token.column))
    except MonkeySyntaxError as e:
        console.print(table)
        console.print(f"[bold red]Syntax Error:[/bold red] {escape(e.format())}")
        sys.exit(1)

    console.print(table)


@cli.command()
def repl():
    """Start the Monkey REPL"""
    env = Environment()
    evaluator = Evaluator()
    console.print(f"[bold green]Monkey REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            code = console.input(f"[bold blue]{escape(config.prompt)}[/bold blue]")
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye!")
            break

        if code.strip() in ['exit', 'quit']:
            break
        if not code.strip():
            continue

        program = _parse_source(code, "<repl>")
        if program is None:
            continue

        _print_result(evaluator.eval_node(program, env))


if __name__ == "__main__":
    cli()
