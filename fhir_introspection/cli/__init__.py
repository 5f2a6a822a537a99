import click

from .commands.elements import elements_command
from .commands.inspect import inspect_command
from .commands.parse import parse_command


@click.group()
def app() -> None:
    pass


app.add_command(inspect_command, name="inspect")
app.add_command(elements_command, name="elements")
app.add_command(parse_command, name="parse")
__all__ = ["app"]
