"""CLI UI components (Rich).

Why separate components:
- Keeps command handling apart from visual details.
- Tables and panels are reused by `shell` and `exec`.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.commands.base import CommandResult
from core.domain.models import Person


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("TABook", style="bold cyan")
    subtitle = Text("Students • Staff • Tutorials", style="dim")
    hint = Text("Type `help` for the command list, `exit` to quit.", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle, "\n", hint), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_persons_table(persons: Sequence[Person]) -> Table:
    """Table of the shown persons, numbered the way commands index them."""

    table = Table(title=f"Persons ({len(persons)})")
    table.add_column("#", style="bold", justify="right", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta", no_wrap=True)
    table.add_column("NUS Net ID", no_wrap=True)
    table.add_column("Tutorial", justify="right", no_wrap=True)
    table.add_column("Phone", no_wrap=True)
    table.add_column("Email")
    table.add_column("GitHub", style="green")
    table.add_column("Tags", style="yellow")

    for position, person in enumerate(persons, start=1):
        table.add_row(
            str(position),
            person.name.value,
            person.person_type.value,
            person.nus_network_id.value,
            person.tutorial_id.value if person.tutorial_id else "-",
            person.phone.value,
            person.email.value,
            person.github_id.value,
            ", ".join(tag.value for tag in person.sorted_tags()),
        )
    return table


def build_result_panel(result: CommandResult) -> Panel:
    """Panel with the feedback of one command; red when it failed."""

    style = "green" if result.success else "red"
    title = Text("Done" if result.success else "Error", style=f"bold {style}")
    return Panel(Text(result.feedback_to_user), title=title, border_style=style)
