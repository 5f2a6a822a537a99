from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ...application.models import MappingSummary

_CONSTRUCT_STYLES = {
    "Resource": "cyan",
    "ComplexType": "magenta",
    "PrimitiveType": "green",
}


def render_mapping_table(summaries: Sequence[MappingSummary]) -> Table:
    table = Table(title=f"Mapped types ({len(summaries)})")
    table.add_column("Name", style="bold")
    table.add_column("Construct")
    table.add_column("Profile")
    table.add_column("Elements", justify="right")
    table.add_column("Implementing type", style="dim")
    ordered = sorted(summaries, key=lambda s: (s.construct.value, s.name))
    for summary in ordered:
        style = _CONSTRUCT_STYLES.get(summary.construct.value, "")
        construct = f"[{style}]{summary.construct.value}[/{style}]" if style else summary.construct.value
        name = summary.name + (" (generic)" if summary.is_open_generic else "")
        table.add_row(
            name,
            construct,
            summary.profile or "-",
            str(summary.element_count) if summary.elements else "-",
            summary.implementing_type,
        )
    return table


def render_element_table(summary: MappingSummary) -> Table:
    table = Table(title=f"{summary.name} elements")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Element", style="cyan")
    table.add_column("Attribute")
    table.add_column("Type")
    table.add_column("Summary", justify="center")
    for position, element in enumerate(summary.elements, start=1):
        name = f"{element.name}[x]" if element.choice_suffixes else element.name
        table.add_row(
            str(position),
            name,
            element.attribute_name,
            element.display_type,
            "✓" if element.in_summary else "",
        )
    return table
