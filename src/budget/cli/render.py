#!/usr/bin/env python3
"""
Console Rendering

Plain-text tables for listing records.
"""

from collections.abc import Sequence

import click


def render_table(columns: Sequence[str], rows: Sequence[Sequence[str]], right_align: Sequence[int] = ()) -> str:
    """
    Lay out rows under a header, padding each column to its widest cell.

    Args:
        columns: Header labels
        rows: Cell strings, one sequence per row
        right_align: Indexes of the columns to right-align (amounts)
    """
    widths = [len(label) for label in columns]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    def line(cells: Sequence[str]) -> str:
        padded = [
            cell.rjust(widths[i]) if i in right_align else cell.ljust(widths[i]) for i, cell in enumerate(cells)
        ]
        return "  ".join(padded).rstrip()

    separator = "  ".join("-" * width for width in widths)
    return "\n".join([line(columns), separator, *(line(row) for row in rows)])


def echo_title(title: str) -> None:
    click.echo(title)
    click.echo("=" * len(title))


def echo_table(columns: Sequence[str], rows: Sequence[Sequence[str]], right_align: Sequence[int] = ()) -> None:
    click.echo(render_table(columns, rows, right_align))
