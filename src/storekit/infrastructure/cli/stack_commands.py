"""CLI commands for the Stack container."""

from __future__ import annotations

import click

from storekit.domain.model.stack import Stack


@click.command("reverse")
@click.argument("items", nargs=-1, required=True)
def stack_reverse(items: tuple[str, ...]) -> None:
    """Push ITEMS onto a stack and pop them back off."""
    stack: Stack[str] = Stack()
    for item in items:
        stack.push(item)

    click.echo(f"Top: {stack.peek()}  (size={stack.size()})")
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    click.echo(" ".join(popped))
