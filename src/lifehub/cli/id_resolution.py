"""CLI helpers for entity id resolution."""

from __future__ import annotations

from typing import Iterable

import click


def resolve_id(ids: Iterable[str], token: str) -> str:
    """Resolve a full id or a unique id prefix.

    Unknown ids are returned unchanged so that updates and deletes on them
    stay silent no-ops.

    Raises:
        ValueError: If the prefix matches more than one id
    """
    ids = list(ids)
    if token in ids:
        return token
    matches = [entity_id for entity_id in ids if entity_id.startswith(token)]
    if len(matches) > 1:
        raise ValueError(f"Id prefix '{token}' matches {len(matches)} entries; type more characters")
    return matches[0] if matches else token


def resolve_id_or_exit(ctx: click.Context, items: Iterable, token: str) -> str:
    """Resolve an id against entities, or exit with a CLI error."""
    try:
        return resolve_id((item.id for item in items), token)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
