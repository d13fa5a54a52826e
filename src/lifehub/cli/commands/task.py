"""Task and goal commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.id_resolution import resolve_id_or_exit
from lifehub.cli.input_parsing import parse_date_or_exit
from lifehub.domain.defaults import preset_tasks
from lifehub.domain.derivations import countdown_days, COUNTDOWN_LABEL
from lifehub.domain.entities import Area, Recurrence
from lifehub.domain.errors import ValidationError


@click.group()
def task_group():
    """Plan tasks and goals."""
    pass


@task_group.command("add")
@click.argument("title", required=False)
@click.option(
    "--area",
    type=click.Choice([a.value for a in Area]),
    default=Area.LIFE.value,
    show_default=True,
    help="Life area",
)
@click.option("--due", help="Due date (optional)")
@click.option(
    "--recur",
    type=click.Choice([r.value for r in Recurrence]),
    default=Recurrence.NONE.value,
    show_default=True,
    help="Recurrence",
)
@click.pass_context
def add_task(ctx, title: str | None, area: str, due: str | None, recur: str):
    """Add a task.

    Examples:
        lifehub task add "Push to GitHub" --area Career
    """
    service = ctx.obj["store"]
    due_date = parse_date_or_exit(ctx, due, service.today())

    try:
        store = service.add_task(title=title, area=area, due=due_date, recurrence=recur)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added task {store.tasks[0].id}: {store.tasks[0].title}")


@task_group.command("preset")
@click.argument("name", required=False)
@click.pass_context
def add_preset(ctx, name: str | None):
    """Add a built-in task. Without NAME, list the presets."""
    presets = preset_tasks()
    if name is None:
        for preset, (title, area) in presets.items():
            click.echo(f"{preset:<40} {title} [{area.value}]")
        return

    service = ctx.obj["store"]
    try:
        store = service.add_preset_task(name)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added task {store.tasks[0].id}: {store.tasks[0].title}")


@task_group.command("list")
@click.option("--open", "open_only", is_flag=True, help="Hide completed tasks")
@click.pass_context
def list_tasks(ctx, open_only: bool):
    """List tasks."""
    service = ctx.obj["store"]
    tasks = [t for t in service.store.tasks if not (open_only and t.done)]

    click.echo(f"{COUNTDOWN_LABEL} in {countdown_days(service.now())} days")
    if not tasks:
        click.echo("No tasks yet.")
        return

    for task in tasks:
        mark = "[x]" if task.done else "[ ]"
        details = f"Area: {(task.area or Area.LIFE).value}"
        if task.recurrence != Recurrence.NONE:
            details += f" • {task.recurrence.value}"
        if task.due:
            details += f" • due {task.due}"
        click.echo(f"{mark} {task.title}")
        click.echo(f"    {details} • {task.id}")


@task_group.command("toggle")
@click.argument("task_id")
@click.pass_context
def toggle_task(ctx, task_id: str):
    """Mark a task done, or open again."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.tasks, task_id)
    service.toggle_task(entity_id)
    for task in service.store.tasks:
        if task.id == entity_id:
            click.echo(f"{'Completed' if task.done else 'Reopened'}: {task.title}")


@task_group.command("delete")
@click.argument("task_id")
@click.pass_context
def delete_task(ctx, task_id: str):
    """Delete a task."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.tasks, task_id)
    service.delete_task(entity_id)
    click.echo(f"Deleted task {entity_id}")


def register_commands(cli: click.Group) -> None:
    """Register task commands with main CLI."""
    cli.add_command(task_group, name="task")
