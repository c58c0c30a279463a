"""List and manage roster members."""

import typer
from typing_extensions import Annotated

from roster_cli.context import get_context
from roster_cli.display import TableRenderer
from roster_cli.utils import finish_mutation, require_data

members_app = typer.Typer(help="List and manage roster members.")


@members_app.command("ls")
def ls() -> None:
    """List members with names in the configured format."""
    workflow = get_context().members
    require_data(workflow.list_members(), "members")
    members = workflow.member_display_names()

    renderer = TableRenderer()
    if not members:
        renderer.render_empty("No members found")
        return
    renderer.render_members(members)


@members_app.command("add")
def add(
    first_name: Annotated[str, typer.Argument(help="First name")],
    last_name: Annotated[str, typer.Argument(help="Last name")],
) -> None:
    """Add a member; initials are generated from the name."""
    finish_mutation(get_context().members.create_member(first_name, last_name))


@members_app.command("rename")
def rename(
    member_id: Annotated[int, typer.Argument(help="Member ID")],
    first_name: Annotated[str, typer.Argument(help="New first name")],
    last_name: Annotated[str, typer.Argument(help="New last name")],
) -> None:
    """Change a member's first and last name."""
    finish_mutation(
        get_context().members.update_member_name(member_id, first_name, last_name)
    )


@members_app.command("initials")
def initials(
    member_id: Annotated[int, typer.Argument(help="Member ID")],
    value: Annotated[str, typer.Argument(metavar="INITIALS", help="Custom initials")],
) -> None:
    """Set custom initials for a member."""
    finish_mutation(get_context().members.update_member_initials(member_id, value))
