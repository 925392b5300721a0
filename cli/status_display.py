"""Profile and field list display for the CLI"""

from rich.table import Table

from config.loader import ConfigLoader
from linkedin_token import Profile


def show_profile(profile: Profile, console):
    """
    Display a normalized LinkedIn profile

    Args:
        profile: Profile returned by the strategy
        console: Rich console for output
    """
    table = Table(title="LinkedIn Profile")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Provider", profile.provider)
    table.add_row("ID", profile.id or "-")
    table.add_row("Display Name", profile.display_name or "-")
    table.add_row("Given Name", profile.name.given_name or "-")
    table.add_row("Family Name", profile.name.family_name or "-")
    table.add_row("Emails", ", ".join(email.value for email in profile.emails) or "-")
    table.add_row("Photo", profile.photos[0].value or "-")

    console.print(table)


def show_fields(fields: str, console):
    """
    Display the profile fields requested from LinkedIn, one per row

    Args:
        fields: Comma-joined field list
        console: Rich console for output
    """
    table = Table(title="Profile Fields")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Field")

    for index, name in enumerate(ConfigLoader.split_list(fields), start=1):
        table.add_row(str(index), name)

    console.print(table)
