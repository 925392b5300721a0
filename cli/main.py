"""CLI entry point and argument parsing"""

import argparse
import asyncio
import sys
from dataclasses import replace

from rich.console import Console

import settings
from cli.debug_setup import setup_logging
from cli.status_display import show_fields, show_profile
from linkedin_token import InternalOAuthError, LinkedInTokenStrategy, ProfileParseError, scope_to_profile_fields


console = Console()


def _reject(access_token, refresh_token, profile):
    # The CLI only loads profiles; nothing is ever verified
    return None, None


def run_fields(args):
    scope = args.scope or settings.LINKEDIN_SCOPE
    fields = args.field or settings.LINKEDIN_PROFILE_FIELDS
    show_fields(scope_to_profile_fields(list(scope), list(fields)), console)


def run_profile(args):
    from server.dependencies import options_from_settings

    try:
        options = options_from_settings()
    except ValueError as e:
        console.print(f"[red]ERROR:[/red] {e}. Set LINKEDIN_CLIENT_ID and LINKEDIN_CLIENT_SECRET.")
        sys.exit(1)
    if args.scope:
        options = replace(options, scope=tuple(args.scope))

    strategy = LinkedInTokenStrategy(options, _reject)
    try:
        profile = asyncio.run(strategy.user_profile(args.token))
    except InternalOAuthError as e:
        console.print(f"[red]LinkedIn error:[/red] {e}")
        sys.exit(1)
    except ProfileParseError as e:
        console.print(f"[red]Invalid profile response:[/red] {e}")
        sys.exit(1)

    show_profile(profile, console)
    if args.json:
        console.print_json(data=profile.json)


def run_serve(args):
    from server import AuthServer

    try:
        AuthServer(debug=args.debug, bind_address=args.bind, port=args.port).run()
    except ValueError as e:
        console.print(f"[red]ERROR:[/red] {e}. Set LINKEDIN_CLIENT_ID and LINKEDIN_CLIENT_SECRET.")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LinkedIn access-token authentication")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fields_parser = subparsers.add_parser("fields", help="Show the profile fields requested for a scope")
    fields_parser.add_argument("--scope", "-s", action="append", help="LinkedIn scope (repeatable)")
    fields_parser.add_argument("--field", "-f", action="append", help="Extra profile field (repeatable)")
    fields_parser.set_defaults(handler=run_fields)

    profile_parser = subparsers.add_parser("profile", help="Fetch the normalized profile for an access token")
    profile_parser.add_argument("--token", "-t", required=True, help="LinkedIn OAuth2 access token")
    profile_parser.add_argument("--scope", "-s", action="append", help="LinkedIn scope (repeatable)")
    profile_parser.add_argument("--json", action="store_true", help="Also print the raw profile JSON")
    profile_parser.set_defaults(handler=run_profile)

    serve_parser = subparsers.add_parser("serve", help="Run the authentication server")
    serve_parser.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    serve_parser.add_argument("--port", "-p", type=int, default=None, help="Override port (default: from config)")
    serve_parser.set_defaults(handler=run_serve)

    return parser


def main(argv=None):
    """Entry point for the CLI"""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug, settings.LOG_LEVEL)

    try:
        args.handler(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")


if __name__ == "__main__":
    main()
