"""Command-line interface for the Room Token Server."""

import sys

import click
from rich.console import Console

from . import __version__
from .config import get_settings
from .errors import CredentialsNotConfiguredError
from .models.token import TokenRequest
from .services.issuer import issue_token
from .signing.factory import get_token_signer

# Token goes to stdout, everything else to stderr
console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main():
    """Room Token Server - mint LiveKit access tokens."""
    pass


@main.command()
@click.option("--host", default=None, help="Bind address (default: HOST setting)")
@click.option("--port", type=int, default=None, help="Port (default: PORT setting)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool):
    """Run the HTTP token server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold blue]Room Token Server[/bold blue] on [cyan]{host}:{port}[/cyan]")
    if not settings.credentials_configured:
        console.print("[yellow]Warning:[/yellow] LIVEKIT_API_KEY / LIVEKIT_API_SECRET not set")

    uvicorn.run(
        "token_server.main:app",
        host=host,
        port=port,
        reload=reload or settings.debug,
    )


@main.command()
@click.option("-r", "--room", required=True, help="Room to join")
@click.option("-u", "--username", required=True, help="Display name")
@click.option("-i", "--user-id", required=True, help="Participant identity")
def mint(room: str, username: str, user_id: str):
    """Mint a token locally, without going through HTTP."""
    request = TokenRequest(room=room, username=username, user_id=user_id)

    try:
        issued = issue_token(request, get_settings(), get_token_signer())
    except CredentialsNotConfiguredError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] Failed to generate token: {e}")
        sys.exit(1)

    console.print(f"[green]Token for[/green] {user_id} [green]in room[/green] {room}")
    click.echo(issued.token)


if __name__ == "__main__":
    main()
