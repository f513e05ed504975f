import json
from typing import List, Optional

import typer

from ghtf.constants import ENV_TOKEN, SENSITIVE_KEYS
from ghtf.exceptions import GhtfError
from ghtf.logging import get_logger, log_application_event, sanitize_data, setup_logging
from ghtf.provider import GithubProvider
from ghtf.utils.console import console, create_table, error, info, print_json, success

app = typer.Typer(
    help="[bold blue]ghtf[/bold blue] - GitHub provider for infrastructure import",
    rich_markup_mode="rich",
)


def owner_arg():
    return typer.Argument(..., help="GitHub organization or user")


def token_arg():
    return typer.Argument(None, help=f"Personal access token (defaults to ${ENV_TOKEN[0]})")


def base_url_arg():
    return typer.Argument(
        None, help="API base URL; pass an empty string for the public API"
    )


def _positional(owner: str, token: Optional[str], base_url: Optional[str]) -> List[str]:
    args = [owner]
    if token is not None:
        args.append(token)
        if base_url is not None:
            args.append(base_url)
    return args


def _init_provider(owner: str, token: Optional[str], base_url: Optional[str]) -> GithubProvider:
    provider = GithubProvider()
    try:
        provider.init(_positional(owner, token, base_url))
    except GhtfError as e:
        error(str(e))
        raise typer.Exit(1)
    return provider


@app.command("services")
def list_services() -> None:
    """List the services that can be imported"""
    table = create_table("Supported GitHub services", ["#", "Service"])
    for index, name in enumerate(GithubProvider().list_supported(), start=1):
        table.add_row(str(index), name)
    console.print(table)


@app.command("config")
def show_config(
    owner: str = owner_arg(),
    token: Optional[str] = token_arg(),
    base_url: Optional[str] = base_url_arg(),
    show_secrets: bool = typer.Option(
        False, "--show-secrets", help="Print token and key material unmasked"
    ),
) -> None:
    """Resolve credentials and print the provider configuration"""
    provider = _init_provider(owner, token, base_url)
    config = provider.get_config()
    if not show_secrets:
        config = sanitize_data(config, SENSITIVE_KEYS)
    mode = "app" if "app_auth" in config else "token"
    print_json(config, f"Provider configuration ({mode} auth)")


@app.command("provider-data")
def show_provider_data(
    owner: str = owner_arg(),
    token: Optional[str] = token_arg(),
    base_url: Optional[str] = base_url_arg(),
) -> None:
    """Print the provider block written alongside imported resources"""
    provider = _init_provider(owner, token, base_url)
    console.print_json(json.dumps(provider.get_provider_data()))


@app.command("init-service")
def init_service(
    service: str = typer.Argument(..., help="Service to bind, see 'ghtf services'"),
    owner: str = owner_arg(),
    token: Optional[str] = token_arg(),
    base_url: Optional[str] = base_url_arg(),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose generator output"),
) -> None:
    """Bind a service generator and show the arguments it receives"""
    provider = _init_provider(owner, token, base_url)
    try:
        provider.init_service(service, verbose)
    except GhtfError as e:
        error(str(e))
        info("Run 'ghtf services' to see the supported services.")
        raise typer.Exit(1)

    generator = provider.service
    success(f"{type(generator).__name__} bound for '{service}'")
    info(f"Auth mode: {generator.auth_mode().mode}")
    print_json(sanitize_data(generator.get_args(), SENSITIVE_KEYS), "Injected arguments")


@app.callback(invoke_without_command=True)
def callback(ctx: typer.Context):
    """
    [bold blue]ghtf[/bold blue] - GitHub provider for infrastructure import

    Resolves GitHub credentials and binds service generators for import.
    """
    if not ctx.invoked_subcommand:
        print("ghtf: resolve GitHub credentials and bind service generators. "
              "To proceed type ghtf --help")


def main():
    setup_logging()
    logger = get_logger("ghtf.main")
    log_application_event("ghtf CLI started")

    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {str(e)}")
        raise
    finally:
        logger.info("ghtf CLI finished")


if __name__ == "__main__":
    main()
