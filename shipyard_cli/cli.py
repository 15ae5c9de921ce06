"""
Shipyard CLI - Command Line Interface for the Shipyard cluster manager.

This module provides the main CLI entry point and all commands for:
- Configuration and authentication
- Container operations (list, inspect, run, destroy)
- Engine operations (list, inspect, add, remove)
- Cluster info and events
- Accounts, roles and service keys
"""

import functools
import sys
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import click

from . import __version__
from .config import (
    ConfigManager,
    get_config_manager,
    DEFAULT_SERVER_URL,
)
from .api import ShipyardAPIClient
from .exceptions import (
    ShipyardError,
    UnauthorizedError,
    RequestError,
)
from .utils import (
    setup_logging,
    print_success,
    print_error,
    print_info,
    print_json,
    print_table,
    format_datetime,
    parse_key_value,
    confirm_action,
    truncate_string,
    short_id,
    pluck,
    join_values,
    OutputFormat,
)

logger = logging.getLogger(__name__)


# ============================================================================
# CLI Context and Common Options
# ============================================================================

class ShipyardContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config_manager: ConfigManager = None  # type: ignore[assignment]
        self.verbose: bool = False
        self.quiet: bool = False
        self.output_format: OutputFormat = OutputFormat.TABLE


pass_context = click.make_pass_decorator(ShipyardContext, ensure=True)


def log_options(f):
    """Logging options for API commands that print no records."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    return f


def common_options(f):
    """Common options for API commands that print records."""
    f = log_options(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice(['table', 'json']),
        default='table',
        help='Output format'
    )(f)
    return f


def require_config(f):
    """Decorator to require a server URL and credentials."""
    @click.pass_context
    def wrapper(click_ctx, *args, **kwargs):
        ctx = click_ctx.ensure_object(ShipyardContext)
        config = ctx.config_manager.get()

        if not config.is_configured():
            print_error(
                "Shipyard CLI is not configured.",
                "Run 'shipyard login' or 'shipyard configure --service-key KEY' first."
            )
            sys.exit(1)

        return click_ctx.invoke(f, *args, **kwargs)

    return functools.update_wrapper(wrapper, f)


def _exit_with_error(e: ShipyardError) -> None:
    """Report an API error and exit."""
    if isinstance(e, UnauthorizedError):
        print_error("Unauthorized.", "Run 'shipyard login' to re-authenticate.")
    elif isinstance(e, RequestError):
        print_error(f"Request failed (HTTP {e.status_code}): {e.message.strip()}")
    else:
        print_error(str(e), e.details)
    sys.exit(1)


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.version_option(version=__version__, prog_name='shipyard')
@click.option(
    '--config-dir',
    type=click.Path(path_type=Path),
    envvar='SHIPYARD_CONFIG_DIR',
    help='Custom configuration directory'
)
@click.pass_context
def cli(ctx, config_dir: Optional[Path]):
    """
    Shipyard CLI - Docker cluster management tool.

    Manage containers, engines, accounts and service keys through the
    Shipyard API.

    \b
    Quick Start:
      1. Configure server:      shipyard configure --url http://shipyard:8080
      2. Login:                 shipyard login
      3. List containers:       shipyard containers
      4. Run a container:       shipyard run nginx --count 2

    \b
    Environment Variables:
      SHIPYARD_URL           - API server URL
      SHIPYARD_USERNAME      - Account username
      SHIPYARD_TOKEN         - Auth token (from login)
      SHIPYARD_SERVICE_KEY   - Service key (used instead of username/token)
      SHIPYARD_CONFIG_DIR    - Custom configuration directory
    """
    ctx.ensure_object(ShipyardContext)
    ctx.obj.config_manager = get_config_manager(config_dir)


# ============================================================================
# Configuration Commands
# ============================================================================

@cli.command('configure')
@click.option('--url', '-u', help=f'API server URL (default: {DEFAULT_SERVER_URL})')
@click.option('--username', help='Account username')
@click.option('--token', help='Auth token')
@click.option('--service-key', help='Service key (takes priority over username/token)')
@click.option('--timeout', '-t', type=int, help='Request timeout in seconds')
@click.option('--no-verify-ssl', is_flag=True, help='Disable SSL certificate verification')
@click.option('--show', is_flag=True, help='Show current configuration')
@pass_context
def configure(
    ctx: ShipyardContext,
    url: Optional[str],
    username: Optional[str],
    token: Optional[str],
    service_key: Optional[str],
    timeout: Optional[int],
    no_verify_ssl: bool,
    show: bool
):
    """
    Configure Shipyard CLI settings.

    \b
    Examples:
      shipyard configure --url http://shipyard:8080
      shipyard configure --service-key abc123
      shipyard configure --show
    """
    config_manager = ctx.config_manager

    if show:
        config = config_manager.get()
        click.echo("\nCurrent Configuration:")
        click.echo(f"  Server URL:      {config.url or '(not set)'}")
        click.echo(f"  Username:        {config.username or '(not set)'}")
        click.echo(f"  Token:           {'*' * 20 + '...' if config.token else '(not set)'}")
        click.echo(f"  Service Key:     {'*' * 20 + '...' if config.service_key else '(not set)'}")
        click.echo(f"  Timeout:         {config.timeout}s")
        click.echo(f"  Verify SSL:      {config.verify_ssl}")
        click.echo(f"  Config Path:     {config_manager.get_config_path()}")
        return

    # Interactive configuration if no options provided
    if not any([url, username, token, service_key, timeout, no_verify_ssl]):
        click.echo("Interactive configuration setup:")

        current = config_manager.get()

        url = click.prompt(
            "API Server URL",
            default=current.url or DEFAULT_SERVER_URL
        )

        timeout = click.prompt(
            "Request timeout (seconds)",
            default=current.timeout,
            type=int
        )

    updates: Dict[str, Any] = {}
    if url:
        updates['url'] = url.rstrip('/')
    if username:
        updates['username'] = username
    if token:
        updates['token'] = token
    if service_key:
        updates['service_key'] = service_key
    if timeout:
        updates['timeout'] = timeout
    if no_verify_ssl:
        updates['verify_ssl'] = False

    if updates:
        config_manager.update(**updates)
        print_success("Configuration saved successfully.")
        if not (service_key or token):
            print_info("Run 'shipyard login' to authenticate with your credentials.")
    else:
        print_info("No changes made.")


@cli.command('config-clear')
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
@pass_context
def config_clear(ctx: ShipyardContext, yes: bool):
    """Remove the stored configuration file."""
    if not yes:
        if not confirm_action("Remove all stored configuration, including credentials?"):
            print_info("Cancelled.")
            return

    ctx.config_manager.clear()
    print_success("Configuration cleared.")


# ============================================================================
# Authentication Commands
# ============================================================================

@cli.command('login')
@click.option('--username', '-u', help='Account username')
@click.option('--password', '-p', help='Password (will prompt if not provided)')
@click.option('--url', '-s', help='Server URL (overrides configured server)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@pass_context
def login(
    ctx: ShipyardContext,
    username: Optional[str],
    password: Optional[str],
    url: Optional[str],
    verbose: bool
):
    """
    Authenticate with username and password and store the token.

    \b
    Examples:
      shipyard login
      shipyard login --username admin
      shipyard login -u admin -p shipyard --url http://shipyard:8080
    """
    setup_logging(verbose)

    config_manager = ctx.config_manager
    config = config_manager.get()

    if url:
        config = config.with_updates(url=url.rstrip('/'))

    if not config.url:
        print_error(
            "Server URL not configured.",
            "Run 'shipyard configure --url URL' first."
        )
        sys.exit(1)

    if not username:
        username = click.prompt("Username")

    if not password:
        password = click.prompt("Password", hide_input=True)

    print_info(f"Authenticating to {config.url}...")

    try:
        with ShipyardAPIClient(config) as client:
            result = client.login(username, password)
    except UnauthorizedError:
        print_error("Login failed: invalid username or password.")
        sys.exit(1)
    except ShipyardError as e:
        _exit_with_error(e)

    token = result.get('auth_token') if isinstance(result, dict) else None
    if not token:
        print_error("Login succeeded but no token received.")
        sys.exit(1)

    updates = {'username': username, 'token': token}
    if url:
        updates['url'] = config.url
    config_manager.update(**updates)
    print_success("Login successful! Token saved.")


@cli.command('logout')
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
@pass_context
def logout(ctx: ShipyardContext, yes: bool):
    """
    Clear the stored username and token.
    """
    if not yes:
        if not confirm_action("Clear stored authentication token?"):
            print_info("Cancelled.")
            return

    ctx.config_manager.update(username='', token='')
    print_success("Logged out successfully.")


@cli.command('whoami')
@pass_context
def whoami(ctx: ShipyardContext):
    """
    Show current authentication status.
    """
    config = ctx.config_manager.get()

    if config.is_configured():
        click.echo("\nAuthentication Status: " + click.style("Configured", fg="green"))
        click.echo(f"  Server:   {config.url}")
        if config.service_key:
            click.echo("  Auth:     service key")
        else:
            click.echo(f"  Auth:     access token for {config.username}")
    else:
        click.echo("\nAuthentication Status: " + click.style("Not configured", fg="red"))
        click.echo(f"  Server:   {config.url or '(not configured)'}")
        print_info("Run 'shipyard login' to authenticate.")


@cli.command('change-password')
@click.option('--password', '-p', help='New password (will prompt if not provided)')
@log_options
@pass_context
@require_config
def change_password(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    password: Optional[str]
):
    """Change the password of the logged-in account."""
    setup_logging(verbose, quiet)

    if not password:
        password = click.prompt("New password", hide_input=True, confirmation_prompt=True)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            client.change_password(password)
    except ShipyardError as e:
        _exit_with_error(e)

    print_success("Password changed.")


# ============================================================================
# Container Commands
# ============================================================================

def _container_rows(containers: List[Dict[str, Any]]) -> List[List[str]]:
    return [
        [
            short_id(c.get('id')),
            truncate_string(pluck(c, 'image', 'name'), 40),
            pluck(c, 'engine', 'id'),
            c.get('state', ''),
            join_values(c.get('ports')),
        ]
        for c in containers
    ]


@cli.command('containers')
@common_options
@pass_context
@require_config
def list_containers(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """
    List containers in the cluster.

    \b
    Examples:
      shipyard containers
      shipyard containers --format json
    """
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            containers = client.list_containers()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(containers)
        return

    if not containers:
        if not quiet:
            print_info("No containers found.")
        return

    print_table(['ID', 'Image', 'Engine', 'State', 'Ports'], _container_rows(containers))


@cli.command('inspect')
@log_options
@click.argument('container_id')
@pass_context
@require_config
def inspect_container(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    container_id: str
):
    """Show the full record of a container."""
    setup_logging(verbose, quiet)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            container = client.get_container(container_id)
    except ShipyardError as e:
        _exit_with_error(e)

    print_json(container)


@cli.command('run')
@common_options
@click.argument('image_name')
@click.option('--count', '-n', type=int, default=1, show_default=True, help='Number of containers')
@click.option('--pull', is_flag=True, help='Pull the image before running')
@click.option('--cpus', type=float, default=0.1, show_default=True, help='CPU shares')
@click.option('--memory', type=float, default=256, show_default=True, help='Memory in MB')
@click.option('--type', 'container_type', type=click.Choice(['service', 'unique', 'host']),
              default='service', show_default=True, help='Scheduling type')
@click.option('--hostname', default='', help='Container hostname')
@click.option('--domain', default='', help='Container domain')
@click.option('--env', '-e', multiple=True, help='Environment variable (KEY=VALUE)')
@click.option('--label', '-l', multiple=True, help='Engine label constraint')
@click.option('--link', multiple=True, help='Link to another container (NAME=ALIAS)')
@pass_context
@require_config
def run_container(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    image_name: str,
    count: int,
    pull: bool,
    cpus: float,
    memory: float,
    container_type: str,
    hostname: str,
    domain: str,
    env: Tuple[str, ...],
    label: Tuple[str, ...],
    link: Tuple[str, ...]
):
    """
    Run containers from an image.

    \b
    Examples:
      shipyard run nginx
      shipyard run nginx --count 3 --pull
      shipyard run redis -e MAXMEMORY=64mb -l env=prod
    """
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        environment = parse_key_value(env)
        links = parse_key_value(link)
    except ValueError as e:
        print_error(str(e))
        sys.exit(1)

    image = {
        'name': image_name,
        'cpus': cpus,
        'memory': memory,
        'type': container_type,
        'hostname': hostname,
        'domain': domain,
        'environment': environment,
        'labels': list(label),
        'links': links,
    }

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            containers = client.run_container(image, count=count, pull=pull)
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(containers)
        return

    for container in containers:
        if quiet:
            click.echo(container.get('id', ''))
        else:
            print_success(f"Started {short_id(container.get('id'))} on {pluck(container, 'engine', 'id')}")


@cli.command('destroy')
@log_options
@click.argument('container_ids', nargs=-1, required=True)
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
@pass_context
@require_config
def destroy_container(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    container_ids: Tuple[str, ...],
    yes: bool
):
    """
    Stop and remove containers.

    \b
    Examples:
      shipyard destroy 3f2a1b
      shipyard destroy 3f2a1b 9c8d7e --yes
    """
    setup_logging(verbose, quiet)

    if not yes:
        if not confirm_action(f"Destroy {len(container_ids)} container(s)?"):
            print_info("Cancelled.")
            return

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            for container_id in container_ids:
                container = client.get_container(container_id)
                client.destroy_container(container)
                if not quiet:
                    print_success(f"Destroyed {short_id(container_id)}")
    except ShipyardError as e:
        _exit_with_error(e)


# ============================================================================
# Engine Commands
# ============================================================================

@cli.command('engines')
@common_options
@pass_context
@require_config
def list_engines(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """List engines registered with the cluster."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            engines = client.list_engines()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(engines)
        return

    if not engines:
        if not quiet:
            print_info("No engines found.")
        return

    rows = [
        [
            pluck(e, 'engine', 'id'),
            pluck(e, 'engine', 'addr'),
            pluck(e, 'engine', 'cpus'),
            pluck(e, 'engine', 'memory'),
            join_values(pluck(e, 'engine', 'labels', default=None)),
            pluck(e, 'health', 'status'),
        ]
        for e in engines
    ]
    print_table(['ID', 'Address', 'CPUs', 'Memory', 'Labels', 'Health'], rows)


@cli.command('engine-inspect')
@log_options
@click.argument('engine_id')
@pass_context
@require_config
def inspect_engine(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    engine_id: str
):
    """Show the full record of an engine."""
    setup_logging(verbose, quiet)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            engine = client.get_engine(engine_id)
    except ShipyardError as e:
        _exit_with_error(e)

    print_json(engine)


def _read_optional(path: Optional[Path]) -> str:
    return path.read_text() if path else ''


@cli.command('engine-add')
@log_options
@click.option('--id', 'engine_id', required=True, help='Engine ID')
@click.option('--addr', required=True, help='Docker API address (e.g. http://10.0.0.5:2375)')
@click.option('--cpus', type=float, default=1.0, show_default=True, help='CPUs available')
@click.option('--memory', type=float, default=1024, show_default=True, help='Memory available in MB')
@click.option('--label', '-l', multiple=True, help='Engine label')
@click.option('--ssl-cert', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Client SSL certificate')
@click.option('--ssl-key', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Client SSL key')
@click.option('--ca-cert', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='CA certificate')
@pass_context
@require_config
def add_engine(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    engine_id: str,
    addr: str,
    cpus: float,
    memory: float,
    label: Tuple[str, ...],
    ssl_cert: Optional[Path],
    ssl_key: Optional[Path],
    ca_cert: Optional[Path]
):
    """
    Register an engine with the cluster.

    \b
    Examples:
      shipyard engine-add --id local --addr http://127.0.0.1:2375 -l dev
    """
    setup_logging(verbose, quiet)

    engine = {
        'id': engine_id,
        'ssl_cert': _read_optional(ssl_cert),
        'ssl_key': _read_optional(ssl_key),
        'ca_cert': _read_optional(ca_cert),
        'engine': {
            'id': engine_id,
            'addr': addr,
            'cpus': cpus,
            'memory': memory,
            'labels': list(label),
        },
    }

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            client.add_engine(engine)
    except ShipyardError as e:
        _exit_with_error(e)

    print_success(f"Engine added: {engine_id}")


@cli.command('engine-remove')
@log_options
@click.argument('engine_id')
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
@pass_context
@require_config
def remove_engine(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    engine_id: str,
    yes: bool
):
    """Remove an engine from the cluster."""
    setup_logging(verbose, quiet)

    if not yes:
        if not confirm_action(f"Remove engine {engine_id}?"):
            print_info("Cancelled.")
            return

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            engine = client.get_engine(engine_id)
            client.remove_engine(engine)
    except ShipyardError as e:
        _exit_with_error(e)

    print_success(f"Engine removed: {engine_id}")


# ============================================================================
# Cluster Commands
# ============================================================================

@cli.command('info')
@common_options
@pass_context
@require_config
def cluster_info(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """Show cluster capacity and usage."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            info = client.cluster_info()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON or not isinstance(info, dict):
        print_json(info)
        return

    rows = [[key.replace('_', ' ').title(), value] for key, value in sorted(info.items())]
    print_table(['Field', 'Value'], rows)


@cli.command('events')
@common_options
@pass_context
@require_config
def list_events(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """List cluster events."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            events = client.list_events()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(events)
        return

    if not events:
        if not quiet:
            print_info("No events found.")
        return

    rows = [
        [
            format_datetime(ev.get('time')),
            ev.get('type', ''),
            truncate_string(ev.get('message', ''), 60),
            join_values(ev.get('tags')),
        ]
        for ev in events
    ]
    print_table(['Time', 'Type', 'Message', 'Tags'], rows)


# ============================================================================
# Account Commands
# ============================================================================

@cli.command('accounts')
@common_options
@pass_context
@require_config
def list_accounts(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """List accounts."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            accounts = client.list_accounts()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(accounts)
        return

    rows = [[a.get('username', ''), pluck(a, 'role', 'name')] for a in accounts]
    print_table(['Username', 'Role'], rows)


@cli.command('account-add')
@log_options
@click.option('--username', '-u', required=True, help='Account username')
@click.option('--password', '-p', help='Password (will prompt if not provided)')
@click.option('--role', '-r', default='user', show_default=True, help='Role name')
@pass_context
@require_config
def add_account(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    username: str,
    password: Optional[str],
    role: str
):
    """
    Create an account.

    \b
    Examples:
      shipyard account-add -u alice -r admin
    """
    setup_logging(verbose, quiet)

    if not password:
        password = click.prompt("Password", hide_input=True, confirmation_prompt=True)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            role_record = client.get_role(role)
            client.add_account({
                'username': username,
                'password': password,
                'role': role_record,
            })
    except ShipyardError as e:
        _exit_with_error(e)

    print_success(f"Account created: {username}")


@cli.command('account-delete')
@log_options
@click.argument('username')
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
@pass_context
@require_config
def delete_account(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    username: str,
    yes: bool
):
    """Delete an account."""
    setup_logging(verbose, quiet)

    if not yes:
        if not confirm_action(f"Delete account {username}?"):
            print_info("Cancelled.")
            return

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            client.delete_account({'username': username})
    except ShipyardError as e:
        _exit_with_error(e)

    print_success(f"Account deleted: {username}")


@cli.command('roles')
@common_options
@pass_context
@require_config
def list_roles(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """List roles."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            roles = client.list_roles()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(roles)
        return

    print_table(['Name', 'ID'], [[r.get('name', ''), r.get('id', '')] for r in roles])


@cli.command('role')
@log_options
@click.argument('name')
@pass_context
@require_config
def get_role(ctx: ShipyardContext, verbose: bool, quiet: bool, name: str):
    """Show a role."""
    setup_logging(verbose, quiet)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            role = client.get_role(name)
    except ShipyardError as e:
        _exit_with_error(e)

    print_json(role)


# ============================================================================
# Service Key Commands
# ============================================================================

@cli.command('service-keys')
@common_options
@pass_context
@require_config
def list_service_keys(ctx: ShipyardContext, verbose: bool, quiet: bool, output_format: str):
    """List service keys."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            keys = client.list_service_keys()
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(keys)
        return

    print_table(['Key', 'Description'], [[k.get('key', ''), k.get('description', '')] for k in keys])


@cli.command('service-key-create')
@common_options
@click.option('--description', '-d', default='', help='Key description')
@pass_context
@require_config
def create_service_key(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    output_format: str,
    description: str
):
    """Create a service key and print it."""
    setup_logging(verbose, quiet)
    fmt = OutputFormat(output_format)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            key = client.create_service_key(description)
    except ShipyardError as e:
        _exit_with_error(e)

    if fmt == OutputFormat.JSON:
        print_json(key)
    elif quiet:
        click.echo(key.get('key', ''))
    else:
        print_success(f"Service key created: {key.get('key', '')}")


@cli.command('service-key-remove')
@log_options
@click.argument('key')
@pass_context
@require_config
def remove_service_key(
    ctx: ShipyardContext,
    verbose: bool,
    quiet: bool,
    key: str
):
    """Remove a service key."""
    setup_logging(verbose, quiet)

    try:
        with ShipyardAPIClient(ctx.config_manager.get()) as client:
            client.remove_service_key({'key': key})
    except ShipyardError as e:
        _exit_with_error(e)

    print_success("Service key removed.")


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix='SHIPYARD')
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
