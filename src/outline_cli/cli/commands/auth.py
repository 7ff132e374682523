"""
Auth command handlers.

- run_whoami: Show who the configured API key belongs to
"""

from outline_cli.adapters.outline import OutlineAdapter
from outline_cli.core.exceptions import AdapterError
from outline_cli.core.ports.config_provider import AppConfig

from ..exit_codes import ExitCode
from ..output import Console


__all__ = ["run_whoami"]


def run_whoami(args, console: Console, config: AppConfig) -> int:
    """
    Run the ``whoami`` subcommand.

    Args:
        args: Parsed command-line arguments.
        console: Console for output.
        config: Loaded application configuration.

    Returns:
        Exit code.
    """
    adapter = OutlineAdapter(config.outline)

    try:
        identity = adapter.current()
    except AdapterError as e:
        console.error("Could not retrieve authentication information from Outline.")
        console.error_detail(e)
        return ExitCode.CONNECTION_ERROR
    finally:
        adapter.close()

    if console.json_mode:
        console.json({"id": identity.id, "name": identity.name})
        return ExitCode.SUCCESS

    console.print(
        f"Currently authenticated as {identity.name} with user ID {identity.id}!",
        force=True,
    )
    return ExitCode.SUCCESS
