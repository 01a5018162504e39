import argparse
import asyncio
import sys

import structlog

from zendesk_help_center.core.application.tools import HelpCenterTool
from zendesk_help_center.core.exceptions import ConfigurationError, HelpCenterError
from zendesk_help_center.infrastructure.configuration import HelpCenterSettings, load_settings
from zendesk_help_center.infrastructure.entrypoints.console import HelpCenterConsole
from zendesk_help_center.infrastructure.entrypoints.mcp_server import create_server
from zendesk_help_center.infrastructure.observability import configure_logging
from zendesk_help_center.infrastructure.resolution.container import build_retrieval_service
from zendesk_help_center.infrastructure.tools.help_center import HelpCenterMcpClient

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zendesk-help-center",
        description="Search and read Zendesk Help Center articles over MCP or an interactive console.",
    )
    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("serve", help="Run the MCP stdio server (default)")
    console = subcommands.add_parser("console", help="Run the interactive console")
    console.add_argument(
        "--server",
        metavar="PATH",
        help="Drive an MCP server script (.py or .js) over stdio instead of calling the API directly",
    )
    return parser


def serve(settings: HelpCenterSettings) -> None:
    """Run the MCP stdio server until the client disconnects."""
    server = create_server(build_retrieval_service(settings))
    logger.info("Zendesk Help Center MCP Server is running", transport="stdio")
    server.run()


def console(settings: HelpCenterSettings | None, server_script: str | None = None) -> None:
    """Run the console in-process, or against an MCP server when a script is given."""
    tool: HelpCenterTool
    if server_script is not None:
        tool = HelpCenterMcpClient(server_script)
    elif settings is not None:
        tool = build_retrieval_service(settings)
    else:
        raise ConfigurationError("The console needs Zendesk settings or an MCP server script")
    asyncio.run(HelpCenterConsole(tool).run())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    command = args.command or "serve"
    server_script = getattr(args, "server", None)

    try:
        # The console only needs credentials when it calls the API itself.
        settings = None if server_script else load_settings()
        configure_logging(settings.log_level if settings else "INFO")
        if command == "console":
            console(settings, server_script)
        else:
            serve(settings)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except HelpCenterError as exc:
        logger.error(
            "Help Center session failed", error_type=type(exc).__name__, error_details=str(exc)
        )
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
