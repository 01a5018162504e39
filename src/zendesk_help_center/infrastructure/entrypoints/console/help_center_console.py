import asyncio
import json
from collections.abc import Callable
from typing import Any

import structlog

from zendesk_help_center.core.application.tools import HelpCenterTool
from zendesk_help_center.core.exceptions import HelpCenterError, MalformedInputError
from zendesk_help_center.infrastructure.entrypoints.console.console_command_parser import (
    ARTICLE_USAGE,
    SEARCH_USAGE,
    ArticleCommand,
    QuitCommand,
    SearchCommand,
    parse_command,
)

logger = structlog.get_logger()

PROMPT = "\nCommand: "


class HelpCenterConsole:
    """Interactive loop forwarding console commands to a HelpCenterTool.

    Commands run one at a time. A failed command is reported and the loop
    keeps reading; ``quit`` or end of input stops it.
    """

    def __init__(
        self,
        tool: HelpCenterTool,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._tool = tool
        self._read_line = read_line
        self._write = write

    async def run(self) -> None:
        self._print_banner()
        await self._tool.connect()
        try:
            while True:
                try:
                    line = await asyncio.to_thread(self._read_line, PROMPT)
                except EOFError:
                    break
                if not await self.handle_line(line):
                    break
        finally:
            await self._tool.disconnect()

    async def handle_line(self, line: str) -> bool:
        """Execute one command line. Returns False when the loop should stop."""
        try:
            command = parse_command(line)
        except MalformedInputError as exc:
            self._write(str(exc))
            return True

        if isinstance(command, QuitCommand):
            return False

        try:
            result = await self._execute(command)
        except HelpCenterError as exc:
            logger.error(
                "Console command failed",
                command=line.strip(),
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            self._write(f"\nError: {exc}")
            return True

        self._write(json.dumps(result, indent=2, ensure_ascii=False))
        return True

    async def _execute(self, command: SearchCommand | ArticleCommand) -> Any:
        if isinstance(command, SearchCommand):
            return await self._tool.search_articles(
                command.query,
                locale=command.locale,
                page=command.page,
                per_page=command.per_page,
            )
        return await self._tool.get_article(command.article_id, locale=command.locale)

    def _print_banner(self) -> None:
        self._write("\nZendesk Help Center client started!")
        self._write("Enter a command ('quit' to exit):")
        self._write(f"- {SEARCH_USAGE.removeprefix('Usage: ')}")
        self._write(f"- {ARTICLE_USAGE.removeprefix('Usage: ')}")
