from zendesk_help_center.infrastructure.entrypoints.console.console_command_parser import (
    ArticleCommand,
    QuitCommand,
    SearchCommand,
    parse_command,
)
from zendesk_help_center.infrastructure.entrypoints.console.help_center_console import (
    HelpCenterConsole,
)

__all__ = ["ArticleCommand", "HelpCenterConsole", "QuitCommand", "SearchCommand", "parse_command"]
