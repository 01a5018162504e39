"""Parser for the console grammar.

    search <keyword> [locale] [page] [per_page]
    article <articleID> [locale]
    quit

Whitespace-delimited, no quoting. Only the command word is case-insensitive.
"""

from dataclasses import dataclass

from zendesk_help_center.core.exceptions import MalformedInputError

SEARCH_USAGE = "Usage: search <keyword> [locale] [page] [per_page]"
ARTICLE_USAGE = "Usage: article <articleID> [locale]"
UNKNOWN_COMMAND = "Unknown command. Available commands: search, article, quit"


@dataclass(frozen=True)
class SearchCommand:
    query: str
    locale: str | None = None
    page: str | None = None
    per_page: str | None = None


@dataclass(frozen=True)
class ArticleCommand:
    article_id: int
    locale: str | None = None


@dataclass(frozen=True)
class QuitCommand:
    pass


ConsoleCommand = SearchCommand | ArticleCommand | QuitCommand


def parse_command(line: str) -> ConsoleCommand:
    parts = line.split()
    if not parts:
        raise MalformedInputError("Empty command", usage=UNKNOWN_COMMAND)

    command = parts[0].lower()
    if command == "quit":
        return QuitCommand()

    if command == "search":
        if len(parts) < 2:
            raise MalformedInputError("Missing search keyword", usage=SEARCH_USAGE)
        return SearchCommand(
            query=parts[1],
            locale=_optional(parts, 2),
            page=_optional(parts, 3),
            per_page=_optional(parts, 4),
        )

    if command == "article":
        if len(parts) < 2:
            raise MalformedInputError("Missing article ID", usage=ARTICLE_USAGE)
        try:
            article_id = int(parts[1])
        except ValueError as exc:
            raise MalformedInputError(
                f"Article ID must be numeric, got '{parts[1]}'", usage=ARTICLE_USAGE
            ) from exc
        return ArticleCommand(article_id=article_id, locale=_optional(parts, 2))

    raise MalformedInputError(f"Unknown command '{parts[0]}'", usage=UNKNOWN_COMMAND)


def _optional(parts: list[str], index: int) -> str | None:
    return parts[index] if len(parts) > index else None
