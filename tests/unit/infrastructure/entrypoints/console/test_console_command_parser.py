import pytest

from zendesk_help_center.core.exceptions import MalformedInputError
from zendesk_help_center.infrastructure.entrypoints.console import (
    ArticleCommand,
    QuitCommand,
    SearchCommand,
    parse_command,
)
from zendesk_help_center.infrastructure.entrypoints.console.console_command_parser import (
    ARTICLE_USAGE,
    SEARCH_USAGE,
    UNKNOWN_COMMAND,
)


class TestSearch:
    def test_keyword_only(self) -> None:
        assert parse_command("search billing") == SearchCommand(query="billing")

    def test_all_positional_arguments(self) -> None:
        assert parse_command("search billing ja 2 50") == SearchCommand(
            query="billing", locale="ja", page="2", per_page="50"
        )

    def test_extra_whitespace_is_ignored(self) -> None:
        assert parse_command("  SEARCH   billing  en-us ") == SearchCommand(
            query="billing", locale="en-us"
        )

    def test_page_is_kept_raw_for_fallback(self) -> None:
        assert parse_command("search billing ja abc").page == "abc"

    def test_missing_keyword_shows_usage(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse_command("search")

        assert str(exc_info.value) == SEARCH_USAGE


class TestArticle:
    def test_id_and_locale(self) -> None:
        assert parse_command("article 360001 ja") == ArticleCommand(article_id=360001, locale="ja")

    def test_id_only(self) -> None:
        assert parse_command("article 7") == ArticleCommand(article_id=7)

    @pytest.mark.parametrize("line", ["article", "article seven"])
    def test_bad_id_shows_usage(self, line: str) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse_command(line)

        assert str(exc_info.value) == ARTICLE_USAGE


class TestOtherInput:
    @pytest.mark.parametrize("line", ["quit", "QUIT", " quit "])
    def test_quit(self, line: str) -> None:
        assert parse_command(line) == QuitCommand()

    @pytest.mark.parametrize("line", ["", "   ", "help", "delete 1"])
    def test_unknown_input_lists_commands(self, line: str) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse_command(line)

        assert str(exc_info.value) == UNKNOWN_COMMAND
