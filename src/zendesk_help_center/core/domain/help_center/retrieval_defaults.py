from dataclasses import dataclass

from zendesk_help_center.core.exceptions import ConfigurationError

DEFAULT_LOCALE = "en"
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20


@dataclass(frozen=True)
class RetrievalDefaults:
    locale: str = DEFAULT_LOCALE
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self) -> None:
        if not self.locale:
            raise ConfigurationError("Default locale must not be empty")
        for name in ("page", "per_page"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"Default {name} must be a positive integer, got {value!r}")
