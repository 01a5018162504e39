from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zendesk_help_center.core.domain.help_center import Credentials, RetrievalDefaults
from zendesk_help_center.core.domain.help_center.retrieval_defaults import DEFAULT_LOCALE
from zendesk_help_center.core.exceptions import ConfigurationError

REQUIRED_ENV_VARS = ("ZENDESK_SUBDOMAIN", "ZENDESK_EMAIL", "ZENDESK_API_TOKEN")


class HelpCenterSettings(BaseSettings):
    """Settings for the Zendesk Help Center API and local runtime."""

    # ── Zendesk account ──
    subdomain: str = Field(alias="ZENDESK_SUBDOMAIN", min_length=1)
    email: str = Field(alias="ZENDESK_EMAIL", min_length=1)
    api_token: SecretStr = Field(alias="ZENDESK_API_TOKEN")

    # ── Retrieval defaults ──
    default_locale: str = Field(default=DEFAULT_LOCALE, alias="DEFAULT_LOCALE")
    default_page: int = Field(default=1, ge=1, alias="ZENDESK_DEFAULT_PAGE")
    default_per_page: int = Field(default=20, ge=1, alias="ZENDESK_DEFAULT_PER_PAGE")

    # ── Runtime ──
    timeout_seconds: float = Field(default=30.0, gt=0, alias="ZENDESK_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", str_strip_whitespace=True)

    @field_validator("api_token")
    @classmethod
    def reject_blank_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("API token must not be blank")
        return value

    @field_validator("default_locale", mode="before")
    @classmethod
    def fallback_locale(cls, value: object) -> object:
        """An empty DEFAULT_LOCALE behaves as if it were unset."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_LOCALE
        return value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def base_url(self) -> str:
        return f"https://{self.subdomain}.zendesk.com/api/v2/help_center"

    def credentials(self) -> Credentials:
        return Credentials(
            subdomain=self.subdomain,
            email=self.email,
            api_token=self.api_token.get_secret_value(),
        )

    def retrieval_defaults(self) -> RetrievalDefaults:
        return RetrievalDefaults(
            locale=self.default_locale,
            page=self.default_page,
            per_page=self.default_per_page,
        )


def load_settings(**overrides: object) -> HelpCenterSettings:
    """Read settings from the environment, translating validation errors."""
    try:
        return HelpCenterSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        fields = sorted({_error_location(error) for error in exc.errors()})
        raise ConfigurationError(
            f"Missing or invalid Zendesk configuration: {', '.join(fields)}. "
            f"Please set {', '.join(REQUIRED_ENV_VARS)}."
        ) from exc


def _error_location(error: dict) -> str:
    location = error.get("loc") or ("settings",)
    return str(location[0])
