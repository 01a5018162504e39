from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Zendesk account credentials, fixed for the lifetime of the process."""

    subdomain: str
    email: str
    api_token: str = field(repr=False)

    @property
    def basic_auth(self) -> tuple[str, str]:
        """HTTP Basic pair for API-token authentication."""
        return f"{self.email}/token", self.api_token
