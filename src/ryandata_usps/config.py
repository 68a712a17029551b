"""Client configuration for the USPS Addresses API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ryandata_usps.models.errors import ConfigurationError

PRODUCTION_SERVER_URL = "https://apis.usps.com/addresses/v3"
PRODUCTION_TOKEN_URL = "https://apis.usps.com/oauth2/v3/token"
TESTING_SERVER_URL = "https://apis-tem.usps.com/addresses/v3"
TESTING_TOKEN_URL = "https://apis-tem.usps.com/oauth2/v3/token"

DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """Credentials and endpoints for a UspsAddressClient.

    Credentials come from the USPS developer portal; sourcing them (env vars,
    secret stores) is up to the caller. Empty URLs fall back to production.

    Example:
        >>> config = ClientConfig(client_id="abc", client_secret="xyz")
        >>> config.with_defaults().server_url
        'https://apis.usps.com/addresses/v3'
    """

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(default="", description="OAuth2 client ID")
    client_secret: str = Field(default="", description="OAuth2 client secret", repr=False)
    server_url: str = Field(default="", description="Addresses API base URL")
    token_url: str = Field(default="", description="OAuth2 token endpoint")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Timeout in seconds for every HTTP call"
    )
    debug: bool = Field(default=False, description="Emit request/response debug log records")

    def validate_credentials(self) -> None:
        """Check that both credentials are present.

        Raises:
            ConfigurationError: If the client ID or secret is empty.
        """
        if not self.client_id:
            raise ConfigurationError("Invalid configuration", "ClientID is required")
        if not self.client_secret:
            raise ConfigurationError("Invalid configuration", "ClientSecret is required")

    def with_defaults(self) -> ClientConfig:
        """Return a copy with empty endpoint URLs set to the production defaults."""
        return self.model_copy(
            update={
                "server_url": self.server_url or PRODUCTION_SERVER_URL,
                "token_url": self.token_url or PRODUCTION_TOKEN_URL,
            }
        )
