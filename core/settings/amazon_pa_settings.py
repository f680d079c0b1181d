from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paapi_sdk.errors import ConfigurationError
from paapi_sdk.marketplaces import Marketplace

# host credential store key -> field name
_CREDENTIAL_KEYS = {
    "accessKey": "access_key",
    "secretKey": "secret_key",
    "partnerTag": "partner_tag",
    "marketplace": "marketplace",
}


class AmazonPaApiCredentials(BaseModel):
    """
    Account credentials for the Product Advertising API.

    Immutable for the whole run. Emptiness of the partner tag is not
    checked here; the node checks it once it has seen the per-request
    override.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_key: str = ""
    secret_key: str = ""
    partner_tag: str = ""
    marketplace: Marketplace = Marketplace.US

    @field_validator("access_key", "secret_key", "partner_tag", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "AmazonPaApiCredentials":
        """Build credentials from a host credential mapping (camelCase or snake_case keys).

        Raises:
            ConfigurationError: If a stored value is invalid, e.g. an unknown marketplace
        """
        values = {}
        for key, value in data.items():
            field_name = _CREDENTIAL_KEYS.get(key, key)
            if field_name in cls.model_fields:
                values[field_name] = value
        try:
            return cls(**values)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigurationError(f"Invalid Amazon PA API credentials: {problems}") from exc


class AmazonPaApiSettings(BaseSettings):
    """
    Credentials read from the environment.

    ENV:
      AMAZON_PA_ACCESS_KEY, AMAZON_PA_SECRET_KEY,
      AMAZON_PA_PARTNER_TAG, AMAZON_PA_MARKETPLACE
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="AMAZON_PA_",
    )

    access_key: str = ""
    secret_key: str = ""
    partner_tag: str = ""
    marketplace: Marketplace = Marketplace.US

    def to_credentials(self) -> AmazonPaApiCredentials:
        return AmazonPaApiCredentials(
            access_key=self.access_key,
            secret_key=self.secret_key,
            partner_tag=self.partner_tag,
            marketplace=self.marketplace,
        )


@lru_cache()
def get_amazon_pa_settings() -> AmazonPaApiSettings:
    return AmazonPaApiSettings()
