# Settings package
from core.settings.amazon_pa_settings import (
    AmazonPaApiCredentials,
    AmazonPaApiSettings,
    get_amazon_pa_settings,
)

__all__ = ["AmazonPaApiCredentials", "AmazonPaApiSettings", "get_amazon_pa_settings"]
