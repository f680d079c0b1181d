"""PA-API marketplaces and their regional endpoints."""

from enum import Enum
from typing import NamedTuple


class Endpoint(NamedTuple):
    host: str
    region: str


class Marketplace(str, Enum):
    """Amazon marketplaces selectable on the credential."""

    US = "www.amazon.com"
    UK = "www.amazon.co.uk"
    GERMANY = "www.amazon.de"
    JAPAN = "www.amazon.co.jp"
    CANADA = "www.amazon.ca"
    FRANCE = "www.amazon.fr"
    ITALY = "www.amazon.it"
    SPAIN = "www.amazon.es"
    MEXICO = "www.amazon.com.mx"
    BRAZIL = "www.amazon.com.br"
    INDIA = "www.amazon.in"
    AUSTRALIA = "www.amazon.com.au"
    CHINA = "www.amazon.cn"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def endpoint(self) -> Endpoint:
        return _ENDPOINTS[self]


_LABELS = {
    Marketplace.US: "US",
    Marketplace.UK: "UK",
    Marketplace.GERMANY: "Germany",
    Marketplace.JAPAN: "Japan",
    Marketplace.CANADA: "Canada",
    Marketplace.FRANCE: "France",
    Marketplace.ITALY: "Italy",
    Marketplace.SPAIN: "Spain",
    Marketplace.MEXICO: "Mexico",
    Marketplace.BRAZIL: "Brazil",
    Marketplace.INDIA: "India",
    Marketplace.AUSTRALIA: "Australia",
    Marketplace.CHINA: "China",
}

# (api host, AWS signing region) per PA-API 5 locale reference
_ENDPOINTS = {
    Marketplace.US: Endpoint("webservices.amazon.com", "us-east-1"),
    Marketplace.UK: Endpoint("webservices.amazon.co.uk", "eu-west-1"),
    Marketplace.GERMANY: Endpoint("webservices.amazon.de", "eu-west-1"),
    Marketplace.JAPAN: Endpoint("webservices.amazon.co.jp", "us-west-2"),
    Marketplace.CANADA: Endpoint("webservices.amazon.ca", "us-east-1"),
    Marketplace.FRANCE: Endpoint("webservices.amazon.fr", "eu-west-1"),
    Marketplace.ITALY: Endpoint("webservices.amazon.it", "eu-west-1"),
    Marketplace.SPAIN: Endpoint("webservices.amazon.es", "eu-west-1"),
    Marketplace.MEXICO: Endpoint("webservices.amazon.com.mx", "us-east-1"),
    Marketplace.BRAZIL: Endpoint("webservices.amazon.com.br", "us-east-1"),
    Marketplace.INDIA: Endpoint("webservices.amazon.in", "eu-west-1"),
    Marketplace.AUSTRALIA: Endpoint("webservices.amazon.com.au", "us-west-2"),
    # Not a PA-API 5 locale; kept selectable, requests will be rejected upstream.
    Marketplace.CHINA: Endpoint("webservices.amazon.cn", "cn-north-1"),
}
