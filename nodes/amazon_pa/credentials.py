"""Credential type the Amazon PA node asks the host for."""

from paapi_sdk.marketplaces import Marketplace

from orchestration.node import CredentialTypeDescription, NodeProperty, NodePropertyOption

CREDENTIAL_NAME = "amazonPaApi"

AMAZON_PA_API_CREDENTIALS = CredentialTypeDescription(
    name=CREDENTIAL_NAME,
    display_name="Amazon PA API",
    documentation_url="https://webservices.amazon.com/paapi5/documentation/",
    properties=(
        NodeProperty(display_name="Access Key", name="accessKey", type="string"),
        NodeProperty(display_name="Secret Key", name="secretKey", type="string"),
        NodeProperty(
            display_name="Partner Tag",
            name="partnerTag",
            type="string",
            description="Your default Partner Tag (can be overridden per request).",
        ),
        NodeProperty(
            display_name="Marketplace",
            name="marketplace",
            type="options",
            default=Marketplace.US.value,
            description="The Amazon marketplace you want to use.",
            options=tuple(
                NodePropertyOption(marketplace.label, marketplace.value)
                for marketplace in Marketplace
            ),
        ),
    ),
)
