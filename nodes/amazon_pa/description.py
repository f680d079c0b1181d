"""Static description of the Amazon PA node: operations and form fields."""

from orchestration.node import NodeProperty, NodePropertyOption, NodeTypeDescription

from .credentials import CREDENTIAL_NAME
from .requests import Operation

RESOURCE_OPTIONS = (
    "Images.Primary.Small",
    "Images.Primary.Medium",
    "Images.Primary.Large",
    "ItemInfo.Title",
    "ItemInfo.Features",
    "ItemInfo.ContentInfo",
    "ItemInfo.ManufactureInfo",
    "ItemInfo.ProductInfo",
    "ItemInfo.TechnicalInfo",
    "Offers.Listings.Availability.Message",
    "Offers.Listings.Availability.MaxOrderQuantity",
    "Offers.Listings.Condition",
    "Offers.Listings.Price",
    "Offers.Listings.DeliveryInfo",
    "Offers.Listings.MerchantInfo",
    "Offers.Summaries.HighestPrice",
    "Offers.Summaries.LowestPrice",
    "ParentASIN",
)

DEFAULT_RESOURCES = (
    "Images.Primary.Medium",
    "ItemInfo.Title",
    "Offers.Listings.Price",
)

AMAZON_PA_NODE_DESCRIPTION = NodeTypeDescription(
    display_name="Amazon PA API",
    name="amazonPA",
    description="Interact with Amazon Product Advertising API",
    icon="file:amazon.svg",
    color="#FF9900",
    subtitle='={{$parameter["operation"]}}',
    credentials=(CREDENTIAL_NAME,),
    properties=(
        NodeProperty(
            display_name="Operation",
            name="operation",
            type="options",
            default=Operation.SEARCH_ITEMS.value,
            options=(
                NodePropertyOption(
                    "Search Items", Operation.SEARCH_ITEMS.value, "Search for items on Amazon"
                ),
                NodePropertyOption(
                    "Get Items", Operation.GET_ITEMS.value, "Get item information by ASIN"
                ),
                NodePropertyOption(
                    "Get Browse Nodes",
                    Operation.GET_BROWSE_NODES.value,
                    "Get browse node information",
                ),
            ),
        ),
        NodeProperty(
            display_name="Partner Tag",
            name="partnerTag",
            type="string",
            description="Amazon Partner Tag (overrides default if set)",
        ),
        NodeProperty(
            display_name="Item IDs (for Get Items)",
            name="itemIds",
            type="string",
            description="Comma-separated list of ASINs for items",
            show_for_operations=(Operation.GET_ITEMS.value,),
        ),
        NodeProperty(
            display_name="Keywords (for Search Items)",
            name="keywords",
            type="string",
            description="Keywords to search for items on Amazon",
            show_for_operations=(Operation.SEARCH_ITEMS.value,),
        ),
        NodeProperty(
            display_name="Browse Node IDs (for Get Browse Nodes)",
            name="browseNodeIds",
            type="string",
            description="Comma-separated list of Browse Node IDs",
            show_for_operations=(Operation.GET_BROWSE_NODES.value,),
        ),
        NodeProperty(
            display_name="Resources",
            name="resources",
            type="multiOptions",
            default=list(DEFAULT_RESOURCES),
            description="Resources to retrieve from Amazon PA API",
            options=tuple(NodePropertyOption(value, value) for value in RESOURCE_OPTIONS),
            show_for_operations=(Operation.GET_ITEMS.value, Operation.SEARCH_ITEMS.value),
        ),
    ),
)
