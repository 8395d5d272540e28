"""
Product info service on top of a provider implementation.
"""
import asyncio
import logging
from typing import Optional

from productinfo.clients.aws_provider import AwsInfoer
from productinfo.clients.provider_interface import ProductInfoer, UnknownRegionError
from productinfo.models.productinfo_schemas import (
    AttributeValuesResponse,
    InstanceTypesResponse,
    ProductsResponse,
    Region,
    RegionsResponse,
)
from productinfo.utils.transform_data_types import to_attr_value

logger = logging.getLogger(__name__)


class ProductInfoService:
    """Service exposing provider product info to async callers."""

    def __init__(self, infoer: Optional[ProductInfoer] = None):
        """
        Initialize the product info service.

        Args:
            infoer: Optional provider implementation for dependency injection

        Raises:
            ProviderError: If the default AWS provider cannot be set up
        """
        self.infoer = infoer or AwsInfoer()

    async def get_attribute_values(self, attribute: str) -> AttributeValuesResponse:
        values = await asyncio.to_thread(self.infoer.get_attribute_values, attribute)
        return AttributeValuesResponse(attribute=attribute, values=values)

    async def get_products(self, region_id: str, attr_key: str, attr_value: str) -> ProductsResponse:
        """
        Get the instance types of a region matching one attribute value.

        Args:
            region_id: Region code
            attr_key: Attribute name
            attr_value: Attribute value as listed by get_attribute_values

        Returns:
            Products response
        """
        value = to_attr_value(attr_key, attr_value)
        vms = await asyncio.to_thread(self.infoer.get_products, region_id, attr_key, value)
        return ProductsResponse(region=region_id, attribute=attr_key, value=attr_value, results=vms)

    async def get_instance_types(self, region_id: str, attribute: str) -> InstanceTypesResponse:
        """
        Get the instance types of a region for every value of an attribute.

        The attribute values are fetched first, then products are queried
        once per value. The first failed query aborts the whole call.

        Args:
            region_id: Region code
            attribute: Attribute name whose values partition the query

        Returns:
            Instance types response

        Raises:
            UnknownRegionError: If the region is not known
            ProviderError: If the attribute values or any of the products cannot be fetched
        """
        if await self.get_region(region_id) is None:
            raise UnknownRegionError(region_id)

        values = await asyncio.to_thread(self.infoer.get_attribute_values, attribute)
        results = []
        for value in values:
            results.extend(await asyncio.to_thread(self.infoer.get_products, region_id, attribute, value))

        logger.info(f"Found {len(results)} instance types in {region_id} for {len(values)} {attribute} values")
        return InstanceTypesResponse(region=region_id, attribute=attribute, results=results)

    async def get_region(self, region_id: str) -> Optional[Region]:
        # the partition table is parsed from disk on every lookup
        return await asyncio.to_thread(self.infoer.get_region, region_id)

    async def get_regions(self) -> RegionsResponse:
        regions = await asyncio.to_thread(self.infoer.get_regions)
        return RegionsResponse(regions=regions)
