"""
Interface for cloud provider product info implementations.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from productinfo.models.productinfo_schemas import AttrValue, AttrValues, Ec2Vm, Region


@dataclass(eq=False)
class ProviderError(Exception):
    """Exception raised when there's an error from a cloud provider."""
    provider: str
    message: str
    details: Optional[Dict] = None

    def __str__(self) -> str:
        return f"{self.provider}: {self.message}"


class UnknownRegionError(ValueError):
    """Raised when a region id is not part of the provider partition."""

    def __init__(self, region_id: str):
        super().__init__(f"unknown region: {region_id}")
        self.region_id = region_id


class MissingPriceError(ValueError):
    """Raised when a price list item carries no on-demand price."""


class ProductInfoer(ABC):
    """
    Operations for retrieving cloud provider product information.

    Decouples the provider API specific code from its callers.
    """

    def __init__(self, provider_name: str):
        """
        Initialize the product info provider.

        Args:
            provider_name: Name of the provider
        """
        self.provider_name = provider_name

    @abstractmethod
    def get_attribute_values(self, attribute: str) -> AttrValues:
        """
        Get the values of a pricing attribute from the provider.

        Args:
            attribute: Attribute name, e.g. "instanceType"

        Returns:
            Attribute values in provider order

        Raises:
            ProviderError: If the provider query fails
        """
        pass

    @abstractmethod
    def get_products(self, region_id: str, attr_key: str, attr_value: AttrValue) -> List[Ec2Vm]:
        """
        Get the instance types of a region matching an attribute value.

        Args:
            region_id: Region code, e.g. "eu-west-1"
            attr_key: Attribute name used as an additional filter
            attr_value: Attribute value used as an additional filter

        Returns:
            One record per matching product, in provider order

        Raises:
            UnknownRegionError: If the region is not known
            ProviderError: If the provider query fails
        """
        pass

    @abstractmethod
    def get_region(self, region_id: str) -> Optional[Region]:
        """Look up a region by id, None if unknown."""
        pass

    @abstractmethod
    def get_regions(self) -> Dict[str, str]:
        """Retrieve the available regions."""
        pass
