"""
Enum definitions for the EC2 product info service.
"""
from enum import Enum


class StrEnum(str, Enum):
    """String Enum base class to allow for string comparison."""

    def __str__(self) -> str:
        return self.value


class Provider(StrEnum):
    """Supported cloud providers."""
    AWS = "aws"


class ServiceCode(StrEnum):
    """Pricing API service codes."""
    EC2 = "AmazonEC2"


class FilterType(StrEnum):
    """Match types accepted by the pricing GetProducts filters."""
    TERM_MATCH = "TERM_MATCH"


class ProductAttribute(StrEnum):
    """
    Product attribute names used in filters and read from price list items.
    """
    INSTANCE_TYPE = "instanceType"
    CPU = "vcpu"
    MEMORY = "memory"
    GPU = "gpu"
    OPERATING_SYSTEM = "operatingSystem"
    LOCATION = "location"
    TENANCY = "tenancy"
    PRE_INSTALLED_SW = "preInstalledSw"


class ErrorSource(StrEnum):
    """Sources of errors in the application."""
    GENERAL = "general"
    AWS = "aws"
