"""
Product info schemas: attribute values, EC2 instance records and regions.
"""
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class AttrValue(BaseModel):
    """One value of a pricing attribute, parsed and as returned by the provider."""
    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Parsed numeric magnitude, 0 if the value is not numeric")
    str_value: str = Field(..., description="Original provider formatted value")


# Ordered as returned by the provider, not deduplicated
AttrValues = List[AttrValue]


class Ec2Vm(BaseModel):
    """Flat record describing one priced EC2 instance type."""
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Instance type identifier, e.g. m5.large")
    on_demand_price: float = Field(0.0, description="On-demand price per unit in USD")
    cpus: float = Field(0.0, description="Number of virtual CPUs")
    mem: float = Field(0.0, description="Memory size in GiB")
    gpus: float = Field(0.0, description="Number of GPUs, 0 if the instance has none")


class Region(BaseModel):
    """A region of a provider partition."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Region code, e.g. eu-west-1")
    description: str = Field(..., description="Human readable name, used as the pricing location")


class AttributeValuesResponse(BaseModel):
    """Response listing the values of one pricing attribute."""
    attribute: str
    values: List[AttrValue]


class ProductsResponse(BaseModel):
    """Response listing the instance types matching one attribute value in a region."""
    region: str
    attribute: str
    value: str
    results: List[Ec2Vm]


class InstanceTypesResponse(BaseModel):
    """Instance types of a region, gathered for every value of an attribute."""
    region: str
    attribute: str
    results: List[Ec2Vm]


class RegionsResponse(BaseModel):
    """Known regions of the configured partition."""
    regions: Dict[str, str]
