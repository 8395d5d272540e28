"""
Schemas for the raw price list items returned by the pricing GetProducts call.

Each item is a nested JSON document with no schema guarantee, so every field is
optional here. Decoding an item into these models is the only place where the
payload shape is checked; anything the models do not describe is ignored.

    {
      "product": {"sku": "...", "attributes": {"instanceType": "m5.large", ...}},
      "terms": {
        "OnDemand": {
          "<offer term code>": {
            "priceDimensions": {
              "<rate code>": {"pricePerUnit": {"USD": "0.0960000000"}, ...}
            }
          }
        }
      }
    }
"""
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class PriceListModel(BaseModel):
    # numbers where strings are expected are read as strings and parsed later
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)


class PricePerUnit(PriceListModel):
    usd: Optional[str] = Field(None, alias="USD")


class PriceDimension(PriceListModel):
    unit: Optional[str] = None
    price_per_unit: PricePerUnit = Field(default_factory=PricePerUnit, alias="pricePerUnit")


class OfferTerm(PriceListModel):
    # Keyed by provider generated rate codes
    price_dimensions: Optional[Dict[str, PriceDimension]] = Field(None, alias="priceDimensions")


class PriceTerms(PriceListModel):
    # Keyed by provider generated offer term codes
    on_demand: Optional[Dict[str, OfferTerm]] = Field(None, alias="OnDemand")


class ProductAttributes(PriceListModel):
    instance_type: Optional[str] = Field(None, alias="instanceType")
    vcpu: Optional[str] = None
    memory: Optional[str] = None
    gpu: Optional[str] = None


class Product(PriceListModel):
    sku: Optional[str] = None
    product_family: Optional[str] = Field(None, alias="productFamily")
    attributes: ProductAttributes = Field(default_factory=ProductAttributes)


class PriceListItem(PriceListModel):
    """One decoded entry of a GetProducts PriceList."""
    product: Product = Field(default_factory=Product)
    terms: PriceTerms = Field(default_factory=PriceTerms)
