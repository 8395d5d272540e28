import logging
from typing import Any, Callable, Dict, List, Optional, Union

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError
from pydantic import ValidationError

from productinfo.clients.provider_interface import (
    MissingPriceError,
    ProductInfoer,
    ProviderError,
    UnknownRegionError,
)
from productinfo.clients.regions import RegionResolver
from productinfo.models.enums import FilterType, ProductAttribute, Provider, ServiceCode
from productinfo.models.price_list_schemas import PriceListItem
from productinfo.models.productinfo_schemas import AttrValue, AttrValues, Ec2Vm, Region
from productinfo.utils.config import Settings, get_settings
from productinfo.utils.transform_data_types import parse_memory, parse_number, to_attr_value

logger = logging.getLogger(__name__)

# Fixed filters for every GetProducts query, the location and attribute filters are added per call
OPERATING_SYSTEM = "Linux"
TENANCY = "shared"
PRE_INSTALLED_SW = "NA"


def decode_price_list_item(raw: Union[str, bytes, Dict[str, Any]]) -> PriceListItem:
    """
    Decode one PriceList entry. boto3 returns the entries as JSON strings.

    Raises:
        ValidationError: If the entry is not JSON or its shape does not match
    """
    if isinstance(raw, (str, bytes)):
        return PriceListItem.model_validate_json(raw)
    return PriceListItem.model_validate(raw)


def on_demand_price(item: PriceListItem) -> float:
    """
    Extract the on-demand USD price of a price list item.

    The OnDemand terms and their price dimensions are keyed by provider
    generated codes. The provider returns a single term with a single
    dimension per product; should there be more, the last one wins.

    Raises:
        MissingPriceError: If there is no term, dimension or USD price
        ValueError: If the USD price is not a number
    """
    on_demand = item.terms.on_demand or {}
    if not on_demand:
        raise MissingPriceError("no OnDemand term")
    price = None
    for term in on_demand.values():
        if not term.price_dimensions:
            raise MissingPriceError("no price dimension in OnDemand term")
        for dimension in term.price_dimensions.values():
            price = dimension.price_per_unit.usd
    if price is None:
        raise MissingPriceError("no USD price in OnDemand term")
    return parse_number(price)


class AwsInfoer(ProductInfoer):
    """Product info backed by the AWS Pricing API."""

    def __init__(
        self,
        session: Optional[boto3.Session] = None,
        region_resolver: Optional[RegionResolver] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Set up the session and the pricing client.

        Args:
            session: boto3 session to use, a new one is created when omitted
            region_resolver: Region lookups, the bundled AWS partition when omitted
            settings: Settings, read from the environment when omitted

        Raises:
            ProviderError: If the session or the client cannot be created
        """
        logger.info("Initializing AwsInfoer...")
        super().__init__(provider_name=Provider.AWS.value)
        self.settings = settings or get_settings()
        self.region_resolver = region_resolver or RegionResolver(partition=self.settings.partition)
        try:
            self.session = session or boto3.Session(profile_name=self.settings.aws_profile)
            if self.session.get_credentials() is None:
                raise NoCredentialsError()
            # The pricing API is only served from a few endpoints, us-east-1 by default
            self.pricing_client = self.session.client(
                "pricing",
                region_name=self.settings.pricing_region,
                config=Config(
                    connect_timeout=self.settings.connect_timeout,
                    read_timeout=self.settings.read_timeout,
                    retries={"total_max_attempts": self.settings.max_attempts},
                ),
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to set up AWS session: {e}")
            raise ProviderError(
                provider=self.provider_name,
                message=f"could not create session: {e}",
                details={"error_type": type(e).__name__},
            ) from e
        logger.info(f"AwsInfoer initialized with pricing client in {self.settings.pricing_region}.")

    def _query_error(self, operation: str, error: Exception) -> ProviderError:
        logger.error(f"{operation} failed: {error}")
        details = {"operation": operation, "error_type": type(error).__name__}
        if isinstance(error, ClientError):
            details["error_code"] = error.response.get("Error", {}).get("Code")
        return ProviderError(provider=self.provider_name, message=str(error), details=details)

    def get_attribute_values(self, attribute: str) -> AttrValues:
        try:
            response = self.pricing_client.get_attribute_values(
                ServiceCode=ServiceCode.EC2.value,
                AttributeName=attribute,
            )
        except (BotoCoreError, ClientError) as e:
            raise self._query_error("GetAttributeValues", e) from e

        values = [to_attr_value(attribute, v.get("Value", "")) for v in response.get("AttributeValues", [])]
        logger.debug(f"found {attribute} values: {values}")
        return values

    def get_products(self, region_id: str, attr_key: str, attr_value: AttrValue) -> List[Ec2Vm]:
        logger.debug(
            f"Getting available instance types from AWS API. [region={region_id}, {attr_key}={attr_value.str_value}]")
        region = self.get_region(region_id)
        if region is None:
            raise UnknownRegionError(region_id)

        try:
            response = self.pricing_client.get_products(
                ServiceCode=ServiceCode.EC2.value,
                Filters=self._get_products_filters(region, attr_key, attr_value),
            )
        except (BotoCoreError, ClientError) as e:
            raise self._query_error("GetProducts", e) from e

        vms = []
        for raw in response.get("PriceList", []):
            try:
                item = decode_price_list_item(raw)
            except ValidationError as e:
                logger.warning(f"Skipping malformed price list item [{attr_key}={attr_value.str_value}]: {e}")
                continue
            vm = self._to_vm(item)
            if vm is not None:
                vms.append(vm)
        logger.debug(f"found vms [{attr_key}={attr_value.str_value}]: {vms}")
        return vms

    def _to_vm(self, item: PriceListItem) -> Optional[Ec2Vm]:
        attrs = item.product.attributes
        if not attrs.instance_type:
            logger.warning(f"Skipping price list item without instance type [sku={item.product.sku}]")
            return None

        gpus = 0.0
        if attrs.gpu is not None:
            gpus = self._parse_field(attrs.instance_type, ProductAttribute.GPU, attrs.gpu, parse_number)
        try:
            price = on_demand_price(item)
        except ValueError as e:
            logger.warning(f"Couldn't get on-demand price of {attrs.instance_type}: {e}")
            price = 0.0

        return Ec2Vm(
            type=attrs.instance_type,
            on_demand_price=price,
            cpus=self._parse_field(attrs.instance_type, ProductAttribute.CPU, attrs.vcpu, parse_number),
            mem=self._parse_field(attrs.instance_type, ProductAttribute.MEMORY, attrs.memory, parse_memory),
            gpus=gpus,
        )

    @staticmethod
    def _parse_field(instance_type: str, name: str, value: Optional[str], parse: Callable[[str], float]) -> float:
        if value is None:
            logger.warning(f"Missing {name} for {instance_type}")
            return 0.0
        try:
            return parse(value)
        except ValueError as e:
            logger.warning(f"Couldn't parse {name} of {instance_type}: [{value}]: {e}")
            return 0.0

    def get_region(self, region_id: str) -> Optional[Region]:
        return self.region_resolver.get_region(region_id)

    def get_regions(self) -> Dict[str, str]:
        return self.region_resolver.get_regions()

    @staticmethod
    def _get_products_filters(region: Region, attr_key: str, attr_value: AttrValue) -> List[Dict[str, str]]:
        # The pricing API indexes locations by their description, not the region code
        return [
            {"Type": FilterType.TERM_MATCH.value, "Field": ProductAttribute.OPERATING_SYSTEM.value,
             "Value": OPERATING_SYSTEM},
            {"Type": FilterType.TERM_MATCH.value, "Field": ProductAttribute.LOCATION.value,
             "Value": region.description},
            {"Type": FilterType.TERM_MATCH.value, "Field": ProductAttribute.TENANCY.value,
             "Value": TENANCY},
            {"Type": FilterType.TERM_MATCH.value, "Field": ProductAttribute.PRE_INSTALLED_SW.value,
             "Value": PRE_INSTALLED_SW},
            {"Type": FilterType.TERM_MATCH.value, "Field": attr_key,
             "Value": attr_value.str_value},
        ]
