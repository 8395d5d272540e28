"""
Shared fixtures: a fake partition table and a mocked boto3 session.
"""
import json
from unittest.mock import MagicMock

import pytest

from productinfo.clients.aws_provider import AwsInfoer
from productinfo.clients.regions import RegionResolver
from productinfo.utils.config import Settings


PARTITIONS = [
    {
        "partition": "aws",
        "regions": {
            "us-east-1": {"description": "US East (N. Virginia)"},
            "eu-west-1": {"description": "Europe (Ireland)"},
        },
    },
    {
        "partition": "aws-cn",
        "regions": {
            "cn-north-1": {"description": "China (Beijing)"},
        },
    },
]


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def region_resolver(partitions):
    return RegionResolver(partition="aws", partitions=partitions)


@pytest.fixture
def pricing_client():
    client = MagicMock()
    client.get_attribute_values.return_value = {"AttributeValues": []}
    client.get_products.return_value = {"PriceList": []}
    return client


@pytest.fixture
def session(pricing_client):
    session = MagicMock()
    session.client.return_value = pricing_client
    return session


@pytest.fixture
def infoer(session, region_resolver, settings):
    return AwsInfoer(session=session, region_resolver=region_resolver, settings=settings)


@pytest.fixture
def price_item():
    """Factory for GetProducts PriceList entries, JSON encoded like boto3 returns them."""

    def make(instance_type="m5.large", vcpu="2", memory="8 GiB", gpu=None, prices=("0.0960000000",)):
        attributes = {
            "instanceType": instance_type,
            "vcpu": vcpu,
            "memory": memory,
            "operatingSystem": "Linux",
            "tenancy": "Shared",
        }
        if gpu is not None:
            attributes["gpu"] = gpu
        dimensions = {
            f"JRTCKXETXF.6YS6EN2CT7.{i}": {
                "unit": "Hrs",
                "pricePerUnit": {"USD": price},
            }
            for i, price in enumerate(prices)
        }
        return json.dumps({
            "product": {
                "sku": "ABCDEF123456",
                "productFamily": "Compute Instance",
                "attributes": attributes,
            },
            "terms": {
                "OnDemand": {
                    "ABCDEF123456.JRTCKXETXF": {"priceDimensions": dimensions},
                },
            },
        })

    return make


@pytest.fixture
def partitions():
    return PARTITIONS
