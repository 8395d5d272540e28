"""
Main FastAPI application.
"""
import logging
from typing import Dict
import uuid

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse

from productinfo.api.productinfo_service import ProductInfoService
from productinfo.clients.provider_interface import ProviderError
from productinfo.models.base_schemas import ErrorResponse
from productinfo.models.enums import ErrorSource
from productinfo.models.productinfo_schemas import (
    AttributeValuesResponse,
    InstanceTypesResponse,
    ProductsResponse,
    Region,
    RegionsResponse,
)
from productinfo.utils.config import get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="EC2 Product Info API",
    description=(
        "API for listing EC2 instance types with their vCPUs, memory, GPUs and on-demand price, "
        "as published by the AWS Pricing API.\n"
        "\n---\n"
        "### Example Usage\n"
        "- List the instance families: `GET /attributes/instanceFamily`\n"
        "- List the memory optimized instance types of Ireland: "
        "`GET /products?region=eu-west-1&attribute=instanceFamily&value=Memory optimized`\n"
        "- List every instance type of Ireland: `GET /instance-types/eu-west-1?attribute=instanceFamily`\n"
    ),
    version="1.0.0",
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Unknown region or bad request"},
    502: {"model": ErrorResponse, "description": "AWS Pricing API error"},
    500: {"model": ErrorResponse, "description": "Server error"},
}

# Global product info service instance
_productinfo_service = None


# Dependency for product info service
async def get_productinfo_service() -> ProductInfoService:
    """
    Get or create the product info service.

    Returns:
        Product info service instance
    """
    global _productinfo_service

    if _productinfo_service is None:
        try:
            _productinfo_service = ProductInfoService()
        except ProviderError as e:
            logger.error(f"Failed to initialize product info service: {e}")
            raise HTTPException(status_code=503, detail=str(e))

    return _productinfo_service


def error_response(request_id: str, e: Exception) -> JSONResponse:
    """Map an exception raised while serving a request to an error response."""
    if isinstance(e, ValueError):
        logger.error(f"[{request_id}] Value error: {str(e)}")
        status_code, source, message = 400, ErrorSource.GENERAL, str(e)
        details = {"type": type(e).__name__}
    elif isinstance(e, ProviderError):
        logger.error(f"[{request_id}] Provider error: {str(e)}")
        status_code, source, message = 502, ErrorSource.AWS, e.message
        details = e.details
    else:
        logger.exception(f"[{request_id}] Unexpected error: {str(e)}")
        status_code, source, message = 500, ErrorSource.GENERAL, f"Unexpected error: {str(e)}"
        details = {"type": type(e).__name__}
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, source=source, details=details).model_dump(mode="json"),
    )


@app.get("/", tags=["Health"])
async def health_check() -> Dict[str, str]:
    """Health check endpoint returning service status."""
    return {"status": "healthy", "message": "EC2 Product Info API is running"}


@app.get("/regions", response_model=RegionsResponse, tags=["Regions"])
async def list_regions(
    productinfo_service: ProductInfoService = Depends(get_productinfo_service),
) -> RegionsResponse:
    """List the region ids of the configured partition."""
    return await productinfo_service.get_regions()


@app.get(
    "/regions/{region_id}",
    response_model=Region,
    responses={404: {"model": ErrorResponse, "description": "Unknown region"}},
    tags=["Regions"],
)
async def get_region(
    region_id: str,
    productinfo_service: ProductInfoService = Depends(get_productinfo_service),
):
    """Get a region with the description used as its pricing location."""
    region = await productinfo_service.get_region(region_id)
    if region is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error=f"unknown region: {region_id}",
                source=ErrorSource.GENERAL,
                details={"region": region_id},
            ).model_dump(mode="json"),
        )
    return region


@app.get(
    "/attributes/{attribute}",
    response_model=AttributeValuesResponse,
    responses=ERROR_RESPONSES,
    tags=["Product Info"],
)
async def list_attribute_values(
    attribute: str,
    productinfo_service: ProductInfoService = Depends(get_productinfo_service),
):
    """
    List the values of a pricing attribute, e.g. instanceType or instanceFamily.

    Values that are not numeric are listed with value 0.
    """
    request_id = str(uuid.uuid4())
    logger.info(f"[{request_id}] Processing attribute values request for {attribute}")
    try:
        response = await productinfo_service.get_attribute_values(attribute)
    except Exception as e:
        return error_response(request_id, e)
    logger.info(f"[{request_id}] Request completed successfully with {len(response.values)} values")
    return response


@app.get(
    "/products",
    response_model=ProductsResponse,
    responses=ERROR_RESPONSES,
    tags=["Product Info"],
    description=(
        "## AWS Product Assumptions\n"
        "- Only On-Demand EC2 instance pricing is returned.\n"
        "- Only Linux OS, shared tenancy, and no pre-installed software are considered.\n"
        "- Prices are in USD, fetched from the AWS Pricing API.\n"
        "- Fields missing from the pricing data are reported as 0.\n"
        "- The location filter is the region description bundled with botocore, e.g. `Europe (Ireland)` "
        "for eu-west-1. Where the Pricing API still names a location differently (e.g. `EU (Ireland)`), "
        "the query returns no products.\n"
    ),
)
async def list_products(
    region: str,
    attribute: str,
    value: str,
    productinfo_service: ProductInfoService = Depends(get_productinfo_service),
):
    """List the instance types of a region matching one attribute value."""
    request_id = str(uuid.uuid4())
    logger.info(f"[{request_id}] Processing products request [region={region}, {attribute}={value}]")
    try:
        response = await productinfo_service.get_products(region, attribute, value)
    except Exception as e:
        return error_response(request_id, e)
    logger.info(f"[{request_id}] Request completed successfully with {len(response.results)} products")
    return response


@app.get(
    "/instance-types/{region_id}",
    response_model=InstanceTypesResponse,
    responses=ERROR_RESPONSES,
    tags=["Product Info"],
)
async def list_instance_types(
    region_id: str,
    attribute: str = "instanceType",
    productinfo_service: ProductInfoService = Depends(get_productinfo_service),
):
    """
    List the instance types of a region, querying once per value of an attribute.

    Any failed query fails the whole request.
    """
    request_id = str(uuid.uuid4())
    logger.info(f"[{request_id}] Processing instance types request [region={region_id}, attribute={attribute}]")
    try:
        response = await productinfo_service.get_instance_types(region_id, attribute)
    except Exception as e:
        return error_response(request_id, e)
    logger.info(f"[{request_id}] Request completed successfully with {len(response.results)} instance types")
    return response
