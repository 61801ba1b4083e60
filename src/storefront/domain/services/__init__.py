"""Domain services."""

from storefront.domain.services.product_faker import (
    CommerceProvider,
    ProductFaker,
    generate_product,
    generate_products,
    get_product_faker,
)

__all__ = [
    "CommerceProvider",
    "ProductFaker",
    "generate_product",
    "generate_products",
    "get_product_faker",
]
