"""Synthetic product records for mocking the catalog.

Backed by Faker with a commerce provider for product names and
departments, which Faker does not ship for Python.
"""

from typing import Any

from faker import Faker
from faker.providers import BaseProvider

from storefront.core.config import Settings, get_settings

PRICE_MIN = 1
PRICE_MAX = 200
STOCK_MIN = 1
STOCK_MAX = 100


class CommerceProvider(BaseProvider):
    """Product names and store departments in Spanish."""

    products = (
        "Silla", "Mesa", "Camisa", "Pantalones", "Zapatos", "Sombrero",
        "Guantes", "Toalla", "Teclado", "Ratón", "Computadora", "Monitor",
        "Bicicleta", "Pelota", "Coche", "Queso", "Pollo", "Atún",
        "Ensalada", "Salchichas", "Pizza", "Jabón", "Libro", "Lámpara",
    )
    departments = (
        "Electrónica", "Hogar", "Ropa", "Deportes", "Juguetes", "Libros",
        "Música", "Jardín", "Herramientas", "Salud", "Belleza", "Bebés",
        "Automotriz", "Industrial", "Alimentos", "Computación",
    )
    materials = (
        "Madera", "Acero", "Plástico", "Algodón", "Granito", "Metal",
        "Concreto", "Hule", "Bronce", "Cuero",
    )

    def product(self) -> str:
        return self.random_element(self.products)

    def department(self) -> str:
        return self.random_element(self.departments)

    def product_description(self) -> str:
        product = self.product()
        material = self.random_element(self.materials)
        return f"{product} de {material.lower()} {self.generator.sentence(nb_words=8).lower()}"


class ProductFaker:
    """Builds fake product records."""

    def __init__(self, locale: str | None = None, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.faker = Faker(locale or settings.faker_locale)
        self.faker.add_provider(CommerceProvider)

    def generate_product(self) -> dict[str, Any]:
        """Generate one product.

        Price is within [1, 200] with two decimals, stock an integer within
        [1, 100] and code a UUID4 string.
        """
        cents = self.faker.random_int(min=PRICE_MIN * 100, max=PRICE_MAX * 100)
        return {
            "title": self.faker.product(),
            "description": self.faker.product_description(),
            "price": round(cents / 100, 2),
            "code": self.faker.uuid4(),
            "stock": self.faker.random_int(min=STOCK_MIN, max=STOCK_MAX),
            "category": self.faker.department(),
        }

    def generate_products(self, count: int) -> list[dict[str, Any]]:
        if count < 0:
            raise ValueError("count must not be negative")
        return [self.generate_product() for _ in range(count)]


_product_faker: ProductFaker | None = None


def get_product_faker() -> ProductFaker:
    global _product_faker
    if _product_faker is None:
        _product_faker = ProductFaker()
    return _product_faker


def generate_product() -> dict[str, Any]:
    """Generate one fake product with the shared faker."""
    return get_product_faker().generate_product()


def generate_products(count: int) -> list[dict[str, Any]]:
    return get_product_faker().generate_products(count)
