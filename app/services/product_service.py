from collections import Counter
from datetime import date
from typing import Dict, List
import logging

from app.models.product import Product
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

UNCATEGORIZED = "uncategorized"


class ProductNotFoundError(Exception):
    """Exception raised when the requested product doesn't exist."""
    pass


class ProductService:
    """
    Service class for Product operations.

    This service handles:
    - Creating products, one at a time or in bulk
    - Reading products by ID, by name, or all of them
    - Updating product details and marking products out of stock
    - Deleting products
    - Filtering and summarizing the catalog in memory
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    @staticmethod
    def _stamp_dates(product: Product) -> None:
        today = date.today()
        if product.created_date is None:
            product.created_date = today
        product.updated_date = today

    def save(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Stored product with its assigned ID
        """
        product = Product(**product_data.model_dump())
        self._stamp_dates(product)
        product = self.repository.save(product)
        logger.info(f"Product #{product.id} created")
        return product

    def save_batch(self, products_data: List[ProductCreate]) -> List[Product]:
        """
        Create several products with a single batched write.

        Args:
            products_data: Product creation data, in the order to be returned

        Returns:
            Stored products in input order
        """
        products = [Product(**data.model_dump()) for data in products_data]
        for product in products:
            self._stamp_dates(product)
        products = self.repository.save_all(products)
        logger.info(f"Bulk created {len(products)} products")
        return products

    def get_all(self) -> List[Product]:
        return self.repository.find_all()

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no product has this ID
        """
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product with ID {product_id} not found.")
        return product

    def get_by_name(self, name: str) -> Product:
        """
        Get a product by its exact name.

        Raises:
            ProductNotFoundError: If no product has this name
        """
        product = self.repository.find_by_name(name)
        if product is None:
            raise ProductNotFoundError(f"Product with name {name} not found.")
        return product

    def update(self, product_data: ProductUpdate) -> Product:
        """
        Overwrite name, price, description and category of an existing product.

        Quantity, stock flag and creation date are left untouched.

        Raises:
            ProductNotFoundError: If the product referenced by ``product_data.id`` doesn't exist
        """
        product = self.get_by_id(product_data.id)
        product.update_details(
            product_data.name,
            product_data.price,
            product_data.description,
            product_data.category,
        )
        product = self.repository.save(product)
        logger.info(f"Product #{product.id} updated")
        return product

    def delete(self, product_id: int) -> str:
        """
        Delete a product by ID.

        Deleting an ID that does not exist is not an error.

        Returns:
            Confirmation message
        """
        self.repository.delete_by_id(product_id)
        logger.info(f"Product #{product_id} deleted")
        return f"Product with ID {product_id} deleted successfully."

    def get_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        """Products priced between min_price and max_price, both inclusive."""
        return [
            product for product in self.repository.find_all()
            if min_price <= product.price <= max_price
        ]

    def get_by_category(self, category: str) -> List[Product]:
        return [
            product for product in self.repository.find_all()
            if product.is_in_category(category)
        ]

    def mark_out_of_stock(self, product_id: int) -> Product:
        """
        Set quantity to zero and clear the stock flag.

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        product = self.get_by_id(product_id)
        product.mark_as_out_of_stock()
        product = self.repository.save(product)
        logger.info(f"Product #{product_id} marked out of stock")
        return product

    def summary_by_category(self) -> Dict[str, int]:
        """
        Count products per category.

        Categories are grouped by their stored spelling. Products without a
        category are counted under ``UNCATEGORIZED``.
        """
        counts = Counter(
            product.category if product.category is not None else UNCATEGORIZED
            for product in self.repository.find_all()
        )
        return dict(counts)

    def total_stock_value(self) -> float:
        """Sum of price * quantity over every product; 0.0 for an empty catalog."""
        return sum(
            (product.calculate_stock_value() for product in self.repository.find_all()),
            0.0,
        )
