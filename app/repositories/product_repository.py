from sqlalchemy.orm import Session
from typing import Optional, List

from app.models.product import Product


class ProductRepository:
    """
    Storage gateway for the product table.

    Lookups return None when nothing matches; deciding whether that is an
    error is left to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, product: Product) -> Product:
        """Insert or update a single product and return the stored row."""
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def save_all(self, products: List[Product]) -> List[Product]:
        """Insert or update a batch of products in a single commit."""
        self.db.add_all(products)
        self.db.commit()
        for product in products:
            self.db.refresh(product)
        return products

    def find_all(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def find_by_name(self, name: str) -> Optional[Product]:
        """Exact, case-sensitive name match."""
        return (
            self.db.query(Product)
            .filter(Product.name == name)
            .order_by(Product.id)
            .first()
        )

    def delete_by_id(self, product_id: int) -> None:
        """Delete a product if it exists; deleting a missing ID is a no-op."""
        self.db.query(Product).filter(Product.id == product_id).delete(
            synchronize_session=False
        )
        self.db.commit()
