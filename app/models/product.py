from datetime import date

from sqlalchemy import Boolean, Column, Date, Float, Integer, String, Text

from app.database import Base


class Product(Base):
    """
    Product record stored in the catalog table.

    Attributes:
        id: Unique identifier assigned on first insert
        name: Product name
        quantity: Units available in stock
        price: Price per unit
        description: Free-form description
        category: Category name (compared case-insensitively)
        created_date: Date the product was first saved
        updated_date: Date the product was last saved
        in_stock: Availability flag
    """
    __tablename__ = "product_tbl"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), index=True)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False, default=0.0)
    description = Column(Text)
    category = Column(String(100))
    created_date = Column(Date)
    updated_date = Column(Date)
    in_stock = Column(Boolean, nullable=False, default=False)

    def calculate_stock_value(self) -> float:
        """Total value of the units on hand (price * quantity)."""
        return (self.price or 0.0) * (self.quantity or 0)

    def is_in_category(self, category: str) -> bool:
        """Case-insensitive category match; a product without a category never matches."""
        if self.category is None or category is None:
            return False
        return self.category.casefold() == category.casefold()

    def mark_as_out_of_stock(self) -> None:
        self.in_stock = False
        self.quantity = 0

    def update_details(self, name: str, price: float, description: str, category: str) -> None:
        """Overwrite the editable details and refresh the update date."""
        self.name = name
        self.price = price
        self.description = description
        self.category = category
        self.updated_date = date.today()

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', quantity={self.quantity})>"
