from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import date
from typing import Optional


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: Optional[str] = Field(None, description="Product name")
    quantity: int = Field(0, description="Units available in stock")
    price: float = Field(0.0, description="Price per unit")
    description: Optional[str] = Field(None, description="Product description")
    category: Optional[str] = Field(None, description="Product category, e.g. Electronics")
    in_stock: bool = Field(False, description="Availability flag")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(ProductBase):
    """Schema for creating a new product. createdDate defaults to today when omitted."""
    created_date: Optional[date] = Field(None, description="Date the product was added")


class ProductUpdate(BaseModel):
    """
    Schema for a full-detail update.

    Only name, price, description and category are applied; the identifier
    selects the record to update.
    """
    id: int = Field(..., description="ID of the product to update")
    name: Optional[str] = None
    price: float = 0.0
    description: Optional[str] = None
    category: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int
    created_date: Optional[date] = None
    updated_date: Optional[date] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
