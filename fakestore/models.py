from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StrictFloat, StrictInt, TypeAdapter
from typing import List, Optional


class Product(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictInt = Field(..., description="Server-assigned product identifier")
    title: str = Field(..., description="Display name")
    price: StrictFloat = Field(..., description="Unit price; JSON integers are accepted")
    description: str
    category: str
    image: HttpUrl = Field(..., description="Absolute URL of the product image")


class ProductUpdate(BaseModel):
    """Partial Product, as sent to and echoed back by PUT /products/{id}."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[StrictInt] = None
    title: Optional[str] = None
    price: Optional[StrictFloat] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image: Optional[HttpUrl] = None


ProductList = TypeAdapter(List[Product])
