from typing import Optional
from pydantic import BaseModel, Field


class Person(BaseModel):
    """
    Зеркало backend/schemas.py.
    Ответ /people декодируется в эту модель.
    """

    name: str
    age: int = Field(..., ge=0)
    favourite_food: Optional[str] = None


class Card(BaseModel):
    """
    Данные одной карточки, готовые для шаблона.
    """

    avatar: str
    name: str
    age: int
    favourite_food: str
