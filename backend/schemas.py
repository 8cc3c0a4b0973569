from typing import Optional
from pydantic import BaseModel, Field


class Person(BaseModel):
    """
    Человек из списка, который отдаётся на фронт.
    Форма модели должна совпадать с frontend/models.py.
    """

    name: str
    age: int = Field(..., ge=0)
    favourite_food: Optional[str] = None
