from typing import List
from .schemas import Person


def get_people() -> List[Person]:
    """
    Возвращает фиксированный список из трёх человек.

    Список собирается заново при каждом вызове,
    поэтому между запросами нет общего изменяемого состояния.
    """

    return [
        Person(name="Person A", age=36, favourite_food="Pizza"),
        Person(name="Person B", age=5, favourite_food="Broccoli"),
        Person(name="Person C", age=100, favourite_food=None),
    ]
