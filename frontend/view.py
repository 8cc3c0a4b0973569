import asyncio
from typing import Callable, List, Optional

from .config import AVATAR_1, AVATAR_2, UNKNOWN_FOOD
from .models import Card, Person


def build_cards(people: List[Person]) -> List[Card]:
    """
    Формирует по одной карточке на человека.

    Аватары чередуются по чётности индекса: чётный - AVATAR_1, нечётный - AVATAR_2.
    Если любимая еда не указана, выводится UNKNOWN_FOOD.
    """

    cards = []

    for i, person in enumerate(people):
        favourite_food = person.favourite_food
        if favourite_food is None:
            favourite_food = UNKNOWN_FOOD

        cards.append(Card(
            avatar=AVATAR_1 if i % 2 == 0 else AVATAR_2,
            name=person.name,
            age=person.age,
            favourite_food=favourite_food
        ))

    return cards


class PeopleView:
    def __init__(self, fetch_people: Callable[[], List[Person]]):
        self.fetch_people = fetch_people
        self.people: List[Person] = []
        self.mounted = False
        self._task: Optional[asyncio.Task] = None

    def mount(self) -> asyncio.Task:
        """
        Запускает единственную загрузку списка.

        Блокирующий запрос выполняется в executor'е,
        результат попадает в состояние только пока view смонтирован.
        """

        if self._task is None:
            self.mounted = True
            self._task = asyncio.get_running_loop().create_task(self._load())

        return self._task

    async def _load(self) -> None:
        loop = asyncio.get_running_loop()
        people = await loop.run_in_executor(None, self.fetch_people)

        if self.mounted:
            self.people = people

    def unmount(self) -> None:
        self.mounted = False
        if self._task and not self._task.done():
            self._task.cancel()

    def cards(self) -> List[Card]:
        return build_cards(self.people)
