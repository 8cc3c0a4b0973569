from typing import List, Optional
import requests

from .config import API_URL, REQUEST_TIMEOUT
from .models import Person


class PeopleClient:
    def __init__(self,
                 base_url: str = API_URL,
                 session: Optional[requests.Session] = None,
                 timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_people(self) -> List[Person]:
        """
        Один GET запрос к /people.

        Ошибки сети и HTTP статусы не обрабатываются,
        исключение уходит вызывающему коду.
        """

        response = self.session.get(f"{self.base_url}/people", timeout=self.timeout)
        response.raise_for_status()

        return [Person(**item) for item in response.json()]

    def close(self) -> None:
        self.session.close()
