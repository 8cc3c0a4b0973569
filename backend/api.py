import uvicorn
from contextlib import asynccontextmanager
from typing import List
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware

from .config import API_HOST, API_PORT, ALLOWED_ORIGINS
from .people import get_people
from .schemas import Person


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Жизненный цикл API.
    Состояния между запросами нет, поэтому только сообщает о старте и остановке.
    """

    print("Starting API...")

    yield

    print("Stopping API...")

app = FastAPI(title='People API', lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello, World!"

@app.get("/people", response_model=List[Person])
async def list_people() -> List[Person]:
    """
    Отдаёт фиксированный список людей.

    Без параметров и пагинации, порядок всегда один и тот же.
    """

    return get_people()


def main() -> None:
    uvicorn.run(app, host=API_HOST, port=API_PORT, reload=False)


if __name__ == "__main__":
    main()
