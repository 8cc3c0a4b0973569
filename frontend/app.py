"""
Frontend Application Server.

Этот модуль отдаёт страницу со списком карточек.
Список загружается из People API при каждом открытии страницы.
"""

from flask import Flask, current_app, render_template

from .client import PeopleClient
from .config import FRONTEND_HOST, FRONTEND_PORT
from .view import PeopleView

# Flask автоматически ищет шаблоны в папке 'templates'
# и статические файлы (css) в папке 'static'.
app = Flask(__name__)
app.config["PEOPLE_CLIENT"] = PeopleClient()


@app.route("/")
async def index() -> str:
    """
    Главная страница.

    Монтирует view, дожидается единственной загрузки списка
    и рендерит по карточке на каждого человека.

    Returns:
        str: Отрендеренный HTML шаблон 'index.html'.
    """
    client: PeopleClient = current_app.config["PEOPLE_CLIENT"]
    view = PeopleView(client.fetch_people)

    try:
        await view.mount()
        return render_template("index.html", cards=view.cards())
    finally:
        view.unmount()


def main() -> None:
    print(f"Running at http://{FRONTEND_HOST}:{FRONTEND_PORT}")
    app.run(debug=False, port=FRONTEND_PORT, host=FRONTEND_HOST)


if __name__ == "__main__":
    main()
