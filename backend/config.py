import os
from dotenv import load_dotenv


# .env файл не обязателен, все значения имеют значения по умолчанию
load_dotenv()

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "3000"))

ALLOWED_ORIGINS = ["*"]
