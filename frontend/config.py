import os
from dotenv import load_dotenv


load_dotenv()

API_URL = os.getenv("API_URL", "http://127.0.0.1:3000")

FRONTEND_HOST = os.getenv("FRONTEND_HOST", "127.0.0.1")
FRONTEND_PORT = int(os.getenv("FRONTEND_PORT", "5000"))

# секунды
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

AVATAR_1 = ("https://res.cloudinary.com/dqse2txyi/image/upload/"
            "v1666049372/axum_server/img_avatar_lf92vl.png")
AVATAR_2 = ("https://res.cloudinary.com/dqse2txyi/image/upload/"
            "v1666049372/axum_server/img_avatar2_erqray.png")

UNKNOWN_FOOD = "Unknown"
