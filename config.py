import os
from dotenv import load_dotenv
load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL")

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")

database_config = {
    "MONGO_URI": MONGO_URI,
    "DB_NAME": os.getenv("DB_NAME", "portfolio"),
    "USER_COLLECTION": "users",
    "PROJECT_COLLECTION": "projects",
}

# Single-tenant ownership: all project references live on this one user.
# When OWNER_EMAIL is unset the first user record is treated as the owner.
OWNER_CONFIG = {
    "OWNER_EMAIL": os.getenv("OWNER_EMAIL") or None,
    "ADMIN_PASS": os.getenv("ADMIN_PASS") or None,
}

JWT_CONFIG = {
    "JWT_SECRET_KEY": os.getenv("JWT_SECRET_KEY"),
    "JWT_ALGORITHM": os.getenv("JWT_ALGORITHM", "HS256"),
    "ACCESS_TOKEN_EXPIRE_MINUTES": int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)),
}

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
