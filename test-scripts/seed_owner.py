import os
import sys

# Ensure repo root on sys.path so we can import config/app modules when run from test-scripts
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import asyncio
from getpass import getpass

from app.database.conn import mongo_client
from app.models.user.user import User
from app.services.user_management.user_helper import seed_owner_helper


async def main() -> None:
    email = os.getenv("SEED_OWNER_EMAIL") or os.getenv("OWNER_EMAIL") or input("Owner email: ")
    password = os.getenv("SEED_OWNER_PASSWORD") or getpass("Owner password: ")

    await mongo_client.connect()
    try:
        created = await seed_owner_helper(User(email=email, password=password))
        print({"_id": created.id, "email": created.email})
    finally:
        if mongo_client.is_connected:
            await mongo_client.close()


if __name__ == "__main__":
    asyncio.run(main())
