from typing import Any, Dict

from app.database.conn import mongo_client
from app.utils.logger_utils import logger


def _project_validator() -> Dict[str, Any]:
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "required": ["project_name", "small_description", "description", "order"],
            "properties": {
                "project_name": {"bsonType": "string"},
                "small_description": {"bsonType": "string"},
                "description": {"bsonType": "string"},
                "skills": {"bsonType": ["array", "null"], "items": {"bsonType": "string"}},
                "project_repository": {"bsonType": ["string", "null"]},
                "project_live_link": {"bsonType": ["string", "null"]},
                "project_video": {"bsonType": ["string", "null"]},
                "images": {"bsonType": ["array", "null"], "items": {"bsonType": "string"}},
                "order": {"bsonType": ["int", "long"]},
                "created_at": {"bsonType": ["date", "null"]},
                "updated_at": {"bsonType": ["date", "null"]},
            },
        }
    }


def _user_validator_lenient() -> Dict[str, Any]:
    # Keep permissive; the owner document may carry profile fields managed elsewhere
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "properties": {
                "email": {"bsonType": ["string", "null"]},
                "password": {"bsonType": ["string", "null"]},
                "projects": {"bsonType": ["array", "null"], "items": {"bsonType": "objectId"}},
                "created_at": {"bsonType": ["date", "null"]},
                "updated_at": {"bsonType": ["date", "null"]},
            },
        }
    }


# Collection config key -> validator applied at startup
COLLECTION_VALIDATORS = {
    "PROJECT_COLLECTION": _project_validator,
    "USER_COLLECTION": _user_validator_lenient,
}


async def ensure_collections_and_indexes() -> None:
    """Create collections with validators and ensure indexes exist.

    This is idempotent and safe to call on every startup.
    """
    db = mongo_client.database
    existing = await db.list_collection_names()

    for key, build_validator in COLLECTION_VALIDATORS.items():
        name = mongo_client.collection_name(key)
        validator = build_validator()
        try:
            if name not in existing:
                await db.create_collection(name, validator=validator)
                logger.info(f"Created collection {name} with validator")
            else:
                try:
                    await db.command({
                        "collMod": name,
                        "validator": validator,
                        "validationLevel": "moderate",
                    })
                    logger.info(f"Updated validator for collection {name}")
                except Exception as e:
                    logger.warning(f"Could not update validator for {name}: {e}")
        except Exception as e:
            logger.error(f"Error ensuring collection {name}: {e}")

    # Listing and kanban both sort on order
    try:
        await mongo_client.collection("PROJECT_COLLECTION").create_index("order", name="idx_project_order")
    except Exception as e:
        logger.warning(f"Create index projects.order failed or exists: {e}")

    try:
        await mongo_client.collection("USER_COLLECTION").create_index("email", unique=True, name="uniq_user_email")
    except Exception as e:
        logger.warning(f"Create index users.email failed or exists: {e}")
