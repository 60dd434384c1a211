from app.database.conn import mongo_client
from app.utils.logger_utils import logger
from app.utils.exceptions import ServiceError, ValidationError, NotFoundError, StoreError
from app.models.user.user import User, UserOut
from app.services.auth.auth_utils import hash_password
from bson import ObjectId
from datetime import datetime, timezone
from config import OWNER_CONFIG


def _user_col():
    return mongo_client.collection("USER_COLLECTION")


def _owner_filter() -> dict:
    """Filter selecting the single owner record.

    An explicitly configured OWNER_EMAIL wins; otherwise the first user
    record found is the owner.
    """
    if OWNER_CONFIG["OWNER_EMAIL"]:
        return {"email": OWNER_CONFIG["OWNER_EMAIL"]}
    return {}


def to_user_out(doc: dict) -> UserOut:
    return UserOut(
        _id=str(doc["_id"]),
        email=doc["email"],
        projects=[str(pid) for pid in doc.get("projects") or []],
    )


# ---------- OWNER LOOKUP ----------
async def get_owner_helper() -> dict:
    try:
        owner = await _user_col().find_one(_owner_filter())
    except Exception as e:
        logger.error(f"get_owner_helper error: {e}")
        raise StoreError("Failed to fetch user", error=str(e))
    if not owner:
        logger.warning("No owner user record found")
        raise NotFoundError("User not found")
    return owner


# ---------- USER-PROJECT LINKAGE ----------
async def attach_project_helper(project_id: ObjectId) -> None:
    """Add project_id to the owner's project references (set-like, never duplicated)."""
    owner = await get_owner_helper()
    try:
        res = await _user_col().update_one(
            {"_id": owner["_id"]},
            {
                "$addToSet": {"projects": project_id},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
        )
    except Exception as e:
        logger.error(f"attach_project_helper error for project {project_id}: {e}")
        raise StoreError("Failed to update user projects", error=str(e))
    if res.matched_count == 0:
        raise NotFoundError("User not found")
    logger.info(f"Linked project {project_id} to user {owner['_id']}")


async def detach_project_helper(project_id: ObjectId) -> None:
    """Remove project_id from the owner's project references; no-op when absent."""
    owner = await get_owner_helper()
    if project_id not in (owner.get("projects") or []):
        logger.warning(f"Project {project_id} is not linked to user {owner['_id']}")
    try:
        res = await _user_col().update_one(
            {"_id": owner["_id"]},
            {
                "$pull": {"projects": project_id},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
        )
    except Exception as e:
        logger.error(f"detach_project_helper error for project {project_id}: {e}")
        raise StoreError("Failed to update user projects", error=str(e))
    if res.matched_count == 0:
        raise NotFoundError("User not found")
    logger.info(f"Unlinked project {project_id} from user {owner['_id']}")


# ---------- OWNER SEEDING ----------
async def seed_owner_helper(payload: User) -> UserOut:
    logger.info(f"Attempting to create owner user with email: {payload.email}")
    try:
        existing_user = await _user_col().find_one({"email": payload.email})
        if existing_user:
            logger.warning(f"User with email {payload.email} already exists")
            raise ValidationError("User with this email already exists")

        doc = payload.model_dump()
        doc["password"] = hash_password(doc["password"])
        doc["projects"] = []
        doc["created_at"] = datetime.now(timezone.utc)
        doc["updated_at"] = datetime.now(timezone.utc)

        result = await _user_col().insert_one(doc)
        if not result.inserted_id:
            raise StoreError("Failed to create user")
        logger.info(f"Owner user created successfully with ID: {result.inserted_id}")
        doc["_id"] = result.inserted_id
        return to_user_out(doc)
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating owner user: {e}")
        raise StoreError("Failed to create user", error=str(e))
