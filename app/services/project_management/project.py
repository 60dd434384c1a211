from app.database.conn import mongo_client
from app.utils.logger_utils import logger
from app.utils.exceptions import ServiceError, ValidationError, NotFoundError, StoreError
from app.models.project.project import Project, ProjectOut, ProjectUpdate, ProjectKanban, ProjectOrderUpdate
from app.services.user_management.user_helper import get_owner_helper, attach_project_helper, detach_project_helper
from bson import ObjectId
from pydantic import ValidationError as SchemaValidationError
from datetime import datetime, timezone
from typing import List


def _project_col():
    return mongo_client.collection("PROJECT_COLLECTION")


def _to_object_id(project_id: str) -> ObjectId:
    if not project_id or not project_id.strip():
        raise ValidationError("Project ID is required")
    if not ObjectId.is_valid(project_id):
        raise ValidationError("Invalid project ID")
    return ObjectId(project_id)


def _validate_required(payload: ProjectUpdate) -> None:
    required = (payload.project_name, payload.small_description, payload.description)
    if not all(value and value.strip() for value in required):
        raise ValidationError("Name, small description and description are required")


def _to_project_out(doc: dict) -> ProjectOut:
    doc["_id"] = str(doc["_id"])
    try:
        return ProjectOut(**doc)
    except SchemaValidationError as e:
        logger.error(f"Stored project {doc['_id']} does not match the project model: {e}")
        raise StoreError(f"Malformed project record {doc['_id']}", error=str(e))


async def _next_order() -> int:
    last = await _project_col().find_one({}, sort=[("order", -1)])
    if not last:
        return 1
    return int(last.get("order") or 0) + 1


# ---------- PROJECT READS ----------
async def list_projects_helper() -> List[ProjectOut]:
    """All projects, ascending by order. Empty list when there are none."""
    try:
        docs = await _project_col().find({}).to_list(length=None)
    except Exception as e:
        logger.error(f"list_projects_helper error: {e}")
        raise StoreError("Failed to fetch projects", error=str(e))

    items = [_to_project_out(doc) for doc in docs]
    return sorted(items, key=lambda project: project.order)


async def get_projects_kanban_helper() -> List[ProjectKanban]:
    """Ascending listing reversed: highest order first, trimmed to order/id/title."""
    projects = await list_projects_helper()
    return [
        ProjectKanban(order=project.order, project_id=project.id, project_title=project.project_name)
        for project in reversed(projects)
    ]


async def get_project_helper(project_id: str) -> ProjectOut:
    oid = _to_object_id(project_id)
    try:
        doc = await _project_col().find_one({"_id": oid})
    except Exception as e:
        logger.error(f"get_project_helper error: {e}")
        raise StoreError("Failed to fetch project", error=str(e))
    if not doc:
        raise NotFoundError("Project not found")
    return _to_project_out(doc)


# ---------- PROJECT WRITES ----------
async def create_project_helper(payload: Project) -> ProjectOut:
    _validate_required(payload)
    # Resolve the owner up front so a missing user never leaves an unlinked project behind
    await get_owner_helper()

    doc = payload.model_dump()
    try:
        if doc.get("order") is None:
            doc["order"] = await _next_order()
        doc["created_at"] = datetime.now(timezone.utc)
        doc["updated_at"] = datetime.now(timezone.utc)
        result = await _project_col().insert_one(doc)
    except Exception as e:
        logger.error(f"create_project_helper error: {e}")
        raise StoreError("Failed to add project", error=str(e))
    if not result.inserted_id:
        raise StoreError("Failed to add project")

    project_id = result.inserted_id
    logger.info(f"Project created with ID: {project_id}")

    try:
        await attach_project_helper(project_id)
    except ServiceError as e:
        # The project stays persisted; report its id so the caller can reconcile
        logger.error(f"Project {project_id} created but not linked to user: {e.message}")
        raise StoreError(
            "Project created but failed to update user projects",
            error=e.error or e.message,
            data={"project_id": str(project_id)},
        )

    doc["_id"] = project_id
    return _to_project_out(doc)


async def update_project_helper(project_id: str, payload: ProjectUpdate) -> ProjectOut:
    """Replace the editable fields of a project. order and _id are never written."""
    oid = _to_object_id(project_id)
    _validate_required(payload)

    update_data = payload.model_dump(include=set(ProjectUpdate.model_fields))
    update_data["updated_at"] = datetime.now(timezone.utc)
    try:
        res = await _project_col().update_one({"_id": oid}, {"$set": update_data})
        if res.matched_count == 0:
            raise NotFoundError("Project not found")
        doc = await _project_col().find_one({"_id": oid})
    except ServiceError:
        raise
    except Exception as e:
        logger.error(f"update_project_helper error: {e}")
        raise StoreError("Failed to update project", error=str(e))
    if not doc:
        raise NotFoundError("Project not found")

    logger.info(f"Project {project_id} updated")
    return _to_project_out(doc)


async def delete_project_helper(project_id: str) -> None:
    """Unlink the project from the owner, then delete it.

    The id is validated before the owner is loaded, so a malformed id is a
    ValidationError even when no owner exists. If unlinking fails the project
    is left untouched. If the delete itself fails the reference is already
    gone and is not restored.
    """
    oid = _to_object_id(project_id)

    await detach_project_helper(oid)

    try:
        res = await _project_col().delete_one({"_id": oid})
    except Exception as e:
        logger.error(f"delete_project_helper error: {e}")
        raise StoreError("Failed to delete project", error=str(e))
    if res.deleted_count == 0:
        logger.warning(f"Project {project_id} was unlinked but no record was deleted")
        raise NotFoundError("Project not found")

    logger.info(f"Project {project_id} deleted")


# ---------- ORDERING ----------
async def update_project_order_helper(entries: List[ProjectOrderUpdate]) -> int:
    """Apply (project_id, order) pairs one at a time.

    Every id is validated before the first write. The first failing update
    aborts the rest; updates already applied are kept. An entry whose project
    no longer exists also aborts with NotFoundError instead of matching
    nothing.
    """
    targets = [(_to_object_id(entry.project_id), entry.order) for entry in entries]

    for oid, order in targets:
        try:
            res = await _project_col().update_one({"_id": oid}, {"$set": {"order": order}})
        except Exception as e:
            logger.error(f"update_project_order_helper error for project {oid}: {e}")
            raise StoreError(f"Failed to update order for project {oid}", error=str(e))
        if res.matched_count == 0:
            logger.warning(f"Reorder aborted: project {oid} not found")
            raise NotFoundError(f"Project not found: {oid}")

    logger.info(f"Updated order for {len(targets)} projects")
    return len(targets)
