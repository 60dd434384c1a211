from fastapi import APIRouter, Depends, status
from typing import List

from app.models.project.project import Project, ProjectUpdate, ProjectOrderUpdate
from app.services.auth.auth_utils import require_scope
from app.services.project_management.project import (
    create_project_helper,
    list_projects_helper,
    get_projects_kanban_helper,
    get_project_helper,
    update_project_helper,
    update_project_order_helper,
    delete_project_helper,
)
from app.utils.response_utils import response_api


router = APIRouter(prefix="/api/projects")

require_admin = require_scope("admin")

# Literal paths (kanban, updateOrder) must be registered before "/{project_id}"
# or they would be captured as an id.


@router.get("")
async def list_projects():
    projects = await list_projects_helper()
    if not projects:
        return response_api(status.HTTP_200_OK, "No projects found")
    return response_api(status.HTTP_200_OK, "Projects retrieved successfully", projects)


@router.get("/kanban")
async def list_projects_kanban():
    projects = await get_projects_kanban_helper()
    if not projects:
        return response_api(status.HTTP_200_OK, "No projects found")
    return response_api(status.HTTP_200_OK, "Projects retrieved successfully", projects)


@router.post("", dependencies=[Depends(require_admin)])
async def create_project(payload: Project):
    project = await create_project_helper(payload)
    return response_api(status.HTTP_200_OK, "Project added successfully", project)


@router.post("/updateOrder", dependencies=[Depends(require_admin)])
async def update_project_order(payload: List[ProjectOrderUpdate]):
    await update_project_order_helper(payload)
    return response_api(status.HTTP_200_OK, "Project order updated successfully")


@router.get("/{project_id}")
async def get_project(project_id: str):
    project = await get_project_helper(project_id)
    return response_api(status.HTTP_200_OK, "Project retrieved successfully", project)


@router.put("/{project_id}", dependencies=[Depends(require_admin)])
async def update_project(project_id: str, payload: ProjectUpdate):
    project = await update_project_helper(project_id, payload)
    return response_api(status.HTTP_200_OK, "Project updated successfully", project)


@router.delete("/{project_id}", dependencies=[Depends(require_admin)])
async def delete_project(project_id: str):
    await delete_project_helper(project_id)
    return response_api(status.HTTP_200_OK, "Project removed successfully")
