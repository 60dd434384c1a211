from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime

# ---------- Project Models ----------#

class ProjectUpdate(BaseModel):
    # Required fields default to "" so the service reports them as missing
    project_name: str = ""
    small_description: str = ""
    description: str = ""
    skills: List[str] = Field(default_factory=list)
    project_repository: Optional[str] = ""
    project_live_link: Optional[str] = ""
    project_video: Optional[str] = ""
    images: List[str] = Field(default_factory=list)

class Project(ProjectUpdate):
    order: Optional[int] = None

class ProjectOut(Project):
    id: str = Field(..., alias="_id")
    order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(protected_namespaces=(), populate_by_name=True)

    # Stored documents may hold null for empty arrays or a missing order
    @field_validator("skills", "images", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("order", mode="before")
    @classmethod
    def _null_order(cls, value):
        return 0 if value is None else value

# ---------- Ordering Models ----------#

class ProjectOrderUpdate(BaseModel):
    project_id: str
    order: int

class ProjectKanban(BaseModel):
    order: int
    project_id: str
    project_title: str
