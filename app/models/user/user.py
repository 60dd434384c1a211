from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import List

# ---------- User Models ----------

class User(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: str = Field(..., alias="_id")
    email: EmailStr
    projects: List[str] = Field(default_factory=list)
    model_config = ConfigDict(protected_namespaces=(), populate_by_name=True)
