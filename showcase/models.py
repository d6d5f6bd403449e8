from typing import List, Optional

from pydantic import BaseModel

CATEGORIES = ["Web Development", "Mobile App", "Data Science", "IoT", "Machine Learning"]
UPLOAD_CATEGORIES = CATEGORIES + ["Other"]
DEPARTMENTS = ["CSE", "IT", "ECE", "Mechanical", "Civil"]
UPLOAD_DEPARTMENTS = DEPARTMENTS + ["Other"]


class Project(BaseModel):
    id: str
    title: str
    description: str
    student_name: str
    year: str
    category: str
    department: str
    project_url: str
    likes: int = 0
    created_at: str
    video_url: Optional[str] = None


class Peer(BaseModel):
    id: str
    name: str
    year: str
    department: str
    interests: List[str]
    project_title: str
    looking_for_collaborators: bool


class ProjectUpload(BaseModel):
    # defaults so missing fields reach our own messages instead of a 422
    title: str = ""
    description: str = ""
    project_url: str = ""
    category: str = ""
    department: str = ""
    video_url: Optional[str] = None


class LoginRequest(BaseModel):
    register_number: str = ""


class PreviewRequest(BaseModel):
    code: str = ""
    language: Optional[str] = None
