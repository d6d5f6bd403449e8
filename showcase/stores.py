"""
showcase/stores.py

Project and peer data behind small store interfaces. The in-memory versions
are seeded with the campus sample data; a database-backed store only has to
satisfy the same Protocol.
"""

import threading
import uuid
from datetime import date
from typing import List, Optional, Protocol
from urllib.parse import urlparse

from showcase.models import Peer, Project, ProjectUpload, UPLOAD_CATEGORIES, UPLOAD_DEPARTMENTS
from utils.errors import ProjectNotFoundError, ShowcaseValidationError

SAMPLE_PROJECTS = [
    Project(id="1", title="AI-Powered Study Assistant",
            description="A web app that helps students organize notes, create study plans, and practice with AI-generated quizzes.",
            student_name="Raj Polimetla", year="2024", category="Web Development", department="CSE",
            project_url="https://example.com/study-assistant", likes=234, created_at="2024-01-15"),
    Project(id="2", title="Campus Community App",
            description="Mobile app connecting students for events, study groups, and campus activities.",
            student_name="Priya Singh", year="2023", category="Mobile App", department="CSE",
            project_url="https://example.com/campus-app", likes=189, created_at="2024-01-10"),
    Project(id="3", title="Data Analytics Dashboard",
            description="Interactive dashboard for analyzing student performance metrics and trends.",
            student_name="Arun Kumar", year="2022", category="Data Science", department="IT",
            project_url="https://example.com/analytics", likes=156, created_at="2024-01-08"),
    Project(id="4", title="IoT Weather Station",
            description="Smart device project using IoT sensors to monitor and display real-time weather data.",
            student_name="Neha Patel", year="2024", category="IoT", department="ECE",
            project_url="https://example.com/weather-iot", likes=128, created_at="2024-01-05"),
    Project(id="5", title="E-Commerce Platform",
            description="Full-stack e-commerce solution with payment integration and inventory management.",
            student_name="Vikram Reddy", year="2023", category="Web Development", department="CSE",
            project_url="https://example.com/ecommerce", likes=267, created_at="2024-01-02"),
    Project(id="6", title="ML Image Recognition",
            description="Machine learning model for identifying and classifying objects in images using deep learning.",
            student_name="Sophia Chen", year="2025", category="Machine Learning", department="CSE",
            project_url="https://example.com/ml-vision", likes=198, created_at="2024-01-01"),
]

SAMPLE_PEERS = [
    Peer(id="1", name="Raj Polimetla", year="2024", department="CSE",
         interests=["Web Development", "AI/ML", "Full Stack"],
         project_title="AI-Powered Study Assistant", looking_for_collaborators=True),
    Peer(id="2", name="Priya Singh", year="2023", department="CSE",
         interests=["Mobile App", "UI/UX", "React"],
         project_title="Campus Community App", looking_for_collaborators=True),
    Peer(id="3", name="Arun Kumar", year="2022", department="IT",
         interests=["Data Science", "Python", "Analytics"],
         project_title="Data Analytics Dashboard", looking_for_collaborators=False),
    Peer(id="4", name="Neha Patel", year="2024", department="ECE",
         interests=["IoT", "Embedded Systems", "Hardware"],
         project_title="IoT Weather Station", looking_for_collaborators=True),
    Peer(id="5", name="Vikram Reddy", year="2023", department="CSE",
         interests=["Backend", "Databases", "APIs"],
         project_title="E-Commerce Platform", looking_for_collaborators=True),
    Peer(id="6", name="Sophia Chen", year="2025", department="CSE",
         interests=["Machine Learning", "Computer Vision", "Python"],
         project_title="ML Image Recognition", looking_for_collaborators=False),
]


class ProjectStore(Protocol):
    def list(self, search: str = "", year: str = "", category: str = "") -> List[Project]: ...

    def get(self, project_id: str) -> Project: ...

    def add(self, upload: ProjectUpload, student_name: str, year: str) -> Project: ...

    def adjust_likes(self, project_id: str, delta: int) -> Project: ...


class PeerStore(Protocol):
    def list(self, search: str = "", year: str = "", department: str = "",
             only_looking: bool = False) -> List[Peer]: ...


def validate_upload(upload: ProjectUpload) -> None:
    """Raise ShowcaseValidationError with the first problem found."""
    if not upload.title.strip():
        raise ShowcaseValidationError("Project title is required")
    if not upload.description.strip():
        raise ShowcaseValidationError("Project description is required")
    if not upload.project_url.strip():
        raise ShowcaseValidationError("Project URL is required")
    if upload.category not in UPLOAD_CATEGORIES:
        raise ShowcaseValidationError("Please select a category")
    if upload.department not in UPLOAD_DEPARTMENTS:
        raise ShowcaseValidationError("Please select your department")

    parsed = urlparse(upload.project_url.strip())
    if not parsed.scheme or not parsed.netloc:
        raise ShowcaseValidationError("Please enter a valid URL")


class InMemoryProjectStore:
    def __init__(self, projects: Optional[List[Project]] = None):
        seed = SAMPLE_PROJECTS if projects is None else projects
        self._projects = [p.model_copy() for p in seed]
        self._lock = threading.Lock()

    def list(self, search: str = "", year: str = "", category: str = "") -> List[Project]:
        q = (search or "").lower()
        with self._lock:
            return [
                p for p in self._projects
                if (q in p.title.lower() or q in p.description.lower() or q in p.student_name.lower())
                and (not year or p.year == year)
                and (not category or p.category == category)
            ]

    def get(self, project_id: str) -> Project:
        with self._lock:
            for p in self._projects:
                if p.id == project_id:
                    return p
        raise ProjectNotFoundError(project_id)

    def add(self, upload: ProjectUpload, student_name: str, year: str) -> Project:
        validate_upload(upload)
        project = Project(
            id=uuid.uuid4().hex[:12],
            title=upload.title.strip(),
            description=upload.description.strip(),
            student_name=student_name,
            year=year,
            category=upload.category,
            department=upload.department,
            project_url=upload.project_url.strip(),
            likes=0,
            created_at=date.today().isoformat(),
            video_url=(upload.video_url or "").strip() or None,
        )
        with self._lock:
            self._projects.insert(0, project)
        return project

    def adjust_likes(self, project_id: str, delta: int) -> Project:
        project = self.get(project_id)
        with self._lock:
            project.likes = max(0, project.likes + delta)
        return project


class InMemoryPeerStore:
    def __init__(self, peers: Optional[List[Peer]] = None):
        self._peers = list(SAMPLE_PEERS if peers is None else peers)

    def list(self, search: str = "", year: str = "", department: str = "",
             only_looking: bool = False) -> List[Peer]:
        q = (search or "").lower()
        return [
            p for p in self._peers
            if (q in p.name.lower() or q in p.project_title.lower()
                or any(q in i.lower() for i in p.interests))
            and (not year or p.year == year)
            and (not department or p.department == department)
            and (not only_looking or p.looking_for_collaborators)
        ]
