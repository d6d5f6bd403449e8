"""
app.py

Main FastAPI app for the campus project showcase
- /generate: prompt -> hosted model -> {code, language}
- /preview: builds the sandboxed preview document for generated code
- /assistant: the AI Problem Solver chat
- showcase routes: login/logout, projects, peers
"""

import logging
import os
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Header, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from agents.assistant import GREETING, QUICK_SUGGESTIONS, ProblemSolverAgent
from graph.codegen_graph import execute_codegen
from renderer.preview import SANDBOX_POLICY, build_preview_document
from showcase.auth import SessionManager, StudentSession
from showcase.models import LoginRequest, PreviewRequest, ProjectUpload
from showcase.stores import InMemoryPeerStore, InMemoryProjectStore, PeerStore, ProjectStore
from utils import settings
from utils.errors import ShowcaseError, ShowcaseValidationError, UpstreamError
from utils.llm import GroqCompletionProvider, TextCompletionProvider
from utils.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

FRONTEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "frontend")
ASSISTANT_FAILURE = "Failed to get a reply from the assistant"

app = FastAPI(title="Campus Showcase")

# ------------------------
# Shared collaborators
# ------------------------

_provider = GroqCompletionProvider()
_projects = InMemoryProjectStore()
_peers = InMemoryPeerStore()
_sessions = SessionManager()


def get_completion_provider() -> TextCompletionProvider:
    return _provider


def get_project_store() -> ProjectStore:
    return _projects


def get_peer_store() -> PeerStore:
    return _peers


def get_session_manager() -> SessionManager:
    return _sessions


def current_session(
    x_session_token: Optional[str] = Header(default=None),
    sessions: SessionManager = Depends(get_session_manager),
) -> StudentSession:
    return sessions.require(x_session_token)


async def _json_body(req: Request):
    try:
        return await req.json()
    except ValueError:
        return {}


def _upstream_failure(exc: Exception, message: str) -> JSONResponse:
    body = {"error": message}
    if not settings.is_production():
        body["details"] = str(exc)
    return JSONResponse(body, status_code=500)


@app.exception_handler(ShowcaseError)
async def showcase_error_handler(request: Request, exc: ShowcaseError):
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


# ------------------------
# Main API routes
# ------------------------
# Serve static files
app.mount("/frontend", StaticFiles(directory=FRONTEND_DIR), name="frontend")


@app.get("/")
async def root():
    return FileResponse(os.path.join(FRONTEND_DIR, "index.html"))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/generate")
async def generate_code(req: Request, provider: TextCompletionProvider = Depends(get_completion_provider)):
    payload = await _json_body(req)
    prompt = payload.get("prompt") if isinstance(payload, dict) else None

    try:
        # validate -> generate graph; blank prompts never reach the model
        result = await run_in_threadpool(execute_codegen, prompt, provider)
    except ShowcaseValidationError as e:
        return JSONResponse(e.to_dict(), status_code=400)
    except Exception as e:
        logger.exception("Code generation error")
        return _upstream_failure(e, UpstreamError().message)

    return JSONResponse(result)


@app.get("/assistant")
def assistant_intro():
    return {"greeting": GREETING, "suggestions": list(QUICK_SUGGESTIONS)}


@app.post("/assistant")
async def ask_assistant(req: Request, provider: TextCompletionProvider = Depends(get_completion_provider)):
    payload = await _json_body(req)
    message = payload.get("message") if isinstance(payload, dict) else None

    try:
        reply = await run_in_threadpool(ProblemSolverAgent(provider).reply, message)
    except ShowcaseValidationError as e:
        return JSONResponse(e.to_dict(), status_code=400)
    except Exception as e:
        logger.exception("Assistant error")
        return _upstream_failure(e, ASSISTANT_FAILURE)

    return {"reply": reply}


@app.post("/preview")
def preview(payload: PreviewRequest):
    if not payload.code.strip():
        raise ShowcaseValidationError("Code is required")
    document = build_preview_document(payload.code, payload.language)
    # opened directly, the document still runs in an opaque sandboxed origin
    return HTMLResponse(document, headers={"Content-Security-Policy": f"sandbox {SANDBOX_POLICY}"})


# ------------------------
# Showcase routes
# ------------------------

@app.post("/auth/login")
def login(payload: LoginRequest, sessions: SessionManager = Depends(get_session_manager)):
    session = sessions.login(payload.register_number)
    return session.as_dict()


@app.post("/auth/logout")
def logout(
    x_session_token: Optional[str] = Header(default=None),
    sessions: SessionManager = Depends(get_session_manager),
):
    return {"logged_out": sessions.logout(x_session_token)}


@app.get("/auth/session")
def whoami(session: StudentSession = Depends(current_session)):
    return session.as_dict()


@app.get("/projects")
def list_projects(search: str = "", year: str = "", category: str = "",
                  store: ProjectStore = Depends(get_project_store)):
    return [p.model_dump() for p in store.list(search=search, year=year, category=category)]


@app.post("/projects", status_code=201)
def upload_project(payload: ProjectUpload,
                   session: StudentSession = Depends(current_session),
                   store: ProjectStore = Depends(get_project_store)):
    project = store.add(payload, student_name=session.register_number, year=session.year)
    logger.info("Project %s uploaded by %s", project.id, session.register_number)
    return project.model_dump()


@app.post("/projects/{project_id}/like")
def toggle_like(project_id: str,
                session: StudentSession = Depends(current_session),
                store: ProjectStore = Depends(get_project_store),
                sessions: SessionManager = Depends(get_session_manager)):
    liked, project = sessions.toggle_like(session, project_id, store)
    return {"liked": liked, "likes": project.likes}


@app.get("/peers")
def list_peers(search: str = "", year: str = "", department: str = "", only_looking: bool = False,
               store: PeerStore = Depends(get_peer_store)):
    return [p.model_dump() for p in store.list(search=search, year=year, department=department,
                                               only_looking=only_looking)]


# ------------------------
# Main entry
# ------------------------

if __name__ == "__main__":
    uvicorn.run("app:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")),
                reload=True, log_level="info")
