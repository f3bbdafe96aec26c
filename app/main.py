import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.api.auth.routes import router as auth_router
from app.api.projects.routes import router as project_router
from app.api.resource_types.routes import router as resource_type_router
from app.api.epics.routes import router as epic_router
from app.api.features.routes import router as feature_router
from app.api.stories.routes import router as story_router
from app.api.tasks.routes import router as task_router
from app.api.templates.routes import router as template_router
from app.api.apply_template.routes import router as apply_template_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Estimator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_input_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400 with a readable message instead of FastAPI's 422."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    detail = "; ".join(problems) or "Invalid input"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})


# Routers
app.include_router(auth_router, prefix="/auth", tags=["Auth"])

app.include_router(project_router, prefix="/projects", tags=["Projects"])
app.include_router(resource_type_router, prefix="/projects", tags=["Resource Types"])
app.include_router(epic_router, prefix="/projects", tags=["Epics"])
app.include_router(feature_router, prefix="/epics", tags=["Features"])
app.include_router(story_router, prefix="/features", tags=["User Stories"])
app.include_router(apply_template_router, prefix="/features", tags=["Templates"])
app.include_router(task_router, prefix="/stories", tags=["Tasks"])

app.include_router(template_router, prefix="/templates", tags=["Templates"])

@app.get("/ping")
def ping():
    return {"message": "pong"}
