# backend/research_assistant/main.py
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .database import engine
from . import models
from .api import projects, sources, notes, jobs
from .errors import ActionError, ErrorCode, ERROR_STATUS
from .utils.logging import api_logger

# Create all tables on startup
models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="Research Assistant API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(projects.router)
app.include_router(sources.router)
app.include_router(notes.router)
app.include_router(jobs.router)

@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError):
    api_logger.warning("Action failed", extra={
        "path": request.url.path,
        "code": exc.code.value,
        "error": exc.message
    })
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    api_logger.warning("Rejected invalid input", extra={"path": request.url.path})
    return JSONResponse(
        status_code=ERROR_STATUS[ErrorCode.BAD_REQUEST],
        content={
            "error": {
                "code": ErrorCode.BAD_REQUEST.value,
                "message": "Invalid input.",
                "details": jsonable_encoder(exc.errors())
            }
        }
    )

@app.get("/")
async def root():
    return {"message": "Research Assistant API is running"}
