"""Main FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.routes import chat, documents, notes, questions
from core.models.common import ErrorResponse
from core.services.errors import ErrorHandler, StudyError
from core.utils.logger import logger

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG
)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    logger.setLevel(settings.LOG_LEVEL.upper())
    logger.info("StudyForge API Starting...")
    logger.info(f"Upload directory: {settings.UPLOAD_DIR} (max {settings.MAX_UPLOAD_SIZE} bytes)")
    logger.info(f"Azure Document Intelligence: {'Configured' if settings.AZURE_DOCUMENT_INTELLIGENCE_ENDPOINT and settings.AZURE_DOCUMENT_INTELLIGENCE_KEY else 'Not Configured'}")


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StudyError)
async def study_error_handler(request: Request, exc: StudyError):
    body = ErrorHandler.to_error_response(exc)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"Invalid request to {request.url.path}: {detail}")
    body = ErrorResponse(error="Invalid request data", detail=detail)
    return JSONResponse(status_code=400, content=body.model_dump())


# Include routers
app.include_router(documents.router, prefix="/api/documents", tags=["Documents"])
app.include_router(questions.router, prefix="/api/questions", tags=["Questions"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])
app.include_router(notes.router, prefix="/api/notes", tags=["Notes"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "StudyForge API",
        "version": settings.API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
