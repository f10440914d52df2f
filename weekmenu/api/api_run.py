from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from weekmenu.api.routes import menus, recipes, users
from weekmenu.domain.errors import AppError, from_pydantic
from weekmenu.utilities.config import DEBUG, LOG_LEVEL
from weekmenu.utilities.constants import ERROR_MESSAGES
from weekmenu.utilities.logging_config import configure_logging

# Logging
logger = logging.getLogger("menu_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Menu Planner API", version="0.1.0")

# Include routers
app.include_router(users.router)
app.include_router(recipes.router)
app.include_router(menus.router)


@app.on_event("startup")
def _startup_logging():
    """Install the log handler when the app starts."""
    configure_logging(LOG_LEVEL)
    logger.info("Weekly Menu Planner API started (debug=%s)", DEBUG)


# -------------------- Error handling --------------------
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code in (401, 403):
        logger.warning("%s %s refused: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content=from_pydantic(exc).to_dict())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"status": "error", "message": ERROR_MESSAGES["SERVER_ERROR"]}
    if DEBUG:
        content["detail"] = str(exc)
    return JSONResponse(status_code=500, content=content)


@app.get("/health")
def health():
    return {"status": "ok"}
