from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy import text
from concert_manager.utils.config import settings
from concert_manager.utils.database import engine
from concert_manager.utils.exceptions import validation_exception_handler
from concert_manager.utils.logging_config import setup_logging
from concert_manager.utils.observability import PrometheusMiddleware, metrics
from concert_manager.api.main_router import router as main_router

import logging

setup_logging(application="concert_manager")

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info(f"Database connection established ({engine.url.get_backend_name()})")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
    yield
    engine.dispose()
    logger.info("Database connections released")

app = FastAPI(title="Concert Manager API", lifespan=lifespan)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.add_middleware(PrometheusMiddleware, app_name="concert_manager")
app.add_route("/metrics", metrics)

@app.get("/")
def read_root():
    return {"message": "Welcome to the Concert Manager API"}

app.include_router(main_router, prefix="/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
