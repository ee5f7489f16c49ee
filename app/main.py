# main.py
import os
import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import DEFAULT_CLIENT_BUILD_DIR, DEFAULT_CORS_ORIGINS, DEFAULT_PORT, load_settings
from app.database import MongoConnector
from app.errors import InvalidBranch
from app.routes.candidate_routes import router as candidate_router
from app.schemas import fail

load_dotenv(find_dotenv(usecwd=True))

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing config or an unreachable database stops startup here
    settings = load_settings()
    mongo = MongoConnector.from_uri(settings.mongodb_uri, settings.mongo_db)
    try:
        await mongo.ping()
    except Exception:
        mongo.close()
        raise
    app.state.mongo = mongo
    logger.info("Ballot API ready")
    yield
    mongo.close()


def create_app(client_build_dir: str = None) -> FastAPI:
    app = FastAPI(title="Ballot API", lifespan=lifespan)

    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidBranch)
    async def invalid_branch_handler(request: Request, exc: InvalidBranch):
        return fail({"message": str(exc)})

    app.include_router(candidate_router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "database": "MongoDB"}

    # Frontend build goes last so /api and /health win
    build_dir = client_build_dir or os.getenv("CLIENT_BUILD_DIR", DEFAULT_CLIENT_BUILD_DIR)
    if os.path.isdir(build_dir):
        app.mount("/", StaticFiles(directory=build_dir, html=True), name="client")
    else:
        logger.warning(f"No frontend build at {build_dir}; serving the API only")

    return app


app = create_app()


if __name__ == "__main__":
    port = int(os.getenv("PORT", DEFAULT_PORT))
    print(f"Now serving! http://localhost:{port}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=port)
