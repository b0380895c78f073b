"""
Document Diff Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docdiff.routers import config, diff
from docdiff.services.config_manager import ConfigManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    # Startup: Initialize singleton services
    print("[Backend] Starting Document Diff Backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")

    settings = config_manager.diff_settings()
    diff.diff_cache.resize(int(settings.get("cacheSize", 0)))
    print(
        f"[Backend] Diff mode '{settings.get('mode')}', "
        f"cache size {diff.diff_cache.max_entries}, max {settings.get('maxLines')} lines"
    )

    yield
    # Shutdown: Cleanup
    diff.diff_cache.clear()
    print("[Backend] Shutting down Document Diff Backend...")


app = FastAPI(
    title="Document Diff Backend",
    description="Line-level comparison of rich-text document trees",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the editor front-end running locally
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "docdiff-backend"}


def run():
    """Console entry point"""
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    run()
