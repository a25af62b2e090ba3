from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from gas_telemetry.config import get_config
from gas_telemetry.database.connection import dispose_engine, init_db
from gas_telemetry.logger import CustomLogger
from gas_telemetry.routes import status_router

config = get_config()
console = CustomLogger(name="api_logs", log_dir=config.api["log_dir"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.database["create_tables"]:
        await init_db()
    console.log("Gas telemetry API started")
    yield
    await dispose_engine()
    console.log("Gas telemetry API stopped")


app = FastAPI(
    title="Gas Telemetry",
    description="Ingestion and query endpoint for MQ135/MQ2 gas sensor nodes",
    version="0.1.0",
    docs_url="/api/docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    console.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.get("/health")
def health():
    console.debug("Health check pinged.")
    return {"status": "ok"}


app.include_router(status_router)
