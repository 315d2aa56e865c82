from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from domain.config import get_server_config
from infrastructure.metrics.metrics import metrics_endpoint
from app.routers.transactions import router

config = get_server_config()

app = FastAPI(title=config.service_name)

# Dashboard frontends call this API from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

@app.get("/metrics")
async def metrics():
    return metrics_endpoint()

@app.get("/health")
async def health():
    return {"status": "ok", "message": f"{config.service_name} is running"}

app.include_router(router)


def run():
    """Start the server on HOST:PORT (defaults 0.0.0.0:3000)."""
    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
