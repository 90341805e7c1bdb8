from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import time

from history_chat.core.config import CORS_ORIGINS, LOG_LEVEL
from history_chat.api.format import router as format_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Vietnam History Chat Formatter",
    version="1.0.0",
)

# ===== MIDDLEWARE =====
@app.middleware("http")
async def log_requests(request, call_next):
    start_time = time.time()
    path = request.url.path
    logger.info("[REQUEST] %s %s", request.method, path)
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info("[RESPONSE] %s %s | Status: %s | %.3fs", request.method, path, response.status_code, duration)
    return response

# ===== CORS =====
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===== ROUTER =====
app.include_router(format_router, prefix="/api")

# ===== HEALTH CHECK =====
@app.get("/health")
def health():
    """Basic health check for load balancers."""
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "service": "Vietnam History Chat Formatter",
        "status": "ready",
        "ready": True,
    }
