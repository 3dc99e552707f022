import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.middleware.auth import TokenAuthMiddleware
from app.rate_limit import limiter
from app.routers.mindmap import router as mindmap_router

app = FastAPI(title="Mindmap Viewer API", version="0.1.0")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# --- Security: Optional API token authentication ---
# Set MINDMAP_API_TOKEN to require a Bearer token on all /api/ endpoints.
app.add_middleware(TokenAuthMiddleware)

# CORS: load origins from env (comma-separated); none are allowed by default
_cors_env = os.environ.get("CORS_ORIGINS", "")
cors_origins = [o.strip() for o in _cors_env.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)


# --- Security: security headers ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


app.include_router(mindmap_router)


@app.get("/api/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
