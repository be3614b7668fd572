"""
Portfolio Server

FastAPI server for the portfolio site backend.

Endpoints:
- GET /api/health: Health check
- GET /api/profile: CV data
- POST /api/ai-chat: Ask the portfolio assistant a question
- GET /api/ai-status: AI provider status
- GET /api/blog: Blog posts
- GET /api/blog/{post_id}: Single blog post
- GET /api/dashboard: Dashboard counters
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .common.config import load_config, PortfolioConfig
from .common.content import load_content
from .common.schemas import SiteContent
from .assistant import ResponderPipeline

logger = logging.getLogger("portfolio.server")


# Global state
config: Optional[PortfolioConfig] = None
content: Optional[SiteContent] = None
pipeline: Optional[ResponderPipeline] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize components on startup"""
    global config, content, pipeline

    print("[Portfolio] Starting up...")

    config = load_config()
    content = load_content(config.content_path or None)
    print(f"[Portfolio] Loaded content for {content.knowledge.name} "
          f"({len(content.blog_posts)} posts)")

    pipeline = ResponderPipeline.from_config(config.llm, content.knowledge)
    status = pipeline.status()
    print(f"[Portfolio] AI Provider: {config.llm.provider}")
    print(f"[Portfolio] AI Available: {status.provider_configured}")
    print(f"[Portfolio] AI agent ready for questions about {content.knowledge.name}")

    yield

    print("[Portfolio] Shutting down...")
    pipeline.close()


app = FastAPI(
    title="Portfolio Backend",
    description="Portfolio data and AI assistant",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request bodies above this size are rejected with 413
MAX_BODY_BYTES = 10 * 1024 * 1024

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Content-Security-Policy": "default-src 'self'; frame-ancestors 'self'",
}


@app.middleware("http")
async def security_headers(request: Request, call_next):
    """Reject oversized bodies and add security headers to every response"""
    try:
        too_large = int(request.headers.get("content-length") or 0) > MAX_BODY_BYTES
    except ValueError:
        too_large = False

    if too_large:
        response = JSONResponse(status_code=413, content={"error": "Request body too large"})
    else:
        response = await call_next(request)

    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


# =============================================================================
# Request/Response Models
# =============================================================================

class ChatRequest(BaseModel):
    """Chat request"""
    question: Optional[str] = None


# =============================================================================
# Helpers
# =============================================================================

def _require_ready():
    if pipeline is None or content is None:
        raise HTTPException(status_code=503, detail="Service not initialized")


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/api/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "aiProvider": config.llm.provider if config else None,
        "aiAvailable": pipeline.status().provider_configured if pipeline else False,
    }


@app.get("/api/profile")
async def profile():
    """Full CV data"""
    _require_ready()
    return content.knowledge.snapshot()


# Sync handler: provider calls block, so FastAPI runs this in its threadpool
@app.post("/api/ai-chat")
def ai_chat(request: ChatRequest):
    """Answer a question about the portfolio subject"""
    _require_ready()

    question = (request.question or "").strip()
    if not question:
        return JSONResponse(status_code=400, content={"error": "Question is required"})

    return {"response": pipeline.resolve(question)}


@app.get("/api/ai-status")
async def ai_status():
    """AI provider status"""
    _require_ready()

    status = pipeline.status()
    return {
        "provider": status.provider,
        "available": status.provider_configured,
        "fallback": status.using_fallback,
        **status.to_dict(),
    }


@app.get("/api/blog")
async def blog_posts():
    """All blog posts"""
    _require_ready()
    return [post.model_dump(mode="json") for post in content.blog_posts]


@app.get("/api/blog/{post_id}")
async def blog_post(post_id: int):
    """A single blog post"""
    _require_ready()

    post = content.get_post(post_id)
    if post is None:
        return JSONResponse(status_code=404, content={"error": "Post not found"})
    return post.model_dump(mode="json")


@app.get("/api/dashboard")
async def dashboard():
    """Dashboard counters"""
    _require_ready()
    return content.dashboard()


# =============================================================================
# CLI Entry Point
# =============================================================================

def run_server():
    """Run the Portfolio server"""
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = load_config()
    print(f"[Portfolio] Starting server on {config.server.host}:{config.server.port}")
    uvicorn.run(
        "portfolio.server:app",
        host=config.server.host,
        port=config.server.port,
        reload=False,
    )


if __name__ == "__main__":
    run_server()
