from fastapi import FastAPI
from memoapp.shared.db import Base, engine
from memoapp.shared.log import setup_logging

# import models so they register with Base.metadata
from memoapp.memos import models as memos_models  # noqa: F401

# Routers Import
from memoapp.memos.api import router as memos_router
from memoapp.summarize.api import router as summarize_router

setup_logging()

TAGS_METADATA = [
    {"name": "Memos", "description": "Create, list and read memos; store AI summaries"},
    {"name": "Summarize", "description": "Gemini-backed memo summaries"},
    {"name": "Health", "description": "Service health"},
]

app = FastAPI(
    title="Memo App",
    version="0.1.0",
    description="Personal memos with AI summaries.",
    openapi_tags=TAGS_METADATA,
)

@app.on_event("startup")
def _init_db():
    Base.metadata.create_all(bind=engine)

@app.get("/healthz", tags=["Health"])
def healthz():
    return {"ok": True}

# Routers
app.include_router(memos_router)
app.include_router(summarize_router)
