from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pattern_catalog.api.routes import router
from pattern_catalog.config import CORS_ORIGINS

app = FastAPI(
    title="Design Pattern Catalog",
    version="1.0.0",
)

# Middleware before routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(router)
