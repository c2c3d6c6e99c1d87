from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging
from dotenv import load_dotenv

from db import Base, engine
from mentor_matching import ENGINE_VERSION
from mentor_matching.models import ProviderProfile  # registers provider_profiles on Base
from mentor_matching.routes import router as matching_router

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logging.info("Mentor matching service starting")

app = FastAPI(title="CRNA Club Mentor Matching", version=ENGINE_VERSION)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(matching_router)


@app.get("/", tags=["meta"])
def root():
    return {"service": "mentor-matching", "version": ENGINE_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
