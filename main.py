from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from curriculum.routes import router as curriculum_router
from lessons.routes import router as lessons_router
from wizard.routes import router as wizard_router

logging.basicConfig(level=logging.INFO)
logging.info("App starting (lesson generator %s)", "configured" if config.OPENAI_API_KEY else "in demo mode")

app = FastAPI(title="Lesson Wizard API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(curriculum_router)
app.include_router(lessons_router)
app.include_router(wizard_router)


@app.get("/", tags=["meta"])
def root():
    return {"status": "ok", "service": "lesson-wizard"}


@app.get("/health", tags=["meta"])
def health():
    return {"status": "ok", "demo_mode": not bool(config.OPENAI_API_KEY)}
