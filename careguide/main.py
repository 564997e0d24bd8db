from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careguide import __version__
from careguide.config import Settings, get_settings
from careguide.knowledge.base import KnowledgeBase, get_knowledge_base, load_knowledge_base
from careguide.knowledge.validation import validate_knowledge_base
from careguide.routers.health import router as health_router
from careguide.routers.kids import router as kids_router
from careguide.routers.medicines import router as medicines_router
from careguide.routers.symptoms import router as symptoms_router
from careguide.utils.logging import logger, setup_logging
from careguide.utils.rate_limit import InMemorySlidingWindowLimiter


def _load_knowledge_base(settings: Settings) -> KnowledgeBase:
    if settings.knowledge_base_dir == get_settings().knowledge_base_dir:
        return get_knowledge_base()
    return load_knowledge_base(settings.knowledge_base_dir)


def create_app(settings: Settings | None = None, knowledge_base: KnowledgeBase | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    kb = knowledge_base or _load_knowledge_base(settings)
    for issue in validate_knowledge_base(kb):
        logger.warning("Knowledge base issue: %s", issue)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Symptom recommendations and urgency triage over a fixed medical reference catalog. "
            "Not a substitute for professional medical advice."
        ),
        version=__version__,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.knowledge_base = kb
    app.state.limiter = InMemorySlidingWindowLimiter(
        max_requests=settings.rate_limit_per_minute,
        window_seconds=60,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(symptoms_router)
    app.include_router(medicines_router)
    app.include_router(kids_router)

    @app.get("/", include_in_schema=False)
    def root() -> dict:
        return {
            "service": settings.app_name,
            "status": "online",
            "version": __version__,
            "disclaimer": kb.safety_disclaimer.points[0],
        }

    return app


app = create_app()
