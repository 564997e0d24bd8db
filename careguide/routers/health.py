from __future__ import annotations

from fastapi import APIRouter, Request

from careguide import __version__


router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict:
    return {"status": "healthy"}


@router.get("/api/info")
def api_info(request: Request) -> dict:
    return {
        "service": request.app.state.settings.app_name,
        "status": "online",
        "version": __version__,
        "endpoints": {
            "symptoms": "GET /symptoms",
            "recommendations": "POST /symptoms/recommendations",
            "analyze": "POST /symptoms/analyze",
            "details": "GET /symptoms/details/<name>",
            "assess": "POST /symptoms/assess",
            "medicines": "GET /medicines?q=<query>&type=<type>",
            "medicine": "GET /medicines/<id>",
            "safety": "GET /safety",
            "kids_symptoms": "GET /kids/symptoms?q=<query>&category=<category>&age_group=<age>&urgency=<level>",
            "kids_symptom": "GET /kids/symptoms/<id>",
            "kids_reference": "GET /kids/reference",
        },
    }
