"""FastAPI application exposing language resolution and the service registry."""

from __future__ import annotations

import logging
from typing import Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .assets import SVG_ICON
from .config import Settings, get_settings
from .language import LANGUAGE_TABLE, LanguageDetector, LanguageEntry, infer_language, match_language
from .services import (
    SERVICES,
    ServiceDescriptor,
    effective_priority,
    get_service,
    get_sorted_services_with_priorities,
)

logger = logging.getLogger(__name__)


class LanguageResponse(BaseModel):
    code: str
    name: str


class InferLanguageRequest(BaseModel):
    text: str


class MatchLanguageRequest(BaseModel):
    code: str


class DetectLanguageRequest(BaseModel):
    text: str = Field(..., min_length=1)


class DetectLanguageResponse(BaseModel):
    language_code: Optional[str]
    confidence: float
    source: str


class ServiceResponse(BaseModel):
    type: Literal["word", "sentence"]
    id: str
    default_secret: Optional[str]
    validator: Optional[str]


class RankedServiceResponse(ServiceResponse):
    priority: float


class SortServicesRequest(BaseModel):
    type: Literal["word", "sentence"]
    priorities: Dict[str, Optional[float]] = Field(default_factory=dict)


class ValidateSecretRequest(BaseModel):
    secret: str


class ValidateSecretResponse(BaseModel):
    secret: str
    status: bool
    info: str


def _language_response(entry: LanguageEntry) -> LanguageResponse:
    return LanguageResponse(code=entry.code, name=entry.name)


def _lookup_service(service_id: str) -> ServiceDescriptor:
    try:
        return get_service(service_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown service: {service_id}") from exc


def create_app(
    settings: Optional[Settings] = None,
    detector: Optional[LanguageDetector] = None,
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    app = FastAPI(
        title=settings.app_name,
        description="Language resolution and translation service registry",
    )

    detector = detector or LanguageDetector(use_lingua=settings.detector_backend == "lingua")
    app.state.settings = settings
    app.state.language_detector = detector

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/languages", response_model=List[LanguageResponse])
    async def list_languages() -> List[LanguageResponse]:
        return [_language_response(entry) for entry in LANGUAGE_TABLE]

    @app.post("/languages/match", response_model=LanguageResponse)
    async def match(payload: MatchLanguageRequest) -> LanguageResponse:
        return _language_response(match_language(payload.code))

    @app.post("/languages/infer", response_model=LanguageResponse)
    async def infer(payload: InferLanguageRequest) -> LanguageResponse:
        entry = infer_language(
            payload.text,
            detector=detector,
            min_length=settings.min_detection_length,
        )
        return _language_response(entry)

    @app.post("/languages/detect", response_model=DetectLanguageResponse)
    async def detect(payload: DetectLanguageRequest) -> DetectLanguageResponse:
        try:
            result = detector.detect_from_text(payload.text)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return DetectLanguageResponse(**result.to_dict())

    @app.get("/services", response_model=List[ServiceResponse])
    async def list_services() -> List[ServiceResponse]:
        return [ServiceResponse(**service.to_dict()) for service in SERVICES]

    @app.post("/services/sorted", response_model=List[RankedServiceResponse])
    async def sorted_services(payload: SortServicesRequest) -> List[RankedServiceResponse]:
        priorities: Dict[str, Optional[float]] = dict(settings.service_priorities)
        priorities.update({key: value for key, value in payload.priorities.items() if value is not None})
        ranked = get_sorted_services_with_priorities(payload.type, priorities)
        return [
            RankedServiceResponse(**service.to_dict(), priority=effective_priority(service.id, priorities))
            for service in ranked
        ]

    @app.get("/services/{service_id}", response_model=ServiceResponse)
    async def read_service(service_id: str) -> ServiceResponse:
        return ServiceResponse(**_lookup_service(service_id).to_dict())

    @app.post("/services/{service_id}/validate", response_model=ValidateSecretResponse)
    async def validate_secret(service_id: str, payload: ValidateSecretRequest) -> ValidateSecretResponse:
        result = _lookup_service(service_id).validate_secret(payload.secret)
        if not result.status:
            logger.debug("Secret rejected for %s", service_id)
        return ValidateSecretResponse(**result.to_dict())

    @app.get("/icon.svg")
    async def icon() -> Response:
        return Response(content=SVG_ICON, media_type="image/svg+xml")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
