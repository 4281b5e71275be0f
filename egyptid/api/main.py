import logging
import time
from typing import Dict, Any, List

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from egyptid.config import load_settings
from egyptid.decoder.extractor import extract_info
from egyptid.models.errors import InvalidIDError
from egyptid.presentation.age import calculate_age
from egyptid.telemetry import (
    init_telemetry,
    emit_decode_telemetry,
    emit_exception_telemetry,
)

settings = load_settings()

# --- AUDIT LOGGING ---
logging.basicConfig(
    filename=settings.audit_log_file,
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
audit_logger = logging.getLogger("audit")

tags_metadata = [
    {
        "name": "Decoding",
        "description": "Validates a National ID and extracts birth date, governorate and gender.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="EgyptID Decoder",
    description="""
    Validation and decoding of **Egyptian National ID** numbers.

    * **Format:** exactly 14 ASCII digits.
    * **Decoded fields:** birth date, governorate of birth, gender.
    * **Derived:** current age.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry()


# The ID never reaches the audit log: method, path, status and timing only.
@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client_host = request.client.host if request.client else "unknown"
    audit_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client_host} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class DecodeRequest(BaseModel):
    national_id: str


class BirthDateModel(BaseModel):
    day: int
    month: int
    year: int


class DecodeResponse(BaseModel):
    national_id: str
    birthdate: BirthDateModel
    governorate: str
    gender: str
    age: int


# --- ENDPOINTS ---

@app.post("/decode", response_model=DecodeResponse, tags=["Decoding"])
def decode_national_id(request: DecodeRequest):
    """
    Decode a National ID. Validation failures return 422 with the error kind.
    """
    start_time = time.perf_counter()
    try:
        info = extract_info(request.national_id)
    except InvalidIDError as e:
        emit_decode_telemetry(
            decode_latency_ms=int((time.perf_counter() - start_time) * 1000),
            outcome="rejected",
            error_kind=e.kind,
        )
        audit_logger.info(f"DECODE_REJECTED: {e.kind}")
        raise HTTPException(status_code=422, detail=e.to_dict())
    except Exception as e:
        emit_exception_telemetry(e)
        audit_logger.error(f"ENGINE_ERROR: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Internal decoder error")

    emit_decode_telemetry(
        decode_latency_ms=int((time.perf_counter() - start_time) * 1000),
        outcome="decoded",
    )

    payload: Dict[str, Any] = info.to_dict()
    payload["national_id"] = request.national_id
    payload["age"] = calculate_age(info.birthdate)
    return payload


@app.get("/health", tags=["System"])
def health() -> Dict[str, Any]:
    modules: List[str] = ["Format", "BirthDate", "Governorate", "Gender", "AuditLog"]
    return {
        "status": "online",
        "modules": modules
    }
