"""
FastAPI web application for SmartResumeFix.
Razorpay checkout, payment-gated PDF generation, downloads and a
payment-free preview path.

Usage:
    uvicorn web.app:app --port 4000
"""

import json
import logging
from typing import Dict, Optional

import httpx
from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel

from resumefix.config import Settings, load_settings
from resumefix.exceptions import (
    ArtifactNotFoundError,
    InputValidationError,
    RenderingError,
    ResumeFixError,
)
from resumefix.pipeline import GenerationRequest, ResumePipeline
from resumefix.renderer import DEFAULT_RESUME_TYPE

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Resume generation failed. Please try again."


# === Models ===

class CreateOrderRequest(BaseModel):
    amount_in_paise: Optional[int] = None


# === Helpers ===

async def read_fields(request: Request) -> Dict[str, str]:
    """Request fields from a JSON object body or from form data."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError as e:
            raise InputValidationError("Request body is not valid JSON") from e
        if not isinstance(data, dict):
            raise InputValidationError("Request body must be a JSON object")
    else:
        data = await request.form()

    return {key: str(value) for key, value in data.items() if value is not None}


def _captured_entity(payload) -> Optional[dict]:
    """payload.payment.entity of a webhook event, when every level is an object."""
    data = payload.get("payload")
    payment = data.get("payment") if isinstance(data, dict) else None
    entity = payment.get("entity") if isinstance(payment, dict) else None
    return entity if isinstance(entity, dict) else None


# === Error handlers ===

async def resume_error_handler(request: Request, exc: ResumeFixError) -> JSONResponse:
    """Map pipeline errors to status codes with a user-facing message."""
    if isinstance(exc, RenderingError):
        logger.error(f"Rendering failed in {request.url.path}: {exc!r}", exc_info=exc.__cause__)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.user_message}
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": GENERIC_FAILURE}
    )


def create_app(settings: Optional[Settings] = None, pipeline: Optional[ResumePipeline] = None) -> FastAPI:
    """Build the application around one settings object and pipeline."""
    settings = settings or load_settings()
    pipeline = pipeline or ResumePipeline.from_settings(settings)

    if not settings.razorpay.is_configured:
        logger.warning("Razorpay keys not set. Payment will fail until you add keys.")

    app = FastAPI(title="SmartResumeFix", version="1.0.0")
    app.state.settings = settings
    app.state.pipeline = pipeline

    # Checkout pages may be served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ResumeFixError, resume_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # === Routes ===

    @app.get("/health")
    async def health_check():
        return {"ok": True}

    @app.post("/api/create-order")
    async def create_order(request: Optional[CreateOrderRequest] = None):
        """Create a Razorpay order for the checkout widget."""
        amount = request.amount_in_paise if request else None
        try:
            order = await pipeline.payments.create_order(amount)
        except httpx.HTTPError as e:
            logger.error(f"create-order error: {e}")
            return JSONResponse(status_code=502, content={"success": False, "error": "Could not create order"})
        return JSONResponse({
            "success": True,
            "order": order,
            "keyId": settings.razorpay.key_id
        })

    @app.post("/webhook/razorpay")
    async def razorpay_webhook(request: Request):
        """Payment notifications configured in the Razorpay dashboard."""
        body = await request.body()
        signature = request.headers.get("X-Razorpay-Signature")
        if not pipeline.payments.verify_webhook_signature(body, signature):
            logger.warning("Webhook signature mismatch")
            return PlainTextResponse("invalid signature", status_code=400)

        try:
            payload = json.loads(body or b"{}")
        except ValueError:
            logger.error("Webhook payload is not valid JSON")
            return PlainTextResponse("error", status_code=400)

        if isinstance(payload, dict) and payload.get("event") == "payment.captured":
            payment = _captured_entity(payload)
            if payment:
                logger.info(f"Payment captured: {payment.get('id')} {payment.get('amount')}")

        return PlainTextResponse("ok")

    @app.post("/api/generate")
    async def generate_resume(request: Request, background_tasks: BackgroundTasks):
        """
        Verify the payment and build the PDF. Returns a download link.

        Accepts form fields or a JSON object: payment_id, resume_text,
        order_id, provider, resume_type, email, name, target_role.
        """
        fields = await read_fields(request)
        result = await pipeline.generate(
            GenerationRequest(
                payment_id=fields.get("payment_id", ""),
                resume_text=fields.get("resume_text", ""),
                target_role=fields.get("target_role", ""),
                resume_type=fields.get("resume_type", DEFAULT_RESUME_TYPE),
                email=fields.get("email"),
                order_id=fields.get("order_id"),
                name=fields.get("name"),
            ),
            schedule=background_tasks.add_task,
        )
        return JSONResponse({"success": True, "downloadUrl": result.download_url})

    @app.get("/download/{file_name}")
    async def download(file_name: str):
        try:
            path = pipeline.store.path_for(file_name)
        except ArtifactNotFoundError:
            return PlainTextResponse("Not found", status_code=404)
        return FileResponse(path, media_type="application/pdf", filename=file_name)

    @app.post("/api/test-generate")
    async def test_generate(request: Request):
        """Labeled resume text without payment."""
        fields = await read_fields(request)
        text = pipeline.preview(fields.get("resume_text", ""), fields.get("target_role", ""))
        return JSONResponse({"success": True, "aiText": text})

    @app.post("/api/preview", response_class=HTMLResponse)
    async def preview(request: Request):
        """HTML page as it will be printed, without payment."""
        fields = await read_fields(request)
        return HTMLResponse(pipeline.preview_html(
            fields.get("resume_text", ""),
            fields.get("target_role", ""),
            fields.get("resume_type", DEFAULT_RESUME_TYPE),
        ))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
