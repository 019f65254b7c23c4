"""REST API routes."""

import logging
from typing import List, Optional
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()

logger = logging.getLogger(__name__)


# Request models
class TranslateRequest(BaseModel):
    text: Optional[str] = None
    sourceLang: Optional[str] = None
    targetLang: Optional[str] = None


class ChatRequest(BaseModel):
    text: Optional[str] = None
    senderLang: Optional[str] = None
    receiverLang: Optional[str] = None


def error_response(status_code: int, message: str, supported: List[str]) -> JSONResponse:
    """Build an error body; every error lists the supported languages."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "success": False, "supportedLanguages": supported},
    )


def _missing(**fields: Optional[str]) -> List[str]:
    return [
        name for name, value in fields.items()
        if value is None or (name != "text" and not value.strip())
    ]


@router.post("/translate")
async def translate(request: Request, body: TranslateRequest):
    """Translate a single text."""
    translator = request.app.state.translator
    supported = translator.registry.supported_languages()

    missing = _missing(text=body.text, sourceLang=body.sourceLang, targetLang=body.targetLang)
    if missing:
        return error_response(400, f"Missing required fields: {', '.join(missing)}", supported)

    try:
        result = await translator.translate_async(body.text, body.sourceLang, body.targetLang)
    except Exception as e:
        logger.exception("Translation request failed")
        return error_response(500, f"Translation failed: {e}", supported)

    return {
        "translatedText": result.text,
        "sourceLang": result.source_language,
        "targetLang": result.target_language,
        "translationPath": result.direction.value,
        "success": result.error is None,
        "error": result.error,
        "confidence": result.confidence,
        "method": result.method.value,
        "isTranslated": result.is_translated,
        "isTransliterated": result.is_transliterated,
        "englishPivot": result.english_pivot,
        "unknownWords": result.unknown_words,
        "supportedLanguages": supported,
    }


@router.post("/chat")
async def chat(request: Request, body: ChatRequest):
    """Render a chat message for its sender and receiver."""
    translator = request.app.state.translator
    supported = translator.registry.supported_languages()

    missing = _missing(text=body.text, senderLang=body.senderLang, receiverLang=body.receiverLang)
    if missing:
        return error_response(400, f"Missing required fields: {', '.join(missing)}", supported)

    try:
        views = await translator.translate_for_chat_async(body.text, body.senderLang, body.receiverLang)
    except Exception as e:
        logger.exception("Chat translation request failed")
        return error_response(500, f"Translation failed: {e}", supported)

    return {
        "originalText": views.original_text,
        "senderView": views.sender_view,
        "receiverView": views.receiver_view,
        "englishCore": views.english_core,
        "senderLang": views.sender_language,
        "receiverLang": views.receiver_language,
        "translationPath": views.path.value,
        "wasTranslated": views.was_translated,
        "wasTransliterated": views.was_transliterated,
        "confidence": views.confidence,
        "method": views.method.value,
        "success": True,
        "supportedLanguages": supported,
    }


@router.get("/languages")
async def list_languages(request: Request):
    """List supported languages with their script and word order."""
    registry = request.app.state.translator.registry
    return {
        "languages": [
            {
                "name": profile.name,
                "code": profile.code,
                "nativeName": profile.native_name,
                "script": profile.script,
                "rtl": profile.rtl,
                "wordOrder": profile.word_order.value,
            }
            for profile in registry.profiles()
        ],
        "supportedLanguages": registry.supported_languages(),
    }


@router.get("/health")
async def health(request: Request):
    """Report cache and model backend state."""
    translator = request.app.state.translator
    pipeline = translator.model_pipeline
    return {
        "status": "ok",
        "cache": translator.cache_stats(),
        "model": pipeline.snapshot().to_dict() if pipeline else None,
    }
