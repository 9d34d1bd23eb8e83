#!/usr/bin/env python3
"""
Valence - sentiment analysis HTTP API
FastAPI application exposing lexicon-based phrase scoring
"""

import os
from typing import Any

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import get_config
from valence import (
    InvalidOption,
    SentimentService,
    UnsupportedCategory,
    UnsupportedLanguage,
    parse_options,
)
from valence.logging_utils import get_structured_logger

logger = get_structured_logger(__name__)

app = FastAPI(
    title="Valence",
    description="AFINN-style lexicon sentiment analysis",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

config = get_config()
sentiment_service = SentimentService()


class AnalyzeRequest(BaseModel):
    # Options are checked by AnalysisOptions so bad types surface as InvalidOption
    phrase: str = ""
    lang: Any = None
    category: Any = None
    overrides: Any = None
    strict: Any = None


@app.post("/api/analyze")
async def analyze_phrase(request: AnalyzeRequest):
    """Score a phrase"""
    options = {
        key: value
        for key, value in request.dict(exclude={"phrase"}).items()
        if value is not None
    }
    try:
        opts = parse_options(options)
        result = await sentiment_service.analyze_async(request.phrase, opts)
    except (UnsupportedLanguage, UnsupportedCategory) as e:
        logger.warning("Analysis rejected", error=e.to_dict())
        raise HTTPException(status_code=404, detail=e.to_dict())
    except InvalidOption as e:
        logger.warning("Analysis rejected", error=e.to_dict())
        raise HTTPException(status_code=400, detail=e.to_dict())

    logger.debug("Phrase analyzed", score=result.score, tokens=len(result.tokens))
    return {
        "lang": opts.lang or get_config().DEFAULT_LANG,
        "category": opts.category,
        **result.to_dict(),
    }


@app.get("/api/languages")
async def get_languages():
    """List available languages and their categories"""
    return {"languages": sentiment_service.languages()}


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "default_lang": config.DEFAULT_LANG,
        "languages": len(sentiment_service.languages()),
    }


@app.on_event("startup")
async def startup_event():
    """Load lexicons before the first request"""
    languages = sentiment_service.languages()
    logger.info("Valence started", languages=sorted(languages))


if __name__ == "__main__":
    port = int(os.getenv("PORT", config.PORT))
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=port,
        reload=config.APP_ENV == "development"
    )
