from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .models import SummarizeRequest, SummarizeResponse, LocateRequest, LocateResponse
from ..config import SummarizerConfig
from ..highlight import highlight_spans
from ..summarizer import locate_occurrences, summarize
from ..utils import clamp_text
from pathlib import Path
import logging

CONFIG_PATH = Path("keysum.json")

log = logging.getLogger(__name__)

cfg = SummarizerConfig.load(CONFIG_PATH) if CONFIG_PATH.exists() else SummarizerConfig()

app = FastAPI(title="Key Sentence Service", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev friendly; tighten later
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/summarize", response_model=SummarizeResponse)
def summarize_endpoint(req: SummarizeRequest):
    k = cfg.top_words if req.top_words is None else req.top_words
    text = clamp_text(req.text or "", cfg.max_chars)
    result = summarize(text, k, bullet=cfg.bullet)
    log.debug("summarize request: %d chars, k=%d, %d key sentences", len(text), k, len(result.key_sentences))
    return SummarizeResponse(
        bulleted_summary=result.bulleted_summary,
        key_sentences=result.key_sentences,
        top_words=result.top_words,
        spans=highlight_spans(text, result.key_sentences),
    )

@app.post("/locate", response_model=LocateResponse)
def locate_endpoint(req: LocateRequest):
    return LocateResponse(spans=locate_occurrences(req.text, req.sentence))
