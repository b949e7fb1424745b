from pydantic import BaseModel, Field
from typing import List, Optional, Tuple

class SummarizeRequest(BaseModel):
    text: Optional[str] = None
    top_words: Optional[int] = Field(default=None, ge=0)

class SummarizeResponse(BaseModel):
    bulleted_summary: str
    key_sentences: List[str]
    top_words: List[str]
    spans: List[Tuple[int, int]]

class LocateRequest(BaseModel):
    text: str
    sentence: str

class LocateResponse(BaseModel):
    spans: List[Tuple[int, int]]
