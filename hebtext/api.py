from __future__ import annotations
from contextlib import asynccontextmanager
from os import environ
from typing import Dict, List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .hebrew import compute_gematria, extract_unique_words, is_rtl
from .vocab import Lesson, WordCard, build_deck, load_lessons

_lessons: Dict[str, Lesson] = {}

@asynccontextmanager
async def lifespan(app: FastAPI):
    # runs on startup
    _lessons.clear()
    _lessons.update(load_lessons(
        environ.get("LESSONS_PATH"),
        environ.get("LESSONS_FORMAT", "json"),
    ))
    yield
    _lessons.clear()

app = FastAPI(title="hebtext", lifespan=lifespan)

class GematriaOut(BaseModel):
    text: str
    simple: int
    standard: int
    ordinal: int

class WordsOut(BaseModel):
    count: int
    words: List[str]

class RtlOut(BaseModel):
    text: str
    rtl: bool

class GematriaFields(BaseModel):
    simple: int
    standard: int
    ordinal: int

class CardOut(BaseModel):
    word: str
    letters: str
    gematria: GematriaFields

class DeckIn(BaseModel):
    text: str = Field(..., min_length=1, description="טקסט בעברית")

class LessonOut(BaseModel):
    id: str
    title: str

class LessonDeckOut(BaseModel):
    id: str
    title: str
    content: str
    cards: List[CardOut]

def _card_out(card: WordCard) -> CardOut:
    g = card.gematria
    return CardOut(
        word=card.word,
        letters=card.letters,
        gematria=GematriaFields(simple=g.simple, standard=g.standard, ordinal=g.ordinal),
    )

@app.get("/gematria", response_model=GematriaOut)
def api_gematria(
    text: str = Query(..., min_length=1, description="טקסט בעברית לחישוב גימטריה"),
):
    g = compute_gematria(text)
    return GematriaOut(text=text, simple=g.simple, standard=g.standard, ordinal=g.ordinal)

@app.get("/words", response_model=WordsOut)
def api_words(
    text: str = Query(..., min_length=1, description="קטע טקסט לפירוק למילים"),
):
    words = extract_unique_words(text)
    return WordsOut(count=len(words), words=words)

@app.get("/rtl", response_model=RtlOut)
def api_rtl(text: str = Query(...)):
    return RtlOut(text=text, rtl=is_rtl(text))

@app.post("/deck", response_model=List[CardOut])
def api_deck(body: DeckIn):
    return [_card_out(c) for c in build_deck(body.text)]

@app.get("/lessons", response_model=List[LessonOut])
def api_lessons():
    return [LessonOut(id=l.id, title=l.title) for l in _lessons.values()]

@app.get("/lessons/{lesson_id}/deck", response_model=LessonDeckOut)
def api_lesson_deck(lesson_id: str):
    lesson = _lessons.get(lesson_id)
    if lesson is None:
        raise HTTPException(status_code=404, detail=f"שיעור לא נמצא: {lesson_id}")
    return LessonDeckOut(
        id=lesson.id,
        title=lesson.title,
        content=lesson.content,
        cards=[_card_out(c) for c in build_deck(lesson.content)],
    )
