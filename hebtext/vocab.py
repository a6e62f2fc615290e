from __future__ import annotations
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from .hebrew import GematriaValue, compute_gematria, extract_unique_words, letters_only

DEMO_LESSON_ID = "demo"

# Genesis 1:1-2, pointed
_DEMO_CONTENT = (
    "בְּרֵאשִׁית בָּרָא אֱלֹהִים אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ׃ "
    "וְהָאָרֶץ הָיְתָה תֹהוּ וָבֹהוּ וְחֹשֶׁךְ עַל־פְּנֵי תְהוֹם "
    "וְרוּחַ אֱלֹהִים מְרַחֶפֶת עַל־פְּנֵי הַמָּיִם׃"
)

@dataclass
class Lesson:
    id: str
    title: str
    content: str

@dataclass
class WordCard:
    word: str
    letters: str
    gematria: GematriaValue = field(default_factory=GematriaValue)

def demo_lesson() -> Lesson:
    return Lesson(id=DEMO_LESSON_ID, title="בראשית א׳ א׳-ב׳", content=_DEMO_CONTENT)

def build_deck(text: str) -> List[WordCard]:
    """One flashcard per distinct word, in order of first occurrence."""
    return [
        WordCard(word=w, letters=letters_only(w), gematria=compute_gematria(w))
        for w in extract_unique_words(text)
    ]

def iter_lessons_tsv(path: Path) -> Iterator[Lesson]:
    with path.open("r", encoding="utf-8") as f:
        for ln, line in enumerate(f, 1):
            line = line.rstrip("\n")
            if not line.strip():
                continue
            parts = line.split("\t")
            if len(parts) < 3:
                raise ValueError(f"Bad TSV line {ln}: expected 3 columns, got {len(parts)}")
            lesson_id = parts[0].strip()
            title = parts[1].strip()
            content = "\t".join(parts[2:]).strip()
            yield Lesson(id=lesson_id, title=title, content=content)

def iter_lessons_json(path: Path) -> Iterator[Lesson]:
    data = json.loads(path.read_text(encoding="utf-8"))

    if isinstance(data, dict) and isinstance(data.get("lessons"), list):
        items = data["lessons"]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Unsupported JSON shape: expected a list or {\"lessons\": [...]}")

    for idx, item in enumerate(items, 1):
        if not isinstance(item, dict):
            raise ValueError(f"Lesson #{idx} is not an object")
        content = item.get("content")
        if not isinstance(content, str):
            raise ValueError(f"Lesson #{idx} has no text content")
        lesson_id = item.get("id")
        yield Lesson(
            id=str(lesson_id) if lesson_id is not None else str(idx),
            title=str(item.get("title") or ""),
            content=content,
        )

def load_lessons(input_path: Optional[str], fmt: str = "json") -> Dict[str, Lesson]:
    """
    Read lessons keyed by id. Without a path, only the demo lesson is served.
    Later duplicates of an id replace earlier ones.
    """
    if not input_path:
        lesson = demo_lesson()
        return {lesson.id: lesson}

    in_path = Path(input_path)
    if not in_path.exists():
        raise FileNotFoundError(str(in_path))

    if fmt == "tsv":
        lesson_iter = iter_lessons_tsv(in_path)
    elif fmt == "json":
        lesson_iter = iter_lessons_json(in_path)
    else:
        raise ValueError("format must be: tsv | json")

    lessons = {lesson.id: lesson for lesson in lesson_iter}
    print(f"[lessons] loaded {len(lessons)} lessons from {in_path}", file=sys.stderr, flush=True)
    return lessons
