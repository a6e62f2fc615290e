from __future__ import annotations
import argparse
import json
import os
from dataclasses import asdict

from .hebrew import compute_gematria, extract_unique_words
from .vocab import build_deck, load_lessons

def cmd_gematria(args: argparse.Namespace) -> int:
    g = compute_gematria(args.text)
    if args.json:
        print(json.dumps({"text": args.text, **asdict(g)}, ensure_ascii=False, indent=2))
        return 0
    print(f"{args.text}  =>  simple={g.simple} standard={g.standard} ordinal={g.ordinal}")
    return 0

def cmd_words(args: argparse.Namespace) -> int:
    words = extract_unique_words(args.text)
    if args.json:
        print(json.dumps(words, ensure_ascii=False, indent=2))
        return 0
    if not words:
        print("No Hebrew words.")
        return 0
    for w in words:
        print(w)
    return 0

def cmd_deck(args: argparse.Namespace) -> int:
    if args.text is not None:
        text = args.text
    else:
        lessons = load_lessons(args.input, args.format)
        if not lessons:
            print(f"No lessons in {args.input}")
            return 2
        lesson_id = args.lesson or next(iter(lessons))
        lesson = lessons.get(lesson_id)
        if lesson is None:
            print(f"Unknown lesson: {args.lesson}")
            return 2
        text = lesson.content

    cards = build_deck(text)
    if args.json:
        print(json.dumps([asdict(c) for c in cards], ensure_ascii=False, indent=2))
        return 0

    for i, c in enumerate(cards, 1):
        g = c.gematria
        print(f"{i:3d}. {c.word}  [{c.letters}]  =>  {g.simple} / ordinal {g.ordinal}")
    return 0

def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run(
        "hebtext.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hebtext", description="Hebrew gematria and study vocabulary")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_g = sub.add_parser("gematria", help="Compute simple/standard/ordinal gematria")
    p_g.add_argument("text", help="Hebrew text")
    p_g.add_argument("--json", action="store_true", help="Output JSON")
    p_g.set_defaults(func=cmd_gematria)

    p_w = sub.add_parser("words", help="List distinct Hebrew words of a passage")
    p_w.add_argument("text", help="Hebrew passage")
    p_w.add_argument("--json", action="store_true", help="Output JSON")
    p_w.set_defaults(func=cmd_words)

    p_d = sub.add_parser("deck", help="Build a flashcard deck from a passage or a lesson")
    src = p_d.add_mutually_exclusive_group()
    src.add_argument("--text", default=None, help="Hebrew passage")
    src.add_argument("--input", default=os.environ.get("LESSONS_PATH"), help="Lessons file (TSV or JSON)")
    p_d.add_argument("--format", choices=["tsv", "json"], default=os.environ.get("LESSONS_FORMAT", "json"))
    p_d.add_argument("--lesson", default=None, help="Lesson id (default: first lesson)")
    p_d.add_argument("--json", action="store_true", help="Output JSON")
    p_d.set_defaults(func=cmd_deck)

    p_srv = sub.add_parser("serve", help="Run FastAPI server")
    p_srv.add_argument("--host", default="127.0.0.1")
    p_srv.add_argument("--port", type=int, default=8000)
    p_srv.add_argument("--reload", action="store_true")
    p_srv.set_defaults(func=cmd_serve)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
