from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.core.config import settings  # noqa: E402
from resume_engine.parsing.parse import read_document  # noqa: E402
from resume_engine.services.resume_parser import ParseError, parse_resume  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Parse a PDF or DOCX résumé into a structured JSON profile.")
    parser.add_argument("--file", required=True, help="Path to the résumé document")
    parser.add_argument(
        "--format",
        default=None,
        help="Declared format (pdf, docx or a MIME type). Defaults to the file suffix.",
    )
    parser.add_argument("--out", default=None, help="Write the JSON profile to this path instead of stdout")
    parser.add_argument(
        "--include-text",
        action="store_true",
        help="Keep cleaned and original text in the output.",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(message)s")

    document = read_document(args.file, args.format)
    try:
        profile = parse_resume(document)
    except ParseError as exc:
        print(json.dumps(exc.to_failure().model_dump(), ensure_ascii=False, indent=2))
        return 1

    exclude = None if args.include_text else {"cleaned_text": True, "raw": {"original_text"}}
    payload = json.dumps(profile.model_dump(mode="json", exclude=exclude), ensure_ascii=False, indent=2)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(f"{payload}\n", encoding="utf-8")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
