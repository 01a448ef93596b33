"""
Interactive prefix completion from the terminal.

Usage:
    python -m carfind.cli --vocab data/filtered_car_deals.json --field name
"""
import argparse
from typing import Callable, Optional

from .data.loader import build_service
from .service.completion import CompletionService

PROMPT = "Enter a prefix (type 'exit' to quit): "


def interactive_loop(
    service: CompletionService,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    limit: Optional[int] = None,
) -> None:
    while True:
        try:
            prefix = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            write("")
            break

        if prefix == "exit":
            break

        suggestions = service.suggest(prefix, limit=limit)
        if suggestions:
            write("Suggestions:")
            for suggestion in suggestions:
                write(suggestion)
        else:
            write("No suggestions found.")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Prefix completion over a vocabulary file")
    parser.add_argument("--vocab", default=None, help="vocabulary file (json, jsonl or csv)")
    parser.add_argument("--field", default=None, help="record field holding each entry")
    parser.add_argument("--limit", type=int, default=None, help="max suggestions per prefix")
    args = parser.parse_args(argv)

    service = build_service(filename=args.vocab, field=args.field)
    print(f"Loaded {len(service)} distinct entries.")
    interactive_loop(service, limit=args.limit)


if __name__ == "__main__":
    main()
