import json
import pandas as pd
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from ..config import ASCII_ONLY, DATA_DIR, VOCAB_FIELD, VOCAB_FILE
from ..exceptions import VocabularySourceError
from ..index.trie import ASCII_ALPHABET
from ..logger import get_logger
from ..service.completion import CompletionService

logger = get_logger("data.loader")

RECORD_KEYS = ("deals", "products", "items")


def _resolve(filename) -> Path:
    p = Path(filename)
    return p if p.is_absolute() else Path(DATA_DIR) / p


def read_records(path) -> List[Any]:
    """Load raw records from json/jsonl/csv."""
    p = Path(path)
    suffix = p.suffix.lower()

    try:
        if suffix == ".csv":
            return pd.read_csv(p).to_dict(orient="records")

        if suffix == ".jsonl":
            with open(p, "r", encoding="utf-8") as f:
                return [json.loads(line) for line in f if line.strip()]

        if suffix == ".json":
            with open(p, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, list):
                return data
            if isinstance(data, dict):
                for key in RECORD_KEYS:
                    if isinstance(data.get(key), list):
                        return data[key]
            raise VocabularySourceError(f"No list of records in {p}")
    except (OSError, ValueError) as e:
        raise VocabularySourceError(f"Failed to read vocabulary {p}: {e}") from e

    raise VocabularySourceError(f"Unsupported extension: {p.suffix}")


def extract_field(records: Iterable[Any], field: str) -> Tuple[List[str], int]:
    """Pull ``field`` out of each record; malformed records are counted, not raised."""
    values: List[str] = []
    skipped = 0
    for i, record in enumerate(records):
        value = record.get(field) if isinstance(record, dict) else None
        if not isinstance(value, str):
            logger.warning(f"Record #{i} has no usable '{field}' field, skipping")
            skipped += 1
            continue
        values.append(value)
    return values, skipped


def load_vocabulary(filename=VOCAB_FILE, field: str = VOCAB_FIELD) -> List[str]:
    p = _resolve(filename)
    if not p.exists():
        logger.warning(f"Vocabulary not found at {p}")
        return []

    records = read_records(p)
    values, skipped = extract_field(records, field)
    logger.info(f"Read {len(values)} vocabulary entries from {p} ({skipped} skipped)")
    return values


def build_service(
    filename=None,
    field: Optional[str] = None,
    alphabet: Optional[Iterable[str]] = None,
) -> CompletionService:
    """Read the vocabulary source and return a loaded CompletionService."""
    if alphabet is None and ASCII_ONLY:
        alphabet = ASCII_ALPHABET
    words = load_vocabulary(filename or VOCAB_FILE, field or VOCAB_FIELD)
    service = CompletionService(alphabet=alphabet)
    service.load(words)
    return service
