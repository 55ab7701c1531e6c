from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple
from ..errors import ModelFileMissingError, ModelLoadError, ModelParseError

logger = logging.getLogger(__name__)

Triple = Tuple[str, str, float]


@dataclass
class ModelTables:
    """
    raw model content, in file order
      transitions: (tag_from, tag_to, P(tag_to | tag_from))
      emissions:   (tag, word, P(word | tag))
    """
    transitions: List[Triple] = field(default_factory=list)
    emissions: List[Triple] = field(default_factory=list)
    vocabulary: List[str] = field(default_factory=list)


def _read_tokens(path: Path) -> List[str]:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ModelFileMissingError(path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ModelLoadError(f"{path}: {e}") from e
    # tokens may be split across lines any way; only whitespace separates them
    return raw.split()


def iter_triples(path: Path) -> Iterator[Triple]:
    tokens = _read_tokens(path)
    if len(tokens) % 3:
        raise ModelParseError(
            path, len(tokens) // 3 + 1, f"incomplete record, {len(tokens) % 3} trailing token(s)"
        )
    for i in range(0, len(tokens), 3):
        key1, key2, value = tokens[i], tokens[i + 1], tokens[i + 2]
        record = i // 3 + 1
        try:
            prob = float(value)
        except ValueError:
            raise ModelParseError(path, record, f"probability {value!r} is not a number") from None
        if not math.isfinite(prob) or prob < 0.0 or prob > 1.0:
            raise ModelParseError(path, record, f"probability {value!r} outside [0, 1]")
        yield key1, key2, prob


def load_triples(path: Path) -> List[Triple]:
    return list(iter_triples(path))


def load_vocabulary(path: Path) -> List[str]:
    return _read_tokens(path)


def load_tables(transitions: Path, emissions: Path, vocabulary: Path) -> ModelTables:
    # everything is parsed before anything is returned: no partial model
    tables = ModelTables(
        transitions=load_triples(transitions),
        emissions=load_triples(emissions),
        vocabulary=load_vocabulary(vocabulary),
    )
    logger.info(
        "loaded %d transitions from %s, %d emissions from %s, %d words from %s",
        len(tables.transitions), transitions.name,
        len(tables.emissions), emissions.name,
        len(tables.vocabulary), vocabulary.name,
    )
    return tables
