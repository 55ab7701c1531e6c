from pathlib import Path
from typing import Iterable, List

import pytest

from hmm_tagger.model.loader import ModelTables, Triple


def _write_triples(path: Path, triples: Iterable[Triple]) -> None:
    path.write_text("".join(f"{a} {b} {p!r}\n" for a, b, p in triples), encoding="utf-8")


def write_model(root: Path, tables: ModelTables) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    _write_triples(root / "a.txt", tables.transitions)
    _write_triples(root / "b.txt", tables.emissions)
    (root / "vocabulary.txt").write_text("\n".join(tables.vocabulary) + "\n", encoding="utf-8")
    return root


def _grid(rows: dict) -> List[Triple]:
    return [(a, b, p) for a, row in rows.items() for b, p in row.items()]


@pytest.fixture
def toy_tables() -> ModelTables:
    # three tags, every entry present
    transitions = _grid({
        "<s>": {"DT": 0.6, "NN": 0.3, "VB": 0.1},
        "DT": {"DT": 0.1, "NN": 0.8, "VB": 0.1},
        "NN": {"DT": 0.2, "NN": 0.3, "VB": 0.5},
        "VB": {"DT": 0.5, "NN": 0.4, "VB": 0.1},
    })
    emissions = _grid({
        "DT": {"the": 0.9, "fox": 0.05, "runs": 0.05, "dog": 0.0},
        "NN": {"the": 0.05, "fox": 0.5, "runs": 0.1, "dog": 0.35},
        "VB": {"the": 0.05, "fox": 0.1, "runs": 0.8, "dog": 0.05},
    })
    return ModelTables(transitions, emissions, ["the", "fox", "runs", "dog"])


@pytest.fixture
def tie_tables() -> ModelTables:
    # every score ties
    transitions = _grid({
        "<s>": {"A": 0.5, "B": 0.5},
        "A": {"A": 0.5, "B": 0.5},
        "B": {"A": 0.5, "B": 0.5},
    })
    emissions = _grid({"A": {"x": 0.4}, "B": {"x": 0.4}})
    return ModelTables(transitions, emissions, ["x"])


@pytest.fixture
def toy_model_dir(tmp_path, toy_tables) -> Path:
    return write_model(tmp_path / "model", toy_tables)


@pytest.fixture
def model_writer():
    return write_model
