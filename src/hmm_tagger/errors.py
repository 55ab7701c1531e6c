from __future__ import annotations
from pathlib import Path
from typing import Optional


class ModelLoadError(RuntimeError):
    """Model files could not be turned into a probability store."""


class ModelFileMissingError(ModelLoadError, FileNotFoundError):
    def __init__(self, path: Path, hint: str = "") -> None:
        msg = f"model file not found: {path}"
        if hint:
            msg = f"{msg}. {hint}"
        super().__init__(msg)
        self.path = path


class ModelParseError(ModelLoadError):
    def __init__(self, path: Path, record: int, reason: str) -> None:
        super().__init__(f"{path}: record {record}: {reason}")
        self.path = path
        self.record = record


class MissingProbabilityError(LookupError):
    """
    transition / emission entry absent from the model
    kind is "transition" or "emission"
    """
    def __init__(self, kind: str, key1: str, key2: str) -> None:
        if kind == "transition":
            msg = f"no transition probability P({key2} | {key1})"
        else:
            msg = f"no emission probability P({key2} | {key1})"
        super().__init__(msg)
        self.kind = kind
        self.key = (key1, key2)


class EmptyResultError(RuntimeError):
    def __init__(self, position: Optional[int] = None) -> None:
        where = "final column" if position is None else f"column {position}"
        super().__init__(f"no path to backtrace: {where} is empty")


class EmptySentenceError(ValueError):
    def __init__(self) -> None:
        super().__init__("sentence has no words after the start symbol")
