from .downloader import ensure_model, model_files_present
from .loader import ModelTables, load_tables, load_triples, load_vocabulary
from .store import ProbabilityStore

__all__ = [
    "ensure_model",
    "model_files_present",
    "ModelTables",
    "load_tables",
    "load_triples",
    "load_vocabulary",
    "ProbabilityStore",
]
