from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
from .config import ModelConfig, TaggerConfig
from .errors import ModelLoadError
from .model import ProbabilityStore, ensure_model, load_tables
from .types import TaggedWord
from .viterbi import ViterbiResult, format_tagged, viterbi_decode


@dataclass
class HmmTagger:
    model_cfg: ModelConfig = ModelConfig()
    cfg: TaggerConfig = TaggerConfig()
    store: Optional[ProbabilityStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.store is None:
            ensure_model(self.model_cfg)
            tables = load_tables(
                self.model_cfg.transitions_path,
                self.model_cfg.emissions_path,
                self.model_cfg.vocabulary_path,
            )
            self.store = ProbabilityStore.from_tables(tables, self.cfg.tag_set, self.cfg.start_symbol)
        if self.store.start_symbol != self.cfg.start_symbol:
            raise ModelLoadError(
                f"store built for start symbol {self.store.start_symbol!r}, tagger uses {self.cfg.start_symbol!r}"
            )
        if not self.store.has_tag(self.cfg.fallback_tag):
            raise ModelLoadError(f"fallback tag {self.cfg.fallback_tag!r} is not in the tag set {list(self.store.tags)}")

    @classmethod
    def from_store(cls, store: ProbabilityStore, cfg: TaggerConfig = TaggerConfig()) -> "HmmTagger":
        return cls(cfg=cfg, store=store)

    def _with_start(self, words: Sequence[str]) -> List[str]:
        words = list(words)
        if not words or words[0] != self.cfg.start_symbol:
            words.insert(0, self.cfg.start_symbol)
        return words

    def decode(self, words: Sequence[str]) -> ViterbiResult:
        assert self.store is not None
        return viterbi_decode(self._with_start(words), self.store, self.cfg)

    def tag_words(self, words: Sequence[str]) -> List[TaggedWord]:
        return self.decode(words).tagged

    def tag(self, text: str) -> List[TaggedWord]:
        return self.tag_words(text.split())

    def tag_to_string(self, text: str) -> str:
        return format_tagged(self.tag(text))
