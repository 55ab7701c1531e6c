from __future__ import annotations
import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple
import numpy as np
from ..errors import MissingProbabilityError, ModelLoadError
from .loader import ModelTables, Triple

logger = logging.getLogger(__name__)


def _ordered_unique(items: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for it in items:
        seen.setdefault(it, None)
    return list(seen)


class ProbabilityStore:
    """
    read-only HMM parameters
      transitions: dense (source x target) matrix, sources = tag set + start symbol,
                   NaN where the model has no entry
      emissions:   flat (tag, word) -> prob mapping
    missing transitions and missing emissions fail the same way
    """
    def __init__(
        self,
        tags: Sequence[str],
        start_symbol: str,
        transitions: Iterable[Triple],
        emissions: Iterable[Triple],
        vocabulary: Iterable[str],
    ) -> None:
        self.tags: Tuple[str, ...] = tuple(tags)
        self.start_symbol = start_symbol
        if not self.tags:
            raise ModelLoadError("tag set is empty")
        if start_symbol in self.tags:
            raise ModelLoadError(f"start symbol {start_symbol!r} cannot be a tag")
        if len(set(self.tags)) != len(self.tags):
            raise ModelLoadError(f"tag set has duplicates: {list(self.tags)}")

        self._target_id: Dict[str, int] = {t: i for i, t in enumerate(self.tags)}
        self._source_id: Dict[str, int] = dict(self._target_id)
        self._source_id[start_symbol] = len(self.tags)

        mat = np.full((len(self._source_id), len(self.tags)), np.nan, dtype=np.float64)
        for tag_from, tag_to, prob in transitions:
            if tag_from not in self._source_id:
                raise ModelLoadError(f"transition source {tag_from!r} is not in the tag set")
            if tag_to not in self._target_id:
                if tag_to == start_symbol:
                    raise ModelLoadError(f"start symbol {start_symbol!r} used as a transition target")
                # end-of-sentence columns and the like are never decoding targets
                logger.debug("skipping transition %s -> %s: target not in the tag set", tag_from, tag_to)
                continue
            mat[self._source_id[tag_from], self._target_id[tag_to]] = prob
        mat.setflags(write=False)
        self._transitions = mat

        emit: Dict[Tuple[str, str], float] = {}
        for tag, word, prob in emissions:
            if tag not in self._target_id:
                if tag == start_symbol:
                    raise ModelLoadError(f"start symbol {start_symbol!r} used as an emission tag")
                raise ModelLoadError(f"emission tag {tag!r} is not in the tag set")
            emit[(tag, word)] = prob
        self._emissions = emit
        self._vocabulary: FrozenSet[str] = frozenset(vocabulary)

    @classmethod
    def from_tables(
        cls,
        tables: ModelTables,
        tag_set: Optional[Sequence[str]] = None,
        start_symbol: str = "<s>",
    ) -> "ProbabilityStore":
        if tag_set is None:
            tag_set = [t for t in _ordered_unique(t[0] for t in tables.transitions) if t != start_symbol]
        store = cls(tag_set, start_symbol, tables.transitions, tables.emissions, tables.vocabulary)
        logger.info(
            "probability store ready: %d tags, %d emissions, %d known words",
            len(store.tags), len(store._emissions), len(store._vocabulary),
        )
        return store

    @property
    def transition_matrix(self) -> np.ndarray:
        return self._transitions

    @property
    def vocabulary(self) -> FrozenSet[str]:
        return self._vocabulary

    def has_tag(self, tag: str) -> bool:
        return tag in self._target_id

    def transition_prob(self, tag_from: str, tag_to: str) -> float:
        i = self._source_id.get(tag_from)
        j = self._target_id.get(tag_to)
        if i is None or j is None:
            raise MissingProbabilityError("transition", tag_from, tag_to)
        p = self._transitions[i, j]
        if np.isnan(p):
            raise MissingProbabilityError("transition", tag_from, tag_to)
        return float(p)

    def emission_prob(self, tag: str, word: str) -> float:
        try:
            return self._emissions[(tag, word)]
        except KeyError:
            raise MissingProbabilityError("emission", tag, word) from None

    def has_emission(self, tag: str, word: str) -> bool:
        return (tag, word) in self._emissions

    def is_known(self, word: str) -> bool:
        return word in self._vocabulary
