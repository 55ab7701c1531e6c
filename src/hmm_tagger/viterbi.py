from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from .config import TaggerConfig
from .errors import EmptyResultError, EmptySentenceError, MissingProbabilityError
from .model.store import ProbabilityStore
from .trellis import Column, Trellis
from .types import Cell, TaggedWord

logger = logging.getLogger(__name__)


@dataclass
class ViterbiResult:
    tagged: List[TaggedWord]
    prob: float
    trellis: Trellis


class _Lookups:
    """store lookups with the declared TaggerConfig policies applied"""
    def __init__(self, store: ProbabilityStore, cfg: TaggerConfig) -> None:
        self.store = store
        self.cfg = cfg

    def transition(self, tag_from: str, tag_to: str) -> float:
        try:
            return self.store.transition_prob(tag_from, tag_to)
        except MissingProbabilityError:
            if self.cfg.strict:
                raise
            return 0.0

    def emission(self, tag: str, word: str, known: bool) -> float:
        if not known and self.cfg.oov_emission is not None and not self.store.has_emission(tag, word):
            return self.cfg.oov_emission
        try:
            return self.store.emission_prob(tag, word)
        except MissingProbabilityError:
            if self.cfg.strict:
                raise
            return 0.0


def candidate_tags(store: ProbabilityStore, cfg: TaggerConfig, word: str) -> Tuple[bool, Sequence[str]]:
    known = store.is_known(word)
    if known:
        return True, store.tags
    return False, (cfg.fallback_tag,)


def _best_predecessor(
    trellis: Trellis,
    prev: Column,
    tag: str,
    emit: float,
    look: _Lookups,
) -> Tuple[float, Optional[int]]:
    # first maximizer in column order wins (strict >); starting below zero
    # means an all-zero column still yields a backpointer to its first cell
    best = -1.0
    best_idx: Optional[int] = None
    for prev_tag, pidx in prev.items():
        score = trellis.cells[pidx].prob * look.transition(prev_tag, tag) * emit
        if score > best:
            best = score
            best_idx = pidx
    if best_idx is None:
        raise EmptyResultError(len(trellis.columns) - 2)
    return best, best_idx


def build_trellis(
    words: Sequence[str],
    store: ProbabilityStore,
    cfg: TaggerConfig = TaggerConfig(),
) -> Trellis:
    """
    forward pass over words[1:]; words[0] must be the start symbol, it only
    serves as the transition source of the first column
    """
    if not words or words[0] != cfg.start_symbol:
        raise ValueError(f"sentence must begin with the start symbol {cfg.start_symbol!r}")
    if len(words) < 2:
        raise EmptySentenceError()
    look = _Lookups(store, cfg)
    body = list(words[1:])
    trellis = Trellis(words=body)

    # init
    word = body[0]
    known, tags = candidate_tags(store, cfg, word)
    col = trellis.add_column()
    for tag in tags:
        prob = look.transition(cfg.start_symbol, tag) * look.emission(tag, word, known)
        trellis.add_cell(col, Cell(word, tag, prob, None))

    # recursion
    n_oov = 0 if known else 1
    for i in range(1, len(body)):
        word = body[i]
        known, tags = candidate_tags(store, cfg, word)
        if not known:
            n_oov += 1
        prev = trellis.columns[i - 1]
        col = trellis.add_column()
        for tag in tags:
            emit = look.emission(tag, word, known)
            prob, bp = _best_predecessor(trellis, prev, tag, emit, look)
            if prob == 0.0:
                logger.debug("position %d: no predecessor with mass for %s/%s", i, word, tag)
            trellis.add_cell(col, Cell(word, tag, prob, bp))

    logger.debug("decoded %d words (%d unknown), %d cells", len(body), n_oov, len(trellis.cells))
    return trellis


def backtrace(trellis: Trellis, position: int = -1) -> Tuple[List[TaggedWord], float]:
    """
    pick the best cell of a column and follow its backpointers
    ties: the last maximal cell in column order wins (>=), unlike the forward pass
    """
    if not -len(trellis.columns) <= position < len(trellis.columns) or not trellis.columns[position]:
        raise EmptyResultError(None if position == -1 else position)
    best_idx: Optional[int] = None
    best = 0.0
    for idx in trellis.columns[position].values():
        prob = trellis.cells[idx].prob
        if best_idx is None or prob >= best:
            best = prob
            best_idx = idx
    assert best_idx is not None
    path = [TaggedWord(c.word, c.tag) for c in trellis.chain(best_idx)]
    path.reverse()
    return path, best


def viterbi_decode(
    words: Sequence[str],
    store: ProbabilityStore,
    cfg: TaggerConfig = TaggerConfig(),
) -> ViterbiResult:
    trellis = build_trellis(words, store, cfg)
    tagged, prob = backtrace(trellis)
    return ViterbiResult(tagged=tagged, prob=prob, trellis=trellis)


def format_tagged(tagged: Sequence[TaggedWord]) -> str:
    return " ".join(f"{t.word} {t.tag}" for t in tagged)
