from __future__ import annotations
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from .config import ModelConfig, TaggerConfig
from .errors import EmptySentenceError, MissingProbabilityError, ModelLoadError
from .tagger import HmmTagger
from .tagset import translate_tag


class TaggedWordOut(BaseModel):
    word: str
    tag: str
    tag_en: str


class TagRequest(BaseModel):
    text: str
    include_descriptions: bool = True


def create_app(
    model_cfg: ModelConfig = ModelConfig(),
    cfg: TaggerConfig = TaggerConfig(),
    tagger: Optional[HmmTagger] = None,
) -> FastAPI:
    app = FastAPI(title="HMM POS Tagger", version="1.0.0")
    # model is loaded once per app, lazily so /health answers without it
    state = {"tagger": tagger}

    def get_tagger() -> HmmTagger:
        if state["tagger"] is None:
            state["tagger"] = HmmTagger(model_cfg=model_cfg, cfg=cfg)
        return state["tagger"]

    @app.get("/")
    def root() -> dict:
        return {
            "name": "HMM Part-of-Speech Tagger",
            "docs": "/docs",
            "health": "/health",
            "tag": "/tag",
        }

    @app.get("/health")
    def health() -> dict:
        return {"ok": True}

    @app.post("/tag", response_model=list[TaggedWordOut])
    def tag(req: TagRequest) -> List[TaggedWordOut]:
        try:
            tk = get_tagger()
        except ModelLoadError as e:
            raise HTTPException(status_code=503, detail=str(e))
        try:
            toks = tk.tag(req.text)
        except EmptySentenceError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except MissingProbabilityError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return [
            TaggedWordOut(
                word=t.word,
                tag=t.tag,
                tag_en=translate_tag(t.tag) if req.include_descriptions else "",
            )
            for t in toks
        ]

    return app
