__all__ = ["HmmTagger"]

def __getattr__(name: str):
    if name == "HmmTagger":
        from .tagger import HmmTagger  # keeps `import hmm_tagger` free of numpy until needed
        return HmmTagger
    raise AttributeError(name)
