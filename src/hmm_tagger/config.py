from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
from platformdirs import user_data_dir


@dataclass(frozen=True)
class ModelConfig:
    name: str = "hmm-pos"
    version: str = "1.0"
    root_dir: Path = Path(user_data_dir("hmm_tagger", "hmmtag")) / "models"
    # point straight at a folder holding the three files, skips root_dir/name-version
    model_dir: Optional[Path] = None
    transitions_file: str = "a.txt"
    emissions_file: str = "b.txt"
    vocabulary_file: str = "vocabulary.txt"
    url: Optional[str] = None
    auto_download: bool = False

    @property
    def install_dir(self) -> Path:
        if self.model_dir is not None:
            return self.model_dir
        return self.root_dir / f"{self.name}-{self.version}"

    @property
    def transitions_path(self) -> Path:
        return self.install_dir / self.transitions_file

    @property
    def emissions_path(self) -> Path:
        return self.install_dir / self.emissions_file

    @property
    def vocabulary_path(self) -> Path:
        return self.install_dir / self.vocabulary_file

    @property
    def required_files(self) -> Tuple[str, str, str]:
        return (self.transitions_file, self.emissions_file, self.vocabulary_file)


@dataclass(frozen=True)
class TaggerConfig:
    start_symbol: str = "<s>"
    # tag given to every out-of-vocabulary word
    fallback_tag: str = "NN"
    # None -> transition sources of the loaded model, in file order
    tag_set: Optional[Tuple[str, ...]] = None
    # emission for an OOV word under fallback_tag when b.txt has no entry; None = strict
    oov_emission: Optional[float] = 1.0
    # False -> any other missing table entry counts as 0.0
    strict: bool = True
