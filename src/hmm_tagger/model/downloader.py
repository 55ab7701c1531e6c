from __future__ import annotations
import io
import logging
import tarfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
import requests
from tqdm import tqdm
from ..config import ModelConfig
from ..errors import ModelFileMissingError, ModelLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadResult:
    installed_to: Path
    version: str


def model_files_present(cfg: ModelConfig = ModelConfig()) -> bool:
    install_dir = cfg.install_dir
    return all((install_dir / name).exists() for name in cfg.required_files)


def _download_bytes(url: str) -> bytes:
    r = requests.get(url, stream=True, timeout=60)
    r.raise_for_status()
    total = int(r.headers.get("Content-Length", "0") or "0")
    buf = io.BytesIO()
    with tqdm(total=total if total > 0 else None, unit="B", unit_scale=True, desc="downloading model") as pbar:
        for chunk in r.iter_content(chunk_size=1024 * 1024):
            if not chunk:
                continue
            buf.write(chunk)
            pbar.update(len(chunk))
    return buf.getvalue()


def ensure_model(cfg: ModelConfig = ModelConfig()) -> DownloadResult:
    """
    Make sure the three model files (transitions, emissions, vocabulary) are in cfg.install_dir.

    Nothing is fetched when they already exist. Otherwise the .tar.gz at cfg.url is downloaded
    and each required file is extracted by basename, wherever it sits inside the archive.
    """
    install_dir = cfg.install_dir
    if model_files_present(cfg):
        return DownloadResult(installed_to=install_dir, version=cfg.version)
    missing = [name for name in cfg.required_files if not (install_dir / name).exists()]
    if not cfg.auto_download or not cfg.url:
        raise ModelFileMissingError(
            install_dir / missing[0],
            f"Missing: {', '.join(missing)}. "
            "Run `hmmtag download-model --url ...` or pass --model-dir.",
        )

    logger.info("fetching model %s-%s from %s", cfg.name, cfg.version, cfg.url)
    data = _download_bytes(cfg.url)
    install_dir.mkdir(parents=True, exist_ok=True)

    with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tf:
        by_name = {}
        for m in tf.getmembers():
            if m.isfile():
                by_name.setdefault(PurePosixPath(m.name).name, m)
        absent = [name for name in cfg.required_files if name not in by_name]
        if absent:
            raise ModelLoadError(f"archive at {cfg.url} lacks {', '.join(absent)}")
        for fname in cfg.required_files:
            f = tf.extractfile(by_name[fname])
            assert f is not None
            (install_dir / fname).write_bytes(f.read())

    return DownloadResult(installed_to=install_dir, version=cfg.version)
