from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
import typer
from rich import print as rprint
from rich.logging import RichHandler
from .config import ModelConfig, TaggerConfig
from .errors import EmptySentenceError, MissingProbabilityError, ModelLoadError
from .examples import EXAMPLE_SENTENCES
from .model.downloader import ensure_model
from .tagger import HmmTagger
from .tagset import translate_tag
from .viterbi import format_tagged


app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _load_tagger(model_dir: Optional[Path], fallback_tag: str = "NN") -> HmmTagger:
    model_cfg = ModelConfig(model_dir=model_dir)
    try:
        return HmmTagger(model_cfg=model_cfg, cfg=TaggerConfig(fallback_tag=fallback_tag))
    except ModelLoadError as e:
        rprint(f"[red]ERROR[/red] {e}")
        raise typer.Exit(code=1)


@app.command("tag")
def tag(
    text: str,
    model_dir: Optional[Path] = typer.Option(None, help="Folder holding a.txt, b.txt and vocabulary.txt"),
    fallback_tag: str = typer.Option("NN", help="Tag for out-of-vocabulary words"),
    describe: bool = typer.Option(False, help="Show english tag descriptions"),
) -> None:
    tk = _load_tagger(model_dir, fallback_tag)
    try:
        toks = tk.tag(text)
    except (MissingProbabilityError, EmptySentenceError) as e:
        rprint(f"[red]ERROR[/red] {e}")
        raise typer.Exit(code=1)
    for t in toks:
        if describe:
            typer.echo(f"{t.word:<20} {t.tag:<6} {translate_tag(t.tag)}")
        else:
            typer.echo(f"{t.word:<20} {t.tag}")


@app.command("examples")
def examples(
    model_dir: Optional[Path] = typer.Option(None, help="Folder holding a.txt, b.txt and vocabulary.txt"),
) -> None:
    tk = _load_tagger(model_dir)
    for sentence in EXAMPLE_SENTENCES:
        try:
            typer.echo(format_tagged(tk.tag(sentence)))
        except MissingProbabilityError as e:
            rprint(f"[red]ERROR[/red] {e}")


@app.command("download-model")
def download_model(
    url: str = typer.Option(..., help="URL of a .tar.gz holding the model files"),
    version: str = typer.Option("1.0", help="model version label"),
) -> None:
    cfg = ModelConfig(version=version, url=url, auto_download=True)
    try:
        res = ensure_model(cfg)
    except ModelLoadError as e:
        rprint(f"[red]ERROR[/red] {e}")
        raise typer.Exit(code=1)
    rprint(f"[green]OK[/green] installed model to: {res.installed_to}")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1"),
    port: int = typer.Option(8000),
    model_dir: Optional[Path] = typer.Option(None, help="Folder holding a.txt, b.txt and vocabulary.txt"),
) -> None:
    import uvicorn
    from .api import create_app
    uvicorn.run(create_app(ModelConfig(model_dir=model_dir)), host=host, port=port)


if __name__ == "__main__":
    app()
