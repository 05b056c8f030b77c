"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.log import configure_logging
from docstore.models import Document, SearchRequest
from docstore.seed import seed_store
from docstore.store.errors import DocStoreError
from docstore.store.memory_repo import MemoryRepo


SeedArg = Annotated[Path, typer.Argument(help="YAML or JSON file of documents to load")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _load_store(seed: Path, settings: Settings) -> MemoryRepo:
    """Build a store from settings and fill it from the seed file."""
    store = MemoryRepo.from_settings(settings)
    try:
        seed_store(store, seed)
    except DocStoreError as e:
        _fail(f"Could not load {seed}", e)
    return store


def _dump(docs: list[Document]) -> str:
    return json.dumps([d.model_dump(mode="json", by_alias=True) for d in docs], indent=2, ensure_ascii=False)


def main_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Configure logging before any command runs."""
    settings = _settings(overrides={"log_level": log_level})
    try:
        configure_logging(settings.log_level)
    except ValueError as e:
        _fail(str(e))


def search_cmd(
    seed: SeedArg,
    prefixes: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contents: Annotated[Optional[List[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    authors: Annotated[Optional[List[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Earliest created timestamp, ISO 8601")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Latest created timestamp, ISO 8601")] = None,
    ):
    """Print the seeded documents matching every given filter as JSON."""
    try:
        request = SearchRequest(
            title_prefixes=set(prefixes) if prefixes else None,
            contains_contents=set(contents) if contents else None,
            author_ids=set(authors) if authors else None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search filters", e)

    store = _load_store(seed, _settings())
    typer.echo(_dump(store.search(request)))


def show_cmd(
    seed: SeedArg,
    doc_id: Annotated[str, typer.Argument(help="Document id to look up")],
    ):
    """Print a single seeded document as JSON."""
    store = _load_store(seed, _settings())
    doc = store.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id {doc_id!r}")
    typer.echo(json.dumps(doc.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
