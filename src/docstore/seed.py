"""Seed files: load documents from YAML or JSON into a store"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.models import Document
from docstore.store.errors import DocStoreError
from docstore.store.repo import DocumentRepo


logger = logging.getLogger(__name__)

SEED_SUFFIXES = {".yaml", ".yml", ".json"}


class SeedError(DocStoreError, ValueError):
    """The seed file could not be read or does not describe documents."""


def _records(data: Any) -> list:
    """Accept a bare list of documents or a mapping with a `documents` list."""
    if isinstance(data, dict):
        data = data.get("documents")
    if not isinstance(data, list):
        raise SeedError("expected a list of documents or a mapping with a 'documents' list")
    return data


def load_seed(path: Path) -> list[Document]:
    """Parse a seed file into Documents. JSON is read with the YAML parser."""
    path = Path(path)
    if path.suffix.lower() not in SEED_SUFFIXES:
        raise SeedError(f"Unsupported seed file type: {path.suffix or path.name}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SeedError(f"Seed file {path} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise SeedError(f"Invalid seed file {path}: {e}") from e

    docs = []
    for i, raw in enumerate(_records(data)):
        try:
            docs.append(Document.model_validate(raw))
        except ValidationError as e:
            raise SeedError(f"Invalid document at index {i} in {path}: {e}") from e
    return docs


def seed_store(store: DocumentRepo, path: Path) -> list[Document]:
    """Save every document from the seed file into store; return the saved documents."""
    saved = [store.save(doc) for doc in load_seed(path)]
    logger.info("Seeded %d document(s) from %s", len(saved), path)
    return saved
