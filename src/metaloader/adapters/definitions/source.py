"""File-system definition source.

Definition documents live in ``<root>/<module>/views/*.json`` and are yielded
in file-name order. ``module.json`` (manifest) and ``models.json`` (model
catalog) are optional siblings of the ``views`` directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from metaloader.domain.loader.errors import DefinitionParseError
from metaloader.domain.model import Module

from .schema import DefinitionDocument, ModelCatalog, ModuleManifest
from .translator import translate_catalog, translate_document, translate_manifest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from metaloader.domain.definitions import DefinitionBatch
    from metaloader.domain.ports import ModelInfo

log = logging.getLogger(__name__)

VIEWS_DIRECTORY = "views"
MANIFEST_FILE = "module.json"
CATALOG_FILE = "models.json"


def _parse[TSchema: BaseModel](path: Path, schema: type[TSchema]) -> TSchema:
    try:
        return schema.model_validate_json(path.read_bytes())
    except OSError as exc:
        raise DefinitionParseError(str(path), f"unreadable: {exc}") from exc
    except ValidationError as exc:
        raise DefinitionParseError(str(path), str(exc)) from exc


@dataclass(slots=True)
class FileDefinitionSource:
    root: Path

    def module_dir(self, module: Module | str) -> Path:
        name = module if isinstance(module, str) else module.name
        return self.root / name

    def files(self, module: Module) -> list[Path]:
        views_dir = self.module_dir(module) / VIEWS_DIRECTORY
        if not views_dir.is_dir():
            log.warning("No definition directory for module %s: %s", module.name, views_dir)
            return []
        return sorted(path for path in views_dir.glob("*.json") if path.is_file())

    def batches(self, module: Module) -> Iterator[DefinitionBatch]:
        for path in self.files(module):
            document = _parse(path, DefinitionDocument)
            yield translate_document(document, source=str(path))

    def module(self, name: str) -> Module:
        """Describe module ``name``, reading its manifest when there is one."""

        manifest_path = self.module_dir(name) / MANIFEST_FILE
        if not manifest_path.is_file():
            return Module(name=name)
        manifest = _parse(manifest_path, ModuleManifest)
        module = translate_manifest(manifest, default_name=name)
        if module.name != name:
            log.warning(
                "Manifest %s names module %r; using directory name %r",
                manifest_path,
                module.name,
                name,
            )
            module = Module(name=name, depends=module.depends, title=module.title)
        return module

    def discover_modules(self) -> list[Module]:
        """Every module directory under ``root``, in name order."""

        if not self.root.is_dir():
            return []
        return [
            self.module(path.name)
            for path in sorted(self.root.iterdir())
            if path.is_dir()
            and ((path / VIEWS_DIRECTORY).is_dir() or (path / MANIFEST_FILE).is_file())
        ]

    def models(self, module: Module | str) -> list[ModelInfo]:
        """Model catalog shipped by ``module``; empty when it ships none."""

        name = module if isinstance(module, str) else module.name
        catalog_path = self.module_dir(name) / CATALOG_FILE
        if not catalog_path.is_file():
            return []
        return translate_catalog(_parse(catalog_path, ModelCatalog), module=name)
