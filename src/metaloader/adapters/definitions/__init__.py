"""Public interface for the JSON definition file adapter."""

from __future__ import annotations

from .schema import DefinitionDocument, ModelCatalog, ModuleManifest
from .serializer import JsonDefinitionSerializer, definition_payload
from .source import FileDefinitionSource
from .translator import translate_document

__all__ = [
    "DefinitionDocument",
    "FileDefinitionSource",
    "JsonDefinitionSerializer",
    "ModelCatalog",
    "ModuleManifest",
    "definition_payload",
    "translate_document",
]
