"""Shared fixtures: a small petstore schema on disk and in memory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

PETSTORE: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Petstore", "version": "1.0.3"},
    "host": "petstore.example.com",
    "basePath": "/api/",
    "definitions": {
        "Pet": {
            "type": "object",
            "required": ["name"],
            "properties": {
                "id": {"type": "integer", "format": "int64"},
                "name": {"type": "string", "description": "Pet name"},
                "status": {"type": "string", "enum": ["available", "sold"]},
                "tags": {"type": "array", "items": {"$ref": "#/definitions/Tag"}},
            },
        },
        "Tag": {
            "type": "object",
            "properties": {"id": {"type": "integer"}, "label": {"type": "string"}},
        },
        "Status": {"type": "string", "enum": ["on", "off"]},
    },
    "paths": {
        "/pets": {
            "get": {
                "tags": ["pet"],
                "operationId": "listPets",
                "summary": "List pets",
                "parameters": [
                    {"name": "limit", "in": "query", "type": "integer"},
                    {"name": "x-api-key", "in": "header", "type": "string"},
                ],
                "responses": {
                    "200": {
                        "description": "ok",
                        "schema": {"type": "array", "items": {"$ref": "#/definitions/Pet"}},
                    },
                },
            },
            "post": {
                "tags": ["pet"],
                "operationId": "addPet",
                "parameters": [
                    {"name": "body", "in": "body", "required": True,
                     "schema": {"$ref": "#/definitions/Pet"}},
                ],
                "responses": {"201": {"description": "created"}},
            },
        },
        "/pets/{petId}": {
            "parameters": [
                {"name": "petId", "in": "path", "required": True, "type": "integer"},
            ],
            "get": {
                "tags": ["pet"],
                "operationId": "getPet",
                "responses": {"200": {"description": "ok", "schema": {"$ref": "#/definitions/Pet"}}},
            },
            "delete": {
                "tags": ["pet"],
                "operationId": "deletePet",
                "responses": {"204": {"description": "gone"}},
            },
        },
        "/store/status": {
            "get": {
                "responses": {
                    "200": {"description": "ok", "schema": {"type": "string", "enum": ["up", "down"]}},
                },
            },
        },
    },
}


@pytest.fixture
def petstore() -> dict[str, Any]:
    """A fresh copy of the petstore schema."""
    return json.loads(json.dumps(PETSTORE))


@pytest.fixture
def petstore_file(tmp_path: Path, petstore: dict[str, Any]) -> Path:
    """The petstore schema written as compact JSON."""
    path = tmp_path / "api-docs.json"
    path.write_text(json.dumps(petstore, separators=(",", ":"), ensure_ascii=False), encoding="utf-8")
    return path
