"""Helper functions to talk to the FastAPI backend."""
from __future__ import annotations

import os
from typing import Any, Dict, List

import httpx
from dotenv import load_dotenv

load_dotenv()

API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_BASE = os.getenv("SYMPTOMCHECK_API_BASE", f"http://{API_HOST}:{API_PORT}").rstrip("/")


async def _post(path: str, json_data: Dict[str, Any]) -> Dict[str, Any]:
    async with httpx.AsyncClient(timeout=60.0) as client:
        response = await client.post(f"{API_BASE}{path}", json=json_data)
        response.raise_for_status()
        return response.json()


async def _get(path: str, params: Dict[str, Any] | None = None) -> Any:
    async with httpx.AsyncClient(timeout=60.0) as client:
        response = await client.get(f"{API_BASE}{path}", params=params)
        response.raise_for_status()
        return response.json()


async def list_symptoms() -> List[str]:
    data = await _get("/symptoms")
    return data.get("symptoms", [])


async def catalog_status() -> Dict[str, Any]:
    return await _get("/catalog/status")


async def reload_catalog() -> Dict[str, Any]:
    return await _post("/catalog/reload", {})


async def predict(symptoms: List[str]) -> Dict[str, Any]:
    return await _post("/predict", {"symptoms": symptoms})
