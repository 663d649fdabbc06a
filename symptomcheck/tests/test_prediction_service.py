import asyncio
import json

import httpx

from symptomcheck.api.clients.remote import RemoteCatalogClient
from symptomcheck.api.models.catalog import PredictionState
from symptomcheck.api.repositories.catalog_store import CatalogStore
from symptomcheck.api.schemas.catalog import ConditionRecord
from symptomcheck.api.services.prediction_service import PredictionService


def loaded_store() -> CatalogStore:
    store = CatalogStore()
    store.replace(
        {
            "Flu": ConditionRecord(name="Flu", symptoms=["fever", "cough", "fatigue"], precautions=["rest"]),
            "Cold": ConditionRecord(name="Cold", symptoms=["cough", "sneezing"]),
        },
        "bundled",
    )
    return store


def remote_client(handler) -> RemoteCatalogClient:
    return RemoteCatalogClient(base_url="http://remote.test", transport=httpx.MockTransport(handler))


def test_local_prediction_ranks_catalog():
    outcome = asyncio.run(PredictionService(loaded_store()).predict(["fever", "cough"]))
    assert outcome.engine == "local"
    assert outcome.state is PredictionState.OK
    assert [p.disease for p in outcome.predictions] == ["Flu", "Cold"]
    assert outcome.predictions[0].precautions == ["rest"]


def test_no_matches_is_distinct_from_no_data():
    matches = asyncio.run(PredictionService(loaded_store()).predict(["itching"]))
    assert matches.state is PredictionState.NO_MATCHES

    empty = asyncio.run(PredictionService(CatalogStore()).predict(["itching"]))
    assert empty.state is PredictionState.NO_DATA


def test_remote_prediction_is_used_when_available():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"predictions": [{"disease": "Remote Flu", "match_percentage": 80.0, "description": "from server"}]},
        )

    service = PredictionService(loaded_store(), remote=remote_client(handler))
    outcome = asyncio.run(service.predict(["fever", "fever", "cough"]))

    assert seen == {"path": "/predict", "body": {"symptoms": ["fever", "cough"]}}
    assert outcome.engine == "remote"
    assert outcome.state is PredictionState.OK
    assert outcome.predictions[0].disease == "Remote Flu"
    assert outcome.predictions[0].medications == []


def test_remote_failures_fall_back_to_local_engine():
    def refuse(request):
        raise httpx.ReadTimeout("timed out", request=request)

    handlers = [
        lambda request: httpx.Response(503),
        lambda request: httpx.Response(200, json={"unexpected": True}),
        refuse,
    ]
    for handler in handlers:
        service = PredictionService(loaded_store(), remote=remote_client(handler))
        outcome = asyncio.run(service.predict(["sneezing"]))
        assert outcome.engine == "local"
        assert [p.disease for p in outcome.predictions] == ["Cold"]
        assert outcome.warnings and outcome.warnings[0].startswith("remote prediction unavailable")
