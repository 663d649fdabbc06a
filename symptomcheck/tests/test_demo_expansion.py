import asyncio
import json

import httpx

from symptomcheck.api.schemas.catalog import ConditionRecord
from symptomcheck.api.services.catalog_sources import DemoSource, expand_seed


def seed_records(count: int = 8):
    return [
        ConditionRecord(
            name=f"Seed {i}",
            description=f"Description {i}",
            symptoms=[f"symptom {i}", "fever"],
            precautions=[f"precaution {i}"],
            medications=[f"medication {i}"],
        )
        for i in range(count)
    ]


def test_expands_eight_seeds_to_five_hundred():
    seed = seed_records()
    expanded = expand_seed(seed, 500)

    assert len(expanded) == 500
    names = [record.name for record in expanded]
    assert len(set(names)) == 500
    assert names[:8] == [record.name for record in seed]
    assert names[8:16] == [f"{record.name} #2" for record in seed]
    assert names[-1] == "Seed 3 #63"

    for index, clone in enumerate(expanded):
        original = seed[index % len(seed)]
        assert clone.description == original.description
        assert clone.symptoms == original.symptoms
        assert clone.precautions == original.precautions
        assert clone.medications == original.medications


def test_target_smaller_than_seed_truncates():
    expanded = expand_seed(seed_records(), 3)
    assert [record.name for record in expanded] == ["Seed 0", "Seed 1", "Seed 2"]


def test_empty_seed_expands_to_nothing():
    assert expand_seed([], 500) == []


def test_demo_source_reads_seed_file(tmp_path):
    seed_file = tmp_path / "disease.json"
    seed_file.write_text(
        json.dumps([record.model_dump() for record in seed_records(4)]),
        encoding="utf-8",
    )
    result = asyncio.run(DemoSource(str(seed_file), 10).attempt())
    assert result.ok
    assert len(result.catalog) == 10
    assert "Seed 1 #3" in result.catalog


def test_demo_source_fetches_seed_over_http():
    payload = [record.model_dump() for record in seed_records(2)]

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/disease.json"
        return httpx.Response(200, json=payload)

    source = DemoSource("http://seed.test/disease.json", 5, transport=httpx.MockTransport(handler))
    result = asyncio.run(source.attempt())
    assert result.ok
    assert list(result.catalog) == ["Seed 0", "Seed 1", "Seed 0 #2", "Seed 1 #2", "Seed 0 #3"]


def test_demo_source_failures_become_reasons(tmp_path):
    missing = asyncio.run(DemoSource(str(tmp_path / "missing.json"), 10).attempt())
    assert not missing.ok and "not found" in missing.reason

    empty_file = tmp_path / "empty.json"
    empty_file.write_text("[]", encoding="utf-8")
    empty = asyncio.run(DemoSource(str(empty_file), 10).attempt())
    assert not empty.ok and empty.reason == "no usable records"

    broken_file = tmp_path / "broken.json"
    broken_file.write_text("{not json", encoding="utf-8")
    broken = asyncio.run(DemoSource(str(broken_file), 10).attempt())
    assert not broken.ok and broken.reason.startswith("unreadable data")


def test_duplicate_seed_names_still_fill_the_target():
    seed = [
        ConditionRecord(name="Flu", symptoms=["fever"]),
        ConditionRecord(name="Flu", symptoms=["fever", "cough"]),
        ConditionRecord(name="Cold", symptoms=["sneezing"]),
    ]
    expanded = expand_seed(seed, 10)

    names = [record.name for record in expanded]
    assert len(names) == 10
    assert len(set(names)) == 10
    assert names[:4] == ["Flu", "Cold", "Flu #2", "Cold #2"]
    assert expanded[0].symptoms == ["fever", "cough"]


def test_clones_do_not_share_lists_with_their_seed():
    seed = seed_records(2)
    expanded = expand_seed(seed, 4)

    for clone in expanded:
        original = seed[0] if clone.name.startswith("Seed 0") else seed[1]
        assert clone.symptoms == original.symptoms
        assert clone.symptoms is not original.symptoms
        assert clone.precautions is not original.precautions
        assert clone.medications is not original.medications
    assert expanded[0].symptoms is not expanded[2].symptoms
