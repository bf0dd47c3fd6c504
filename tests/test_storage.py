# -*- coding: utf-8 -*-
from __future__ import annotations

import json
import logging
import threading
from datetime import datetime

import numpy as np
import pytest

from heatexchange.errors import CalculationNotFoundError, InvalidParameterError, SchemaError
from heatexchange.export import profile_to_csv
from heatexchange.params import CalculationInput, default_input, default_parameters
from heatexchange.storage import (
    STORE_ENV_VAR,
    Calculation,
    CalculationService,
    CalculationStore,
    default_store_dir,
)


def small_input(name=None, description=None, **overrides):
    overrides.setdefault("calculation_steps", 4)
    return CalculationInput(name=name, description=description, parameters=default_parameters(**overrides))


def test_calculate_persists_and_reads_back(service):
    calc = service.calculate(small_input("Опыт", "первый прогон"))
    assert calc.id == 1
    assert calc.name == "Опыт"
    assert calc.description == "первый прогон"
    assert calc.created_at == datetime(2024, 5, 1, 14, 30)

    again = service.get(calc.id)
    assert again.name == calc.name
    assert again.input == calc.input
    np.testing.assert_array_equal(again.result.material_temperatures, calc.result.material_temperatures)
    assert again.result.total_heat_transfer == pytest.approx(60.0)


def test_default_name_from_clock(service):
    calc = service.calculate(small_input())
    assert calc.name == "Расчёт 01.05.2024 14:30"


def test_blank_name_replaced_and_name_stripped(service):
    assert service.calculate(small_input("   ")).name == "Расчёт 01.05.2024 14:30"
    assert service.calculate(small_input("  Сушка  ")).name == "Сушка"


def test_invalid_input_stores_nothing(service):
    with pytest.raises(InvalidParameterError):
        service.calculate(small_input(height=0.0))
    assert service.list_recent() == []
    assert service.store.ids() == []


def test_ids_increase(service):
    ids = [service.calculate(small_input(f"r{k}")).id for k in range(3)]
    assert ids == [1, 2, 3]


def test_list_recent_newest_first_and_limited(service):
    for k in range(5):
        service.calculate(small_input(f"r{k}"))
    recent = service.list_recent()
    assert [c.name for c in recent] == ["r4", "r3", "r2", "r1", "r0"]
    assert [c.name for c in service.list_recent(limit=2)] == ["r4", "r3"]


def test_list_recent_ties_broken_by_id(tmp_path):
    same_time = datetime(2024, 1, 1, 12, 0)
    svc = CalculationService(CalculationStore(tmp_path), clock=lambda: same_time)
    for k in range(3):
        svc.calculate(small_input(f"r{k}"))
    assert [c.id for c in svc.list_recent()] == [3, 2, 1]


def test_delete(service):
    a = service.calculate(small_input("a"))
    b = service.calculate(small_input("b"))
    service.delete(a.id)
    assert [c.id for c in service.list_recent()] == [b.id]
    with pytest.raises(CalculationNotFoundError):
        service.get(a.id)
    with pytest.raises(CalculationNotFoundError):
        service.delete(a.id)


def test_missing_id_is_key_error(service):
    with pytest.raises(KeyError):
        service.get(42)
    with pytest.raises(CalculationNotFoundError) as exc:
        service.export_csv(42)
    assert exc.value.calc_id == 42


def test_export_csv(service):
    calc = service.calculate(small_input("Опыт 7"))
    filename, payload = service.export_csv(calc.id)
    assert filename == "Опыт_7.csv"
    assert payload == profile_to_csv(calc.result).encode("utf-8")
    assert payload.decode("utf-8").splitlines()[0].startswith("Высота (м);")


def test_record_file_layout(service):
    calc = service.calculate(small_input("Опыт"))
    path = service.store.root / f"calc_{calc.id}.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"id", "name", "description", "createdAt", "input", "result"}
    assert data["createdAt"] == "2024-05-01T14:30:00"
    assert data["input"]["parameters"]["calculationSteps"] == 4
    assert len(data["result"]["heights"]) == 5


def test_calculation_dict_round_trip(service):
    calc = service.calculate(default_input(calculation_steps=6))
    back = Calculation.from_dict(json.loads(json.dumps(calc.to_dict())))
    assert (back.id, back.name, back.created_at, back.input) == (calc.id, calc.name, calc.created_at, calc.input)
    np.testing.assert_array_equal(back.result.heights, calc.result.heights)


def test_corrupt_record_is_schema_error(service):
    calc = service.calculate(small_input())
    path = service.store.root / f"calc_{calc.id}.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    del data["createdAt"]
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(SchemaError):
        service.get(calc.id)


def test_store_ignores_foreign_files(tmp_path):
    store = CalculationStore(tmp_path)
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    (tmp_path / "calc_x.json").write_text("{}", encoding="utf-8")
    assert store.ids() == []


def test_concurrent_calculations_get_distinct_ids(tmp_path):
    svc = CalculationService(CalculationStore(tmp_path))
    errors = []

    def worker(k):
        try:
            svc.calculate(small_input(f"t{k}"))
        except Exception as exc:  # pragma: no cover
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(k,)) for k in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
    assert svc.store.ids() == list(range(1, 9))


def test_default_store_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(STORE_ENV_VAR, str(tmp_path / "elsewhere"))
    assert default_store_dir() == tmp_path / "elsewhere"
    store = CalculationStore()
    assert store.root == tmp_path / "elsewhere"
    assert store.root.is_dir()


def test_default_store_dir_fallback(monkeypatch):
    monkeypatch.delenv(STORE_ENV_VAR, raising=False)
    assert default_store_dir().name == "calculations"


def test_unreadable_json_is_schema_error(service):
    calc = service.calculate(small_input())
    (service.store.root / f"calc_{calc.id}.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaError):
        service.get(calc.id)


def test_list_recent_skips_corrupt_records(service, caplog):
    good = service.calculate(small_input("good"))
    (service.store.root / "calc_2.json").write_text("{not json", encoding="utf-8")
    bad_type = service.calculate(small_input("bad"))
    path = service.store.root / f"calc_{bad_type.id}.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    data["description"] = 5
    path.write_text(json.dumps(data), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="heatexchange.storage"):
        recent = service.list_recent()
    assert [c.id for c in recent] == [good.id]
    assert sum(r.levelno == logging.WARNING for r in caplog.records) == 2


def test_list_recent_skips_record_deleted_while_listing(service, monkeypatch):
    a = service.calculate(small_input("a"))
    b = service.calculate(small_input("b"))
    listed = service.store.ids()
    service.delete(a.id)
    monkeypatch.setattr(service.store, "ids", lambda: listed)
    assert [c.id for c in service.list_recent()] == [b.id]
