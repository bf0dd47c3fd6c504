# heatexchange/storage.py
# -*- coding: utf-8 -*-
"""Saved calculations: file-backed store and the service that fills it.

Each run is one JSON file ``calc_<id>.json`` holding the input record, the
solver result and bookkeeping fields (name, description, creation time).
"""
from __future__ import annotations

import json
import logging
import os
import re
import tempfile
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from .errors import CalculationNotFoundError, SchemaError
from .export import csv_filename, profile_to_csv
from .params import CalculationInput
from .schemas import CalculationModel, dump_record, input_from_model, input_to_dict, validate_record
from .solver import ProfileResult, solve

logger = logging.getLogger(__name__)

DEFAULT_STORE_DIR = Path("calculations")
STORE_ENV_VAR = "HEATEXCHANGE_STORE"
RECENT_LIMIT = 30

_FILE_RE = re.compile(r"^calc_(\d+)\.json$")


@dataclass(frozen=True)
class Calculation:
    id: int
    name: str
    description: str | None
    created_at: datetime
    input: CalculationInput
    result: ProfileResult

    def to_dict(self) -> dict:
        values = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at,
            "input": input_to_dict(self.input),
            "result": self.result.to_dict(),
        }
        return dump_record(CalculationModel, values, "запись расчёта")

    @classmethod
    def from_dict(cls, data: Any) -> "Calculation":
        record = validate_record(CalculationModel, data, "запись расчёта")
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            created_at=record.created_at,
            input=input_from_model(record.input),
            result=ProfileResult.from_model(record.result),
        )


def default_store_dir() -> Path:
    return Path(os.environ.get(STORE_ENV_VAR, DEFAULT_STORE_DIR))


class CalculationStore:
    """JSON-per-record store keyed by integer id."""

    def __init__(self, root: Path | str | None = None):
        self.root = Path(root) if root is not None else default_store_dir()
        self.root.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _path(self, calc_id: int) -> Path:
        return self.root / f"calc_{int(calc_id)}.json"

    def ids(self) -> list[int]:
        out = []
        for p in self.root.iterdir():
            match = _FILE_RE.match(p.name)
            if match:
                out.append(int(match.group(1)))
        return sorted(out)

    def _write(self, path: Path, payload: dict) -> None:
        fd, tmp = tempfile.mkstemp(dir=self.root, prefix=".tmp_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def add(
        self,
        name: str,
        description: str | None,
        created_at: datetime,
        calc_input: CalculationInput,
        result: ProfileResult,
    ) -> Calculation:
        with self._lock:
            ids = self.ids()
            calc_id = (ids[-1] + 1) if ids else 1
            calc = Calculation(calc_id, name, description, created_at, calc_input, result)
            self._write(self._path(calc_id), calc.to_dict())
        logger.info("Сохранён расчёт id=%d «%s»", calc_id, name)
        return calc

    def get(self, calc_id: int) -> Calculation:
        path = self._path(calc_id)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise CalculationNotFoundError(calc_id) from None
        except ValueError as exc:
            # JSONDecodeError и UnicodeDecodeError
            raise SchemaError(f"{path.name}: файл не читается как JSON ({exc})") from exc
        return Calculation.from_dict(data)

    def list_recent(self, limit: int = RECENT_LIMIT) -> list[Calculation]:
        """Последние расчёты, новые первыми. Повреждённые и удалённые за время чтения записи пропускаются."""
        calcs = []
        for calc_id in self.ids():
            try:
                calcs.append(self.get(calc_id))
            except CalculationNotFoundError:
                logger.debug("Расчёт id=%d удалён во время чтения списка", calc_id)
            except SchemaError as exc:
                logger.warning("Пропущена повреждённая запись id=%d: %s", calc_id, exc)
        calcs.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return calcs[:limit]

    def delete(self, calc_id: int) -> None:
        with self._lock:
            try:
                self._path(calc_id).unlink()
            except FileNotFoundError:
                raise CalculationNotFoundError(calc_id) from None
        logger.info("Удалён расчёт id=%d", calc_id)


class CalculationService:
    """Validate → solve → persist, plus retrieval and CSV export of saved runs."""

    def __init__(self, store: CalculationStore, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.clock = clock

    def default_name(self, now: datetime) -> str:
        return "Расчёт " + now.strftime("%d.%m.%Y %H:%M")

    def calculate(self, calc_input: CalculationInput) -> Calculation:
        result = solve(calc_input.parameters)
        now = self.clock()
        name = (calc_input.name or "").strip() or self.default_name(now)
        return self.store.add(name, calc_input.description, now, calc_input, result)

    def get(self, calc_id: int) -> Calculation:
        return self.store.get(calc_id)

    def list_recent(self, limit: int = RECENT_LIMIT) -> list[Calculation]:
        return self.store.list_recent(limit)

    def delete(self, calc_id: int) -> None:
        self.store.delete(calc_id)

    def export_csv(self, calc_id: int) -> tuple[str, bytes]:
        calc = self.store.get(calc_id)
        return csv_filename(calc.name), profile_to_csv(calc.result).encode("utf-8")
