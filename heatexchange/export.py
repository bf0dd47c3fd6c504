# heatexchange/export.py
# -*- coding: utf-8 -*-
"""CSV export of the height profile (semicolon-separated, fixed precision)."""
from __future__ import annotations

import re

import numpy as np

from .errors import SchemaError
from .solver import ProfileResult

CSV_HEADER = "Высота (м);T материала (°C);T газа (°C);ΔT (°C)"
CSV_COLUMNS = ("heights", "material_temperatures", "gas_temperatures", "temperature_differences")

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def profile_to_csv(result: ProfileResult) -> str:
    lines = [CSV_HEADER]
    for y, t_mat, t_gas, dT in zip(
        result.heights,
        result.material_temperatures,
        result.gas_temperatures,
        result.temperature_differences,
    ):
        lines.append(f"{y:.3f};{t_mat:.1f};{t_gas:.1f};{dT:.1f}")
    return "\n".join(lines) + "\n"


def parse_profile_csv(text: str) -> dict[str, np.ndarray]:
    """Разобрать CSV обратно в четыре массива (с точностью экспорта)."""
    rows = [line for line in text.splitlines() if line.strip()]
    if not rows or rows[0].lstrip("﻿") != CSV_HEADER:
        raise SchemaError("CSV: неверный заголовок")
    values = []
    for lineno, line in enumerate(rows[1:], start=2):
        parts = line.split(";")
        if len(parts) != len(CSV_COLUMNS):
            raise SchemaError(f"CSV, строка {lineno}: ожидается {len(CSV_COLUMNS)} столбца")
        try:
            values.append([float(p) for p in parts])
        except ValueError as exc:
            raise SchemaError(f"CSV, строка {lineno}: {exc}") from exc
    table = np.asarray(values, dtype=float).reshape(-1, len(CSV_COLUMNS))
    return {name: table[:, j].copy() for j, name in enumerate(CSV_COLUMNS)}


def csv_filename(name: str) -> str:
    """Имя файла для скачивания: пробелы заменены на '_'."""
    return f"{name.replace(' ', '_')}.csv"


def safe_csv_filename(name: str, fallback: str = "profile") -> str:
    """Имя CSV-файла, пригодное для записи на диск (в том числе в Windows).

    Разделители путей и символы <>:"|?* заменяются на '_', точки и пробелы
    по краям убираются, поэтому результат не выходит за пределы папки.
    """
    stem = _UNSAFE_CHARS.sub("_", name.replace(" ", "_")).strip(". ")
    return f"{stem or fallback}.csv"


def write_profile_csv(result: ProfileResult, path) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(profile_to_csv(result))
