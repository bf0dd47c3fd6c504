# -*- coding: utf-8 -*-
from __future__ import annotations

import numpy as np
import pytest

from heatexchange.errors import SchemaError
from heatexchange.export import (
    CSV_HEADER,
    csv_filename,
    parse_profile_csv,
    profile_to_csv,
    safe_csv_filename,
    write_profile_csv,
)
from heatexchange.solver import solve


def test_header_and_row_count(reference_params):
    text = profile_to_csv(solve(reference_params))
    lines = text.splitlines()
    assert lines[0] == "Высота (м);T материала (°C);T газа (°C);ΔT (°C)"
    assert lines[0] == CSV_HEADER
    assert len(lines) == 1 + 5
    assert text.endswith("\n")


def test_row_format(reference_params):
    lines = profile_to_csv(solve(reference_params)).splitlines()
    assert lines[1] == "0.000;20.0;20.0;0.0"
    assert lines[-1] == "2.000;51.3;46.1;5.2"
    for line in lines[1:]:
        y, t_mat, t_gas, dT = line.split(";")
        assert len(y.split(".")[1]) == 3
        for value in (t_mat, t_gas, dT):
            assert len(value.split(".")[1]) == 1


def test_parse_recovers_profile_at_export_precision(reference_params):
    res = solve(reference_params)
    table = parse_profile_csv(profile_to_csv(res))
    np.testing.assert_allclose(table["heights"], res.heights, atol=5e-4)
    np.testing.assert_allclose(table["material_temperatures"], res.material_temperatures, atol=0.05)
    np.testing.assert_allclose(table["gas_temperatures"], res.gas_temperatures, atol=0.05)
    np.testing.assert_allclose(table["temperature_differences"], res.temperature_differences, atol=0.05)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Высота;T;T;dT\n0.000;1.0;2.0;1.0\n",
        CSV_HEADER + "\n0.000;1.0;2.0\n",
        CSV_HEADER + "\n0.000;abc;2.0;1.0\n",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(SchemaError):
        parse_profile_csv(text)


def test_csv_filename_replaces_spaces():
    assert csv_filename("Расчёт 01.05.2024 14:30") == "Расчёт_01.05.2024_14:30.csv"
    assert csv_filename("run") == "run.csv"


def test_write_profile_csv(tmp_path, reference_params):
    res = solve(reference_params)
    path = tmp_path / "profile.csv"
    write_profile_csv(res, path)
    assert path.read_text(encoding="utf-8") == profile_to_csv(res)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Опыт 1/2", "Опыт_1_2.csv"),
        ("a\\b", "a_b.csv"),
        ("../../etc/passwd", "_.._etc_passwd.csv"),
        ("Расчёт 01.05.2024 14:30", "Расчёт_01.05.2024_14_30.csv"),
        ('x<>:"|?*y', "x_______y.csv"),
        ("...", "profile.csv"),
        ("", "profile.csv"),
    ],
)
def test_safe_csv_filename(name, expected):
    assert safe_csv_filename(name) == expected


def test_safe_csv_filename_stays_in_directory(tmp_path, reference_params):
    path = tmp_path / safe_csv_filename("../вне папки")
    write_profile_csv(solve(reference_params), path)
    assert path.parent == tmp_path
    assert [p.name for p in tmp_path.iterdir()] == [path.name]
