# -*- coding: utf-8 -*-
from __future__ import annotations

import matplotlib.pyplot as plt

from heatexchange.params import default_parameters
from heatexchange.solver import solve
from heatexchange.visualization import plot_profile, profile_table, render_profile_ru, summary_lines


def test_render_profile_writes_files(tmp_path, reference_params):
    paths = render_profile_ru(solve(reference_params), tmp_path / "out", title="Тест", dpi=50)
    assert set(paths) == {"profile", "delta", "report"}
    for path in paths.values():
        assert path.is_file()
        assert path.stat().st_size > 0
    report = paths["report"].read_text(encoding="utf-8")
    assert "Тест" in report
    assert "60.000 кВт" in report


def test_plot_profile_draws_two_curves(reference_params):
    fig, ax = plt.subplots()
    plot_profile(ax, solve(reference_params))
    assert len(ax.get_lines()) == 2
    plt.close(fig)


def test_summary_flags_singular_and_non_finite(ratio_params):
    assert any("m = 1" in line for line in summary_lines(solve(ratio_params(1.0))))
    bad = solve(ratio_params(2.0, volumetric_heat_transfer_coeff=1e6, height=1.0))
    assert any("ВНИМАНИЕ" in line for line in summary_lines(bad))


def test_profile_table_rows():
    res = solve(default_parameters(calculation_steps=8))
    table = profile_table(res, rows=5)
    assert len(table) == 2 + 5
    assert table[2].split()[0] == "0.000"
    assert table[-1].split()[0] == "2.000"
