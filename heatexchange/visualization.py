# heatexchange/visualization.py
# -*- coding: utf-8 -*-
import matplotlib.pyplot as plt
from pathlib import Path

from .solver import ProfileResult


# Общие размеры шрифтов для экспорта
RC = {
    "font.size": 12,
    "axes.titlesize": 16,
    "axes.labelsize": 13,
    "legend.fontsize": 11,
    "xtick.labelsize": 11,
    "ytick.labelsize": 11,
}


def plot_profile(ax, result: ProfileResult, lw: float = 2.0):
    """Температуры материала и газа по высоте слоя (высота по вертикали)."""
    ax.plot(result.material_temperatures, result.heights, 'r-', lw=lw, label='Материал (↓)')
    ax.plot(result.gas_temperatures, result.heights, 'b-', lw=lw, label='Газ (↑)')
    ax.set_xlabel('T (°C)')
    ax.set_ylabel('Высота (м)')
    ax.set_title('Профиль температур')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')


def plot_delta(ax, result: ProfileResult, lw: float = 2.0):
    ax.plot(result.temperature_differences, result.heights, 'k-', lw=lw)
    ax.set_xlabel('ΔT (°C)')
    ax.set_ylabel('Высота (м)')
    ax.set_title('Разность температур')
    ax.grid(True, alpha=0.3)


def summary_lines(result: ProfileResult) -> list[str]:
    lines = [
        f"  Тепловой поток Q:          {result.total_heat_transfer:.3f} кВт",
        f"  Эффективность:             {result.efficiency:.2f} %",
        f"  T материала на выходе:     {result.material_outlet_temp:.1f} °C",
        f"  T газа на выходе:          {result.gas_outlet_temp:.1f} °C",
        f"  α_v:                       {result.volumetric_heat_transfer_coefficient:.1f} Вт/(м³·°C)",
        f"  Cm / Cg:                   {result.material_capacity_rate:.2f} / {result.gas_capacity_rate:.2f} Вт/(м²·°C)",
        f"  m = Cm/Cg:                 {result.capacity_ratio:.4f}" + ("  (особый случай m = 1)" if result.singular else ""),
    ]
    if not result.is_finite:
        lines.append("  ВНИМАНИЕ: профиль содержит inf/NaN (знаменатель близок к нулю)")
    return lines


def profile_table(result: ProfileResult, rows: int = 5) -> list[str]:
    """Выборочные строки профиля (низ, четверти, верх)."""
    n = len(result.heights)
    out = [f"{'y, м':>8} {'T мат, °C':>10} {'T газ, °C':>10} {'ΔT, °C':>8}", "-" * 40]
    idxs = sorted({int(round(k * (n - 1) / (rows - 1))) for k in range(rows)}) if rows > 1 else [0]
    for i in idxs:
        out.append(
            f"{result.heights[i]:>8.3f} {result.material_temperatures[i]:>10.1f} "
            f"{result.gas_temperatures[i]:>10.1f} {result.temperature_differences[i]:>8.1f}"
        )
    return out


def render_profile_ru(result: ProfileResult, outdir: Path, title: str = None, dpi: int = 200):
    """Экспорт графиков профиля и текстового отчёта в папку."""
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    with plt.rc_context(RC):
        # 1) ПРОФИЛЬ ТЕМПЕРАТУР
        fig, ax = plt.subplots(figsize=(8, 7), constrained_layout=True)
        plot_profile(ax, result)
        if title:
            fig.suptitle(title)
        fig.savefig(outdir / 'temperature_profile.png', dpi=dpi)
        plt.close(fig)

        # 2) РАЗНОСТЬ ТЕМПЕРАТУР
        fig, ax = plt.subplots(figsize=(8, 7), constrained_layout=True)
        plot_delta(ax, result)
        fig.savefig(outdir / 'delta_t.png', dpi=dpi)
        plt.close(fig)

    # 3) Текстовый отчёт
    with open(outdir / 'results.txt', 'w', encoding='utf-8') as f:
        f.write("=" * 60 + "\n")
        f.write("РЕЗУЛЬТАТЫ РАСЧЁТА ТЕПЛООБМЕННИКА\n")
        if title:
            f.write(f"{title}\n")
        f.write("=" * 60 + "\n\n")
        f.write("Итоговые показатели:\n")
        f.write("\n".join(summary_lines(result)) + "\n\n")
        f.write(f"Профиль по высоте (N = {result.steps}, выборочные точки):\n")
        f.write("\n".join(profile_table(result)) + "\n")

    return {
        "profile": outdir / 'temperature_profile.png',
        "delta": outdir / 'delta_t.png',
        "report": outdir / 'results.txt',
    }
