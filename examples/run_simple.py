# examples/run_simple.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path

from heatexchange.params import default_parameters
from heatexchange.solver import capacity_rates, solve
from heatexchange.export import write_profile_csv
from heatexchange.visualization import render_profile_ru


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def main() -> None:
    print("\n======================================================================")
    print("    ПРОТИВОТОЧНЫЙ ТЕПЛООБМЕННИК С ДВИЖУЩИМСЯ СЛОЕМ")
    print("======================================================================\n")

    # --- 1) Параметры ---------------------------------------------------------
    params = default_parameters()
    outdir = Path("results")
    _ensure_dir(outdir)

    print("Шаг 1: Параметры...")
    print("======================================================================")
    print("Геометрия:")
    print(f"  Высота слоя: {params.height:.3f} м | Площадь сечения: {params.cross_section:.3f} м²")
    print("Потоки:")
    print(f"  G_m={params.material_flow_rate:.1f} кг/ч | V_g={params.gas_flow_rate:.1f} "
          f"{'м³/ч' if params.is_gas_heat_capacity_volumetric else 'кг/ч'}")
    print(f"  t′={params.material_inlet_temp:.1f} °C (сверху) | T′={params.gas_inlet_temp:.1f} °C (снизу)")
    Cm, Cg = capacity_rates(params)
    print("Теплоёмкости потоков:")
    print(f"  Cm={Cm:.1f} | Cg={Cg:.1f} Вт/(м²·°C) | m={Cm / Cg:.4f}")
    print("======================================================================\n")

    # --- 2) Расчёт -------------------------------------------------------------
    print("Шаг 2: Аналитический расчёт профиля...")
    result = solve(params)
    print("======================================================================")
    print(f"Тепловой поток:          {result.total_heat_transfer:.2f} кВт")
    print(f"Эффективность:           {result.efficiency:.2f} %")
    print(f"T материала на выходе:   {result.material_outlet_temp:.1f} °C")
    print(f"T газа на выходе:        {result.gas_outlet_temp:.1f} °C")
    print("======================================================================\n")

    # --- 3) Постпроцесс -------------------------------------------------------
    print("Шаг 3: Визуализация и отчёт...")
    write_profile_csv(result, outdir / "profile.csv")
    render_profile_ru(result, outdir=outdir, title="Пример: параметры по умолчанию")
    print("Готово. Картинки, CSV и отчёт →", outdir)


if __name__ == "__main__":
    main()
