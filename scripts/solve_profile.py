#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Command-line run of the moving-bed heat exchanger profile: JSON input → summary, CSV, plots."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from heatexchange.errors import HeatExchangeError, SchemaError
from heatexchange.export import safe_csv_filename, write_profile_csv
from heatexchange.params import CalculationInput, default_input
from heatexchange.schemas import input_from_dict
from heatexchange.solver import solve
from heatexchange.storage import CalculationService, CalculationStore
from heatexchange.visualization import profile_table, summary_lines


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Steady-state temperature profile of a counter-current moving-bed heat exchanger.')
    parser.add_argument('--input', type=Path, default=None, help='JSON file with the calculation input (name, material, gas, parameters).')
    parser.add_argument('--steps', type=int, default=None, help='Override the number of height steps N.')
    parser.add_argument('--out', type=Path, default=Path('results'), help='Output directory for CSV and plots.')
    parser.add_argument('--csv', action='store_true', help='Write the height profile as CSV.')
    parser.add_argument('--plots', action='store_true', help='Render temperature plots and the text report.')
    parser.add_argument('--store', type=Path, default=None, help='Save the run to this calculation store directory.')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging.')
    return parser.parse_args(argv)


def load_input(path: Path | None) -> CalculationInput:
    if path is None:
        return default_input()
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaError(f"{path}: некорректный JSON ({e})") from e
    return input_from_dict(data)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        calc_input = load_input(args.input)
        if args.steps is not None:
            calc_input = CalculationInput(
                name=calc_input.name,
                description=calc_input.description,
                material=calc_input.material,
                gas=calc_input.gas,
                parameters=calc_input.parameters.with_overrides(calculation_steps=args.steps),
            )

        if args.store is not None:
            calc = CalculationService(CalculationStore(args.store)).calculate(calc_input)
            name, result = calc.name, calc.result
            print(f"Расчёт сохранён: id={calc.id} ({args.store})")
        else:
            result = solve(calc_input.parameters)
            name = (calc_input.name or '').strip() or 'profile'
    except (HeatExchangeError, OSError) as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print(f"РАСЧЁТ: {name}")
    print("=" * 60)
    print("\n".join(summary_lines(result)))
    print()
    print("\n".join(profile_table(result)))

    if not (args.csv or args.plots):
        return 0
    try:
        args.out.mkdir(parents=True, exist_ok=True)
        if args.csv:
            csv_path = args.out / safe_csv_filename(name)
            write_profile_csv(result, csv_path)
            print(f"CSV → {csv_path}")
        if args.plots:
            from heatexchange.visualization import render_profile_ru
            render_profile_ru(result, args.out, title=name)
            print(f"Графики и отчёт → {args.out}")
    except OSError as e:
        print(f"Ошибка записи в {args.out}: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
