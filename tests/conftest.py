# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import datetime

import matplotlib
matplotlib.use("Agg")

import pytest

from heatexchange.params import OperatingParameters, default_parameters
from heatexchange.storage import CalculationService, CalculationStore


@pytest.fixture
def reference_params() -> OperatingParameters:
    """H=2, S=1, G_m=3600, C_m=1000, C_g=1.2 кДж/(м³·°C), V_g=3600, α_v=500, t′=80, T′=20, N=4."""
    return default_parameters(calculation_steps=4)


@pytest.fixture
def ratio_params():
    """Фабрика: Cm = 1000 Вт/(м²·°C), массовая C_g подобрана так, чтобы Cm/Cg = m."""
    def make(m: float, **overrides) -> OperatingParameters:
        base = dict(
            height=2.0,
            cross_section=1.0,
            material_flow_rate=3600.0,
            gas_flow_rate=3600.0,
            material_inlet_temp=80.0,
            gas_inlet_temp=20.0,
            material_specific_heat=1000.0,
            gas_specific_heat=1000.0 / m,
            is_gas_heat_capacity_volumetric=False,
            volumetric_heat_transfer_coeff=500.0,
            calculation_steps=40,
        )
        base.update(overrides)
        return OperatingParameters(**base)
    return make


@pytest.fixture
def fixed_clock():
    """Часы, которые идут по минуте на каждый вызов, начиная с 01.05.2024 14:30."""
    times = iter([datetime(2024, 5, 1, 14, 30 + k) for k in range(20)])
    return lambda: next(times)


@pytest.fixture
def service(tmp_path, fixed_clock) -> CalculationService:
    return CalculationService(CalculationStore(tmp_path / "calcs"), clock=fixed_clock)
