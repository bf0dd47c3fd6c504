# heatexchange/params.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import numbers
from dataclasses import dataclass, field, fields, replace
from typing import Any

from .errors import InvalidParameterError, SchemaError

# Сообщение для пользователя при отказе в расчёте
INVALID_PARAMETERS_MESSAGE = "Проверьте значения: высота, площадь, расходы и α_v должны быть > 0"

DEFAULT_STEPS = 400


@dataclass(frozen=True)
class Material:
    """Descriptive properties of the falling solid (stored with the run, not used by the solver)."""
    name: str | None = None
    density: float = 0.0          # кг/м³
    specific_heat: float = 0.0    # Дж/(кг·°C)
    particle_size: float = 0.0    # мм
    porosity: float = 0.0


@dataclass(frozen=True)
class Gas:
    """Descriptive properties of the rising gas stream."""
    name: str | None = None
    density: float = 0.0               # кг/м³
    specific_heat: float = 0.0
    viscosity: float = 0.0             # Па·с
    thermal_conductivity: float = 0.0  # Вт/(м·°C)


@dataclass(frozen=True)
class OperatingParameters:
    """Режим работы аппарата (SI, кроме расходов в кг/ч или м³/ч)."""
    height: float = 2.0                        # H, м
    cross_section: float = 1.0                 # S, м²
    material_flow_rate: float = 3600.0         # G_m, кг/ч
    gas_flow_rate: float = 3600.0              # V_g, кг/ч или м³/ч
    material_inlet_temp: float = 80.0          # t′, °C (сверху)
    gas_inlet_temp: float = 20.0               # T′, °C (снизу)
    material_specific_heat: float = 1000.0     # C_m, Дж/(кг·°C)
    gas_specific_heat: float = 1.2             # C_g, кДж/(м³·°C) или Дж/(кг·°C)
    is_gas_heat_capacity_volumetric: bool = True
    volumetric_heat_transfer_coeff: float = 500.0  # α_v, Вт/(м³·°C)
    calculation_steps: int = DEFAULT_STEPS     # N

    def invalid_fields(self) -> tuple[str, ...]:
        bad = [
            name for name in _POSITIVE_FIELDS
            if not _is_positive(getattr(self, name))
        ]
        n = self.calculation_steps
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            bad.append("calculation_steps")
        return tuple(bad)

    def validate(self) -> "OperatingParameters":
        bad = self.invalid_fields()
        if bad:
            raise InvalidParameterError(INVALID_PARAMETERS_MESSAGE, fields=bad)
        return self

    def with_overrides(self, **overrides: Any) -> "OperatingParameters":
        unknown = set(overrides) - _PARAMETER_NAMES
        if unknown:
            raise SchemaError(f"Неизвестные параметры: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)


_POSITIVE_FIELDS = (
    "height",
    "cross_section",
    "material_flow_rate",
    "gas_flow_rate",
    "volumetric_heat_transfer_coeff",
)
_PARAMETER_NAMES = frozenset(f.name for f in fields(OperatingParameters))


def _is_positive(value: Any) -> bool:
    # NaN тоже отклоняется: сравнение с NaN всегда ложно
    try:
        return float(value) > 0.0
    except (TypeError, ValueError):
        return False


@dataclass(frozen=True)
class CalculationInput:
    name: str | None = None
    description: str | None = None
    material: Material = field(default_factory=Material)
    gas: Gas = field(default_factory=Gas)
    parameters: OperatingParameters = field(default_factory=OperatingParameters)


def default_material() -> Material:
    return Material()


def default_gas() -> Gas:
    return Gas()


def default_parameters(**overrides: Any) -> OperatingParameters:
    """Factory helper: the reference operating point with optional named overrides."""
    base = OperatingParameters()
    return base.with_overrides(**overrides) if overrides else base


def default_input(**overrides: Any) -> CalculationInput:
    return CalculationInput(parameters=default_parameters(**overrides))
