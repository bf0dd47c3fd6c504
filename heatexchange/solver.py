# heatexchange/solver.py
# -*- coding: utf-8 -*-
"""Аналитический профиль температур в противоточном аппарате с движущимся слоем.

Материал движется сверху вниз, газ снизу вверх. Безразмерная высота
Y = y/H отсчитывается от низа слоя: индекс 0 — низ (выход материала),
индекс N — верх (вход материала, выход газа).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import DegenerateFlowError, SchemaError
from .params import OperatingParameters
from .schemas import ProfileResultModel, dump_record, validate_record

logger = logging.getLogger(__name__)

# Допуск для особого случая m = 1 (устранимая особенность общей формулы)
SINGULAR_TOL = 1e-6
# Порог, ниже которого знаменатель 1 - m·exp2 считается численным нулём
DENOM_EPS = 1e-12


def capacity_rates(params: OperatingParameters) -> tuple[float, float]:
    """Возвращает (Cm, Cg) — теплоёмкости потоков на единицу сечения, Вт/(м²·°C)."""
    S = np.float64(params.cross_section)
    Cm = (np.float64(params.material_flow_rate) / 3600.0) * params.material_specific_heat / S
    if params.is_gas_heat_capacity_volumetric:
        # C_g в кДж/(м³·°C) → Дж/(м³·°C); расход м³/ч → м³/с
        Cg_vol = np.float64(params.gas_specific_heat) * 1000.0
        volumetric_flow = np.float64(params.gas_flow_rate) / 3600.0
        Cg = Cg_vol * (volumetric_flow / S)
    else:
        Cg = (np.float64(params.gas_flow_rate) / 3600.0) * params.gas_specific_heat / S
    return Cm, Cg


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=np.float64)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class ProfileResult:
    volumetric_heat_transfer_coefficient: float  # α_v, Вт/(м³·°C)
    total_heat_transfer: float                   # Q, кВт
    efficiency: float                            # %
    material_outlet_temp: float                  # °C, низ слоя
    gas_outlet_temp: float                       # °C, верх слоя
    heights: np.ndarray
    material_temperatures: np.ndarray
    gas_temperatures: np.ndarray
    temperature_differences: np.ndarray
    material_capacity_rate: float = float("nan")
    gas_capacity_rate: float = float("nan")
    capacity_ratio: float = float("nan")
    singular: bool = False

    def __post_init__(self):
        for name in _SEQUENCE_FIELDS:
            object.__setattr__(self, name, _readonly(getattr(self, name)))
        n = {len(getattr(self, name)) for name in _SEQUENCE_FIELDS}
        if len(n) != 1:
            raise ValueError("profile sequences must have equal length")

    @property
    def steps(self) -> int:
        return len(self.heights) - 1

    @property
    def is_finite(self) -> bool:
        return all(bool(np.all(np.isfinite(getattr(self, name)))) for name in _SEQUENCE_FIELDS)

    def to_dict(self) -> dict:
        values = {name: getattr(self, name) for name in ProfileResultModel.model_fields}
        for name in _SEQUENCE_FIELDS:
            values[name] = values[name].tolist()
        return dump_record(ProfileResultModel, values, "результат")

    @classmethod
    def from_model(cls, record: ProfileResultModel) -> "ProfileResult":
        try:
            return cls(**record.model_dump())
        except ValueError as exc:
            raise SchemaError(f"результат: {exc}") from exc

    @classmethod
    def from_dict(cls, data: Any) -> "ProfileResult":
        return cls.from_model(validate_record(ProfileResultModel, data, "результат"))


_SEQUENCE_FIELDS = (
    "heights",
    "material_temperatures",
    "gas_temperatures",
    "temperature_differences",
)


def _profile_singular(Y: np.ndarray, params: OperatingParameters, Cm: float):
    dT_in = params.material_inlet_temp - params.gas_inlet_temp
    alpha_v, H = params.volumetric_heat_transfer_coeff, params.height
    exp_term = np.exp(-alpha_v * H * (1.0 - Y) / Cm)
    theta_mat = params.gas_inlet_temp + dT_in * Y * (1.0 - exp_term)
    theta_gas = theta_mat - dT_in * (1.0 - exp_term)
    return theta_mat, theta_gas


def _profile_general(Y: np.ndarray, params: OperatingParameters, Cm: float, m: float):
    dT_in = params.material_inlet_temp - params.gas_inlet_temp
    alpha_v, H = params.volumetric_heat_transfer_coeff, params.height
    exp1 = np.exp(-(1.0 - m) * alpha_v * H * Y / Cm)
    exp2 = np.exp(-(1.0 - m) * alpha_v * H / Cm)
    denom = 1.0 - m * exp2
    if not abs(denom) > DENOM_EPS:
        logger.warning("Знаменатель 1 - m·exp2 = %r близок к нулю (m=%.6g): профиль не определён", denom, m)
    A = dT_in * (1.0 - exp1) / denom
    theta_mat = params.gas_inlet_temp + A
    theta_gas = params.gas_inlet_temp + m * A
    return theta_mat, theta_gas


def solve(params: OperatingParameters) -> ProfileResult:
    """Рассчитать профиль температур материала и газа по высоте слоя.

    Raises InvalidParameterError for non-positive H, S, G_m, V_g, α_v or N < 1,
    and DegenerateFlowError when the gas capacity rate evaluates to zero.
    Numerical anomalies (overflow, vanishing denominator) are not errors: they
    propagate as ±inf/NaN in the returned arrays.
    """
    params.validate()
    steps = int(params.calculation_steps)

    with np.errstate(all="ignore"):
        Cm, Cg = capacity_rates(params)
        if Cg == 0.0:
            raise DegenerateFlowError("Теплоёмкость потока газа равна нулю (Cg = 0)")
        m = Cm / Cg

        Y = np.arange(steps + 1, dtype=np.float64) / steps  # 0: низ, 1: верх
        heights = Y * params.height

        singular = bool(abs(m - 1.0) < SINGULAR_TOL)
        if singular:
            theta_mat, theta_gas = _profile_singular(Y, params, Cm)
        else:
            theta_mat, theta_gas = _profile_general(Y, params, Cm, m)
        delta = np.abs(theta_mat - theta_gas)

        logger.debug(
            "Cm=%.6g Cg=%.6g m=%.6g ветвь=%s N=%d",
            Cm, Cg, m, "m=1" if singular else "общая", steps,
        )

        # Выход материала внизу (индекс 0), выход газа вверху (последний индекс)
        S = params.cross_section
        t_in = params.material_inlet_temp
        Q_kW = np.abs(Cm * S * (theta_mat[0] - t_in)) / 1000.0
        Cmin = min(Cm, Cg) * S
        if Cmin > 0:
            eff = Q_kW * 1000.0 / (Cmin * np.abs(np.float64(t_in) - params.gas_inlet_temp)) * 100.0
        else:
            eff = 0.0

    result = ProfileResult(
        volumetric_heat_transfer_coefficient=float(params.volumetric_heat_transfer_coeff),
        total_heat_transfer=float(Q_kW),
        efficiency=float(eff),
        material_outlet_temp=float(theta_mat[0]),
        gas_outlet_temp=float(theta_gas[-1]),
        heights=heights,
        material_temperatures=theta_mat,
        gas_temperatures=theta_gas,
        temperature_differences=delta,
        material_capacity_rate=float(Cm),
        gas_capacity_rate=float(Cg),
        capacity_ratio=float(m),
        singular=singular,
    )
    if not result.is_finite:
        logger.warning("Профиль содержит нечисловые значения (inf/NaN) при m=%.6g", m)
    return result
