# heatexchange/errors.py
# -*- coding: utf-8 -*-
from __future__ import annotations


class HeatExchangeError(Exception):
    """Base class for errors raised by the heatexchange package."""


class InvalidParameterError(HeatExchangeError, ValueError):
    """Входные параметры не проходят проверку положительности."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = tuple(fields)


class DegenerateFlowError(HeatExchangeError, ZeroDivisionError):
    """Теплоёмкость потока газа равна нулю: отношение m = Cm/Cg не определено."""


class SchemaError(HeatExchangeError, ValueError):
    """Record does not match its fixed schema (unknown key, wrong type, bad header)."""


class CalculationNotFoundError(HeatExchangeError, KeyError):
    """No saved calculation with the requested id."""

    def __init__(self, calc_id: int):
        super().__init__(calc_id)
        self.calc_id = calc_id

    def __str__(self) -> str:
        return f"Расчёт не найден (id={self.calc_id})"
