# heatexchange/schemas.py
# -*- coding: utf-8 -*-
"""JSON-записи расчёта: входные данные, результат, сохранённый расчёт.

Pydantic-модели описывают формат на границе (файлы конфигурации, хранилище):
ключи в camelCase, лишние поля запрещены, строки и bool в числовых полях не
принимаются. Любое несоответствие поднимается как SchemaError.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Annotated, Any, List, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    StrictBool,
    StrictStr,
    ValidationError,
    field_serializer,
)
from pydantic.alias_generators import to_camel

from .errors import SchemaError
from .params import CalculationInput, Gas, Material, OperatingParameters

_DEFAULT_PARAMETERS = OperatingParameters()
_DEFAULT_MATERIAL = Material()
_DEFAULT_GAS = Gas()


def _reject_text_and_bool(value: Any) -> Any:
    # pydantic в нестрогом режиме превращает "2" и True в числа
    if isinstance(value, (str, bytes, bool)):
        raise ValueError(f"ожидается число, получено {value!r}")
    return value


Number = Annotated[float, BeforeValidator(_reject_text_and_bool)]
# 10.0 принимается как 10, 2.5 отклоняется
Integer = Annotated[int, BeforeValidator(_reject_text_and_bool)]


class RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class MaterialModel(RecordModel):
    name: Optional[StrictStr] = _DEFAULT_MATERIAL.name
    density: Number = _DEFAULT_MATERIAL.density
    specific_heat: Number = _DEFAULT_MATERIAL.specific_heat
    particle_size: Number = _DEFAULT_MATERIAL.particle_size
    porosity: Number = _DEFAULT_MATERIAL.porosity


class GasModel(RecordModel):
    name: Optional[StrictStr] = _DEFAULT_GAS.name
    density: Number = _DEFAULT_GAS.density
    specific_heat: Number = _DEFAULT_GAS.specific_heat
    viscosity: Number = _DEFAULT_GAS.viscosity
    thermal_conductivity: Number = _DEFAULT_GAS.thermal_conductivity


class ParametersModel(RecordModel):
    height: Number = _DEFAULT_PARAMETERS.height
    cross_section: Number = _DEFAULT_PARAMETERS.cross_section
    material_flow_rate: Number = _DEFAULT_PARAMETERS.material_flow_rate
    gas_flow_rate: Number = _DEFAULT_PARAMETERS.gas_flow_rate
    material_inlet_temp: Number = _DEFAULT_PARAMETERS.material_inlet_temp
    gas_inlet_temp: Number = _DEFAULT_PARAMETERS.gas_inlet_temp
    material_specific_heat: Number = _DEFAULT_PARAMETERS.material_specific_heat
    gas_specific_heat: Number = _DEFAULT_PARAMETERS.gas_specific_heat
    is_gas_heat_capacity_volumetric: StrictBool = _DEFAULT_PARAMETERS.is_gas_heat_capacity_volumetric
    volumetric_heat_transfer_coeff: Number = _DEFAULT_PARAMETERS.volumetric_heat_transfer_coeff
    calculation_steps: Integer = _DEFAULT_PARAMETERS.calculation_steps


class CalculationInputModel(RecordModel):
    """Входные данные; отсутствующие или null-разделы заменяются значениями по умолчанию."""
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    material: Optional[MaterialModel] = None
    gas: Optional[GasModel] = None
    parameters: Optional[ParametersModel] = None


class ProfileResultModel(RecordModel):
    volumetric_heat_transfer_coefficient: Number
    total_heat_transfer: Number
    efficiency: Number
    material_outlet_temp: Number
    gas_outlet_temp: Number
    heights: List[Number]
    material_temperatures: List[Number]
    gas_temperatures: List[Number]
    temperature_differences: List[Number]
    # не обязательны: записи без них читаются
    material_capacity_rate: Number = float("nan")
    gas_capacity_rate: Number = float("nan")
    capacity_ratio: Number = float("nan")
    singular: StrictBool = False


class CalculationModel(RecordModel):
    id: Integer
    name: StrictStr
    description: Optional[StrictStr] = None
    created_at: datetime
    input: CalculationInputModel
    result: ProfileResultModel

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return value.isoformat()


M = TypeVar("M", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"'{loc}': {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def validate_record(model: Type[M], data: Any, where: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise SchemaError(f"{where}: {_describe(exc)}") from exc


def dump_record(model: Type[BaseModel], values: dict, where: str) -> dict:
    """Проверить значения по модели и вернуть словарь с ключами в camelCase."""
    return validate_record(model, values, where).model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Преобразования запись <-> dataclass
# ---------------------------------------------------------------------------

def input_from_model(record: CalculationInputModel) -> CalculationInput:
    return CalculationInput(
        name=record.name,
        description=record.description,
        material=Material(**record.material.model_dump()) if record.material is not None else Material(),
        gas=Gas(**record.gas.model_dump()) if record.gas is not None else Gas(),
        parameters=(
            OperatingParameters(**record.parameters.model_dump())
            if record.parameters is not None else OperatingParameters()
        ),
    )


def parameters_from_dict(data: Any) -> OperatingParameters:
    if data is None:
        return OperatingParameters()
    return OperatingParameters(**validate_record(ParametersModel, data, "parameters").model_dump())


def parameters_to_dict(params: OperatingParameters) -> dict:
    return dump_record(ParametersModel, dataclasses.asdict(params), "parameters")


def input_from_dict(data: Any) -> CalculationInput:
    return input_from_model(validate_record(CalculationInputModel, data, "входные данные"))


def input_to_dict(calc_input: CalculationInput) -> dict:
    return dump_record(CalculationInputModel, dataclasses.asdict(calc_input), "входные данные")
