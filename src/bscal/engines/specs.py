"""
bscal.engines.specs
-------------------
Pure-data engine specifications shipped with the package.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import BsDate, EngineId, EngineSpec, TableSpec
from ..reference import nepal


def table_spec(
    name: str,
    *,
    anchor_bs: BsDate,
    anchor_ad_iso: str,
    years,
    version: str = "1.0",
    family: str = "bs",
    **meta,
) -> TableSpec:
    return TableSpec(
        id=EngineId(family, name, version),
        anchor_bs=anchor_bs,
        anchor_ad_iso=anchor_ad_iso,
        years=years,
        meta=meta,
    )


NEPAL_TABLE = table_spec(
    "nepal",
    anchor_bs=nepal.ANCHOR_BS,
    anchor_ad_iso=nepal.ANCHOR_AD_ISO,
    years=nepal.BS_MONTH_DAYS,
    description="Bikram Sambat, BS 2000-2100",
)

NEPAL = EngineSpec(kind="indexed", id=NEPAL_TABLE.id, payload=NEPAL_TABLE)
NEPAL_WALK = NEPAL.with_kind("walking", name="nepal-walk")

SAMPLE_TABLE = table_spec(
    "sample",
    anchor_bs=nepal.SAMPLE_ANCHOR_BS,
    anchor_ad_iso=nepal.SAMPLE_ANCHOR_AD_ISO,
    years=nepal.SAMPLE_MONTH_DAYS,
    version="0.1",
    description="Demo table, BS 2080-2081",
)

SAMPLE = EngineSpec(kind="walking", id=SAMPLE_TABLE.id, payload=SAMPLE_TABLE)

ALL_SPECS: Dict[str, EngineSpec] = {
    "nepal": NEPAL,
    "nepal-walk": NEPAL_WALK,
    "sample": SAMPLE,
}
