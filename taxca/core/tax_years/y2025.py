from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from taxca.core._progressive import BracketTable, build_table
from taxca.core.jurisdictions import Jurisdiction as J

D = Decimal

TAX_YEAR = 2025

# Federal lowest rate drops to 14% on July 1st; 14.5% is the blended rate for the year.
FEDERAL_2025 = build_table(
    J.CA,
    TAX_YEAR,
    [
        (D("0"),       D("57375"),  D("0.145")),
        (D("57375"),   D("114750"), D("0.205")),
        (D("114750"),  D("177882"), D("0.26")),
        (D("177882"),  D("253414"), D("0.29")),
        (D("253414"),  None,        D("0.33")),
    ],
    base_credit=D("16129"),
    base_credit_rate=D("0.145"),
)

AB_2025 = build_table(
    J.AB,
    TAX_YEAR,
    [
        (D("0"),       D("60000"),  D("0.08")),
        (D("60000"),   D("151234"), D("0.10")),
        (D("151234"),  D("181481"), D("0.12")),
        (D("181481"),  D("241974"), D("0.13")),
        (D("241974"),  D("362961"), D("0.14")),
        (D("362961"),  None,        D("0.15")),
    ],
    base_credit=D("22323"),
    base_credit_rate=D("0.08"),
)

BC_2025 = build_table(
    J.BC,
    TAX_YEAR,
    [
        (D("0"),       D("49279"),  D("0.0506")),
        (D("49279"),   D("98560"),  D("0.077")),
        (D("98560"),   D("113158"), D("0.105")),
        (D("113158"),  D("137407"), D("0.1229")),
        (D("137407"),  D("186306"), D("0.147")),
        (D("186306"),  D("259829"), D("0.168")),
        (D("259829"),  None,        D("0.205")),
    ],
    base_credit=D("12932"),
    base_credit_rate=D("0.0506"),
)

MB_2025 = build_table(
    J.MB,
    TAX_YEAR,
    [
        (D("0"),       D("47000"),  D("0.108")),
        (D("47000"),   D("100000"), D("0.1275")),
        (D("100000"),  None,        D("0.174")),
    ],
    base_credit=D("15780"),
    base_credit_rate=D("0.108"),
)

NB_2025 = build_table(
    J.NB,
    TAX_YEAR,
    [
        (D("0"),       D("51306"),  D("0.094")),
        (D("51306"),   D("102614"), D("0.14")),
        (D("102614"),  D("190060"), D("0.16")),
        (D("190060"),  None,        D("0.195")),
    ],
    base_credit=D("13396"),
    base_credit_rate=D("0.094"),
)

NL_2025 = build_table(
    J.NL,
    TAX_YEAR,
    [
        (D("0"),       D("44192"),   D("0.087")),
        (D("44192"),   D("88382"),   D("0.145")),
        (D("88382"),   D("157792"),  D("0.158")),
        (D("157792"),  D("220910"),  D("0.178")),
        (D("220910"),  D("282214"),  D("0.198")),
        (D("282214"),  D("564429"),  D("0.208")),
        (D("564429"),  D("1128858"), D("0.213")),
        (D("1128858"), None,         D("0.218")),
    ],
    base_credit=D("11067"),
    base_credit_rate=D("0.087"),
)

NS_2025 = build_table(
    J.NS,
    TAX_YEAR,
    [
        (D("0"),       D("30507"),  D("0.0879")),
        (D("30507"),   D("61015"),  D("0.1495")),
        (D("61015"),   D("95883"),  D("0.1667")),
        (D("95883"),   D("154650"), D("0.175")),
        (D("154650"),  None,        D("0.21")),
    ],
    base_credit=D("11744"),
    base_credit_rate=D("0.0879"),
)

NT_2025 = build_table(
    J.NT,
    TAX_YEAR,
    [
        (D("0"),       D("51964"),  D("0.059")),
        (D("51964"),   D("103930"), D("0.086")),
        (D("103930"),  D("168967"), D("0.122")),
        (D("168967"),  None,        D("0.1405")),
    ],
    base_credit=D("17842"),
    base_credit_rate=D("0.059"),
)

NU_2025 = build_table(
    J.NU,
    TAX_YEAR,
    [
        (D("0"),       D("54707"),  D("0.04")),
        (D("54707"),   D("109413"), D("0.07")),
        (D("109413"),  D("177881"), D("0.09")),
        (D("177881"),  None,        D("0.115")),
    ],
    base_credit=D("19274"),
    base_credit_rate=D("0.04"),
)

ON_2025 = build_table(
    J.ON,
    TAX_YEAR,
    [
        (D("0"),       D("52886"),  D("0.0505")),
        (D("52886"),   D("105775"), D("0.0915")),
        (D("105775"),  D("150000"), D("0.1116")),
        (D("150000"),  D("220000"), D("0.1216")),
        (D("220000"),  None,        D("0.1316")),
    ],
    base_credit=D("12747"),
    base_credit_rate=D("0.0505"),
)

PE_2025 = build_table(
    J.PE,
    TAX_YEAR,
    [
        (D("0"),       D("33328"),  D("0.095")),
        (D("33328"),   D("64656"),  D("0.1347")),
        (D("64656"),   D("105000"), D("0.166")),
        (D("105000"),  D("140000"), D("0.1762")),
        (D("140000"),  None,        D("0.19")),
    ],
    base_credit=D("14250"),
    base_credit_rate=D("0.095"),
)

QC_2025 = build_table(
    J.QC,
    TAX_YEAR,
    [
        (D("0"),       D("53255"),  D("0.14")),
        (D("53255"),   D("106495"), D("0.19")),
        (D("106495"),  D("129590"), D("0.24")),
        (D("129590"),  None,        D("0.2575")),
    ],
    base_credit=D("18571"),
    base_credit_rate=D("0.14"),
)

SK_2025 = build_table(
    J.SK,
    TAX_YEAR,
    [
        (D("0"),       D("53463"),  D("0.105")),
        (D("53463"),   D("152750"), D("0.125")),
        (D("152750"),  None,        D("0.145")),
    ],
    base_credit=D("19491"),
    base_credit_rate=D("0.105"),
)

YT_2025 = build_table(
    J.YT,
    TAX_YEAR,
    [
        (D("0"),       D("57375"),  D("0.064")),
        (D("57375"),   D("114750"), D("0.09")),
        (D("114750"),  D("177882"), D("0.109")),
        (D("177882"),  D("500000"), D("0.128")),
        (D("500000"),  None,        D("0.15")),
    ],
    base_credit=D("16129"),
    base_credit_rate=D("0.064"),
)

TABLES: Mapping[J, BracketTable] = MappingProxyType(
    {
        table.jurisdiction: table
        for table in (
            FEDERAL_2025,
            AB_2025,
            BC_2025,
            MB_2025,
            NB_2025,
            NL_2025,
            NS_2025,
            NT_2025,
            NU_2025,
            ON_2025,
            PE_2025,
            QC_2025,
            SK_2025,
            YT_2025,
        )
    }
)
