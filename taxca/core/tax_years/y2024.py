from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from taxca.core._progressive import BracketTable, build_table
from taxca.core.jurisdictions import Jurisdiction as J

D = Decimal

TAX_YEAR = 2024

FEDERAL_2024 = build_table(
    J.CA,
    TAX_YEAR,
    [
        (D("0"),       D("55867"),  D("0.15")),
        (D("55867"),   D("111733"), D("0.205")),
        (D("111733"),  D("173205"), D("0.26")),
        (D("173205"),  D("246752"), D("0.29")),
        (D("246752"),  None,        D("0.33")),
    ],
    base_credit=D("15705"),
    base_credit_rate=D("0.15"),
)

AB_2024 = build_table(
    J.AB,
    TAX_YEAR,
    [
        (D("0"),       D("148269"), D("0.10")),
        (D("148269"),  D("177922"), D("0.12")),
        (D("177922"),  D("237230"), D("0.13")),
        (D("237230"),  D("355845"), D("0.14")),
        (D("355845"),  None,        D("0.15")),
    ],
    base_credit=D("21885"),
    base_credit_rate=D("0.10"),
)

BC_2024 = build_table(
    J.BC,
    TAX_YEAR,
    [
        (D("0"),       D("47937"),  D("0.0506")),
        (D("47937"),   D("95875"),  D("0.077")),
        (D("95875"),   D("110076"), D("0.105")),
        (D("110076"),  D("133664"), D("0.1229")),
        (D("133664"),  D("181232"), D("0.147")),
        (D("181232"),  D("252752"), D("0.168")),
        (D("252752"),  None,        D("0.205")),
    ],
    base_credit=D("12580"),
    base_credit_rate=D("0.0506"),
)

MB_2024 = build_table(
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

NB_2024 = build_table(
    J.NB,
    TAX_YEAR,
    [
        (D("0"),       D("49958"),  D("0.094")),
        (D("49958"),   D("99916"),  D("0.14")),
        (D("99916"),   D("185064"), D("0.16")),
        (D("185064"),  None,        D("0.195")),
    ],
    base_credit=D("13044"),
    base_credit_rate=D("0.094"),
)

NL_2024 = build_table(
    J.NL,
    TAX_YEAR,
    [
        (D("0"),       D("43198"),   D("0.087")),
        (D("43198"),   D("86395"),   D("0.145")),
        (D("86395"),   D("154244"),  D("0.158")),
        (D("154244"),  D("215943"),  D("0.178")),
        (D("215943"),  D("275870"),  D("0.198")),
        (D("275870"),  D("551739"),  D("0.208")),
        (D("551739"),  D("1103478"), D("0.213")),
        (D("1103478"), None,         D("0.218")),
    ],
    base_credit=D("10818"),
    base_credit_rate=D("0.087"),
)

NS_2024 = build_table(
    J.NS,
    TAX_YEAR,
    [
        (D("0"),       D("29590"),  D("0.0879")),
        (D("29590"),   D("59180"),  D("0.1495")),
        (D("59180"),   D("93000"),  D("0.1667")),
        (D("93000"),   D("150000"), D("0.175")),
        (D("150000"),  None,        D("0.21")),
    ],
    base_credit=D("8481"),
    base_credit_rate=D("0.0879"),
)

NT_2024 = build_table(
    J.NT,
    TAX_YEAR,
    [
        (D("0"),       D("50597"),  D("0.059")),
        (D("50597"),   D("101198"), D("0.086")),
        (D("101198"),  D("164525"), D("0.122")),
        (D("164525"),  None,        D("0.1405")),
    ],
    base_credit=D("17373"),
    base_credit_rate=D("0.059"),
)

NU_2024 = build_table(
    J.NU,
    TAX_YEAR,
    [
        (D("0"),       D("53268"),  D("0.04")),
        (D("53268"),   D("106537"), D("0.07")),
        (D("106537"),  D("173205"), D("0.09")),
        (D("173205"),  None,        D("0.115")),
    ],
    base_credit=D("18767"),
    base_credit_rate=D("0.04"),
)

ON_2024 = build_table(
    J.ON,
    TAX_YEAR,
    [
        (D("0"),       D("51446"),  D("0.0505")),
        (D("51446"),   D("102894"), D("0.0915")),
        (D("102894"),  D("150000"), D("0.1116")),
        (D("150000"),  D("220000"), D("0.1216")),
        (D("220000"),  None,        D("0.1316")),
    ],
    base_credit=D("12399"),
    base_credit_rate=D("0.0505"),
)

PE_2024 = build_table(
    J.PE,
    TAX_YEAR,
    [
        (D("0"),       D("32656"),  D("0.0965")),
        (D("32656"),   D("64313"),  D("0.1363")),
        (D("64313"),   D("105000"), D("0.1665")),
        (D("105000"),  D("140000"), D("0.18")),
        (D("140000"),  None,        D("0.1875")),
    ],
    base_credit=D("13500"),
    base_credit_rate=D("0.0965"),
)

QC_2024 = build_table(
    J.QC,
    TAX_YEAR,
    [
        (D("0"),       D("51780"),  D("0.14")),
        (D("51780"),   D("103545"), D("0.19")),
        (D("103545"),  D("126000"), D("0.24")),
        (D("126000"),  None,        D("0.2575")),
    ],
    base_credit=D("18056"),
    base_credit_rate=D("0.14"),
)

SK_2024 = build_table(
    J.SK,
    TAX_YEAR,
    [
        (D("0"),       D("52057"),  D("0.105")),
        (D("52057"),   D("148734"), D("0.125")),
        (D("148734"),  None,        D("0.145")),
    ],
    base_credit=D("18491"),
    base_credit_rate=D("0.105"),
)

YT_2024 = build_table(
    J.YT,
    TAX_YEAR,
    [
        (D("0"),       D("55867"),  D("0.064")),
        (D("55867"),   D("111733"), D("0.09")),
        (D("111733"),  D("173205"), D("0.109")),
        (D("173205"),  D("500000"), D("0.128")),
        (D("500000"),  None,        D("0.15")),
    ],
    base_credit=D("15705"),
    base_credit_rate=D("0.064"),
)

TABLES: Mapping[J, BracketTable] = MappingProxyType(
    {
        table.jurisdiction: table
        for table in (
            FEDERAL_2024,
            AB_2024,
            BC_2024,
            MB_2024,
            NB_2024,
            NL_2024,
            NS_2024,
            NT_2024,
            NU_2024,
            ON_2024,
            PE_2024,
            QC_2024,
            SK_2024,
            YT_2024,
        )
    }
)
