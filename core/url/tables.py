"""
Hand-curated axis.com URL data: verified product pages, typo aliases, discontinued models,
their replacements and models being phased out. Keys are written as ModelKeys.
"""

from __future__ import annotations

AXIS_PRODUCT_BASE = "https://www.axis.com/products/axis-"
AXIS_SEARCH_BASE = "https://www.axis.com/en-us/products?q="


def _product_url(model: str) -> str:
    return f"{AXIS_PRODUCT_BASE}{model.lower()}"


# Confirmed to load on axis.com. Pages follow the product pattern today, but
# entries here survive any future change of that pattern.
VERIFIED_URLS: dict[str, str] = {
    model: _product_url(model)
    for model in (
        # P32xx fixed dome
        "P3245-LV",
        "P3245-LVE",
        "P3245-V",
        "P3245-VE",
        "P3255-LVE",
        "P3265-LV",
        "P3265-LVE",
        "P3265-V",
        "P3267-LV",
        "P3267-LVE",
        "P3268-LV",
        "P3268-LVE",
        "P3275-LV",
        "P3275-LVE",
        "P3275-V",
        # P14xx bullet
        "P1445-LE",
        "P1447-LE",
        "P1448-LE",
        "P1455-LE",
        "P1465-LE",
        "P1467-LE",
        "P1468-LE",
        "P1468-XLE",
        # P37xx panoramic
        "P3715-PLVE",
        "P3717-PLE",
        "P3719-PLE",
        # P55xx / P56xx PTZ
        "P5534",
        "P5534-E",
        "P5635-E",
        "P5654-E",
        "P5655-E",
        # Q35xx fixed dome
        "Q3515-LV",
        "Q3515-LVE",
        "Q3517-LV",
        "Q3517-LVE",
        "Q3517-SLVE",
        "Q3518-LVE",
        "Q3536-LVE",
        "Q3538-LVE",
        "Q3538-SLVE",
        # Q17xx bullet
        "Q1700-LE",
        "Q1785-LE",
        "Q1786-LE",
        "Q1798-LE",
        # Q60xx / Q61xx / Q62xx PTZ
        "Q6010-E",
        "Q6074",
        "Q6074-E",
        "Q6075",
        "Q6075-E",
        "Q6075-S",
        "Q6075-SE",
        "Q6100-E",
        "Q6125-LE",
        "Q6135-LE",
        "Q6215-LE",
        "Q6225-LE",
        # M30xx / M31xx compact dome
        "M3085-V",
        "M3086-V",
        "M3087-PV",
        "M3088-V",
        "M3115-LVE",
        "M3116-LVE",
        # M42xx
        "M4215-LV",
        "M4215-V",
        "M4216-LV",
        "M4216-V",
        "M4218-LV",
        "M4218-V",
        # M20xx bullet
        "M2035-LE",
        "M2036-LE",
        # F modular
        "F1015",
        "F1025",
        "F1035-E",
        "F34",
        "F41",
        "F44",
        "FA1105",
        "FA1125",
        "FA3105-L",
        "FA4115",
    )
}

# typo / variant -> canonical model
MODEL_ALIASES: dict[str, str] = {
    # missing hyphen
    "P3265LVE": "P3265-LVE",
    "P3265LV": "P3265-LV",
    "P3268LVE": "P3268-LVE",
    "P3275LVE": "P3275-LVE",
    "P3275LV": "P3275-LV",
    "P3277LVE": "P3277-LVE",
    "P3278LVE": "P3278-LVE",
    "P3285LVE": "P3285-LVE",
    "P3287LVE": "P3287-LVE",
    "P3288LVE": "P3288-LVE",
    "Q3538LVE": "Q3538-LVE",
    "Q3556LVE": "Q3556-LVE",
    "Q3558LVE": "Q3558-LVE",
    "Q6135LE": "Q6135-LE",
    "Q6315LE": "Q6315-LE",
    "Q6318LE": "Q6318-LE",
    "M3085V": "M3085-V",
    "M4218LV": "M4218-LV",
    "P1475LE": "P1475-LE",
    "P1485LE": "P1485-LE",
    "P1487LE": "P1487-LE",
    "P1488LE": "P1488-LE",
    # variants that do not exist
    "P3275-V": "P3275-LV",
    "P3277-V": "P3277-LV",
    "P3278-V": "P3278-LV",
    "P3268-V": "P3268-LV",
    "Q3538-V": "Q3538-LVE",
    "Q3556-V": "Q3556-LVE",
    "Q3558-V": "Q3558-LVE",
    # -VE vs -LVE confusion
    "P3265-VE": "P3265-LVE",
    "P3267-V": "P3267-LV",
    "P3275-VE": "P3275-LVE",
    "P3277-VE": "P3277-LVE",
    "P3278-VE": "P3278-LVE",
    # product renames
    "Q6032-E": "Q6075-E",
    "Q6034-E": "Q6074-E",
    "Q6035-E": "Q6075-E",
    # Mk II spelling
    "A8207-VE-MKII": "A8207-VE-MK-II",
    "P5654-E-MKII": "P5654-E-MK-II",
    "Q8752-E-MKII": "Q8752-E-MK-II",
    "F9111-R-MKII": "F9111-R-MK-II",
    "P1245-MKII": "P1245-MK-II",
    "M3057-PLR-MKII": "M3057-PLR-MK-II",
}

# End-of-life: product pages may redirect, so these get a search URL.
DISCONTINUED_MODELS: frozenset[str] = frozenset(
    {
        # P14xx bullets
        "P1455-LE",
        "P1455-LE-3",
        # P32xx ARTPEC-8 domes moving to ARTPEC-9
        "P3265-V",
        "P3265-LVE",
        "P3267-LV",
        "P3267-LVE",
        "P3268-LV",
        "P3268-LVE",
        # older P32xx / P33xx
        "P3214-V",
        "P3214-VE",
        "P3225-LV",
        "P3225-LVE",
        "P3354",
        "P3364-LV",
        "P3364-LVE",
        "P3364-V",
        "P3364-VE",
        "P3365-VE",
        "P3384-VE",
        # Q35xx
        "Q3536-LVE",
        "Q3538-LVE",
        "Q3505-VE",
        "Q1647-LE",
        # Q PTZ
        "Q6000-E",
        "Q6032-E",
        "Q6034-E",
        "Q6035-E",
        "Q6044-E",
        "Q6045-E",
        "Q1798-LE",
        # thermal
        "Q1932-E",
        # M series
        "M3004-V",
        "M3005-V",
        "M3044-V",
        "M3045-V",
        "M3046-V",
        "M3065-V",
        "M5014",
        "M5525-E",
        # box cameras
        "P1343",
        "P1344",
        "P1346",
        "P1347",
        "P1353",
        "P1354",
        "P1355",
        "P1357",
        "Q1604",
        "Q1614",
        "Q1615",
        # modular / other
        "F9111",
        "A8105-E",
        "Q7411",
    }
)

DISCONTINUED_REPLACEMENTS: dict[str, str] = {
    "P3364-LVE": "P3265-LVE",
    "P3364-LV": "P3265-LV",
    "P3364-VE": "P3265-LVE",
    "P3364-V": "P3265-V",
    "P3365-VE": "P3265-LVE",
    "P3384-VE": "P3268-LVE",
    "P3225-LVE": "P3245-LVE",
    "P3225-LV": "P3245-LV",
    "P3265-V": "P3275-LV",
    "P3265-LVE": "P3275-LVE",
    "P3265-LV": "P3275-LV",
    "P3267-LV": "P3277-LV",
    "P3267-LVE": "P3277-LVE",
    "P3268-LV": "P3278-LV",
    "P3268-LVE": "P3278-LVE",
    "P1455-LE": "P1485-LE",
    "P1455-LE-3": "P1465-LE-3",
    "Q3536-LVE": "Q3556-LVE",
    "Q3538-LVE": "Q3558-LVE",
    "Q6044-E": "Q6075-E",
    "Q6045-E": "Q6075-SE",
    "Q6032-E": "Q6075-E",
    "Q6034-E": "Q6074-E",
    "Q6035-E": "Q6075-E",
    "Q1647-LE": "Q1656-LE",
    "Q1798-LE": "Q1808-LE",
    "Q1932-E": "Q1972-E",
    "M3044-V": "M3085-V",
    "M3045-V": "M3086-V",
    "M3046-V": "M3086-V",
    "M3065-V": "M3085-V",
    "M5014": "M5074",
    "M5525-E": "M5526-E",
    "F9111": "F9111-R-MK-II",
    "A8105-E": "I8116-E",
    "Q7411": "P7304",
}

# still sold, with an announced successor: model -> (replacement, note)
PHASING_OUT_MODELS: dict[str, tuple[str, str]] = {
    "P3265-LVE": ("P3275-LVE", "ARTPEC-9 upgrade available"),
    "P3267-LVE": ("P3277-LVE", "ARTPEC-9 upgrade available"),
    "P3268-LVE": ("P3278-LVE", "ARTPEC-9 upgrade available"),
    "Q3536-LVE": ("Q3556-LVE", "ARTPEC-9 upgrade - improved AI analytics"),
    "Q3538-LVE": ("Q3558-LVE", "ARTPEC-9 upgrade - improved AI analytics"),
}
