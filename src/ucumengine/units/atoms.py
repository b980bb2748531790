"""Static UCUM unit table.

Rows are listed in dependency order: every definition only refers to base
atoms or to atoms that appear earlier in the table. The loader resolves
each definition through the regular parser, so definitions use ordinary
unit-code syntax.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple, Union


class PrefixRow(NamedTuple):
    symbol: str
    name: str
    factor: float


class BaseRow(NamedTuple):
    symbol: str
    name: str
    property: str
    axis: str


class AtomRow(NamedTuple):
    symbol: str
    name: str
    property: str
    value: float
    unit: str
    metric: bool


class SpecialRow(NamedTuple):
    symbol: str
    name: str
    property: str
    function: str
    value: float
    unit: str


class ArbitraryRow(NamedTuple):
    symbol: str
    name: str
    property: str


Row = Union[BaseRow, AtomRow, SpecialRow, ArbitraryRow]


PREFIXES: Tuple[PrefixRow, ...] = (
    PrefixRow("Y", "yotta", 1e24),
    PrefixRow("Z", "zetta", 1e21),
    PrefixRow("E", "exa", 1e18),
    PrefixRow("P", "peta", 1e15),
    PrefixRow("T", "tera", 1e12),
    PrefixRow("G", "giga", 1e9),
    PrefixRow("M", "mega", 1e6),
    PrefixRow("k", "kilo", 1e3),
    PrefixRow("h", "hecto", 1e2),
    PrefixRow("da", "deka", 1e1),
    PrefixRow("d", "deci", 1e-1),
    PrefixRow("c", "centi", 1e-2),
    PrefixRow("m", "milli", 1e-3),
    PrefixRow("u", "micro", 1e-6),
    PrefixRow("n", "nano", 1e-9),
    PrefixRow("p", "pico", 1e-12),
    PrefixRow("f", "femto", 1e-15),
    PrefixRow("a", "atto", 1e-18),
    PrefixRow("z", "zepto", 1e-21),
    PrefixRow("y", "yocto", 1e-24),
    PrefixRow("Ki", "kibi", 1024.0),
    PrefixRow("Mi", "mebi", 1048576.0),
    PrefixRow("Gi", "gibi", 1073741824.0),
    PrefixRow("Ti", "tebi", 1099511627776.0),
)


BASE_UNITS: Tuple[BaseRow, ...] = (
    BaseRow("m", "meter", "length", "length"),
    BaseRow("s", "second", "time", "time"),
    BaseRow("g", "gram", "mass", "mass"),
    BaseRow("rad", "radian", "plane angle", "angle"),
    BaseRow("K", "kelvin", "temperature", "temperature"),
    BaseRow("C", "coulomb", "electric charge", "charge"),
    BaseRow("cd", "candela", "luminous intensity", "luminosity"),
)


UNITS: Tuple[Row, ...] = (
    # -- Dimensionless numbers ---------------------------------------------
    AtomRow("[pi]", "the number pi", "number", 3.141592653589793, "1", False),
    AtomRow("%", "percent", "fraction", 1, "10*-2", False),
    AtomRow("[ppth]", "parts per thousand", "fraction", 1, "10*-3", False),
    AtomRow("[ppm]", "parts per million", "fraction", 1, "10*-6", False),
    AtomRow("[ppb]", "parts per billion", "fraction", 1, "10*-9", False),
    AtomRow("mol", "mole", "amount of substance", 6.0221367, "10*23", True),
    AtomRow("sr", "steradian", "solid angle", 1, "rad2", True),
    # -- SI derived --------------------------------------------------------
    AtomRow("Hz", "hertz", "frequency", 1, "s-1", True),
    AtomRow("N", "newton", "force", 1, "kg.m/s2", True),
    AtomRow("Pa", "pascal", "pressure", 1, "N/m2", True),
    AtomRow("J", "joule", "energy", 1, "N.m", True),
    AtomRow("W", "watt", "power", 1, "J/s", True),
    AtomRow("A", "ampere", "electric current", 1, "C/s", True),
    AtomRow("V", "volt", "electric potential", 1, "J/C", True),
    AtomRow("F", "farad", "electric capacitance", 1, "C/V", True),
    AtomRow("Ohm", "ohm", "electric resistance", 1, "V/A", True),
    AtomRow("S", "siemens", "electric conductance", 1, "Ohm-1", True),
    AtomRow("Wb", "weber", "magnetic flux", 1, "V.s", True),
    AtomRow("T", "tesla", "magnetic flux density", 1, "Wb/m2", True),
    AtomRow("H", "henry", "inductance", 1, "Wb/A", True),
    AtomRow("lm", "lumen", "luminous flux", 1, "cd.sr", True),
    AtomRow("lx", "lux", "illuminance", 1, "lm/m2", True),
    AtomRow("Bq", "becquerel", "radioactivity", 1, "s-1", True),
    AtomRow("Gy", "gray", "energy dose", 1, "J/kg", True),
    AtomRow("Sv", "sievert", "dose equivalent", 1, "J/kg", True),
    AtomRow("kat", "katal", "catalytic activity", 1, "mol/s", True),
    # -- Accepted with SI --------------------------------------------------
    AtomRow("deg", "degree", "plane angle", 2, "[pi].rad/360", False),
    AtomRow("gon", "gon", "plane angle", 0.9, "deg", False),
    AtomRow("'", "minute of arc", "plane angle", 1, "deg/60", False),
    AtomRow("''", "second of arc", "plane angle", 1, "'/60", False),
    AtomRow("l", "liter", "volume", 1, "dm3", True),
    AtomRow("L", "liter", "volume", 1, "l", True),
    AtomRow("ar", "are", "area", 100, "m2", True),
    AtomRow("min", "minute", "time", 60, "s", False),
    AtomRow("h", "hour", "time", 60, "min", False),
    AtomRow("d", "day", "time", 24, "h", False),
    AtomRow("wk", "week", "time", 7, "d", False),
    AtomRow("a_t", "tropical year", "time", 365.24219, "d", False),
    AtomRow("a_j", "mean Julian year", "time", 365.25, "d", False),
    AtomRow("a_g", "mean Gregorian year", "time", 365.2425, "d", False),
    AtomRow("a", "year", "time", 1, "a_j", False),
    AtomRow("mo_s", "synodal month", "time", 29.53059, "d", False),
    AtomRow("mo_j", "mean Julian month", "time", 1, "a_j/12", False),
    AtomRow("mo_g", "mean Gregorian month", "time", 1, "a_g/12", False),
    AtomRow("mo", "month", "time", 1, "mo_j", False),
    AtomRow("t", "tonne", "mass", 1e3, "kg", True),
    AtomRow("bar", "bar", "pressure", 1e5, "Pa", True),
    AtomRow("u", "unified atomic mass unit", "mass", 1.6605402e-24, "g", True),
    # -- Natural constants -------------------------------------------------
    AtomRow("[e]", "elementary charge", "electric charge", 1.60217733e-19, "C", True),
    AtomRow("eV", "electronvolt", "energy", 1, "[e].V", True),
    AtomRow("[c]", "velocity of light", "velocity", 299792458, "m/s", True),
    AtomRow("[h]", "Planck constant", "action", 6.6260755e-34, "J.s", True),
    AtomRow("[k]", "Boltzmann constant", "entropy", 1.380658e-23, "J/K", True),
    AtomRow("[eps_0]", "permittivity of vacuum", "electric permittivity", 8.854187817e-12, "F/m", True),
    AtomRow("[mu_0]", "permeability of vacuum", "magnetic permeability", 1, "4.[pi].10*-7.N/A2", True),
    AtomRow("[g]", "standard acceleration of free fall", "acceleration", 9.80665, "m/s2", True),
    AtomRow("[G]", "Newtonian constant of gravitation", "gravitation", 6.67259e-11, "m3.kg-1.s-2", True),
    AtomRow("atm", "standard atmosphere", "pressure", 101325, "Pa", False),
    # -- Clinical and chemical ---------------------------------------------
    AtomRow("cal_th", "thermochemical calorie", "energy", 4.184, "J", True),
    AtomRow("cal", "calorie", "energy", 1, "cal_th", True),
    AtomRow("[Cal]", "nutrition label Calorie", "energy", 1, "kcal_th", False),
    AtomRow("m[Hg]", "meter of mercury column", "pressure", 133.322, "kPa", True),
    AtomRow("m[H2O]", "meter of water column", "pressure", 9.80665, "kPa", True),
    AtomRow("g%", "gram percent", "mass concentration", 1, "g/dl", True),
    AtomRow("U", "enzyme unit", "catalytic activity", 1, "umol/min", True),
    AtomRow("osm", "osmole", "amount of substance", 1, "mol", True),
    AtomRow("eq", "equivalent", "amount of substance", 1, "mol", True),
    AtomRow("[drp]", "drop", "volume", 1, "ml/20", False),
    AtomRow("[diop]", "diopter", "refraction of a lens", 1, "/m", False),
    AtomRow("[car_m]", "metric carat", "mass", 2e-1, "g", False),
    AtomRow("bit", "bit", "amount of information", 1, "1", True),
    AtomRow("By", "byte", "amount of information", 8, "bit", True),
    # -- International customary -------------------------------------------
    AtomRow("[in_i]", "inch", "length", 2.54, "cm", False),
    AtomRow("[ft_i]", "foot", "length", 12, "[in_i]", False),
    AtomRow("[yd_i]", "yard", "length", 3, "[ft_i]", False),
    AtomRow("[mi_i]", "statute mile", "length", 5280, "[ft_i]", False),
    AtomRow("[nmi_i]", "nautical mile", "length", 1852, "m", False),
    AtomRow("[kn_i]", "knot", "velocity", 1, "[nmi_i]/h", False),
    AtomRow("[mil_i]", "mil", "length", 1e-3, "[in_i]", False),
    AtomRow("[hd_i]", "hand", "length", 4, "[in_i]", False),
    AtomRow("[sin_i]", "square inch", "area", 1, "[in_i]2", False),
    AtomRow("[sft_i]", "square foot", "area", 1, "[ft_i]2", False),
    AtomRow("[syd_i]", "square yard", "area", 1, "[yd_i]2", False),
    AtomRow("[cin_i]", "cubic inch", "volume", 1, "[in_i]3", False),
    AtomRow("[cft_i]", "cubic foot", "volume", 1, "[ft_i]3", False),
    AtomRow("[mesh_i]", "mesh", "lineic number", 1, "/[in_i]", False),
    # -- Avoirdupois -------------------------------------------------------
    AtomRow("[gr]", "grain", "mass", 64.79891, "mg", False),
    AtomRow("[lb_av]", "pound", "mass", 7000, "[gr]", False),
    AtomRow("[oz_av]", "ounce", "mass", 1, "[lb_av]/16", False),
    AtomRow("[dr_av]", "dram", "mass", 1, "[oz_av]/16", False),
    AtomRow("[scwt_av]", "short hundredweight", "mass", 100, "[lb_av]", False),
    AtomRow("[ston_av]", "short ton", "mass", 20, "[scwt_av]", False),
    AtomRow("[stone_av]", "stone", "mass", 14, "[lb_av]", False),
    AtomRow("[lbf_av]", "pound force", "force", 1, "[lb_av].[g]", False),
    AtomRow("[psi]", "pound per square inch", "pressure", 1, "[lbf_av]/[in_i]2", False),
    # -- US and British volumes --------------------------------------------
    AtomRow("[gal_us]", "Queen Anne's wine gallon", "fluid volume", 231, "[in_i]3", False),
    AtomRow("[qt_us]", "quart", "fluid volume", 1, "[gal_us]/4", False),
    AtomRow("[pt_us]", "pint", "fluid volume", 1, "[qt_us]/2", False),
    AtomRow("[gil_us]", "gill", "fluid volume", 1, "[pt_us]/4", False),
    AtomRow("[foz_us]", "fluid ounce", "fluid volume", 1, "[gil_us]/4", False),
    AtomRow("[fdr_us]", "fluid dram", "fluid volume", 1, "[foz_us]/8", False),
    AtomRow("[tbs_us]", "tablespoon", "volume", 1, "[foz_us]/2", False),
    AtomRow("[tsp_us]", "teaspoon", "volume", 1, "[tbs_us]/3", False),
    AtomRow("[cup_us]", "cup", "volume", 16, "[tbs_us]", False),
    AtomRow("[gal_br]", "imperial gallon", "volume", 4.54609, "l", False),
    AtomRow("[pt_br]", "imperial pint", "volume", 1, "[gal_br]/8", False),
    # -- Heat and power ----------------------------------------------------
    AtomRow("[degR]", "degree Rankine", "temperature", 5, "K/9", False),
    AtomRow("[Btu_th]", "thermochemical British thermal unit", "energy", 1.05435, "kJ", False),
    AtomRow("[Btu]", "British thermal unit", "energy", 1, "[Btu_th]", False),
    AtomRow("[HP]", "horsepower", "power", 550, "[ft_i].[lbf_av]/s", False),
    # -- Legacy CGS --------------------------------------------------------
    AtomRow("Ao", "Angstrom", "length", 0.1, "nm", False),
    AtomRow("b", "barn", "action area", 100, "fm2", False),
    AtomRow("dyn", "dyne", "force", 1, "g.cm/s2", True),
    AtomRow("erg", "erg", "energy", 1, "dyn.cm", True),
    AtomRow("P", "poise", "dynamic viscosity", 1, "dyn.s/cm2", True),
    AtomRow("St", "stokes", "kinematic viscosity", 1, "cm2/s", True),
    AtomRow("Gal", "gal", "acceleration", 1, "cm/s2", True),
    AtomRow("G", "gauss", "magnetic flux density", 1e-4, "T", True),
    AtomRow("Mx", "maxwell", "flux of magnetic induction", 1e-8, "Wb", True),
    AtomRow("Bi", "biot", "electric current", 10, "A", True),
    AtomRow("Ci", "curie", "radioactivity", 3.7e10, "Bq", True),
    AtomRow("R", "roentgen", "ion dose", 2.58e-4, "C/kg", True),
    AtomRow("RAD", "radiation absorbed dose", "energy dose", 100, "erg/g", True),
    AtomRow("REM", "radiation equivalent man", "dose equivalent", 1, "RAD", True),
    # -- Special (non-proportional) ----------------------------------------
    SpecialRow("Cel", "degree Celsius", "temperature", "cel", 1, "K"),
    SpecialRow("[degF]", "degree Fahrenheit", "temperature", "degf", 1, "K"),
    SpecialRow("[degRe]", "degree Reaumur", "temperature", "degre", 1, "K"),
    SpecialRow("pH", "pH", "acidity", "ph", 1, "mol/l"),
    SpecialRow("Np", "neper", "level", "ln", 1, "1"),
    SpecialRow("B", "bel", "level", "lg", 1, "1"),
    SpecialRow("B[SPL]", "bel sound pressure", "pressure level", "2lg", 2, "10*-5.Pa"),
    SpecialRow("B[V]", "bel volt", "electric potential level", "2lg", 1, "V"),
    SpecialRow("B[mV]", "bel millivolt", "electric potential level", "2lg", 1, "mV"),
    SpecialRow("B[uV]", "bel microvolt", "electric potential level", "2lg", 1, "uV"),
    SpecialRow("B[W]", "bel watt", "power level", "lg", 1, "W"),
    SpecialRow("B[kW]", "bel kilowatt", "power level", "lg", 1, "kW"),
    SpecialRow("[p'diop]", "prism diopter", "refraction of a prism", "100tan", 1, "rad"),
    SpecialRow("%[slope]", "percent of slope", "slope", "100tan", 1, "rad"),
    # -- Arbitrary ---------------------------------------------------------
    ArbitraryRow("[IU]", "international unit", "arbitrary"),
    ArbitraryRow("[iU]", "international unit", "arbitrary"),
    ArbitraryRow("[arb'U]", "arbitrary unit", "arbitrary"),
    ArbitraryRow("[USP'U]", "United States Pharmacopeia unit", "arbitrary"),
    ArbitraryRow("[GPL'U]", "GPL unit", "biologic activity of anticardiolipin IgG"),
    ArbitraryRow("[MPL'U]", "MPL unit", "biologic activity of anticardiolipin IgM"),
    ArbitraryRow("[APL'U]", "APL unit", "biologic activity of anticardiolipin IgA"),
    ArbitraryRow("[beth'U]", "Bethesda unit", "biologic activity of factor VIII inhibitor"),
    ArbitraryRow("[todd'U]", "Todd unit", "biologic activity antistreptolysin O"),
    ArbitraryRow("[CFU]", "colony forming unit", "number"),
    ArbitraryRow("[PFU]", "plaque forming unit", "amount of an infectious agent"),
    ArbitraryRow("[FFU]", "focus forming unit", "amount of an infectious agent"),
    ArbitraryRow("[TCID_50]", "50% tissue culture infectious dose", "biologic activity"),
    ArbitraryRow("[Lf]", "Limit of flocculation", "procytotoxic activity"),
    ArbitraryRow("[AU]", "allergy unit", "procedure defined amount of an allergen"),
    ArbitraryRow("[BAU]", "bioequivalent allergen unit", "amount of an allergen"),
    ArbitraryRow("[EU]", "ELISA unit", "arbitrary ELISA unit"),
)


__all__ = [
    "PrefixRow",
    "BaseRow",
    "AtomRow",
    "SpecialRow",
    "ArbitraryRow",
    "Row",
    "PREFIXES",
    "BASE_UNITS",
    "UNITS",
]
