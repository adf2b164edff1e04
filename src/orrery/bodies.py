"""J2000 Keplerian elements of the Sun's major bodies.

Elements and per-century rates for the eight planets and Pluto, taken from
the JPL approximate planetary positions (Table 1, valid 1800-2050 AD).  The
Sun is fixed at the origin and has no elements.

JPL publishes the longitude of perihelion ϖ; the table here stores the
argument of perihelion ω, derived as ϖ - Ω, which is what
:class:`~orrery.orbits.OrbitalElements` expects.  For the Earth Ω = 0, so
ω = ϖ.  The ω rates are the ϖ rates.  The values are curated and kept as
tabulated: for Mars, Saturn, Neptune and Pluto they differ from ϖ - Ω in
the trailing digits, which is far below the accuracy of the model.

References:
    E.M. Standish & J.G. Williams, "Keplerian Elements for
    Approximate Positions of the Major Planets",
    https://ssd.jpl.nasa.gov/planets/approx_pos.html
"""

from __future__ import annotations

from types import MappingProxyType

from orrery.orbits.elements import ElementRates, OrbitalElements

SUN_ID = "sun"

# fmt: off
_ELEMENTS = {
    "mercury": OrbitalElements(
        semi_major_axis=0.38709927,
        eccentricity=0.20563593,
        inclination=7.00497902,
        longitude_of_ascending_node=48.33076593,
        argument_of_perihelion=29.12703035,
        mean_longitude=252.25032350,
        rates=ElementRates(0.00000037, 0.00001906, -0.00594749, -0.12534081, 0.16047689, 149472.67411175),
    ),
    "venus": OrbitalElements(
        semi_major_axis=0.72333566,
        eccentricity=0.00677672,
        inclination=3.39467605,
        longitude_of_ascending_node=76.67984255,
        argument_of_perihelion=54.92262463,
        mean_longitude=181.97909950,
        rates=ElementRates(0.00000390, -0.00004107, -0.00078890, -0.27769418, 0.00268329, 58517.81538729),
    ),
    "earth": OrbitalElements(
        semi_major_axis=1.00000261,
        eccentricity=0.01671123,
        inclination=-0.00001531,
        longitude_of_ascending_node=0.0,
        argument_of_perihelion=102.93768193,
        mean_longitude=100.46457166,
        rates=ElementRates(0.00000562, -0.00004392, -0.01294668, 0.0, 0.32327364, 35999.37244981),
    ),
    "mars": OrbitalElements(
        semi_major_axis=1.52371034,
        eccentricity=0.09339410,
        inclination=1.84969142,
        longitude_of_ascending_node=49.55953891,
        argument_of_perihelion=-73.50318378,
        mean_longitude=-4.55343205,
        rates=ElementRates(0.00001847, 0.00007882, -0.00813131, -0.29257343, 0.44441088, 19140.30268499),
    ),
    "jupiter": OrbitalElements(
        semi_major_axis=5.20288700,
        eccentricity=0.04838624,
        inclination=1.30439695,
        longitude_of_ascending_node=100.47390909,
        argument_of_perihelion=-85.74542926,
        mean_longitude=34.39644051,
        rates=ElementRates(-0.00011607, -0.00013253, -0.00183714, 0.20469106, 0.21252668, 3034.74612775),
    ),
    "saturn": OrbitalElements(
        semi_major_axis=9.53667594,
        eccentricity=0.05386179,
        inclination=2.48599187,
        longitude_of_ascending_node=113.66242448,
        argument_of_perihelion=-21.06303430,
        mean_longitude=49.95424423,
        rates=ElementRates(-0.00125060, -0.00050991, 0.00193609, -0.28867794, -0.41897216, 1222.49362201),
    ),
    "uranus": OrbitalElements(
        semi_major_axis=19.18916464,
        eccentricity=0.04725744,
        inclination=0.77263783,
        longitude_of_ascending_node=74.01692503,
        argument_of_perihelion=96.93735127,
        mean_longitude=313.23810451,
        rates=ElementRates(-0.00196176, -0.00004397, -0.00242939, 0.04240589, 0.40805281, 428.48202785),
    ),
    "neptune": OrbitalElements(
        semi_major_axis=30.06992276,
        eccentricity=0.00859048,
        inclination=1.77004347,
        longitude_of_ascending_node=131.78422574,
        argument_of_perihelion=-86.81996285,
        mean_longitude=-55.12002969,
        rates=ElementRates(0.00026291, 0.00005105, 0.00035372, -0.00508664, -0.32241464, 218.45945325),
    ),
    "pluto": OrbitalElements(
        semi_major_axis=39.48211675,
        eccentricity=0.24882730,
        inclination=17.14001206,
        longitude_of_ascending_node=110.30393684,
        argument_of_perihelion=113.76329169,
        mean_longitude=238.92903833,
        rates=ElementRates(-0.00031596, 0.00005170, 0.00004818, -0.01183482, -0.01062942, 145.20780515),
    ),
}
# fmt: on

BODY_ELEMENTS = MappingProxyType(_ELEMENTS)
"""Read-only mapping of body id to :class:`~orrery.orbits.OrbitalElements`."""

BODY_IDS: tuple[str, ...] = (SUN_ID, *_ELEMENTS)
"""All body ids, the Sun first, then the bodies in order of distance."""


def get_orbital_elements(body_id: str) -> OrbitalElements | None:
    """Look up the J2000 elements of a body.

    Args:
        body_id: Lower-case body identifier, e.g. ``"mars"``.

    Returns:
        The element set, or ``None`` for the Sun and unknown ids.
    """
    return BODY_ELEMENTS.get(body_id)
