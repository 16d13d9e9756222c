# camino/api/data/route_details.py
"""Turn-by-turn stage descriptions keyed by itinerary day.

Day numbers follow the destination catalog. Stages without a hand-written
table are derived from the catalog (previous night's destination to this
night's). Waypoints that sit off the walking path carry no coordinate and are
skipped when a route is drawn.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from camino.api.data.destinations import get_destination
from camino.api.models import Coordinate, LocationPoint, RouteDetail

logger = logging.getLogger(__name__)


def _point(name, lat=None, lng=None, distance=None, services=None, details=None) -> LocationPoint:
    coordinate = Coordinate(lat, lng) if lat is not None and lng is not None else None
    return LocationPoint(
        name=name,
        coordinate=coordinate,
        distance=distance,
        services=services,
        details=details,
    )


_ROUTE_DETAILS: Dict[int, RouteDetail] = {
    0: RouteDetail(
        day=0,
        title="Starting Point: Saint Jean Pied de Port",
        start_point=_point(
            "Saint Jean Pied de Port", 43.1636, -1.2386, 0.0, "All services",
            "Your Camino begins here. Collect your credential at the Pilgrim's Office.",
        ),
        ascent=0,
        descent=0,
    ),
    1: RouteDetail(
        day=1,
        title="St Jean Pied de Port to Roncesvalles (Option A: Via Orisson)",
        start_point=_point(
            "Saint Jean Pied de Port", 43.1636, -1.2386, 0.0, "All services",
            "Begin at the medieval bridge over the River Nive, take the Route de Napoléon.",
        ),
        waypoints=(
            _point("Honto", 43.1415, -1.2406, 5.0, None,
                   "Take the left-hand path to avoid a road curve, rejoin the road to Orisson."),
            _point("Orisson", 43.1094, -1.2346, 7.6, "Bar, Restaurant",
                   "Continue through alpine meadows past the Virgin of Biakorri statue."),
            _point("Arnéguy", None, None, 12.7, None,
                   "Arnéguy lies below on the right; leave the road by the Urdanarre Cross."),
            _point("Collado de Bentartea", 43.0430, -1.2744, 16.2, "Bentartea Pass",
                   "Roldán Fountain, then a beech forest track along the border fence."),
            _point("Collado de Lepoeder", 43.0204, -1.2993, 20.2, None,
                   "Descend directly through the Donsimon beech forest or via the Ibañeta Pass."),
        ),
        end_point=_point(
            "Roncesvalles", 43.0093, -1.3192, 23.9, "Bar-restaurant, Tourism Office",
            "Arrive via the descent into this historic Jacobean town.",
        ),
        ascent=1282,
        descent=504,
    ),
    2: RouteDetail(
        day=2,
        title="Roncesvalles to Zubiri",
        start_point=_point(
            "Roncesvalles", 43.0093, -1.3192, 0.0, "Bar, Restaurant, Tourism Office",
            "Take the path through the Sorginaritzaga Forest past the Cross of the Pilgrims.",
        ),
        waypoints=(
            _point("Burguete", 42.9906, -1.3357, 2.8, "Bars, Stores, Health Center, Pharmacy, ATM",
                   "Cross via the main street, then the footbridge to the Urrobi River."),
            _point("Espinal", 42.9812, -1.3629, 6.5, "Bar, Store, Medical Clinic",
                   "Follow the sidewalk and climb towards Mezkiritz."),
            _point("Alto de Mezkiritz", 42.9743, -1.3811, 8.2, "924 m",
                   "Cross the N-135 and descend on a wooded trail."),
            _point("Bizkarreta", 42.9658, -1.4172, 11.5, None,
                   "Historic stage end with a former 12th-century pilgrims' hospital."),
        ),
        end_point=_point(
            "Zubiri", 42.9321, -1.5036, 21.5, "All services",
            "Cross the 14th-century Bridge of Rabies over the Arga River.",
        ),
        ascent=217,
        descent=633,
    ),
    3: RouteDetail(
        day=3,
        title="Zubiri to Pamplona",
        start_point=_point(
            "Zubiri", 42.9321, -1.5036, 0.0, "All services",
            "Follow the Arga River valley past the magnesite factory.",
        ),
        waypoints=(
            _point("Ilarratz", 42.9245, -1.5145, 2.9, "Drinking fountain"),
            _point("Ezkirotz", 42.9200, -1.5217, 3.7, "Drinking fountain"),
            _point("Larrasoaña", 42.9015, -1.5413, 5.5, "Bar, Store, Supermarket, Medical Clinic",
                   "Keep the Arga River on your right and climb to Akerreta."),
            _point("Akerreta", 42.8987, -1.5451, 6.1, None,
                   "Pass the Church of the Transfiguration and descend to the river."),
            _point("Zuriain", 42.8765, -1.5626, 9.2, "Bar",
                   "Walk beside the N-135 for 600 m, then cross the Arga."),
            _point("Irotz", 42.8594, -1.5869, 11.2, "Bar",
                   "Reach the Romanesque Iturgaiz Bridge."),
            _point("Trinidad de Arre", 42.8367, -1.6095, 16.0, None,
                   "Cross the medieval bridge over the Ultzama River."),
            _point("Villava", 42.8330, -1.6113, 16.4, "All services",
                   "Follow Mayor de Villava Street towards Burlada."),
            _point("Burlada", 42.8260, -1.6178, 17.5, "All services",
                   "Follow the pavement markers onto the Burlada walkway."),
        ),
        end_point=_point(
            "Pamplona", 42.8110, -1.6450, 21.8, "All services",
            "Cross the Magdalena Bridge and enter through the Portal de Francia.",
        ),
        ascent=72,
        descent=148,
    ),
    4: RouteDetail(
        day=4,
        title="Pamplona to Puente la Reina",
        start_point=_point(
            "Pamplona", 42.8110, -1.6450, 0.0, "All services",
            "Exit via the historic center and climb the Sierra del Perdón.",
        ),
        waypoints=(
            _point("Cizur Menor", 42.7867, -1.6778, 5.0, "Bar, store",
                   "Pass the Church of San Miguel, continue on a paved path."),
            _point("Alto del Perdon", 42.7379, -1.7436, 13.0, "770 m",
                   "Reach the ridge, descend on a rocky path (caution advised)."),
            _point("Uterga", 42.7098, -1.7601, 16.5, "Bar",
                   "Enter via a dirt track, continue westward."),
            _point("Obanos", 42.6797, -1.7848, 19.5, "Bar, store",
                   "Merge with the Camino Aragonés."),
        ),
        end_point=_point(
            "Puente la Reina", 42.6723, -1.8154, 24.0, "All services",
            "Cross the iconic 11th-century bridge over the Arga River.",
        ),
        ascent=419,
        descent=523,
    ),
    5: RouteDetail(
        day=5,
        title="Puente la Reina to Estella",
        start_point=_point(
            "Puente la Reina", 42.6723, -1.8154, 0.0, "All services",
            "Cross the medieval bridge and take the path along the Arga River.",
        ),
        waypoints=(
            _point("Mañeru", 42.6698, -1.8620, 4.6, "Bar, store",
                   "Follow the main street through the center."),
            _point("Cirauqui", 42.6759, -1.8900, 8.1, "Bar, store, pharmacy",
                   "Enter through the medieval gate, exit via the Roman road."),
            _point("Lorca", 42.6717, -1.9434, 15.5, "Bar, water fountain"),
            _point("Villatuerta", 42.6589, -1.9926, 18.8, "Bar, store",
                   "Cross the river and follow the path up into town."),
        ),
        end_point=_point(
            "Estella", 42.6705, -2.0320, 22.5, "All services",
            "Enter via the north bridge and follow signs to the center.",
        ),
        ascent=345,
        descent=270,
    ),
    6: RouteDetail(
        day=6,
        title="Rest day in Estella",
        start_point=_point(
            "Estella", 42.6708, -2.0295, 0.0, "All services",
            "Explore the medieval town and the Church of San Pedro de la Rúa.",
        ),
        ascent=0,
        descent=0,
    ),
    7: RouteDetail(
        day=7,
        title="Estella to Los Arcos",
        start_point=_point(
            "Estella", 42.6708, -2.0295, 0.0, "All services",
            "Exit via the Monastery of Irache and its wine fountain.",
        ),
        waypoints=(
            _point("Irache", 42.6500, -2.0430, 2.2, "Wine fountain, monastery"),
            _point("Azqueta", 42.6400, -2.0850, 5.7, "Bar, water"),
            _point("Villamayor de Monjardín", 42.6293, -2.1050, 8.1, "Bar, fountain",
                   "At the foot of Mount Monjardín, below the ruins of San Esteban de Deyo Castle."),
            _point("Luquin", None, None, 14.6, "Water",
                   "Luquin is off the main path; continue through the olive groves."),
        ),
        end_point=_point(
            "Los Arcos", 42.5715, -2.1918, 21.3, "All services",
            "Town centered around the Church of Santa María.",
        ),
        ascent=310,
        descent=264,
    ),
    8: RouteDetail(
        day=8,
        title="Los Arcos to Logroño",
        start_point=_point(
            "Los Arcos", 42.5715, -2.1918, 0.0, "All services",
            "Cross the River Odrón and follow the path through vineyards.",
        ),
        waypoints=(
            _point("Torres del Río", 42.5518, -2.2712, 7.6, "Bar, fountain",
                   "Octagonal Church of the Holy Sepulchre."),
            _point("Viana", 42.5157, -2.3715, 17.8, "All services",
                   "Historic walled town with the Church of Santa María."),
            _point("Navarre-La Rioja Border", 42.4830, -2.4180, 20.1, None,
                   "Cross into La Rioja, marked by a stone monument."),
        ),
        end_point=_point(
            "Logroño", 42.4660, -2.4450, 28.2, "All services",
            "Enter via the Puente de Piedra.",
        ),
        ascent=150,
        descent=185,
    ),
    9: RouteDetail(
        day=9,
        title="Logroño to Nájera",
        start_point=_point(
            "Logroño", 42.4660, -2.4450, 0.0, "All services",
            "Exit past Parque de la Grajera through the vineyards.",
        ),
        waypoints=(
            _point("Navarrete", 42.4297, -2.5621, 12.9, "Bars, restaurants, shops",
                   "Town known for pottery and the Church of the Assumption."),
            _point("Ventosa", 42.4040, -2.6280, 18.2, "Bar, fountain"),
        ),
        end_point=_point(
            "Nájera", 42.4160, -2.7290, 29.0, "All services",
            "Visit the Monastery of Santa María la Real.",
        ),
        ascent=185,
        descent=130,
    ),
    10: RouteDetail(
        day=10,
        title="Nájera to Santo Domingo de la Calzada",
        start_point=_point(
            "Nájera", 42.4160, -2.7290, 0.0, "All services",
            "Cross the Najerilla River and climb through grain fields.",
        ),
        waypoints=(
            _point("Azofra", 42.4240, -2.8010, 5.5, "Bar, fountain, store"),
            _point("Cirueña", 42.4120, -2.8960, 12.0, "Bar"),
        ),
        end_point=_point(
            "Santo Domingo de la Calzada", 42.4400, -2.9530, 21.0, "All services",
            "Visit the cathedral with its live chickens.",
        ),
        ascent=220,
        descent=170,
    ),
    11: RouteDetail(
        day=11,
        title="Santo Domingo de la Calzada to Belorado",
        start_point=_point(
            "Santo Domingo de la Calzada", 42.4400, -2.9530, 0.0, "All services",
            "Pass the stone crosses marking the way into the province of Burgos.",
        ),
        waypoints=(
            _point("Grañón", 42.4500, -3.0270, 6.2, "Bar, fountain",
                   "Last village in La Rioja."),
            _point("Redecilla del Camino", 42.4380, -3.0640, 7.8, "Bar, fountain",
                   "First village in Castilla y León."),
            _point("Viloria de Rioja", 42.4260, -3.1010, 9.3, "Water",
                   "Birthplace of Santo Domingo."),
            _point("Villamayor del Río", 42.4270, -3.1360, 12.7, "Bar",
                   "Continue along the N-120."),
        ),
        end_point=_point(
            "Belorado", 42.4200, -3.1910, 22.7, "All services",
            "Medieval town with an arcaded Plaza Mayor.",
        ),
        ascent=170,
        descent=250,
    ),
}


def _derive_from_catalog(day: int) -> Optional[RouteDetail]:
    destination = get_destination(day)
    previous = get_destination(day - 1)
    if destination is None or previous is None:
        return None

    end_name = destination.location_name.split(" to ")[-1]
    start_name = previous.location_name.split(" to ")[-1]
    return RouteDetail(
        day=day,
        title=f"{start_name} to {end_name}",
        start_point=LocationPoint(
            name=start_name,
            coordinate=previous.coordinate,
            distance=0.0,
        ),
        end_point=LocationPoint(
            name=end_name,
            coordinate=destination.coordinate,
            distance=destination.distance,
            services=destination.hotel_name,
        ),
    )


def get_route_detail(day: int) -> Optional[RouteDetail]:
    """Route detail for ``day``, or None for days outside the itinerary."""
    detail = _ROUTE_DETAILS.get(day)
    if detail is not None:
        return detail

    derived = _derive_from_catalog(day)
    if derived is None:
        logger.debug(f"No route detail for day {day}")
    return derived
