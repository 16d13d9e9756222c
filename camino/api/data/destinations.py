# camino/api/data/destinations.py
"""The Camino Francés itinerary, one destination per day.

Day 0 is the arrival in Saint-Jean-Pied-de-Port; every later day names the
town where the stage ends and the lodging booked there.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Tuple

from camino.api.geo import haversine_m
from camino.api.models import Coordinate, Destination

START_DATE = date(2025, 5, 1)

# (day, location, hotel, lat, lng, km walked, description)
_ITINERARY = [
    (0, "Saint-Jean-Pied-de-Port", "Villa Goxoki", 43.1636, -1.2386, 0.0,
     "Starting point of the Camino Francés, a medieval town with all services. "
     "Highlights: Porte Saint-Jacques, Rue de la Citadelle."),
    (1, "Saint-Jean-Pied-de-Port to Roncesvalles", "Hotel Roncesvalles", 43.0093, -1.3192, 23.9,
     "Cross the Pyrenees via Orisson (tougher, scenic) or Valcarlos (easier). "
     "Elevation +1282 m / -504 m. Highlights: Collegiate Church of Santa María."),
    (2, "Roncesvalles to Zubiri", "Hosteria de Zubiri", 42.9321, -1.5036, 21.5,
     "Descend through the Navarrese Pyrenees, alpine meadows and beech forests. "
     "Highlights: Bridge of Rabies (14th century)."),
    (3, "Zubiri to Pamplona", "Hotel A Pamplona", 42.8110, -1.6450, 21.8,
     "A flat stage along the Arga River ending in Pamplona. "
     "Highlights: Old Town, Cathedral of Santa María, San Fermín streets."),
    (4, "Pamplona to Puente la Reina", "Hotel Jakue", 42.6723, -1.8154, 23.6,
     "Climb the Sierra del Perdón and descend to Puente la Reina. "
     "Highlights: Romanesque bridge, Church of Santiago."),
    (5, "Puente la Reina to Estella", "Hotel Tximista", 42.6705, -2.0320, 21.8,
     "Vineyards and rural Navarra. Highlights: Cirauqui, medieval town center."),
    (6, "Estella", "Alda Estella Hostal", 42.6708, -2.0295, 0.0,
     "Rest day. Visit the Church of San Pedro de la Rúa and the Pilgrim's fountain."),
    (7, "Los Arcos", "Pensión Los Arcos", 42.5715, -2.1918, 21.0,
     "Rolling hills through vineyards and olive groves. "
     "Highlights: Church of Santa María de los Arcos."),
    (8, "Logroño", "Hotel Ciudad de Logroño", 42.4660, -2.4450, 28.0,
     "Enter the Rioja wine region. Highlights: Calle Laurel, Co-cathedral of Santa María de la Redonda."),
    (9, "Nájera", "Hotel Duques de Nájera", 42.4160, -2.7290, 30.0,
     "Follow the Najerilla River valley. Highlights: Monastery of Santa María la Real."),
    (10, "Santo Domingo de la Calzada", "El Molino de Floren", 42.4400, -2.9530, 21.0,
     "Cross the Oja River valley. Highlights: the cathedral with live chickens, medieval bridge."),
    (11, "Belorado", "Hostel Punto B", 42.4200, -3.1910, 22.5,
     "Leave La Rioja for Castilla y León. Highlights: Church of Santa María."),
    (12, "San Juan de Ortega", "Hotel Rural la Iglesia", 42.3760, -3.4370, 24.0,
     "Cross the Montes de Oca. Highlights: Romanesque church."),
    (13, "Burgos", "Hotel Cordón", 42.3410, -3.7010, 26.0,
     "Pass Atapuerca into the historic city. Highlights: Cathedral of Burgos, Old Town."),
    (14, "Hornillos del Camino", "De Sol A Sol", 42.3130, -4.0460, 20.0,
     "Onto the Meseta plateau. Highlights: Roman road, medieval bridge."),
    (15, "Castrojeriz", "A Cien Leguas", 42.2900, -4.1380, 19.0,
     "Through Hontanas along the old road. Highlights: castle ruins, collegiate church."),
    (16, "Frómista", "Eco Hotel Doña Mayor", 42.2670, -4.4060, 25.0,
     "Cross the Pisuerga River. Highlights: Church of San Martín."),
    (17, "Carrión de los Condes", "Hostal La Corte", 42.3380, -4.6030, 19.0,
     "Via Villalcázar de Sirga. Highlights: Monastery of San Zoilo."),
    (18, "Calzadilla de la Cueza", "Hostal Camino Real", 42.3630, -4.8860, 17.0,
     "A long empty stretch of the Meseta on the Roman road."),
    (19, "Sahagún", "Hostal Domus Viatoris", 42.3710, -5.0290, 22.0,
     "Cross the Cea River. Highlights: Church of San Tirso."),
    (20, "El Burgo Ranero", "Hotel Castillo El Burgo", 42.4220, -5.2200, 19.0,
     "Via Bercianos del Real Camino. Highlights: Church of San Pedro."),
    (21, "Mansilla de las Mulas", "Alberguería del Camino", 42.4990, -5.4170, 18.0,
     "Cross the Esla River. Highlights: medieval walls."),
    (22, "León", "Hotel Alda Vía León", 42.5990, -5.5710, 18.0,
     "Enter the historic city of León. Highlights: Cathedral, Old Town."),
    (23, "Villadangos del Páramo", "TBD", 42.5160, -5.7660, 20.0,
     "Cross the Páramo Leonés. Highlights: Church of Santiago."),
    (24, "Chozas de Abajo", "Albergue San Antonio", 42.5060, -5.6830, 15.0,
     "Via San Miguel del Camino. Highlights: Church of San Antonio."),
    (25, "Astorga", "Hotel Astur Plaza", 42.4570, -6.0560, 16.0,
     "Enter the historic city of Astorga. Highlights: Episcopal Palace, Cathedral."),
    (26, "Rabanal del Camino", "Hotel Rural Casa Indie", 42.4810, -6.2840, 20.0,
     "Begin the ascent into the Montes de León. Highlights: Church of Santa María."),
    (27, "Ponferrada", "Hotel El Castillo", 42.5460, -6.5960, 32.0,
     "Cross the highest point at Cruz de Ferro, descend via Molinaseca. Highlights: Templar Castle."),
    (28, "Villafranca del Bierzo", "Hostal Tres Campanas", 42.6060, -6.8110, 24.0,
     "Enter the Bierzo region via Cacabelos. Highlights: Church of Santiago."),
    (29, "O Cebreiro", "Casa Navarro", 42.7080, -7.0420, 28.0,
     "Steep climb into Galicia. Highlights: traditional pallozas, Church of Santa María."),
    (30, "Triacastela", "Complexo Xacobeo", 42.7550, -7.2370, 21.0,
     "Descend through the Galician hills via Hospital da Condesa."),
]


def _build_catalog() -> Tuple[Destination, ...]:
    catalog = []
    cumulative = 0.0
    for day, location, hotel, lat, lng, distance, content in _ITINERARY:
        cumulative += distance
        catalog.append(
            Destination(
                day=day,
                location_name=location,
                hotel_name=hotel,
                coordinate=Coordinate(lat, lng),
                distance=distance,
                cumulative_distance=round(cumulative, 1),
                content=content,
                date=START_DATE + timedelta(days=day),
            )
        )
    return tuple(catalog)


ALL_DESTINATIONS: Tuple[Destination, ...] = _build_catalog()


def get_all_destinations() -> List[Destination]:
    return list(ALL_DESTINATIONS)


def get_destination(day: int) -> Optional[Destination]:
    for destination in ALL_DESTINATIONS:
        if destination.day == day:
            return destination
    return None


def nearest_destination(coordinate: Coordinate) -> Tuple[Optional[Destination], float]:
    """Closest destination to ``coordinate`` and its distance in metres."""
    nearest = None
    best = float("inf")
    for destination in ALL_DESTINATIONS:
        distance = haversine_m(coordinate, destination.coordinate)
        if distance < best:
            nearest, best = destination, distance
    return nearest, best
