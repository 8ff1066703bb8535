"""Configuration for supported cities, scoring weights and catalog bounds."""

from dataclasses import dataclass, field
from pathlib import Path


# === CITY CONFIGURATION ===
@dataclass
class CityConfig:
    """Static lookup data for a city."""

    name: str
    state: str
    lat: float
    lng: float
    population: int
    base_rent: int
    # Amenity density multiplier (city tier)
    tier_multiplier: float = 1.0
    # Metro cities get a transit network and a lifestyle bump
    has_metro: bool = False
    currency: str = "INR"
    # Well-known areas used to seed the catalog
    areas: list[str] = field(default_factory=list)


CITIES: dict[str, CityConfig] = {
    "delhi": CityConfig(
        name="Delhi",
        state="Delhi",
        lat=28.6139,
        lng=77.2090,
        population=32_000_000,
        base_rent=35000,
        tier_multiplier=1.4,
        has_metro=True,
        areas=[
            "Connaught Place", "Khan Market", "Karol Bagh", "Lajpat Nagar", "South Extension",
            "Vasant Kunj", "Dwarka", "Rohini", "Pitampura", "Janakpuri", "Laxmi Nagar",
            "Preet Vihar", "Mayur Vihar", "Kalkaji", "Greater Kailash", "Defence Colony",
            "Hauz Khas", "Saket", "Malviya Nagar", "Green Park", "Nehru Place",
            "Okhla", "Noida Sector 18", "Gurgaon Sector 14", "Faridabad", "Ghaziabad",
        ],
    ),
    "mumbai": CityConfig(
        name="Mumbai",
        state="Maharashtra",
        lat=19.0760,
        lng=72.8777,
        population=21_000_000,
        base_rent=45000,
        tier_multiplier=1.5,
        has_metro=True,
        areas=[
            "Bandra West", "Andheri East", "Andheri West", "Juhu", "Versova", "Powai",
            "Hiranandani Gardens", "Thane West", "Mulund", "Ghatkopar", "Kurla",
            "Santa Cruz", "Vile Parle", "Malad", "Borivali", "Kandivali", "Dahisar",
            "Lower Parel", "Worli", "Prabhadevi", "Dadar", "Matunga", "Sion",
            "Chembur", "Vikhroli", "Bhandup", "Kanjurmarg", "Navi Mumbai",
        ],
    ),
    "bangalore": CityConfig(
        name="Bangalore",
        state="Karnataka",
        lat=12.9716,
        lng=77.5946,
        population=13_000_000,
        base_rent=30000,
        tier_multiplier=1.3,
        has_metro=True,
        areas=[
            "Koramangala", "Indiranagar", "Whitefield", "Electronic City", "BTM Layout",
            "HSR Layout", "Jayanagar", "Basavanagudi", "Malleshwaram", "Rajajinagar",
            "Sadashivanagar", "RT Nagar", "Hebbal", "Yelahanka", "Marathahalli",
            "Bellandur", "Sarjapur Road", "Bannerghatta Road", "JP Nagar", "Banashankari",
            "Vijayanagar", "Nagarbhavi", "Kengeri", "Bommanahalli", "Hosur Road",
        ],
    ),
    "chennai": CityConfig(
        name="Chennai",
        state="Tamil Nadu",
        lat=13.0827,
        lng=80.2707,
        population=11_000_000,
        base_rent=25000,
        tier_multiplier=1.2,
        has_metro=True,
        areas=[
            "T Nagar", "Anna Nagar", "Adyar", "Velachery", "OMR", "Porur", "Tambaram",
            "Chrompet", "Pallikaranai", "Sholinganallur", "Thoraipakkam", "Perungudi",
            "Mylapore", "Nungambakkam", "Egmore", "Kilpauk", "Aminjikarai", "Vadapalani",
            "Ashok Nagar", "KK Nagar", "Saidapet", "Guindy", "Kodambakkam", "West Mambalam",
        ],
    ),
    "kolkata": CityConfig(
        name="Kolkata",
        state="West Bengal",
        lat=22.5726,
        lng=88.3639,
        population=15_000_000,
        base_rent=20000,
        tier_multiplier=1.1,
        has_metro=True,
    ),
    "hyderabad": CityConfig(
        name="Hyderabad",
        state="Telangana",
        lat=17.3850,
        lng=78.4867,
        population=10_000_000,
        base_rent=28000,
        tier_multiplier=1.2,
        has_metro=True,
        areas=[
            "Banjara Hills", "Jubilee Hills", "Hitech City", "Gachibowli", "Kondapur",
            "Madhapur", "Kukatpally", "Miyapur", "Begumpet", "Secunderabad", "Ameerpet",
            "Somajiguda", "Punjagutta", "Lakdi Ka Pul", "Abids", "Koti", "Dilsukhnagar",
            "LB Nagar", "Uppal", "Kompally", "Bachupally", "Nizampet", "Manikonda",
        ],
    ),
    "pune": CityConfig(
        name="Pune",
        state="Maharashtra",
        lat=18.5204,
        lng=73.8567,
        population=7_000_000,
        base_rent=25000,
        tier_multiplier=1.1,
        areas=[
            "Koregaon Park", "Viman Nagar", "Kharadi", "Hadapsar", "Magarpatta",
            "Aundh", "Baner", "Wakad", "Hinjewadi", "Pimpri", "Chinchwad", "Akurdi",
            "Deccan", "Shivajinagar", "Camp", "Kothrud", "Karve Nagar", "Warje",
            "Katraj", "Kondhwa", "Wanowrie", "Undri", "Pisoli", "Wagholi",
        ],
    ),
    "ahmedabad": CityConfig(
        name="Ahmedabad",
        state="Gujarat",
        lat=23.0225,
        lng=72.5714,
        population=8_000_000,
        base_rent=22000,
        tier_multiplier=1.0,
    ),
    "surat": CityConfig(
        name="Surat",
        state="Gujarat",
        lat=21.1702,
        lng=72.8311,
        population=6_000_000,
        base_rent=18000,
        tier_multiplier=0.9,
    ),
    "jaipur": CityConfig(
        name="Jaipur",
        state="Rajasthan",
        lat=26.9124,
        lng=75.7873,
        population=4_000_000,
        base_rent=20000,
        tier_multiplier=1.0,
    ),
    "lucknow": CityConfig(
        name="Lucknow",
        state="Uttar Pradesh",
        lat=26.8467,
        lng=80.9462,
        population=3_000_000,
        base_rent=15000,
        tier_multiplier=0.9,
    ),
    "kanpur": CityConfig(
        name="Kanpur",
        state="Uttar Pradesh",
        lat=26.4499,
        lng=80.3319,
        population=3_000_000,
        base_rent=12000,
        tier_multiplier=0.8,
    ),
}

# Defaults for cities outside the table
DEFAULT_STATE = "India"
DEFAULT_LAT = 28.6139
DEFAULT_LNG = 77.2090
DEFAULT_POPULATION = 2_000_000
DEFAULT_BASE_RENT = 20000
DEFAULT_TIER_MULTIPLIER = 1.0


def is_known_city(city: str) -> bool:
    """Return True if the city has an entry in the lookup table."""
    return bool(city) and city.strip().lower() in CITIES


def get_city_config(city: str) -> CityConfig:
    """Get configuration for a city, falling back to defaults for unknown cities."""
    key = (city or "").strip().lower()
    if key in CITIES:
        return CITIES[key]
    return CityConfig(
        name=(city or "").strip(),
        state=DEFAULT_STATE,
        lat=DEFAULT_LAT,
        lng=DEFAULT_LNG,
        population=DEFAULT_POPULATION,
        base_rent=DEFAULT_BASE_RENT,
        tier_multiplier=DEFAULT_TIER_MULTIPLIER,
    )


def known_city_names() -> list[str]:
    """Display names of all supported cities, in table order."""
    return [c.name for c in CITIES.values()]


# === FIXED KEY SETS ===
AMENITY_KEYS = (
    "restaurants",
    "schools",
    "hospitals",
    "parks",
    "shopping",
    "entertainment",
    "gym",
    "public_transport",
)

LIFESTYLE_KEYS = (
    "quietness",
    "nightlife",
    "walkability",
    "green_spaces",
    "cultural_activities",
    "family_friendly",
)

# === SCORING ===
SCORING_WEIGHTS = {
    "amenities": 0.30,
    "lifestyle": 0.25,
    "budget": 0.20,
    "commute": 0.15,
    "demographics": 0.10,
}

# (max ratio, score) steps; anything above the last step scores RATIO_FLOOR_SCORE
BUDGET_STEPS = [(0.7, 1.0), (0.9, 0.8), (1.1, 0.6), (1.3, 0.3)]
COMMUTE_STEPS = [(0.5, 1.0), (0.8, 0.8), (1.0, 0.6), (1.5, 0.3)]
RATIO_FLOOR_SCORE = 0.1

AMENITY_SATURATION = 10  # count at which an amenity scores fully
REASON_SCORE_THRESHOLD = 0.7
TOP_PRIORITY_IMPORTANCE = 8
REASON_MIN_AMENITY_COUNT = 5
STRENGTH_AMENITY_COUNT = 8
WEAKNESS_AMENITY_COUNT = 2
STRENGTH_LIFESTYLE_SCORE = 8
WEAKNESS_LIFESTYLE_SCORE = 4

# Display bands for match scores (table colors, spreadsheet fills)
GOOD_MATCH_SCORE = 80
FAIR_MATCH_SCORE = 60

# Straight-line commute speeds in km/h
COMMUTE_SPEEDS_KMH = {
    "walking": 5,
    "cycling": 15,
    "public_transport": 25,
    "car": 30,
}

# === CATALOG ===
CATALOG_MIN_SIZE = 20
CATALOG_PAD_TARGET = 25
CATALOG_MAX_SIZE = 30

SYNTHETIC_AREA_TYPES = ["Sector", "Phase", "Extension", "Colony", "Nagar", "Vihar", "Park", "Gardens"]
SYNTHETIC_AREA_MAX_NUMBER = 50

FALLBACK_AREAS = [
    "Central Business District", "North Zone", "South Extension", "East Side", "West End",
    "Old City", "New Town", "IT Hub", "Residential Complex", "Garden City",
    "Metro Station Area", "Commercial Center", "University Area", "Industrial Zone",
    "Heritage Quarter", "Modern Township", "Suburban Area", "Downtown", "Uptown",
    "Riverside", "Hillside", "Market District", "Cultural Quarter", "Tech Park",
    "Green Belt", "Financial District", "Entertainment Zone", "Shopping Complex",
]

# Coordinates are jittered within +/- half of this around the city center
COORDINATE_SPREAD_DEG = 0.2

NO_METRO_LABEL = "Not Available"
NO_METRO_DISTANCE = -1
METRO_LINE_COUNT = 6

# === DIRECTORY LOOKUP ===
DIRECTORY_USER_AGENT = "neighborfit"
DIRECTORY_TIMEOUT = 10  # seconds
DIRECTORY_SEARCH_LIMIT = 20
DIRECTORY_MAX_RESULTS = 15
CACHE_TTL_SECONDS = 30 * 60

# === OUTPUT ===
OUTPUT_DIR = Path("output")
EXCEL_FILENAME = "neighborhood_matches.xlsx"
