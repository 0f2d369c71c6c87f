"""
Small reference tables shaped like the bd-geocode phpMyAdmin JSON exports.

Ids are deliberately inconsistent the way the real exports are: division ids
are strings, some district_id values are ints, and the upazila export uses
"DistrictID" instead of "district_id".
"""

HEADER = {"type": "header", "version": "5.0.2", "comment": "Export to JSON plugin for PHPMyAdmin"}
DATABASE = {"type": "database", "name": "bd_geocode"}


def envelope(name: str, rows: list[dict]) -> list[dict]:
    return [HEADER, DATABASE, {"type": "table", "name": name, "database": "bd_geocode", "data": rows}]


DIVISIONS = [
    {"id": "1", "name": "Chattagram", "bn_name": "চট্টগ্রাম", "url": "www.chittagongdiv.gov.bd"},
    {"id": "6", "name": "Dhaka", "bn_name": "ঢাকা", "url": "www.dhakadiv.gov.bd"},
    {"id": "5", "name": "Sylhet", "bn_name": "সিলেট", "url": "www.sylhetdiv.gov.bd"},
]

DISTRICTS = [
    {"id": "1", "division_id": "1", "name": "Comilla", "bn_name": "কুমিল্লা", "lat": "23.4682747", "lon": "91.1788135"},
    {"id": "47", "division_id": "6", "name": "Dhaka", "bn_name": "ঢাকা", "lat": "23.7115253", "lon": "90.4111451"},
    {"id": "41", "division_id": 6, "name": "Gazipur", "bn_name": "গাজীপুর", "lat": "24.0022858", "lon": "90.4264283"},
    {"id": "42", "division_id": "6", "name": "Narayanganj", "bn_name": "নারায়ণগঞ্জ", "lat": "23.63366", "lon": "90.496482"},
    {"id": "36", "division_id": "5", "name": "Sylhet", "bn_name": "সিলেট", "lat": "24.8998373", "lon": "91.8259625"},
]

UPAZILAS = [
    {"id": "493", "DistrictID": "47", "name": "Dhanmondi", "bn_name": "ধানমন্ডি"},
    {"id": "494", "DistrictID": 47, "name": "Gulshan", "bn_name": "গুলশান"},
    {"id": "495", "DistrictID": "47", "name": "Mirpur", "bn_name": "মিরপুর"},
    {"id": "310", "DistrictID": "41", "name": "Kaliakair", "bn_name": "কালিয়াকৈর"},
    {"id": "1", "DistrictID": "1", "name": "Debidwar", "bn_name": "দেবিদ্বার"},
]

AREAS = [
    {"upazila_id": 493, "district_id": 47, "name": "Dhanmondi", "bn_name": "ধানমন্ডি",
     "areas": ["Dhanmondi 1", "Dhanmondi 2", "Jigatola"], "bn_areas": ["ধানমন্ডি ১", "ধানমন্ডি ২", "জিগাতলা"]},
    {"upazila_id": 494, "district_id": 47, "name": "Gulshan", "bn_name": "গুলশান",
     "areas": ["Gulshan 1", "Gulshan 2", "Banani", "Niketan"], "bn_areas": ["গুলশান ১", "গুলশান ২", "বনানী"]},
]

RAW_DIVISIONS = envelope("divisions", DIVISIONS)
RAW_DISTRICTS = envelope("districts", DISTRICTS)
RAW_UPAZILAS = envelope("upazilas", UPAZILAS)
RAW_AREAS = envelope("area", AREAS)

# Slug-id dataset with localities stored on the sub-district row itself.
SLUG_DIVISIONS = [
    {"id": "dhaka", "name": "Dhaka", "bn_name": "ঢাকা"},
    {"id": "chittagong", "name": "Chittagong", "bn_name": "চট্টগ্রাম"},
]
SLUG_DISTRICTS = [
    {"id": "dhaka-district", "division_id": "dhaka", "name": "Dhaka", "bn_name": "ঢাকা"},
    {"id": "gazipur", "division_id": "dhaka", "name": "Gazipur", "bn_name": "গাজীপুর"},
]
SLUG_SUB_DISTRICTS = [
    {"id": "dhanmondi", "district_id": "dhaka-district", "name": "Dhanmondi", "bn_name": "ধানমন্ডি",
     "localities": ["Dhanmondi 1", "Dhanmondi 2"], "localitiesNative": ["ধানমন্ডি ১", "ধানমন্ডি ২"]},
]
