# Labels used when building timeline titles server-side
LABELS = {
    "en": {
        "check_in": "Check-in",
        "check_out": "Check-out",
        "car_pickup": "Car Pickup",
        "car_return": "Car Return",
        "driving_route": "Driving route",
        "flight": "Flight",
        "train": "Train",
        "bus": "Bus",
        "ferry": "Ferry",
        "car_rental": "Car Rental",
        "other": "By Car",
    },
    "he": {
        "check_in": "צ'ק-אין",
        "check_out": "צ'ק-אאוט",
        "car_pickup": "איסוף רכב",
        "car_return": "החזרת רכב",
        "driving_route": "מסלול נסיעה",
        "flight": "טיסה",
        "train": "רכבת",
        "bus": "אוטובוס",
        "ferry": "מעבורת",
        "car_rental": "השכרת רכב",
        "other": "ברכב",
    },
}

SUPPORTED_LANGUAGES = tuple(LABELS)


def t(key: str, language: str = "en") -> str:
    table = LABELS.get(language, LABELS["en"])
    return table.get(key, LABELS["en"].get(key, key))
