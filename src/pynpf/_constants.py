"""Internal constants shared across the library."""

REFERENCE_URL = "https://sahavre.fr/wp/les-coulisses-de-la-regle-npf/"
REFERENCE_TITLE = "Les coulisses de la règle NPF"

# ------------------------------------------------------------------
# Sensor geometry  (keyed by SensorSize value)
# ------------------------------------------------------------------

SENSOR_WIDTH_MM: dict[str, float] = {
    "full": 36.0,
    "apsc-c": 22.3,
    "apsc-x": 23.5,
    "mft": 17.3,
}

CROP_FACTOR: dict[str, float] = {
    "full": 1.0,
    "apsc-c": 1.6,
    "apsc-x": 1.5,
    "mft": 2.0,
}

# ------------------------------------------------------------------
# Trail tolerance multiplier k  (keyed by TrailType value)
# ------------------------------------------------------------------

TRAIL_FACTOR: dict[str, float] = {
    "pin-point": 1.0,
    "slight": 1.5,
    "visible": 2.0,
}

# ------------------------------------------------------------------
# Form control ranges  (min, max, step)
# ------------------------------------------------------------------

PIXEL_WIDTH_RANGE: tuple[int, int, int] = (1, 10000, 1)
FOCAL_LENGTH_RANGE: tuple[int, int, int] = (1, 1000, 1)
F_NUMBER_RANGE: tuple[float, float, float] = (0.7, 36.0, 0.1)
