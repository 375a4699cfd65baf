from os import getenv
from pathlib import Path

# Repository root for source and editable installs only; installed wheels need the env vars below.
ROOT_DIR = Path(__file__).resolve().parents[2]

DATA_DIR = Path(getenv("CARFACTS_DATA_DIR", ROOT_DIR / "data"))
PROLOG_DIR = Path(getenv("CARFACTS_PROLOG_DIR", ROOT_DIR / "prolog"))

CSV_PATH = DATA_DIR / "car_details.csv"
PROLOG_PATH = PROLOG_DIR / "car_knowledge_base.pl"

PREVIEW_SIZE = 5
AFFORDABLE_MIN = 0
AFFORDABLE_MAX = 300_000
TOP_N = 3
MARKUP_PERCENTAGE = 10
CURRENCY = "RM"
