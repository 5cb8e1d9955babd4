from pathlib import Path

ROOT_PATH = Path(__file__).parent.parent
SAMPLE_KENNEL_PATH = ROOT_PATH/'sample_kennel.json'
