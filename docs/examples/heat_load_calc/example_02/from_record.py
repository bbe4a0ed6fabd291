"""
Example of reading a building record from a JSON file, calculating its heat
load and writing the results to another JSON file.
"""
import json
from pathlib import Path
import pandas as pd
from heatload.building import load_building, building_heat_load_to_record

DIR = Path(__file__).parent


def main():
    building = load_building(DIR / 'gebaeude.json')
    heat_load = building.get_heat_load()

    with pd.option_context(
        'display.max_rows', None,
        'display.max_columns', None,
        'display.width', 800
    ):
        print(building.ID)
        print(heat_load.get_summary())

    record = building_heat_load_to_record(heat_load)
    with open(DIR / 'heizlast.json', 'w', encoding='utf-8') as fh:
        json.dump(record, fh, ensure_ascii=False, indent=2)


if __name__ == '__main__':
    main()
