"""
Build every table, chart and map from the World Cup CSVs and write them to disk.

Usage:
    worldcup-history --top_n 10 --data_dir data/raw --output_dir reports

Outputs (inside output_dir):
- tables/stadiums.csv, tables/country_goals.csv, tables/top_scorers.csv
- figures/top_scorers.png, figures/country_goals.png
- maps/stadiums_map.html, maps/country_goals_map.html
"""

import argparse
import os

from .config import REPORTS_DIR, TOP_SCORERS_DEFAULT, data_paths
from .data_loading import make_csv_data_access
from .pipeline import build_outputs
from .utils import setup_logging
from .viz import plot_bar_chart, save_marker_map


def _ensure_output_dirs(output_dir: str) -> dict:
    """Create the output subfolders if missing."""
    dirs = {name: os.path.join(output_dir, name) for name in ("tables", "figures", "maps")}
    for path in dirs.values():
        os.makedirs(path, exist_ok=True)
    return dirs


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="World Cup history maps and charts")
    parser.add_argument("--top_n", type=int, default=TOP_SCORERS_DEFAULT)
    parser.add_argument("--data_dir", default=None)
    parser.add_argument("--output_dir", default=REPORTS_DIR)
    parser.add_argument("--log_level", default="INFO")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    access = make_csv_data_access(data_paths(args.data_dir) if args.data_dir else None)
    outputs = build_outputs(access, top_n=args.top_n)
    dirs = _ensure_output_dirs(args.output_dir)

    saved = []
    for key, filename in [("stadiums", "stadiums.csv"), ("country_goals", "country_goals.csv"),
                          ("player_goals", "top_scorers.csv")]:
        path = os.path.join(dirs["tables"], filename)
        outputs[key].to_csv(path, index=False)
        saved.append(path)

    for key, filename in [("top_scorers_chart", "top_scorers.png"), ("country_goals_chart", "country_goals.png")]:
        path = os.path.join(dirs["figures"], filename)
        plot_bar_chart(outputs[key], save_path=path)
        saved.append(path)

    maps = [
        ("stadium_markers", "stadiums_map.html", "World Cup Final Stadiums"),
        ("country_markers", "country_goals_map.html", "World Cup Goals by Country"),
    ]
    for key, filename, title in maps:
        path = os.path.join(dirs["maps"], filename)
        save_marker_map(outputs[key], path, title=title)
        saved.append(path)

    for path in saved:
        print("Saved:", path)


if __name__ == "__main__":
    main()
