# post_process.py
import os
import sys

import duckdb

from constants import BASE_NAME, OUTPUT_DIR
from utils import list_solution_files


def find_latest_solution_file(directory, base_name=BASE_NAME, extension="parquet"):
    """Returns (path, None) for the highest-numbered export, or (None, error message)."""
    if not os.path.isdir(directory):
        return None, f"Solutions directory '{directory}' not found."
    exports = list_solution_files(directory, base_name, extension)
    if not exports:
        return None, f"No solution file matching '{base_name}_*.{extension}' found in '{directory}'."
    return exports[-1][1], None


def summarize_solutions(parquet_file_path):
    """
    Counts the exported solutions per center tile with DuckDB, reading the
    parquet file in place. Returns a DataFrame (center, solutions).
    """
    query = f"""
        SELECT CAST(center AS INTEGER) AS center, COUNT(*) AS solutions
        FROM read_parquet('{parquet_file_path}')
        GROUP BY center
        ORDER BY center;
    """
    con = duckdb.connect()
    try:
        return con.execute(query).fetchdf()
    finally:
        con.close()


def print_summary(parquet_file_path):
    try:
        summary = summarize_solutions(parquet_file_path)
    except duckdb.Error as e:
        print(f"❌ Could not summarise '{parquet_file_path}': {e}", file=sys.stderr)
        return None

    total = int(summary["solutions"].sum()) if not summary.empty else 0
    print(f"Solutions per center tile in '{parquet_file_path}':", file=sys.stderr)
    for row in summary.itertuples(index=False):
        print(f"  -> center {row.center}: {row.solutions}", file=sys.stderr)
    print(f"✅ {total} solutions in total.", file=sys.stderr)
    return summary


def main():
    parquet_file, error = find_latest_solution_file(OUTPUT_DIR)
    if error:
        print(f"❌ ERROR: {error}", file=sys.stderr)
        return 1
    print_summary(parquet_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
