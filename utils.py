# utils.py
import os
import re
import sys

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from analysis import STAT_KEYS, calculate_solution_stats
from constants import BASE_NAME, GRID_SIZE


def list_solution_files(directory, base_name=BASE_NAME, extension="parquet"):
    """Indexed exports such as tiling_solutions_3.parquet, as (index, path) sorted by index."""
    if not os.path.isdir(directory):
        return []
    pattern = re.compile(rf"{re.escape(base_name)}_(\d+)\.{re.escape(extension)}$")
    indexed = []
    for filename in os.listdir(directory):
        match = pattern.match(filename)
        if match:
            indexed.append((int(match.group(1)), os.path.join(directory, filename)))
    return sorted(indexed)


def get_next_filename(directory, base_name=BASE_NAME, extension="parquet"):
    """
    Path for the next export in ``directory``, creating it if needed.
    With generated_solutions/tiling_solutions_1.parquet present this returns
    generated_solutions/tiling_solutions_2.parquet.
    """
    os.makedirs(directory, exist_ok=True)
    existing = list_solution_files(directory, base_name, extension)
    next_index = existing[-1][0] + 1 if existing else 1
    return os.path.join(directory, f"{base_name}_{next_index}.{extension}")


def format_solution(solution, catalog):
    """Renders a 3x3 grid of (tile_index, orientation) as rows of tile ids plus a blank line."""
    lines = ["".join(str(catalog[tile_index].id) for tile_index, _ in row) for row in solution]
    return "\n".join(lines) + "\n\n"


def print_solution(solution, catalog, stream=None):
    (stream or sys.stdout).write(format_solution(solution, catalog))


def solution_to_flat_dict(solution, catalog):
    """Converts a 3x3 grid solution into a flat dictionary for a DataFrame."""
    center_index, _ = solution[GRID_SIZE // 2][GRID_SIZE // 2]
    flat_data = {"center": catalog[center_index].id}
    for r, row_data in enumerate(solution):
        for c, (tile_index, orientation) in enumerate(row_data):
            flat_data[f'piece_{r}{c}'] = catalog[tile_index].id
            flat_data[f'orient_{r}{c}'] = orientation
    return flat_data


class SolutionWriter:
    """Manages writing solutions to a Parquet file in chunks."""
    def __init__(self, file_path, catalog, tile_edges, chunk_size=100_000, silent=False):
        self.file_path = file_path
        self.catalog = catalog
        self.tile_edges = tile_edges
        self.chunk_size = chunk_size
        self.silent = silent
        self.writer = None
        self._schema = None
        self._solutions_chunk = []
        self.total_solutions_found = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._solutions_chunk:
            self._write_chunk()
        if self.writer is None and exc_type is None:
            # No solution at all: still leave a readable, empty file behind
            self._write_empty()
        if self.writer:
            self.writer.close()
        if not self.silent:
            print(f"✅ Saved {self.total_solutions_found} solutions to '{self.file_path}'.", file=sys.stderr)

    def _get_schema(self):
        """Creates the data type schema for the DataFrame."""
        if self._schema:
            return self._schema

        schema = {"center": 'uint8'}
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                schema[f'piece_{r}{c}'] = 'uint8'
                schema[f'orient_{r}{c}'] = 'uint8'
        for key in STAT_KEYS:
            schema[key] = 'uint8'

        self._schema = schema
        return self._schema

    def _write_table(self, df):
        table = pa.Table.from_pandas(df, preserve_index=False)
        if self.writer is None:
            self.writer = pq.ParquetWriter(self.file_path, table.schema)
        self.writer.write_table(table)

    def _write_chunk(self):
        """Converts the chunk to a DataFrame, applies the schema, and writes to Parquet."""
        if not self._solutions_chunk:
            return

        df = pd.DataFrame(self._solutions_chunk).astype(self._get_schema())
        self._write_table(df)

        if not self.silent:
            print(f" ... Wrote chunk. Total solutions so far: {self.total_solutions_found}", file=sys.stderr)
        self._solutions_chunk = []

    def _write_empty(self):
        schema = self._get_schema()
        df = pd.DataFrame({col: pd.Series(dtype=dtype) for col, dtype in schema.items()})
        self._write_table(df)

    def add_solution(self, solution):
        flat_solution = solution_to_flat_dict(solution, self.catalog)
        solution_stats = calculate_solution_stats(solution, self.tile_edges)
        self._solutions_chunk.append({**flat_solution, **solution_stats})
        self.total_solutions_found += 1
        if len(self._solutions_chunk) >= self.chunk_size:
            self._write_chunk()

    def process_solutions(self, solutions):
        for solution in solutions:
            self.add_solution(solution)
