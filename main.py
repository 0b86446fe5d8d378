# main.py
import argparse
import multiprocessing
import sys

from constants import BASE_NAME, CHUNK_SIZE, OUTPUT_DIR, TILE_CATALOG
from pieces import build_catalog, generate_tile_edges
from post_process import print_summary
from solver import solve_for_center
from utils import SolutionWriter, get_next_filename, print_solution


def solve_for_task(task_config):
    return solve_for_center(task_config['center_index'], task_config['tile_edges'])


def build_tasks(tile_edges):
    # One search tree per center tile, in catalog order. The center tile is never rotated.
    return [
        {'id': center_index, 'center_index': center_index, 'tile_edges': tile_edges}
        for center_index in range(len(tile_edges))
    ]


def run_tasks(tasks, workers=1):
    """Solves every task and returns the solution lists in task order."""
    if workers > 1:
        with multiprocessing.Pool(workers) as pool:
            return pool.map(solve_for_task, tasks)
    return [solve_for_task(task) for task in tasks]


def find_all_solutions(catalog, workers=1):
    tile_edges = generate_tile_edges(catalog)
    results = run_tasks(build_tasks(tile_edges), workers)
    return [solution for task_solutions in results for solution in task_solutions], tile_edges


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Enumerates every solution of the 3x3 creature tile puzzle.")
    parser.add_argument("--workers", type=int, default=1,
                        help="Number of processes; each one solves whole center-tile search trees")
    parser.add_argument("--save", action="store_true",
                        help=f"Also write the solutions to {OUTPUT_DIR}/{BASE_NAME}_<n>.parquet")
    return parser.parse_args(argv)


def main(argv=None, catalog_spec=TILE_CATALOG, stream=None):
    args = parse_args(argv)
    stream = stream or sys.stdout

    catalog = build_catalog(catalog_spec)
    solutions, tile_edges = find_all_solutions(catalog, args.workers)

    for solution in solutions:
        print_solution(solution, catalog, stream)

    if args.save:
        file_path = get_next_filename(OUTPUT_DIR, base_name=BASE_NAME)
        with SolutionWriter(file_path, catalog, tile_edges, CHUNK_SIZE) as writer:
            writer.process_solutions(solutions)
        print_summary(file_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
