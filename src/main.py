from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import numpy as np
import pandas as pd

from geometry import Point, Rectangle
from quad_tree import DEFAULT_MAX_DEPTH, QuadTree


@dataclass
class IndexParams:

    "Παράμετροι του index και του ερωτήματος (περιοχή, πλήθος σημείων, query rectangle)."
    bounds_x: float = 0.0
    bounds_y: float = 0.0
    bounds_width: float = 600.0
    bounds_height: float = 600.0
    n_points: int = 5000
    seed: int = 42
    max_depth: int = DEFAULT_MAX_DEPTH
    query_x: float = 100.0
    query_y: float = 100.0
    query_width: float = 200.0
    query_height: float = 150.0

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(self.bounds_x, self.bounds_y, self.bounds_width, self.bounds_height)

    @property
    def query_rect(self) -> Rectangle:
        return Rectangle(self.query_x, self.query_y, self.query_width, self.query_height)


def load_points(path: str | Path) -> pd.DataFrame:
    df = pd.read_csv(path)
    print(f"[DATA] Raw rows: {len(df)}")
    return df


def generate_points(params: IndexParams) -> pd.DataFrame:

    "Δημιουργεί τυχαία σημεία ομοιόμορφα μέσα στα bounds."
    rng = np.random.default_rng(params.seed)
    xs = rng.uniform(params.bounds_x, params.bounds_x + params.bounds_width, params.n_points)
    ys = rng.uniform(params.bounds_y, params.bounds_y + params.bounds_height, params.n_points)
    df = pd.DataFrame({"x": xs, "y": ys})
    print(f"[DATA] Generated rows: {len(df)} (seed={params.seed})")
    return df


def preprocess_points(df: pd.DataFrame) -> pd.DataFrame:

    "Κρατάει μόνο τις αριθμητικές στήλες x, y χωρίς κενές τιμές."
    missing = [c for c in ("x", "y") if c not in df.columns]
    if missing:
        raise RuntimeError(f"Λείπουν οι στήλες {missing}. Το αρχείο πρέπει να έχει στήλες 'x' και 'y'.")

    df = df[["x", "y"]].copy()
    df["x"] = pd.to_numeric(df["x"], errors="coerce")
    df["y"] = pd.to_numeric(df["y"], errors="coerce")
    df = df.dropna(subset=["x", "y"]).reset_index(drop=True)

    print(f"[DATA] Rows after preprocessing: {len(df)}")
    return df


#measure to build time + index
def build_quad_index(df: pd.DataFrame, params: IndexParams) -> Tuple[QuadTree, float, int]:

    "Χτίζει το Quad-Tree με διαδοχικά inserts. Επιστρέφει δέντρο, χρόνο και πόσα σημεία απορρίφθηκαν."
    quad_points = df[["x", "y"]].to_numpy(dtype=float)
    t0 = time.perf_counter()
    qtree = QuadTree(params.bounds, max_depth=params.max_depth)
    rejected = 0
    for x, y in quad_points:
        if not qtree.insert(Point(float(x), float(y))):
            rejected += 1
    t1 = time.perf_counter()
    build_time = t1 - t0
    return qtree, build_time, rejected


def numeric_candidates_quadtree(quad_tree: QuadTree, rect: Rectangle) -> Tuple[List[Point], float]:
    t0 = time.perf_counter()
    found = quad_tree.query(rect)
    t1 = time.perf_counter()
    query_time = t1 - t0
    return found, query_time


def brute_force_range(df: pd.DataFrame, rect: Rectangle) -> pd.DataFrame:

    "Απλή brute-force υλοποίηση range query (linear scan) για σύγκριση με το Quad-Tree."
    if df.empty:
        return df.copy()

    X = df[["x", "y"]].to_numpy(dtype=float)
    mask = (
        (X[:, 0] >= rect.x) & (X[:, 0] <= rect.max_x)
        & (X[:, 1] >= rect.y) & (X[:, 1] <= rect.max_y)
    )
    return df[mask].copy()


def cross_check(tree_points: List[Point], brute_df: pd.DataFrame) -> Tuple[bool, Set[Point], Set[Point]]:

    "Συγκρίνει τα αποτελέσματα του δέντρου με το brute force (ως σύνολα)."
    tree_set = set(tree_points)
    brute_set = {Point(float(x), float(y)) for x, y in brute_df[["x", "y"]].to_numpy(dtype=float)}

    missing = brute_set - tree_set  #ston brute force alla oxi sto dentro
    extra = tree_set - brute_set
    return not missing and not extra, missing, extra


def boundaries_frame(quad_tree: QuadTree) -> pd.DataFrame:

    "Επιστρέφει τα ορθογώνια όλων των κόμβων ως DataFrame (για visualization)."
    rows = [(r.x, r.y, r.width, r.height) for r in quad_tree.boundaries()]
    return pd.DataFrame(rows, columns=["x", "y", "width", "height"])


def save_boundaries(quad_tree: QuadTree, path: str | Path) -> Path:
    path = Path(path)
    frame = boundaries_frame(quad_tree)
    frame.to_csv(path, index=False)
    print(f"[INFO] Saved {len(frame)} node boundaries to {path}")
    return path


def evaluate_index(df: pd.DataFrame, params: IndexParams) -> Tuple[QuadTree, Dict[str, float | int | bool]]:

    "Χτίζει το index, τρέχει το range query και το brute force και μαζεύει τους χρόνους."
    quad_tree, build_time, rejected = build_quad_index(df, params)

    rect = params.query_rect
    found, query_time = numeric_candidates_quadtree(quad_tree, rect)

    #to dentro kratei mono osa einai mesa sta bounds, opote kai to baseline
    in_bounds_df = brute_force_range(df, params.bounds)

    #Brute-force baseline (idio query)
    t0 = time.perf_counter()
    brute_df = brute_force_range(in_bounds_df, rect)
    t1 = time.perf_counter()
    brute_time = t1 - t0

    ok, missing, extra = cross_check(found, brute_df)
    if not ok:
        print(f"[CHECK] Mismatch: {len(missing)} missing, {len(extra)} extra")

    summary = {
        "build": build_time,
        "size": len(quad_tree),
        "rejected": rejected,
        "nodes": sum(1 for _ in quad_tree.boundaries()),
        "height": quad_tree.height(),
        "query": query_time,
        "query_results": len(found),
        "bruteforce": brute_time,
        "bruteforce_results": len(brute_df),
        "match": ok,
    }
    return quad_tree, summary


def print_summary(summary: Dict[str, float | int | bool], params: IndexParams):

    print("\n")
    print("QUAD-TREE INDEX")
    print(f"  Bounds     : {params.bounds}")
    print(f"  Points     : {summary['size']:d} stored, {summary['rejected']:d} rejected")
    print(f"  Nodes      : {summary['nodes']:d} (height {summary['height']:d})")
    print(f"  Build time : {summary['build']:.4f} s")

    print("\n")
    print("RANGE QUERY PERFORMANCE (seconds)")
    print(f"{'Method':<12} {'Query':>10} {'Results':>8}")
    print(f"{'Quad-Tree':<12} {summary['query']:10.6f} {summary['query_results']:8d}")
    print(f"{'Brute-force':<12} {summary['bruteforce']:10.6f} {summary['bruteforce_results']:8d}")

    print(f"\n[CHECK] Quad-Tree matches brute force: {summary['match']}")


#i main
def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    params = IndexParams()

    #fortosi apo csv an dothike, allios tyxaia simeia
    if argv:
        df = preprocess_points(load_points(argv[0]))
    else:
        df = preprocess_points(generate_points(params))

    quad_tree, summary = evaluate_index(df, params)
    print_summary(summary, params)

    #proairetika apothikeuoume ta bounds ton nodes gia visualization
    if len(argv) > 1:
        save_boundaries(quad_tree, argv[1])
    return summary


if __name__ == "__main__":
    main()
