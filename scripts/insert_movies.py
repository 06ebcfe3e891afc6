import argparse
import sys
from typing import List

import pandas as pd
import requests

COLUMNS = ["title", "director", "releaseYear", "genre", "imdbRating"]


def read_movies(path: str) -> List[dict]:
    df = pd.read_csv(path)
    missing = [column for column in COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {', '.join(missing)}")
    df = df[COLUMNS].astype(object).where(df[COLUMNS].notna(), None)
    return df.to_dict(orient="records")


def insert_movies(base_url: str, movies: List[dict], dry_run: bool, limit: int, timeout: float) -> int:
    url = base_url.rstrip("/") + "/api/movies"
    count = 0
    for payload in movies:
        if limit and count >= limit:
            break
        if dry_run:
            count += 1
            continue
        try:
            r = requests.post(url, json=payload, timeout=timeout)
            r.raise_for_status()
            count += 1
        except requests.RequestException:
            print(f"Failed to insert movie: {payload}", file=sys.stderr)
            continue
    return count


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--movies_path", type=str, default="data/movies.csv")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_movies(args.movies_path)
    except (OSError, ValueError) as e:
        print(f"Failed to read movies: {e}", file=sys.stderr)
        sys.exit(1)
    inserted = insert_movies(args.base_url, rows, args.dry_run, args.limit, args.timeout)
    print(f"Inserted {inserted} movies")


if __name__ == "__main__":
    main()
