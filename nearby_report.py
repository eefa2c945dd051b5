"""Print the cafés nearest to a given location."""
from __future__ import annotations

import argparse

from finder import NearbyResult, find_nearby_cafes
from location import resolve_location

# Same bounds as the /api/nearby query parameters.
LIMIT_RANGE = (1, 50)
RADIUS_RANGE_M = (100, 50_000)


def _print_rows(result: NearbyResult) -> None:
    print("rank |    km | coordinates          | name")
    print("-" * 64)
    for idx, item in enumerate(result.items, start=1):
        coord = item.candidate.coordinate
        print(
            f"{idx:>4} | {item.distance_km:>5.2f} | "
            f"{coord.lat:>9.4f}, {coord.lon:>9.4f} | {item.candidate.name}"
        )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--lat", type=float, required=True)
    parser.add_argument("--lon", type=float, required=True)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--radius-m", type=int, default=None)
    args = parser.parse_args(argv)

    if args.limit is not None and not LIMIT_RANGE[0] <= args.limit <= LIMIT_RANGE[1]:
        parser.error(f"--limit must be between {LIMIT_RANGE[0]} and {LIMIT_RANGE[1]}")
    if args.radius_m is not None and not RADIUS_RANGE_M[0] <= args.radius_m <= RADIUS_RANGE_M[1]:
        parser.error(f"--radius-m must be between {RADIUS_RANGE_M[0]} and {RADIUS_RANGE_M[1]}")

    result = find_nearby_cafes(
        resolve_location(args.lat, args.lon),
        limit=args.limit,
        radius_m=args.radius_m,
    )
    if result.error:
        raise SystemExit(result.error)
    if result.status == "no_results":
        print(result.message)
        return

    print(f"Origin: {result.origin.lat:.4f}, {result.origin.lon:.4f}")
    print()
    _print_rows(result)


if __name__ == "__main__":
    main()
