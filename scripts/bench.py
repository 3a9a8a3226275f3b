#!/usr/bin/env python3
"""Benchmark checking a list of deviations against a nested shape tree.

The fixture is read and parsed up front so only the check is timed.

    python scripts/bench.py --iterations 5000
    python scripts/bench.py path/to/deviations.json
"""
import argparse
import json
import sys
import time
from pathlib import Path

import shapes
from shapes.config import settings
from shapes.logging import bind_context, clear_context, configure_logging, script_logger

DEFAULT_FIXTURE = Path(__file__).resolve().parent.parent / "tests" / "fixtures" / "deviations.json"

InternalNote = shapes.object("InternalNote", {
    "whatHappened": shapes.string(),
    "actionsTaken": shapes.string(),
})

DeviationInfo = shapes.object("DeviationInfo", {
    "internalNote": InternalNote,
    "isOnCallInvolved": shapes.boolean(),
    "potentialSanctionNok": shapes.optional(shapes.number()),
    "potentialCompensationNok": shapes.optional(shapes.number()),
    "description": shapes.optional(shapes.string()),
    "descriptionInEnglish": shapes.optional(shapes.string()),
    "publishedToWebsite": shapes.boolean(),
    "notifiedSubscribers": shapes.optional(shapes.boolean()),
    "visibleFrom": shapes.optional(shapes.string()),
    "visibleTo": shapes.optional(shapes.string()),
    "relatedDeviationAlertId": shapes.array(shapes.string()),
})

UserInfo = shapes.object("UserInfo", {
    "id": shapes.string(),
    "name": shapes.string(),
    "email": shapes.string(),
})

Departure = shapes.object("Departure", {
    "departureId": shapes.string(),
    "departureTime": shapes.string(),
    "arrivalTime": shapes.string(),
    "departureQuayId": shapes.string(),
    "departureQuayName": shapes.string(),
    "arrivalQuayId": shapes.string(),
    "arrivalQuayName": shapes.string(),
    "serviceJourneyId": shapes.optional(shapes.string()),
})

DepartureFilter = shapes.object("DepartureFilter", {
    "lineId": shapes.string(),
    "blockId": shapes.optional(shapes.string()),
    "blockName": shapes.optional(shapes.string()),
    "from": shapes.string(),
    "to": shapes.optional(shapes.string()),
    "departures": shapes.optional(shapes.array(Departure)),
})

DepartureChange = shapes.object("DepartureChange", {
    "departure": Departure,
    "isCancelled": shapes.boolean(),
    "isRestored": shapes.boolean(),
    "newArrivalQuayId": shapes.optional(shapes.string()),
    "newArrivalQuayName": shapes.optional(shapes.string()),
    "newDepartureTime": shapes.optional(shapes.string()),
    "newArrivalTime": shapes.optional(shapes.string()),
})

TravelDetail = shapes.object("TravelDetail", {
    "extraTripId": shapes.string(),
    "departureTime": shapes.string(),
    "arrivalTime": shapes.string(),
    "departureQuayId": shapes.string(),
    "departureQuayName": shapes.string(),
    "arrivalQuayId": shapes.string(),
    "arrivalQuayName": shapes.string(),
})

Deviation = shapes.object("Deviation", {
    "#type": shapes.string(),
    "id": shapes.string(),
    "lineId": shapes.string(),
    "lineName": shapes.string(),
    "publicCode": shapes.string(),
    "info": DeviationInfo,
    "reason": shapes.optional(shapes.string()),
    "departureFilter": shapes.optional(DepartureFilter),
    "changedDepartures": shapes.optional(shapes.array(DepartureChange)),
    "travelDetails": shapes.optional(shapes.array(TravelDetail)),
    "creator": UserInfo,
    "createdAt": shapes.string(),
    "updatedAt": shapes.string(),
})

LoadDeviationsResponse = shapes.object("LoadDeviationsResponse", {
    "deviations": shapes.array(Deviation),
})


def run(parsed, iterations: int) -> float:
    """Check ``parsed`` ``iterations`` times and return mean seconds per check."""
    start = time.perf_counter()
    for _ in range(iterations):
        LoadDeviationsResponse.check(parsed)
    return (time.perf_counter() - start) / iterations


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark shape checks on a deviations fixture")
    parser.add_argument("fixture", nargs="?", type=Path, default=DEFAULT_FIXTURE, help="Deviations JSON file")
    parser.add_argument("-n", "--iterations", type=int, default=1000, help="Number of timed checks")
    args = parser.parse_args(argv)

    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    bind_context(fixture=str(args.fixture))
    try:
        return _bench(args)
    finally:
        clear_context()


def _bench(args) -> int:
    log = script_logger()

    parsed = json.loads(args.fixture.read_text(encoding="utf-8"))

    if not LoadDeviationsResponse.check(parsed):
        log.error("fixture_invalid")
        return 1
    print(f"Deviations: {len(parsed['deviations'])}")

    mean = run(parsed, args.iterations)
    log.info("bench_finished", iterations=args.iterations, mean_us=round(mean * 1e6, 2))
    print(f"Check list of deviations: {mean * 1e6:.2f} us/iter over {args.iterations} iterations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
