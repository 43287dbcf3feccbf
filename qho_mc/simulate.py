#!/usr/bin/env python
# simulate.py  — Metropolis walk of one oscillator occupation number
import argparse
import sys

from qho_mc.funcs import (
    EquilibrationError,
    InvalidInputError,
    SimulationParams,
    report,
    run_simulation,
)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Oscillator Monte Carlo at fixed temperature")
    ap.add_argument("num_steps", type=int, help="number of Metropolis steps")
    ap.add_argument("n_init", type=int, help="initial occupation number")
    ap.add_argument("coupling", type=float, help="beta * k * a^2")
    ap.add_argument("out_file", help="two-column 'time state' output table")
    ap.add_argument("--chunks", type=int, default=10, help="number of averaging blocks")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--scan", action="store_true", help="also print block errors vs block count")
    ap.add_argument("--quiet", action="store_true")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        params = SimulationParams(args.num_steps, args.n_init, args.coupling,
                                  chunks=args.chunks, seed=args.seed)
        results = run_simulation(params, out_path=args.out_file,
                                 verbose=not args.quiet, scan=args.scan)
    except EquilibrationError as exc:
        sys.exit(f"[simulate] {exc}")
    except InvalidInputError as exc:
        sys.exit(f"[simulate] invalid input: {exc}")
    report(results)


if __name__ == "__main__":
    main()
