from __future__ import annotations

import importlib.util

from dodgerace.config.loader import load_settings
from dodgerace.core.doctor import run_doctor
from simulator import DodgePilot, StayPilot, simulate, summarize

PILOTS = {"dodge": DodgePilot, "stay": StayPilot}


def _settings(args):
    duration = getattr(args, "duration", None)
    return load_settings(
        width=args.width,
        height=args.height,
        fps=args.fps,
        seed=args.seed,
        duration_ms=None if duration is None else duration * 1000,
    )


def cmd_play(args):
    if importlib.util.find_spec("pygame") is None:
        print("[play] pygame is not installed (pip install pygame)")
        return 1
    try:
        settings = _settings(args)
    except ValueError as exc:
        print(f"[play] {exc}")
        return 1
    from car_game import main as run_game

    run_game(settings)
    return 0


def cmd_simulate(args):
    try:
        settings = _settings(args)
    except ValueError as exc:
        print(f"[sim] {exc}")
        return 1
    rounds = args.rounds if args.rounds is not None else settings.sim_rounds
    base_seed = settings.seed if settings.seed is not None else 0
    results = []
    for i in range(rounds):
        result = simulate(
            PILOTS[args.pilot](),
            seed=base_seed + i,
            frame_ms=settings.sim_frame_ms,
            width=settings.display.width,
            height=settings.display.height,
            tuning=settings.tuning,
            jitter_ms=settings.sim_jitter_ms,
            max_ticks=settings.sim_max_ticks,
            record=False,
        )
        print(f"[sim] seed={result['seed']} {result['outcome']} after {result['elapsed_ms'] / 1000:.1f}s")
        results.append(result)

    summary = summarize(results)
    print(
        f"[sim] {summary['won']}/{summary['rounds']} won, "
        f"avg {summary['avg_elapsed_ms'] / 1000:.1f}s survived"
    )
    return 0


def cmd_doctor(args):
    try:
        settings = _settings(args)
    except ValueError as exc:
        print(f"[doctor] {exc}")
        return 1
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")
    return 0 if ok_count == len(checks) else 1
