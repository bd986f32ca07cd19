"""CLI entrypoint for klinecamp.

Usage:
    python -m klinecamp [--config game.jsonc] [--log-level INFO] [--json-logs] series [--days 90] [--out series.csv]
    python -m klinecamp story [--seed 7]
    python -m klinecamp simulate [--seed 7]
    python -m klinecamp history
"""

import argparse
import random
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Optional

from klinecamp import configure_logging
from klinecamp.config import GameConfig, load_game_config
from klinecamp.core.event_bus import EventBus
from klinecamp.data import generate_game_data, series_to_frame, write_series_csv
from klinecamp.feedback import RecordingSoundPlayer, SoundFeedback
from klinecamp.history import SqliteHistoryStore, monthly_win_rate, summarize
from klinecamp.indicators import latest_cross
from klinecamp.simulation import SimulationSession, rank_for_yield
from klinecamp.story import INITIAL_STATS, NarrativeEngine, StorySession
from klinecamp.tips import FallbackTipProvider

DEFAULT_HISTORY = Path(".klinecamp") / "history.db"


def _history_store(cfg: GameConfig) -> SqliteHistoryStore:
    return SqliteHistoryStore(cfg.history_path or DEFAULT_HISTORY, namespace=cfg.namespace)


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def cmd_series(cfg: GameConfig, args: argparse.Namespace) -> int:
    days = args.days if args.days is not None else cfg.series_days
    bars, name, code = generate_game_data(days, rng=_rng(args.seed))
    if args.out is not None:
        write_series_csv(bars, args.out)
        print(f"{name} {code}: wrote {len(bars)} bars to {args.out}")
    else:
        print(series_to_frame(bars).to_csv(index=False), end="")
    return 0


def cmd_story(cfg: GameConfig, args: argparse.Namespace) -> int:
    rng = _rng(args.seed)
    engine = NarrativeEngine(rng=rng, initial_stats=replace(INITIAL_STATS, max_turn=cfg.max_turn))
    session = StorySession(engine)
    print(session.log[0].text)
    while not session.finished:
        open_options = [opt for opt in session.options() if not opt.locked]
        option = rng.choice(open_options)
        shown = len(session.log)
        session.choose(option.index)
        for entry in session.log[shown:]:
            print(entry.text)
    s = session.stats
    print(f"cash={s.cash:.0f} health={s.health} insight={s.insight} reputation={s.reputation} turn={s.turn}")
    return 0


def cmd_simulate(cfg: GameConfig, args: argparse.Namespace) -> int:
    rng = _rng(args.seed)
    bars, name, code = generate_game_data(max(cfg.series_days, 1), rng=rng)
    bus = EventBus()
    player = RecordingSoundPlayer()
    feedback = SoundFeedback(player)
    feedback.bind(bus)
    feedback.on_start()
    session = SimulationSession(
        bars,
        stock_name=name,
        stock_code=code,
        initial_capital=cfg.initial_capital,
        lot_size=cfg.lot_size,
        preview_days=cfg.preview_days,
        bus=bus,
        history=_history_store(cfg),
    )
    session.toggle_play()
    result = None
    while result is None:
        # Follow the MACD cross of the visible prefix.
        cross = latest_cross(session.visible_bars())
        if cross == "golden" and session.holdings == 0 and session.can_buy():
            session.buy()
        elif cross == "death" and session.can_sell():
            session.sell()
        result = session.tick()
    feedback.on_stop()
    rank = rank_for_yield(result.yield_rate)
    print(f"{name} {code}: yield {result.yield_rate:+.2f}% profit {result.profit:.0f} trades {len(result.trades)}")
    print(f"{rank.title} - {rank.description}")
    print(FallbackTipProvider(unavailable=cfg.fallback_tip).tip())
    return 0


def cmd_history(cfg: GameConfig, args: argparse.Namespace) -> int:
    records = _history_store(cfg).list()
    summary = summarize(records)
    print(
        f"games={summary.total_games} profit={summary.total_profit:.0f} "
        f"win_rate={summary.win_rate:.1f}% month_win_rate={monthly_win_rate(records, datetime.now())}%"
    )
    for record in records:
        print(f"{record.timestamp} {record.stock_name} {record.yield_rate:+.2f}% trades={record.trade_count}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="K-line bootcamp game engine.")
    parser.add_argument("--config", type=Path, help="Path to JSON/JSONC config file")
    parser.add_argument("--log-level", default=None, help="Logging level (default: from config, else INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    sub = parser.add_subparsers(dest="command", required=True)

    p_series = sub.add_parser("series", help="Print or export an annotated synthetic series")
    p_series.add_argument("--days", type=int, default=None)
    p_series.add_argument("--seed", type=int, default=None)
    p_series.add_argument("--out", type=Path, default=None, help="Write CSV here instead of stdout")
    p_series.set_defaults(func=cmd_series)

    p_story = sub.add_parser("story", help="Autoplay a narrative run with random open choices")
    p_story.add_argument("--seed", type=int, default=None)
    p_story.set_defaults(func=cmd_story)

    p_sim = sub.add_parser("simulate", help="Autoplay a simulation following MACD crosses")
    p_sim.add_argument("--seed", type=int, default=None)
    p_sim.set_defaults(func=cmd_simulate)

    p_hist = sub.add_parser("history", help="Print recorded simulation stats")
    p_hist.set_defaults(func=cmd_history)

    args = parser.parse_args(argv)
    cfg = load_game_config(args.config) if args.config else GameConfig()
    configure_logging(level=args.log_level or cfg.log_level, json_format=args.json_logs)
    return args.func(cfg, args)


if __name__ == "__main__":
    sys.exit(main())
