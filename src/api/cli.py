"""
Console demo for figures and growable arrays.

Reads vertices from stdin, stores the figures in a shared-handle array and in a
value array of pentagons, and prints areas, centers, totals, equality checks, a
copy/move demonstration and a caught out-of-range access.

Usage:
    printf '0 0 1 1 2 0 1 -1\n...' | figures-demo --log-level WARNING
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO, TypeVar

from common import settings
from common.errors import IndexOutOfRange, InvalidShapeError
from common.logging import setup_default_logging
from containers import SharedArray, ValueArray
from figures import BaseFigure, Pentagon, Rhombus, TokenReader, create_figure, list_figures

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=BaseFigure)

SHARED_PROBE_INDEX = 10
VALUE_PROBE_INDEX = 9


@dataclass
class Session:
    """1 回のデモ実行で共有する入出力と表示設定。"""

    reader: TokenReader
    out: TextIO
    err: TextIO
    precision: int
    attempts: int = 1
    interactive: bool = False

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def say_lines(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.say(line)

    def num(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

    def read_into(self, fig: _F) -> _F:
        """図形へ頂点を読み込む。`attempts` 回まで読み直し、最後の失敗は送出する。"""
        attempt = 1
        while True:
            if self.interactive:
                self.say(f"Enter {fig.vertex_count()} vertices of the {fig.title.lower()} (x y) in order:")
            try:
                return fig.read(self.reader)
            except InvalidShapeError as exc:
                if attempt >= self.attempts:
                    raise
                logger.warning("attempt %d/%d rejected: %s", attempt, self.attempts, exc)
                attempt += 1


def _copy_move_demo(session: Session, fig: BaseFigure, label: str) -> None:
    session.read_into(fig)
    session.say(f"Original {label}:")
    session.say(fig.format(session.precision))

    copied = fig.copy()
    session.say("After copy:")
    session.say(copied.format(session.precision))

    moved = fig.take()
    session.say("After move:")
    session.say(moved.format(session.precision))
    session.say(f"Source is empty after move: {fig.is_empty}")


def run_shared_demo(session: Session, kinds: Sequence[str]) -> SharedArray:
    """図形ハンドルを共有する配列のデモ。"""
    figures: SharedArray = SharedArray()
    for kind in kinds:
        figures.append(create_figure(kind))

    session.say(f"=== Reading vertices for {len(figures)} polymorphic figures ===")
    for i, fig in enumerate(figures):
        session.say()
        session.say(f"Figure {i} - {fig.title}")
        session.read_into(fig)

    session.say()
    session.say("=== Stored figures and their areas ===")
    session.say_lines(figures.surface_lines(session.precision))

    session.say()
    session.say("=== Geometric centers ===")
    session.say_lines(figures.center_lines(session.precision))

    session.say()
    session.say(f"Total area of polymorphic container = {session.num(figures.total_surface())}")

    if len(figures) > 1:
        session.say()
        session.say("=== Operator checks ===")
        if figures[0] == figures[1]:
            session.say("Figure 0 equals figure 1")
        else:
            session.say("Figure 0 differs from figure 1")
        session.say(f"Area of figure 0 = {session.num(float(figures[0]))}")

    session.say()
    session.say("=== Copy and move demonstration (Rhombus) ===")
    _copy_move_demo(session, Rhombus(), "rhombus")

    if len(figures) > 1:
        session.say()
        session.say("Removing figure at index 1...")
        figures.remove_at(1)
        session.say_lines(figures.surface_lines(session.precision))

    session.say()
    session.say(f"Accessing figure {SHARED_PROBE_INDEX}:")
    try:
        session.say(str(figures[SHARED_PROBE_INDEX]))
    except IndexOutOfRange as exc:
        print(f"Out of range: {exc}", file=session.err)
    return figures


def run_value_demo(session: Session, count: int) -> ValueArray:
    """五角形を値として保持する配列のデモ。"""
    session.say()
    session.say("=== Value container: ValueArray[Pentagon] ===")
    pentagons: ValueArray = ValueArray()
    for _ in range(count):
        pentagons.append(Pentagon())

    for i in range(len(pentagons)):
        session.say()
        session.say(f"Pentagon {i}")
        session.read_into(pentagons[i])

    session.say()
    session.say("Pentagons and their areas:")
    session.say_lines(pentagons.surface_lines(session.precision))

    session.say()
    session.say("Pentagon centers:")
    session.say_lines(pentagons.center_lines(session.precision))

    session.say()
    session.say(f"Total area of pentagons = {session.num(pentagons.total_surface())}")

    if len(pentagons) > 1:
        session.say()
        session.say("Equality check of pentagons (0 and 1):")
        if pentagons[0] == pentagons[1]:
            session.say("Pentagon 0 equals pentagon 1")
        else:
            session.say("Pentagon 0 differs from pentagon 1")

    session.say()
    session.say("Copy/move of a pentagon:")
    _copy_move_demo(session, Pentagon(), "pentagon")

    if len(pentagons) > 1:
        session.say()
        session.say("Removing pentagon at index 1...")
        pentagons.remove_at(1)
        session.say("Remaining pentagons:")
        session.say_lines(pentagons.surface_lines(session.precision))

    session.say(f"Accessing pentagon {VALUE_PROBE_INDEX}...")
    try:
        session.say(str(pentagons[VALUE_PROBE_INDEX]))
    except IndexOutOfRange as exc:
        print(f"Out of range: {exc}", file=session.err)
    return pentagons


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="figures-demo",
        description="Read figures from stdin and report areas and centers.",
    )
    p.add_argument("--log-level", default=None, help="logging level (default: FIG_LOG_LEVEL or INFO)")
    p.add_argument(
        "--attempts",
        type=int,
        default=1,
        help="how many times a rejected figure is read again before giving up",
    )
    p.add_argument("--precision", type=int, default=None, help="decimal places in reports")
    p.add_argument(
        "--kinds",
        nargs="+",
        default=["rhombus", "pentagon", "hexagon"],
        choices=list_figures(),
        help="figures stored in the shared-handle array",
    )
    p.add_argument("--pentagons", type=int, default=3, help="pentagons stored in the value array")
    p.add_argument("--skip-values", action="store_true", help="run only the shared-handle part")
    return p


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    cfg = settings.get()
    interactive = cfg.FORCE_PROMPT or (hasattr(stdin, "isatty") and stdin.isatty())
    session = Session(
        reader=TokenReader(stdin),
        out=stdout,
        err=stderr,
        precision=cfg.REPORT_PRECISION if args.precision is None else max(0, args.precision),
        attempts=max(1, args.attempts),
        interactive=interactive,
    )

    try:
        run_shared_demo(session, args.kinds)
        if not args.skip_values:
            run_value_demo(session, max(0, args.pentagons))
    except InvalidShapeError as exc:
        logger.error("figure rejected: kind=%s defect=%s", exc.kind, exc.defect.value)
        print(f"Error: {exc}", file=stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
