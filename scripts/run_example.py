"""Print a few worked examples of the :mod:`fun` helpers as JSON."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Dict, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from fun import array_every, compose, flat_map, fn_return_new
from fun.config import FunConfig, load_config
from fun.utils.logging import setup_logging

logger = logging.getLogger("run_example")


def a(*args: Any) -> str:
    return "a(" + ", ".join(str(arg) for arg in args) + ")"


def b(*args: Any) -> str:
    return "b(" + ", ".join(str(arg) for arg in args) + ")"


def c(*args: Any) -> str:
    return "c(" + ", ".join(str(arg) for arg in args) + ")"


class Tally:
    def __init__(self, label: str, start: int = 0) -> None:
        self.label = label
        self.count = start


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--log-level", default=None, help="override logging.level from the config")
    return parser.parse_args(argv)


def build_examples(config: FunConfig) -> Dict[str, Any]:
    check_arity = config.invoke.check_arity

    make_tally = fn_return_new(Tally, "clicks", 1)
    first, second = make_tally(), make_tally()
    first.count += 1

    return {
        "fun.array_every()": array_every([1, 2, 3], lambda v, k: v == k + 1),
        "fun.compose()": compose(a, b, c, check_arity=check_arity)(1, 2, 3),
        "fun.flat_map()": flat_map(lambda v: [v, v * 10], [1, 2, 3]),
        "fun.fn_return_new()": [first.count, second.count, first is not second],
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    config = load_config(args.config)
    if args.log_level is not None:
        config.logging.level = args.log_level

    setup_logging(config.logging)
    logger.debug("Loaded configuration: %s", config)

    print(json.dumps(build_examples(config), indent=4))


if __name__ == "__main__":
    main()
