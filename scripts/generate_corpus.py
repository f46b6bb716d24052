from __future__ import annotations

import argparse
from pathlib import Path

from edlite.testing import generate_address_lines


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--max-line", type=int, default=12)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / f"seed_{args.seed}_count_{args.count}.txt"

    lines = generate_address_lines(seed=args.seed, count=args.count, max_line=args.max_line)
    out.write_text("\n".join(lines) + "\n", encoding="utf-8")

    print(str(out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
