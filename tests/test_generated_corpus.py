from __future__ import annotations

import os

from edlite import AddressError, EditorState, resolve_line
from edlite.testing import generate_address_lines


def test_corpus_is_deterministic() -> None:
    assert generate_address_lines(seed=7, count=50) == generate_address_lines(seed=7, count=50)
    assert generate_address_lines(seed=7, count=50) != generate_address_lines(seed=8, count=50)


def test_corpus_resolves_against_fixed_buffer() -> None:
    seed = int(os.environ.get("EDLITE_CORPUS_SEED", "1"))
    count = int(os.environ.get("EDLITE_CORPUS_CASES", "1000"))

    ok = failed = 0
    for line in generate_address_lines(seed=seed, count=count):
        state = EditorState.from_lines([f"line {i}" for i in range(1, 13)])
        before = (state.address1, state.address2, state.dot)
        try:
            resolve_line(line, state)
        except AddressError:
            assert (state.address1, state.address2, state.dot) == before, line
            failed += 1
            continue
        assert 1 <= state.address1 <= state.address2 <= state.dollar, line
        ok += 1

    # The generator deliberately mixes valid and invalid expressions.
    assert ok > 0
    assert failed > 0
