from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from edlite import AddressError, EditorState, resolve_line


_ADDRESS_CHARS = list("0123456789.$+-,; ")


@st.composite
def states(draw) -> EditorState:
    dollar = draw(st.integers(min_value=1, max_value=30))
    state = EditorState.from_lines([f"l{i}" for i in range(1, dollar + 1)])
    a1 = draw(st.integers(min_value=1, max_value=dollar))
    a2 = draw(st.integers(min_value=a1, max_value=dollar))
    state.address1, state.address2, state.dot = a1, a2, a2
    return state


@given(states(), st.text(alphabet=_ADDRESS_CHARS, max_size=12), st.sampled_from(["", "p", "n", "="]))
@settings(max_examples=500)
def test_resolution_commits_valid_state_or_nothing(state: EditorState, expr: str, cmd: str) -> None:
    before = (state.address1, state.address2, state.dot)
    try:
        res = resolve_line(expr + cmd, state)
    except AddressError:
        assert (state.address1, state.address2, state.dot) == before
        return

    assert 1 <= state.address1 <= state.address2 <= state.dollar
    assert state.dot in (state.address1, state.address2)
    assert res.count >= 0
    assert res.remainder == cmd


@given(st.integers(min_value=1, max_value=50), st.data())
def test_any_valid_line_number_alone(dollar: int, data: st.DataObject) -> None:
    n = data.draw(st.integers(min_value=1, max_value=dollar))
    state = EditorState.from_lines(["x"] * dollar)
    res = resolve_line(str(n), state)
    assert res.count == 1
    assert (state.address1, state.address2, state.dot) == (n, n, n)


@given(st.integers(min_value=1, max_value=50))
def test_full_range_for_any_buffer(dollar: int) -> None:
    state = EditorState.from_lines(["x"] * dollar)
    res = resolve_line("1,$", state)
    assert res.count == 2
    assert (state.address1, state.address2) == (1, dollar)
