import pytest

from chartviz.keyboard import Key, Keyboard, key_to_char


def test_letters():
    assert key_to_char(Key.A, False, False) == "a"
    assert key_to_char(Key.Z, True, False) == "Z"


def test_control_v_is_paste():
    assert key_to_char(Key.V, False, True) == "$"
    assert key_to_char(Key.V, False, False) == "v"


@pytest.mark.parametrize(
    "key, shifted",
    [(Key.NUM1, "!"), (Key.NUM2, "@"), (Key.NUM9, "("), (Key.NUM0, ")")],
)
def test_shifted_digits(key, shifted):
    assert key_to_char(key, True, False) == shifted


def test_digits_and_numpad_agree():
    for d in range(10):
        assert key_to_char(Key[f"NUM{d}"], False, False) == str(d)
        assert key_to_char(Key[f"NUMPAD{d}"], True, False) == str(d)


@pytest.mark.parametrize(
    "key, plain, shifted",
    [
        (Key.PERIOD, ".", ">"),
        (Key.COMMA, ",", "<"),
        (Key.EQUAL, "=", "+"),
        (Key.DASH, "-", "_"),
        (Key.SLASH, "/", "?"),
    ],
)
def test_symbols(key, plain, shifted):
    assert key_to_char(key, False, False) == plain
    assert key_to_char(key, True, False) == shifted


def test_special_keys():
    assert key_to_char(Key.BACKSPACE, False, False) == "`"
    assert key_to_char(Key.ENTER, False, False) == "\n"
    assert key_to_char(Key.SPACE, False, False) == " "
    assert key_to_char(Key.LSHIFT, False, False) == "\0"
    assert key_to_char(Key.ESCAPE, False, False) == "\0"


def test_handle_key_press():
    kb = Keyboard()
    kb.handle_event(Key.X, shift=True)
    assert kb.key_pressed
    assert kb.same_poll
    assert kb.last_key == "X"


def test_other_event_in_same_poll_keeps_press():
    kb = Keyboard()
    kb.handle_event(Key.B)
    kb.handle_event(None)
    assert kb.key_pressed


def test_other_event_in_new_poll_clears_press():
    kb = Keyboard()
    kb.handle_event(Key.B)
    kb.same_poll = False
    kb.handle_event(None)
    assert not kb.key_pressed
    assert kb.last_key == "b"