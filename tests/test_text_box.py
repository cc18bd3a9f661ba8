from softraster.text_box import TextBox


def test_initial_text_is_truncated():
    assert TextBox("abcdef", max_chars=4).text == "abcd"


def test_short_initial_text_kept():
    assert TextBox("ab", max_chars=4).text == "ab"


def test_typing_stops_below_limit():
    box = TextBox("", max_chars=4)
    box.handle_input("abcdef", backspace=False)
    assert box.text == "abc"


def test_typing_appends_in_order():
    box = TextBox("1.", max_chars=10)
    box.handle_input(["5", "0"], backspace=False)
    assert box.text == "1.50"


def test_backspace_removes_last_character():
    box = TextBox("abc", max_chars=10)
    box.handle_input("", backspace=True)
    assert box.text == "ab"


def test_backspace_on_empty_text():
    box = TextBox("", max_chars=10)
    box.handle_input("", backspace=True)
    assert box.text == ""


def test_typing_is_applied_before_backspace():
    box = TextBox("ab", max_chars=10)
    box.handle_input("c", backspace=True)
    assert box.text == "ab"


def test_starts_unselected():
    assert TextBox("x", max_chars=5).selected is False


def test_selection_swaps_text_and_background_colors():
    box = TextBox("x", max_chars=5)
    unselected_text, unselected_background = box.color, box.background_color
    assert unselected_text != unselected_background
    box.selected = True
    assert box.color == unselected_background
    assert box.background_color == unselected_text
    box.selected = False
    assert box.color == unselected_text